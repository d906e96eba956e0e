[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "juicetally"
version = "0.1.0"
description = "A small web app for tallying juice inventory counts by date and producing printable reports"
requires-python = ">=3.10"
keywords = ["inventory", "tally", "flask", "htmx", "report"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
    "Topic :: Office/Business",
]
dependencies = [
    "flask",
    "jinja2",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
juicetally-server = "juicetally.server:main"
juicetally-sitegen = "juicetally.sitegen:main"

[tool.hatch.build.targets.wheel]
packages = ["juicetally"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
