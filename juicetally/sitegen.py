"""Generate the application's index page from the inventory list."""

import argparse
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

from jinja2 import Environment, FileSystemLoader, TemplateError

from .kebab import kebab_case

PathLike = Union[str, Path]


def inventory_items(path: PathLike = "assets/inventory.txt") -> list[str]:
    """Read the non-blank, stripped lines of the inventory file."""
    with open(path, encoding="utf-8") as handle:
        return [item for item in (line.strip() for line in handle) if item]


def render_index(
    items: Iterable[str],
    assets_dir: PathLike = "assets",
    output_path: PathLike = "app/index.html",
) -> None:
    """Render ``start.html`` from *assets_dir* with *items* into *output_path*."""
    env = Environment(loader=FileSystemLoader(str(assets_dir)), autoescape=True)
    env.filters["kebab_case"] = kebab_case
    env.globals["kebab_case"] = kebab_case
    template = env.get_template("start.html")

    with open(output_path, "w", encoding="utf-8") as handle:
        template.stream(items=list(items)).dump(handle)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Write the index page from the inventory in the assets directory."""
    parser = argparse.ArgumentParser(description="Generate the index page.")
    parser.add_argument("--assets", default="assets", help="template directory")
    parser.add_argument("--app", default="app", help="output directory")
    args = parser.parse_args(argv)

    try:
        items = inventory_items(Path(args.assets) / "inventory.txt")
        render_index(items, args.assets, Path(args.app) / "index.html")
    except (OSError, TemplateError) as err:
        raise SystemExit(f"sitegen: {err}") from err
    return 0