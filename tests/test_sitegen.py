import jinja2
import pytest

from juicetally.kebab import kebab_case
from juicetally.sitegen import inventory_items, main, render_index

START_TEMPLATE = (
    "<ul>{% for item in items %}"
    '<li id="{{ item|kebab_case }}">{{ item }}</li>'
    "{% endfor %}</ul>"
)


@pytest.fixture
def project(tmp_path):
    assets = tmp_path / "assets"
    assets.mkdir()
    (assets / "start.html").write_text(START_TEMPLATE)
    (assets / "inventory.txt").write_text("  Apple Juice \n\nMango\n   \n")
    app_dir = tmp_path / "app"
    app_dir.mkdir()
    return assets, app_dir


def test_inventory_items_strips_and_skips_blanks(project):
    assets, _ = project
    assert inventory_items(assets / "inventory.txt") == ["Apple Juice", "Mango"]


def test_inventory_items_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        inventory_items(tmp_path / "absent.txt")


def test_render_index_uses_kebab_ids(project):
    assets, app_dir = project
    output = app_dir / "index.html"
    render_index(["Apple Juice", "Mango"], assets, output)
    content = output.read_text()
    assert f'id="{kebab_case("Apple Juice")}"' in content
    assert content.count("<li") == 2


def test_render_index_escapes_items(project):
    assets, app_dir = project
    output = app_dir / "index.html"
    render_index(["<script>"], assets, output)
    assert "<script>" not in output.read_text()


def test_render_index_missing_template(tmp_path):
    with pytest.raises(jinja2.TemplateNotFound):
        render_index(["Mango"], tmp_path, tmp_path / "index.html")


def test_main_writes_index(project):
    assets, app_dir = project
    assert main(["--assets", str(assets), "--app", str(app_dir)]) == 0
    content = (app_dir / "index.html").read_text()
    assert ">Apple Juice</li>" in content
    assert ">Mango</li>" in content


def test_main_fails_without_inventory(project):
    assets, app_dir = project
    (assets / "inventory.txt").unlink()
    with pytest.raises(SystemExit) as info:
        main(["--assets", str(assets), "--app", str(app_dir)])
    assert "sitegen" in str(info.value)