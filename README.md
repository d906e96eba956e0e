# juicetally

juicetally is a small web application for counting inventory items, such as
bottles of juice, by date. You pick an item and a date, then enter a count for
it. When you are finished, juicetally adds up the counts for each item and date
and writes an HTML report, which it can also turn into a PDF to download.

## Installation

```
pip install .
```

PDF export runs the `wkhtmltopdf` program, so that program must be on your
`PATH`.

## Working directory layout

The package does not ship any page templates; you supply them. Both commands
expect a directory laid out like this (the directory names can be changed with
the options shown below):

```
assets/
    inventory.txt     one item name per line; blank lines are ignored
    start.html        index page template, rendered with `items`
    datepicker.html   date-picker fragment, rendered with `item_name`
    entry.html        entry-row fragment, rendered with `item_name` and `date`
    report.html       report template, rendered with `headings`
app/                  files served under /app/; generated pages are written here
```

Templates are Jinja2 templates with autoescaping on. They can use:

- `kebab_case` and `undo_kebab_case`, both as filters and as functions
  (`"Orange Juice" | kebab_case` gives `orange-juice`);
- in `entry.html`, `inc()`, which returns 1, 2, 3, … across the life of the
  server, handy for giving each widget a unique numeric `id`;
- in `report.html`, `create_acc()`, which returns an accumulator: each call
  `acc(count)` returns a pair with `count` and the running `total`.

`headings` maps each item name to a list of `DateInfo` objects with `date`
and `count` attributes.

## Generating the main page

```
juicetally-sitegen [--assets DIR] [--app DIR]
```

This reads `inventory.txt` from the assets directory (default `assets`),
renders `start.html` with the list of items and writes the result to
`index.html` in the app directory (default `app`). A missing file or a
template error ends the command with a message.

## Running the server

```
juicetally-server [--host HOST] [--port PORT] [--assets DIR] [--app DIR]
```

By default the server listens on `0.0.0.0`, port 8080, renders templates from
`assets` and serves and writes pages in `app`. Open `http://localhost:8080/`.

| Method | Path                       | What it does                                                          |
|--------|----------------------------|-----------------------------------------------------------------------|
| GET    | `/`                        | redirects (303) to `/app`                                             |
| GET    | `/app/...`                 | static files from the app directory; `/app/` serves `index.html`      |
| GET    | `/date/<item_name>`        | renders `datepicker.html`                                             |
| POST   | `/date/<item_name>`        | renders `entry.html`; form field `date` as `YYYY-MM-DD`, kept as `MM-DD` |
| DELETE | `/date`                    | removes the count whose id is one less than the `Hx-Trigger` id       |
| POST   | `/count/<item_name>/<date>`| records form field `count` under the `Hx-Trigger` id; returns `<span>count</span>` |
| GET    | `/report`                  | writes `report.html` into the app directory and redirects (303) to it |
| GET    | `/prepare`                 | runs `wkhtmltopdf` to make `report.pdf` and returns a download link   |
| DELETE | `/entries`                 | clears every recorded count                                           |

The `Hx-Trigger` header, as htmx sends it, must hold an integer id. Bad input
(a non-integer count or id, a malformed date), a missing file, a template
error or a failed PDF conversion produces a plain-text 500 response.

## Using it as a library

```python
from juicetally.kebab import kebab_case, undo_kebab_case
from juicetally.entries import Entry, parse_date
from juicetally.reports import convert_to_headings, generate_reports, write_reports_file

kebab_case("Orange  Juice")       # "orange-juice"
undo_kebab_case("orange-juice")   # "Orange-juice" words capitalised: "Orange Juice"
parse_date("2024-06-01")          # "06-01"

counts = {
    1: Entry("orange-juice", "06-01", 3),
    2: Entry("orange-juice", "06-01", 2),
}
headings = convert_to_headings(generate_reports(counts))
# {"orange-juice": [DateInfo(date="06-01", count=5)]}
write_reports_file(headings, "assets", "app/report.html")
```

`undo_kebab_case` raises `ValueError` when a word between hyphens is empty;
`parse_date` and `non_empty_value` raise `ValueError` on bad input.

`juicetally.server.create_app(assets_dir, app_dir)` builds the Flask
application, so you can serve it or test it on its own. The
`juicetally.sitegen` functions `inventory_items(path)` and
`render_index(items, assets_dir, output_path)` do the work of the sitegen
command.

Two further modules are available for code that identifies widgets by
structured ids: `juicetally.cid.parse_canonical_id` parses ids of the form
`widgetType_itemName_date_index` into a `CanonicalID`, and
`juicetally.juicecount.CountRegistry` keeps a count per `CanonicalID`
(`set`, `set_bulk`, `get`, `delete`, `info`; `get` and `delete` raise
`KeyError` for unknown ids). The server itself does not use them.

## What it does not do

- Counts live in memory inside the running application; they are lost when
  the server stops and are not shared between processes.
- No templates are included; the pages look like whatever you put in
  `assets/`.
- There is no authentication: anyone who can reach the server can enter or
  clear counts.