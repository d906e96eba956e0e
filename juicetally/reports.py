"""Aggregate entered counts into per-item reports and render them."""

from collections import defaultdict
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import NamedTuple, Union

from jinja2 import Environment, FileSystemLoader

from .entries import Entry
from .kebab import kebab_case, undo_kebab_case

PathLike = Union[str, Path]


@dataclass(frozen=True)
class ItemReport:
    """Key grouping counts by item and date."""

    item_name: str
    date: str


@dataclass(frozen=True)
class DateInfo:
    """The total count for one date under an item heading."""

    date: str
    count: int


class _CountInfo(NamedTuple):
    count: int
    total: int


def _create_acc() -> Callable[[int], _CountInfo]:
    total = 0

    def accumulate(count: int) -> _CountInfo:
        nonlocal total
        total += count
        return _CountInfo(count, total)

    return accumulate


def generate_reports(counts: Mapping[int, Entry]) -> dict[ItemReport, int]:
    """Sum the counts of all entries sharing an item name and date."""
    reports: dict[ItemReport, int] = {}
    for entry in counts.values():
        key = ItemReport(entry.item_name, entry.date)
        reports[key] = reports.get(key, 0) + entry.count
    return reports


def convert_to_headings(reports: Mapping[ItemReport, int]) -> dict[str, list[DateInfo]]:
    """Group report totals under their item names."""
    headings: defaultdict[str, list[DateInfo]] = defaultdict(list)
    for report, count in reports.items():
        headings[report.item_name].append(DateInfo(report.date, count))
    return dict(headings)


def write_reports_file(
    headings: Mapping[str, list[DateInfo]],
    assets_dir: PathLike = "assets",
    output_path: PathLike = "app/report.html",
) -> None:
    """Render ``report.html`` from *assets_dir* with *headings* into *output_path*."""
    env = Environment(loader=FileSystemLoader(str(assets_dir)), autoescape=True)
    for name, func in (("kebab_case", kebab_case), ("undo_kebab_case", undo_kebab_case)):
        env.filters[name] = func
        env.globals[name] = func
    env.globals["create_acc"] = _create_acc

    with open(output_path, "w", encoding="utf-8") as handle:
        template = env.get_template("report.html")
        template.stream(headings=headings).dump(handle)