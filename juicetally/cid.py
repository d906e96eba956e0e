"""Canonical widget identifiers carried in the Hx-Trigger header."""

import re
from dataclasses import dataclass

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _atoi(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    return int(text)


@dataclass(frozen=True)
class CanonicalID:
    """Identifies one widget: which item, which kind, which date, which index."""

    item_name: str
    widget_type: str
    date: str
    index: int


def parse_canonical_id(raw_cid: str) -> CanonicalID:
    """Parse an id of the form ``widgetType_itemName_date_index``."""
    if not raw_cid:
        raise ValueError("Empty Hx-Trigger header (missing id attribute)")

    parts = raw_cid.split("_")
    if len(parts) != 4:
        raise ValueError(f"Malformed CID: {raw_cid}")

    widget_type, item_name, date, raw_index = parts
    return CanonicalID(
        item_name=item_name,
        widget_type=widget_type,
        date=date,
        index=_atoi(raw_index),
    )