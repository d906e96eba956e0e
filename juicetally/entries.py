"""Count entries and the small parsers the request handlers rely on."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Entry:
    """A count entered for one item on one date."""

    item_name: str
    date: str
    count: int


def non_empty_value(value: str) -> str:
    """Return *value*, or raise ValueError if it is empty."""
    if not value:
        raise ValueError(f"Missing '{value}' from path values")
    return value


def parse_date(date_form_value: str) -> str:
    """Drop the year from a ``YYYY-MM-DD`` form value, keeping ``MM-DD``."""
    parts = date_form_value.split("-", 1)
    if len(parts) != 2:
        raise ValueError(f"Invalid date: {date_form_value}")
    return parts[1]