"""Conversion between display names and kebab-case identifiers."""


def kebab_case(name: str) -> str:
    """Lower-case the whitespace-separated words of *name* and join them with hyphens."""
    return "-".join(word.lower() for word in name.split())


def undo_kebab_case(item_name: str) -> str:
    """Turn a kebab-case identifier back into space-separated, capitalised words.

    Only the first character of each word is upper-cased; the rest is kept.
    """
    parts = item_name.split("-")
    if not all(parts):
        raise ValueError(f"Empty word in kebab-case name: {item_name!r}")
    return " ".join(part[0].upper() + part[1:] for part in parts)