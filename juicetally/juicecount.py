"""A registry mapping canonical widget ids to their counts."""

from .cid import CanonicalID


class CountRegistry:
    """Holds the count entered for each widget."""

    def __init__(self) -> None:
        self._counts: dict[CanonicalID, int] = {}

    def set(self, widget_type: str, item_name: str, date: str, index: int, count: int) -> None:
        """Record *count* for the widget described by the given fields."""
        cid = CanonicalID(
            item_name=item_name, widget_type=widget_type, date=date, index=index
        )
        self._counts[cid] = count

    def set_bulk(self, cid: CanonicalID, count: int) -> None:
        """Record *count* for an already built id."""
        self._counts[cid] = count

    def get(self, cid: CanonicalID) -> int:
        """Return the count for *cid*; raise KeyError if there is none."""
        try:
            return self._counts[cid]
        except KeyError:
            raise KeyError(f"Nonexistent ID: {cid!r}") from None

    def delete(self, cid: CanonicalID) -> None:
        """Forget *cid*; raise KeyError if it is not recorded."""
        if cid not in self._counts:
            raise KeyError(f"Nonexistent CID: {cid!r}")
        del self._counts[cid]

    def info(self) -> str:
        """Describe the current contents of the registry."""
        return f"Current counts: {self._counts!r}\n"

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, cid: object) -> bool:
        return cid in self._counts