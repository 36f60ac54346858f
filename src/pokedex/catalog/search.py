from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .models import CatalogEntry


def search_entries(entries: Sequence[CatalogEntry], term: str) -> Sequence[CatalogEntry]:
    """Return the entries whose name contains ``term``, ignoring case.

    Source order is kept. An empty term returns ``entries`` itself.
    """
    if not term:
        return entries
    needle = term.lower()
    return [e for e in entries if needle in e.name.lower()]


class FilteredView:
    """Memoized :func:`search_entries` keyed on both inputs.

    Holds only the last result, so it goes away with the view that owns it.
    """

    def __init__(self):
        self._entries: Optional[Tuple[CatalogEntry, ...]] = None
        self._term: Optional[str] = None
        self._result: Tuple[CatalogEntry, ...] = ()

    def __call__(self, entries: Tuple[CatalogEntry, ...], term: str) -> Tuple[CatalogEntry, ...]:
        if entries is not self._entries or term != self._term:
            self._entries, self._term = entries, term
            self._result = tuple(search_entries(entries, term))
        return self._result
