from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

from .models import CatalogEntry
from .search import FilteredView


@dataclass
class CatalogView:
    """Search term and detail selection over one loaded batch.

    ``selection`` indexes the filtered view, not ``entries``.
    """

    entries: Tuple[CatalogEntry, ...] = ()
    term: str = ""
    selection: Optional[int] = None
    _filter: FilteredView = field(default_factory=FilteredView, init=False, repr=False, compare=False)

    def set_entries(self, entries: Sequence[CatalogEntry]) -> None:
        self.entries = tuple(entries)
        self.selection = None

    def set_term(self, term: str) -> None:
        # The overlay would otherwise point into a view that no longer exists
        if term != self.term:
            self.term = term
            self.selection = None

    @property
    def filtered(self) -> Tuple[CatalogEntry, ...]:
        return self._filter(self.entries, self.term)

    @property
    def is_empty(self) -> bool:
        return not self.filtered

    @property
    def empty_message(self) -> str:
        return f'No results for "{self.term}".'

    @property
    def selected(self) -> Optional[CatalogEntry]:
        if self.selection is None:
            return None
        return self.filtered[self.selection]

    @property
    def show_navigation(self) -> bool:
        return len(self.filtered) > 1

    def select(self, index: int) -> CatalogEntry:
        size = len(self.filtered)
        if not 0 <= index < size:
            raise IndexError(f"selection {index} outside filtered view of {size}")
        self.selection = index
        return self.filtered[index]

    def next(self) -> None:
        if self.selection is None:
            return
        self.selection = (self.selection + 1) % len(self.filtered)

    def previous(self) -> None:
        if self.selection is None:
            return
        size = len(self.filtered)
        self.selection = (self.selection - 1 + size) % size

    def close(self) -> None:
        self.selection = None
