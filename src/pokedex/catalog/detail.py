"""Formatting of the detail overlay, shared by the web page and the CLI."""

from __future__ import annotations

from typing import List, Tuple

from .models import CatalogEntry


def format_weight(weight: int) -> str:
    """Hectograms to a kilogram label, e.g. ``69`` -> ``"6.9 kg"``."""
    return f"{weight / 10:.1f} kg"


def format_experience(base_experience: int | None) -> str:
    return "unknown" if base_experience is None else str(base_experience)


def detail_rows(entry: CatalogEntry) -> List[Tuple[str, str]]:
    return [
        ("ID", f"#{entry.id}"),
        ("Name", entry.name),
        ("Types", ", ".join(entry.categories)),
        ("Weight", format_weight(entry.weight)),
        ("Base experience", format_experience(entry.base_experience)),
    ]
