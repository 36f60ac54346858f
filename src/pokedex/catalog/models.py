from __future__ import annotations
from pydantic import BaseModel, ConfigDict
from typing import Optional, Tuple


class CatalogEntry(BaseModel):
    """One fully hydrated catalog entry. Frozen, so it can key caches."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    source_url: str
    image_url: Optional[str] = None
    categories: Tuple[str, ...] = ()
    weight: int  # hectograms
    base_experience: Optional[int] = None

    @property
    def weight_kg(self) -> float:
        return self.weight / 10
