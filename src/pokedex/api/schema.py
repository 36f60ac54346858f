"""Response shapes of the upstream REST API.

Only the fields the catalog needs are declared; anything else the service
sends is ignored. A missing or mistyped declared field fails validation.
"""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class _Upstream(BaseModel):
    model_config = ConfigDict(extra="ignore")


class Summary(_Upstream):
    name: str = Field(min_length=1)
    url: str = Field(min_length=1)


class ListingResponse(_Upstream):
    count: int
    next: Optional[str]
    previous: Optional[str]
    results: List[Summary]


class Sprites(_Upstream):
    # required, but the service publishes null for some entries
    front_default: Optional[str]


class NamedRef(_Upstream):
    name: str


class TypeSlot(_Upstream):
    type: NamedRef


class DetailResponse(_Upstream):
    id: int
    sprites: Sprites
    types: List[TypeSlot]
    weight: int
    base_experience: Optional[int]
