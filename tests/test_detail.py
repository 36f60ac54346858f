import pytest
from pydantic import ValidationError

from pokedex.catalog.detail import detail_rows, format_experience, format_weight
from pokedex.catalog.models import CatalogEntry


def test_format_weight_one_decimal():
    assert format_weight(69) == "6.9 kg"
    assert format_weight(100) == "10.0 kg"
    assert format_weight(0) == "0.0 kg"
    assert format_weight(9999) == "999.9 kg"


def test_weight_kg_property():
    entry = CatalogEntry(id=25, name="pikachu", source_url="u", weight=60)
    assert entry.weight_kg == 6.0


def test_format_experience():
    assert format_experience(64) == "64"
    assert format_experience(None) == "unknown"


def test_detail_rows():
    entry = CatalogEntry(
        id=1,
        name="bulbasaur",
        source_url="u/1",
        image_url="i/1.png",
        categories=("grass", "poison"),
        weight=69,
        base_experience=64,
    )
    assert detail_rows(entry) == [
        ("ID", "#1"),
        ("Name", "bulbasaur"),
        ("Types", "grass, poison"),
        ("Weight", "6.9 kg"),
        ("Base experience", "64"),
    ]


def test_entries_are_hashable_and_frozen():
    entry = CatalogEntry(id=1, name="bulbasaur", source_url="u/1", weight=69)
    assert hash(entry) == hash(CatalogEntry(id=1, name="bulbasaur", source_url="u/1", weight=69))
    with pytest.raises(ValidationError):
        entry.name = "ivysaur"
    assert entry.name == "bulbasaur"
