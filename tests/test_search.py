from pokedex.catalog.models import CatalogEntry
from pokedex.catalog.search import FilteredView, search_entries


def _entry(n, name):
    return CatalogEntry(id=n, name=name, source_url=f"u/{n}", categories=("water",), weight=10)


ENTRIES = tuple(
    _entry(i, name)
    for i, name in enumerate(["charmander", "squirtle", "charmeleon", "Charizard", "wartortle"], 1)
)


def test_search_is_case_insensitive_substring():
    assert [e.name for e in search_entries(ENTRIES, "CHAR")] == ["charmander", "charmeleon", "Charizard"]


def test_search_keeps_source_order():
    result = search_entries(ENTRIES, "rt")
    assert [e.name for e in result] == ["squirtle", "wartortle"]
    positions = [ENTRIES.index(e) for e in result]
    assert positions == sorted(positions)


def test_empty_term_returns_entries_unchanged():
    assert search_entries(ENTRIES, "") is ENTRIES
    assert FilteredView()(ENTRIES, "") == ENTRIES


def test_no_match_is_empty():
    assert search_entries(ENTRIES, "pikachu") == []


def test_scenario_char_against_three_names():
    entries = tuple(_entry(i, n) for i, n in enumerate(["charmander", "squirtle", "charmeleon"], 1))
    assert [e.name for e in FilteredView()(entries, "char")] == ["charmander", "charmeleon"]


def test_filtered_view_is_memoized_on_entries_and_term():
    view = FilteredView()
    first = view(ENTRIES, "war")
    assert view(ENTRIES, "war") is first
    assert view(ENTRIES, "squ") is not first
    assert view(ENTRIES[:2], "war") == ()


def test_filtered_view_recomputes_for_new_entries_with_same_term():
    view = FilteredView()
    assert [e.name for e in view(ENTRIES, "char")] == ["charmander", "charmeleon", "Charizard"]
    assert [e.name for e in view(ENTRIES[2:], "char")] == ["charmeleon", "Charizard"]
