import pytest

from pokefetch.types import MapArea, MapAreaPage, NamedResource, PokemonEncounter

AREA_URL = "https://pokeapi.co/api/v2/location-area/1/"


def test_named_resource_from_dict():
    res = NamedResource.from_dict({"name": "canalave-city-area", "url": AREA_URL})
    assert res == NamedResource(name="canalave-city-area", url=AREA_URL)


def test_named_resource_missing_fields_are_empty():
    assert NamedResource.from_dict({}) == NamedResource(name="", url="")


def test_named_resource_rejects_non_object():
    with pytest.raises(TypeError):
        NamedResource.from_dict(["not", "an", "object"])


def test_map_area_page_from_dict():
    next_url = "https://pokeapi.co/api/v2/location-area?offset=20&limit=20"
    page = MapAreaPage.from_dict(
        {
            "count": 1089,
            "next": next_url,
            "previous": None,
            "results": [
                {"name": "canalave-city-area", "url": AREA_URL},
                {"name": "eterna-city-area", "url": AREA_URL},
            ],
        }
    )
    assert page.count == 1089
    assert page.next == next_url
    assert page.previous is None
    assert [r.name for r in page.results] == ["canalave-city-area", "eterna-city-area"]


def test_map_area_page_defaults_when_empty():
    page = MapAreaPage.from_dict({})
    assert page == MapAreaPage(count=0, next=None, previous=None, results=())


def test_map_area_page_rejects_wrong_types():
    with pytest.raises(TypeError):
        MapAreaPage.from_dict({"results": "canalave"})
    with pytest.raises(TypeError):
        MapAreaPage.from_dict({"count": "many"})


def test_pokemon_encounter_from_dict():
    details = [{"max_chance": 60, "version": {"name": "diamond", "url": AREA_URL}}]
    enc = PokemonEncounter.from_dict(
        {"pokemon": {"name": "tentacool", "url": AREA_URL}, "version_details": details}
    )
    assert enc.pokemon.name == "tentacool"
    assert enc.version_details == tuple(details)


def test_map_area_from_dict():
    data = {
        "id": 1,
        "name": "canalave-city-area",
        "game_index": 1,
        "location": {"name": "canalave-city", "url": AREA_URL},
        "names": [{"language": {"name": "en", "url": AREA_URL}, "name": "Canalave City"}],
        "encounter_method_rates": [],
        "pokemon_encounters": [
            {"pokemon": {"name": "tentacool", "url": AREA_URL}, "version_details": []},
            {"pokemon": {"name": "tentacruel", "url": AREA_URL}, "version_details": []},
        ],
    }
    area = MapArea.from_dict(data)
    assert area.id == 1
    assert area.name == "canalave-city-area"
    assert area.location.name == "canalave-city"
    assert area.names == tuple(data["names"])
    assert [e.pokemon.name for e in area.pokemon_encounters] == ["tentacool", "tentacruel"]


def test_map_area_rejects_non_object_encounter():
    with pytest.raises(TypeError):
        MapArea.from_dict({"pokemon_encounters": ["tentacool"]})