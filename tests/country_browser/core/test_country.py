from __future__ import annotations

import pytest

from country_browser.core.country import Country


def _api_payload(**overrides):
    raw = {
        "id": 1,
        "name": "Fiji",
        "abbreviation": "FJ",
        "capital": "Suva",
        "currency": "FJD",
        "phone": "679",
        "population": 900_000,
        "media": {
            "flag": "https://flags/fj.png",
            "emblem": "https://emblems/fj.png",
            "orthographic": "https://ortho/fj.png",
        },
        "continent": "Oceania",
    }
    raw.update(overrides)
    return raw


def test_from_api_maps_wire_fields():
    c = Country.from_api(_api_payload())

    assert c == Country(
        name="Fiji",
        code="FJ",
        capital="Suva",
        phone_code="679",
        population=900_000,
        flag="https://flags/fj.png",
        emblem="https://emblems/fj.png",
        continent="Oceania",
    )


def test_from_api_missing_fields_default_to_empty():
    c = Country.from_api({"name": "Nowhere"})

    assert c.name == "Nowhere"
    assert c.capital == ""
    assert c.population == 0
    assert c.flag == ""
    assert c.emblem == ""


def test_from_api_accepts_integral_float_population():
    assert Country.from_api(_api_payload(population=5e6)).population == 5_000_000


@pytest.mark.parametrize("population", [-1, "many", 1.5, True])
def test_from_api_rejects_invalid_population(population):
    with pytest.raises(ValueError):
        Country.from_api(_api_payload(population=population))


def test_from_api_rejects_non_object():
    with pytest.raises(ValueError):
        Country.from_api(["Fiji"])


def test_to_from_dict_roundtrip():
    c = Country.from_api(_api_payload())
    assert Country.from_dict(c.to_dict()) == c
