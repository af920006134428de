# tests/conftest.py

import pytest

API = "https://pokeapi.co/api/v2"


def named(kind: str, name: str, resource_id: int) -> dict:
    return {"name": name, "url": f"{API}/{kind}/{resource_id}/"}


def encounter(pokemon: str, pokemon_id: int, *versions: dict) -> dict:
    return {"pokemon": named("pokemon", pokemon, pokemon_id), "version_details": list(versions)}


def version_detail(version: str, *details: dict) -> dict:
    return {"version": named("version", version, 10), "max_chance": 100, "encounter_details": list(details)}


def detail(method: str, min_level: int, max_level: int, chance: int, conditions=()) -> dict:
    return {
        "method": named("encounter-method", method, 1),
        "min_level": min_level,
        "max_level": max_level,
        "chance": chance,
        "condition_values": [named("encounter-condition-value", c, 1) for c in conditions],
    }


@pytest.fixture
def api_url():
    return API


@pytest.fixture
def region_json():
    return {
        "id": 1,
        "name": "kanto",
        "locations": [
            named("location", "pallet-town", 86),
            named("location", "viridian-forest", 88),
        ],
    }


@pytest.fixture
def location_json():
    return {
        "id": 88,
        "name": "viridian-forest",
        "areas": [
            named("location-area", "viridian-forest-area", 321),
            named("location-area", "viridian-forest-north", 900),
        ],
    }


@pytest.fixture
def area_jsons():
    """Two areas of Viridian Forest keyed by area id."""
    return {
        321: {
            "id": 321,
            "name": "viridian-forest-area",
            "pokemon_encounters": [
                encounter(
                    "weedle", 13,
                    version_detail("firered", detail("walk", 3, 5, 40)),
                    version_detail("leafgreen", detail("walk", 3, 5, 15)),
                ),
                encounter("pikachu", 25, version_detail("firered", detail("walk", 3, 3, 5, ["time-morning", "time-day"]))),
            ],
        },
        900: {
            "id": 900,
            "name": "viridian-forest-north",
            "pokemon_encounters": [
                encounter("caterpie", 10, version_detail("leafgreen", detail("walk", 4, 6, 40))),
                encounter("pikachu", 25, version_detail("firered", detail("gift", 5, 5, 100))),
            ],
        },
    }


@pytest.fixture
def pokemon_json():
    return {
        "id": 43,
        "name": "oddish",
        "species": named("pokemon-species", "oddish", 43),
        "sprites": {"front_default": "https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon/43.png"},
        "types": [
            {"slot": 2, "type": named("type", "poison", 4)},
            {"slot": 1, "type": named("type", "grass", 12)},
        ],
        "stats": [
            {"stat": named("stat", "hp", 1), "base_stat": 45, "effort": 0},
            {"stat": named("stat", "special-attack", 4), "base_stat": 75, "effort": 1},
        ],
        "abilities": [
            {"ability": named("ability", "chlorophyll", 34), "is_hidden": False, "slot": 1},
            {"ability": named("ability", "run-away", 50), "is_hidden": True, "slot": 3},
        ],
    }


@pytest.fixture
def species_json():
    return {
        "id": 43,
        "name": "oddish",
        "flavor_text_entries": [
            {"flavor_text": "During the day, it keeps its face\nburied in the ground.", "language": named("language", "en", 9)},
            {"flavor_text": "Its scientific name is\fOddium wanderus.", "language": named("language", "en", 9)},
            {"flavor_text": "Le jour, il se cache.", "language": named("language", "fr", 5)},
        ],
        "evolution_chain": {"url": f"{API}/evolution-chain/18/"},
    }


@pytest.fixture
def evolution_chain_json():
    return {
        "id": 18,
        "chain": {
            "species": named("pokemon-species", "oddish", 43),
            "evolves_to": [
                {
                    "species": named("pokemon-species", "gloom", 44),
                    "evolves_to": [
                        {"species": named("pokemon-species", "vileplume", 45), "evolves_to": []},
                        {"species": named("pokemon-species", "bellossom", 182), "evolves_to": []},
                    ],
                }
            ],
        },
    }
