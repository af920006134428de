# backend/tests/conftest.py

import httpx
import pytest
import pytest_asyncio

from pokeatlas_lib import PokeAPIClient

from app.clients import get_atlas_client
from app.main import app

POKEAPI = "https://pokeapi.co/api/v2"


def ref(kind: str, name: str, resource_id: int) -> dict:
    return {"name": name, "url": f"{POKEAPI}/{kind}/{resource_id}/"}


def sprite(pokemon_id: int) -> str:
    return f"https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon/{pokemon_id}.png"


@pytest_asyncio.fixture
async def api_client():
    """HTTP client for the app, with the PokeAPI client swapped for a fresh one per test."""
    atlas_client = PokeAPIClient(base_url=f"{POKEAPI}/")

    async def override():
        return atlas_client

    app.dependency_overrides[get_atlas_client] = override
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
    await atlas_client.aclose()


@pytest.fixture
def kanto_json():
    return {
        "id": 1,
        "name": "kanto",
        "locations": [ref("location", "mt-moon", 67), ref("location", "pallet-town", 86)],
    }


@pytest.fixture
def route_jsons():
    """Location 67 with two areas; only the firered entries should surface."""
    def enc(pokemon, pokemon_id, version, method, lo, hi, chance, conditions=()):
        return {
            "pokemon": ref("pokemon", pokemon, pokemon_id),
            "version_details": [{
                "version": ref("version", version, 10 if version == "firered" else 11),
                "encounter_details": [{
                    "method": ref("encounter-method", method, 1),
                    "min_level": lo,
                    "max_level": hi,
                    "chance": chance,
                    "condition_values": [ref("encounter-condition-value", c, 1) for c in conditions],
                }],
            }],
        }

    return {
        "location": {"id": 67, "name": "mt-moon", "areas": [ref("location-area", "mt-moon-1f", 1), ref("location-area", "mt-moon-b1f", 2)]},
        1: {"id": 1, "name": "mt-moon-1f", "pokemon_encounters": [
            enc("zubat", 41, "firered", "walk", 7, 10, 69),
            enc("clefairy", 35, "leafgreen", "walk", 8, 8, 1),
        ]},
        2: {"id": 2, "name": "mt-moon-b1f", "pokemon_encounters": [
            enc("paras", 46, "firered", "walk", 5, 5, 5, ["time-night"]),
        ]},
    }


@pytest.fixture
def oddish_jsons():
    """Everything the detail page of Oddish fetches, keyed by PokeAPI path."""
    def pokemon(pokemon_id, name):
        return {"id": pokemon_id, "name": name, "species": ref("pokemon-species", name, pokemon_id), "sprites": {"front_default": sprite(pokemon_id)}, "types": [], "stats": [], "abilities": []}

    oddish = pokemon(43, "oddish")
    oddish["types"] = [
        {"slot": 2, "type": ref("type", "poison", 4)},
        {"slot": 1, "type": ref("type", "grass", 12)},
    ]
    oddish["abilities"] = [
        {"ability": ref("ability", "chlorophyll", 34), "is_hidden": False},
        {"ability": ref("ability", "run-away", 50), "is_hidden": True},
    ]
    oddish["stats"] = [
        {"stat": ref("stat", "hp", 1), "base_stat": 45},
        {"stat": ref("stat", "special-defense", 5), "base_stat": 65},
    ]
    return {
        "pokemon/oddish/": oddish,
        "pokemon-species/43/": {
            "id": 43,
            "name": "oddish",
            "flavor_text_entries": [
                {"flavor_text": "During the day, it keeps its face\nburied in the ground.", "language": ref("language", "en", 9)},
                {"flavor_text": "Le jour, il se cache.", "language": ref("language", "fr", 5)},
            ],
            "evolution_chain": {"url": f"{POKEAPI}/evolution-chain/18/"},
        },
        "evolution-chain/18/": {
            "id": 18,
            "chain": {
                "species": ref("pokemon-species", "oddish", 43),
                "evolves_to": [{
                    "species": ref("pokemon-species", "gloom", 44),
                    "evolves_to": [
                        {"species": ref("pokemon-species", "vileplume", 45), "evolves_to": []},
                        {"species": ref("pokemon-species", "bellossom", 182), "evolves_to": []},
                    ],
                }],
            },
        },
        "pokemon/44/": pokemon(44, "gloom"),
        "pokemon/45/": pokemon(45, "vileplume"),
        "pokemon/182/": pokemon(182, "bellossom"),
    }
