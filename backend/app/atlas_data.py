# backend/app/atlas_data.py

import logging
from typing import List, Union

from pokeatlas_lib import (
    PokeAPIClient, Pokemon,
    collect_encounter_rows, flatten_evolution_chain, summarize_species, to_title,
)

from .config import settings
from .models import (
    LocationLink, RegionView, RouteView,
    PokemonDetail, TypeBadge, StatBar, EvolutionEntry,
)

logger = logging.getLogger(__name__)

DEFAULT_TYPE_COLOR = "#888888"
TYPE_COLORS = {
    "fire": "#EE8157",
    "water": "#6A8DFF",
    "grass": "#63BC5A",
    "electric": "#F4D045",
    "ice": "#8ED4D6",
    "fighting": "#C03F3C",
    "poison": "#A541A3",
    "ground": "#E2C073",
    "flying": "#90A5EE",
    "psychic": "#FA91B2",
    "bug": "#92BC2C",
    "rock": "#B6A152",
    "ghost": "#566ABE",
    "dragon": "#0A6DC4",
    "dark": "#705A4A",
    "steel": "#B7B7CE",
    "fairy": "#E3A3CF",
}


# --- Helpers ---


def _type_color(type_name: str) -> str:
    return TYPE_COLORS.get(type_name, DEFAULT_TYPE_COLOR)


def _stat_label(stat_name: str) -> str:
    return to_title(stat_name.replace("special-", "Sp. "))


def _pokemon_title(pokemon: Pokemon) -> str:
    return f"{to_title(pokemon.name)}  (#{pokemon.id:03d})"


def _build_type_badges(pokemon: Pokemon) -> List[TypeBadge]:
    return [
        TypeBadge(name=t.type.name, title=to_title(t.type.name), color=_type_color(t.type.name))
        for t in sorted(pokemon.types, key=lambda t: t.slot)
    ]


def _build_ability_labels(pokemon: Pokemon) -> List[str]:
    return [to_title(a.ability.name) + (" (Hidden)" if a.is_hidden else "") for a in pokemon.abilities]


def _build_stat_bars(pokemon: Pokemon) -> List[StatBar]:
    return [StatBar(name=s.stat.name, label=_stat_label(s.stat.name), base_stat=s.base_stat) for s in pokemon.stats]


# --- Views ---


async def get_region_view(client: PokeAPIClient, slug: str) -> RegionView:
    """Region page: every location of the region with its ID and display name."""
    region = await client.get_region(slug)
    locations = [LocationLink(id=loc.id, name=loc.name, title=to_title(loc.name)) for loc in region.locations]
    logger.info(f"Region '{region.name}' lists {len(locations)} locations.")
    return RegionView(name=region.name, title=to_title(region.name), locations=locations)


async def get_route_view(client: PokeAPIClient, location_id: int, version: str) -> RouteView:
    """Route page: the location's encounter table for a single game version."""
    location = await client.get_location(location_id)
    rows = await collect_encounter_rows(client, location, version)
    logger.info(f"Location '{location.name}' has {len(rows)} encounter rows for '{version}'.")
    return RouteView(
        id=location_id,
        name=location.name,
        title=to_title(location.name),
        version=version,
        encounters=rows,
    )


async def get_pokemon_detail(client: PokeAPIClient, name_or_id: Union[int, str]) -> PokemonDetail:
    """
    Pokémon page: base data, short description and evolution line.

    Fetch order is pokemon -> species -> evolution chain -> one pokemon per
    evolution entry (for its sprite), each awaited before the next.

    Species and evolution entries are looked up by species ID: alternate forms
    (e.g. 'deoxys-attack') and species whose default Pokémon has another name
    (e.g. 'wormadam' -> 'wormadam-plant') have no Pokémon under the species slug.
    """
    pokemon = await client.get_pokemon(name_or_id)
    species = await client.get_species(pokemon.species.id)
    summary = summarize_species(species, max_length=settings.summary_max_length)

    chain = await client.get_evolution_chain(species.evolution_chain.id)
    evolutions: List[EvolutionEntry] = []
    for node in flatten_evolution_chain(chain.chain):
        if node.species.id == pokemon.species.id:
            evo_pokemon = pokemon
        else:
            evo_pokemon = await client.get_pokemon(node.species.id)
        slug = node.species.name
        evolutions.append(EvolutionEntry(name=to_title(slug), slug=slug, sprite_url=evo_pokemon.sprite_url))

    return PokemonDetail(
        id=pokemon.id,
        name=pokemon.name,
        title=_pokemon_title(pokemon),
        sprite_url=pokemon.sprite_url,
        types=_build_type_badges(pokemon),
        abilities=_build_ability_labels(pokemon),
        stats=_build_stat_bars(pokemon),
        summary=summary,
        evolutions=evolutions,
    )
