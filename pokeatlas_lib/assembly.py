# pokeatlas_lib/assembly.py

import logging
from typing import TYPE_CHECKING, Iterable, Iterator, List, Sequence

from pydantic import BaseModel

from .models import EvolutionNode, FlavorText, Location, LocationArea, PokemonSpecies
from .utils import clean_flavor_text, format_level_range, to_title, truncate_text

if TYPE_CHECKING:
    from .client import PokeAPIClient

logger = logging.getLogger(__name__)

DEFAULT_VERSION = "firered"
DEFAULT_LANGUAGE = "en"
SUMMARY_MAX_LENGTH = 160
NO_CONDITIONS = "—"


class EncounterRow(BaseModel):
    """One line of a route's encounter table, ready for display."""
    pokemon: str
    pokemon_slug: str
    method: str
    level_range: str
    chance: str
    conditions: str

    class Config:
        frozen = True


# --- Evolution chains ---

def iter_evolution_chain(node: EvolutionNode) -> Iterator[EvolutionNode]:
    """Pre-order walk: the node, then each child subtree left to right."""
    yield node
    for child in node.evolves_to:
        yield from iter_evolution_chain(child)


def flatten_evolution_chain(root: EvolutionNode) -> List[EvolutionNode]:
    return list(iter_evolution_chain(root))


# --- Encounters ---

def build_encounter_rows(areas: Iterable[LocationArea], version: str = DEFAULT_VERSION) -> List[EncounterRow]:
    """
    Flattens the encounters of the given areas into display rows for one game version.

    Rows are sorted by Pokémon display name, then method display name, both
    compared case-insensitively on the title-cased strings. Ties keep area order.
    """
    rows: List[EncounterRow] = []
    for area in areas:
        for encounter in area.encounters:
            for version_detail in encounter.version_details:
                if version_detail.version.name != version:
                    continue
                for detail in version_detail.details:
                    conditions = ", ".join(to_title(c.name) for c in detail.condition_values)
                    rows.append(EncounterRow(
                        pokemon=to_title(encounter.pokemon.name),
                        pokemon_slug=encounter.pokemon.name,
                        method=to_title(detail.method.name),
                        level_range=format_level_range(detail.min_level, detail.max_level),
                        chance=f"{detail.chance}%",
                        conditions=conditions or NO_CONDITIONS,
                    ))
    rows.sort(key=lambda r: (r.pokemon.casefold(), r.method.casefold()))
    return rows


async def collect_encounter_rows(
    client: "PokeAPIClient",
    location: Location,
    version: str = DEFAULT_VERSION,
) -> List[EncounterRow]:
    """
    Fetches every area of a location, one after the other, and builds its encounter rows.

    The first failing area fetch propagates and no rows are returned.
    """
    areas: List[LocationArea] = []
    for area_ref in location.areas:
        areas.append(await client.get_location_area(area_ref.id))
    rows = build_encounter_rows(areas, version)
    logger.debug(f"Built {len(rows)} '{version}' encounter rows from {len(areas)} areas of {location.name}")
    return rows


# --- Species text ---

def select_flavor_text(entries: Sequence[FlavorText], language: str = DEFAULT_LANGUAGE) -> str:
    """
    Picks the shortest cleaned flavor text in the given language.

    Falls back to the first entry when none match the language, and to an
    empty string when there are no entries at all.
    """
    if not entries:
        return ""
    candidates = [clean_flavor_text(e.flavor_text) for e in entries if e.language.name == language]
    if not candidates:
        return clean_flavor_text(entries[0].flavor_text)
    return min(candidates, key=len)


def summarize_species(species: PokemonSpecies, max_length: int = SUMMARY_MAX_LENGTH) -> str:
    return truncate_text(select_flavor_text(species.flavor_texts), max_length)
