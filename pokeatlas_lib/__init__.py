# pokeatlas_lib/__init__.py

# Expose the client, models and assembly helpers for easy import
from .client import PokeAPIClient, build_http_client, DEFAULT_BASE_URL, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from .models import (
    APIResource, NamedResource, Version, Region, Location, LocationArea,
    PokemonEncounter, VersionEncounterDetail, EncounterDetail,
    Pokemon, PokemonSprites, TypeSlot, StatSlot, AbilitySlot,
    PokemonSpecies, FlavorText, EvolutionChain, EvolutionNode,
)
from .assembly import (
    EncounterRow, build_encounter_rows, collect_encounter_rows,
    iter_evolution_chain, flatten_evolution_chain,
    select_flavor_text, summarize_species,
)
from .utils import extract_trailing_id, to_title, clean_flavor_text, truncate_text
from .exceptions import (
    PokeAPIError, PokeAPIConnectionError, PokeAPIStatusError, ResourceNotFoundError,
    PokeAPIDecodeError, ResourceURLError,
)

__all__ = [
    # Client
    "PokeAPIClient", "build_http_client", "DEFAULT_BASE_URL", "DEFAULT_TIMEOUT", "DEFAULT_USER_AGENT",
    # Models
    "APIResource", "NamedResource", "Version", "Region", "Location", "LocationArea",
    "PokemonEncounter", "VersionEncounterDetail", "EncounterDetail",
    "Pokemon", "PokemonSprites", "TypeSlot", "StatSlot", "AbilitySlot",
    "PokemonSpecies", "FlavorText", "EvolutionChain", "EvolutionNode",
    # Assembly
    "EncounterRow", "build_encounter_rows", "collect_encounter_rows",
    "iter_evolution_chain", "flatten_evolution_chain",
    "select_flavor_text", "summarize_species",
    # Helpers
    "extract_trailing_id", "to_title", "clean_flavor_text", "truncate_text",
    # Exceptions
    "PokeAPIError", "PokeAPIConnectionError", "PokeAPIStatusError", "ResourceNotFoundError",
    "PokeAPIDecodeError", "ResourceURLError",
]

__version__ = "0.1.0" # Keep version consistent with pyproject.toml
