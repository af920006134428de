# pokeatlas_lib/models.py
from __future__ import annotations

from pydantic import BaseModel, Field
from typing import List, Optional

from .utils import extract_trailing_id

# Models mirror the PokeAPI JSON shapes, trimmed to what the atlas views read.
# Unknown keys from the API are ignored; every model is frozen once validated.


class ResourceModel(BaseModel):
    class Config:
        frozen = True
        populate_by_name = True


class APIResource(ResourceModel):
    """Bare URL reference, e.g. a species' evolution chain."""
    url: str

    @property
    def id(self) -> int:
        return extract_trailing_id(self.url)


class NamedResource(APIResource):
    """Name + canonical URL reference used all over PokeAPI."""
    name: str


class Version(ResourceModel):
    name: str
    version_group: NamedResource


class Region(ResourceModel):
    name: str
    locations: List[NamedResource] = []


class Location(ResourceModel):
    name: str
    areas: List[NamedResource] = []


# --- Encounters ---

class EncounterDetail(ResourceModel):
    method: NamedResource
    min_level: int
    max_level: int
    chance: int = Field(..., ge=0, le=100)
    condition_values: List[NamedResource] = []


class VersionEncounterDetail(ResourceModel):
    version: NamedResource
    details: List[EncounterDetail] = Field(default_factory=list, alias="encounter_details")


class PokemonEncounter(ResourceModel):
    pokemon: NamedResource
    version_details: List[VersionEncounterDetail] = []


class LocationArea(ResourceModel):
    name: str
    encounters: List[PokemonEncounter] = Field(default_factory=list, alias="pokemon_encounters")


# --- Pokemon ---

class PokemonSprites(ResourceModel):
    front_default: Optional[str] = None


class TypeSlot(ResourceModel):
    slot: int
    type: NamedResource


class StatSlot(ResourceModel):
    stat: NamedResource
    base_stat: int


class AbilitySlot(ResourceModel):
    ability: NamedResource
    is_hidden: bool = False


class Pokemon(ResourceModel):
    id: int
    name: str
    species: NamedResource # Differs from name for alternate forms, e.g. 'deoxys-attack' -> 'deoxys'
    sprites: PokemonSprites = PokemonSprites()
    types: List[TypeSlot] = []
    stats: List[StatSlot] = []
    abilities: List[AbilitySlot] = []

    @property
    def sprite_url(self) -> Optional[str]:
        return self.sprites.front_default


# --- Species & evolution ---

class FlavorText(ResourceModel):
    flavor_text: str
    language: NamedResource


class PokemonSpecies(ResourceModel):
    id: int
    name: str
    flavor_texts: List[FlavorText] = Field(default_factory=list, alias="flavor_text_entries")
    evolution_chain: APIResource


class EvolutionNode(ResourceModel):
    """One species in an evolution tree; children are the species it evolves into."""
    species: NamedResource
    evolves_to: List[EvolutionNode] = []


class EvolutionChain(ResourceModel):
    id: Optional[int] = None
    chain: EvolutionNode


EvolutionNode.model_rebuild()
