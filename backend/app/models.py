# backend/app/models.py

from pydantic import BaseModel, Field
from typing import List, Optional

from pokeatlas_lib import EncounterRow

class LocationLink(BaseModel):
    """A location of a region, as listed on the region page."""
    id: int = Field(..., description="Location ID (taken from its PokeAPI URL)")
    name: str = Field(..., description="Location slug, e.g. 'pallet-town'")
    title: str = Field(..., description="Display name, e.g. 'Pallet Town'")

class RegionView(BaseModel):
    name: str
    title: str
    locations: List[LocationLink]

class RouteView(BaseModel):
    """Encounter table of one location for one game version."""
    id: int
    name: str
    title: str
    version: str = Field(..., description="Game version slug the rows are filtered to")
    encounters: List[EncounterRow]

class TypeBadge(BaseModel):
    name: str
    title: str
    color: str = Field(..., description="Badge colour as #RRGGBB")

class StatBar(BaseModel):
    name: str
    label: str = Field(..., description="Display label, e.g. 'Sp. Attack'")
    base_stat: int
    max_value: int = 255

class EvolutionEntry(BaseModel):
    name: str # Title-cased
    slug: str # Used to navigate to the species' own detail page
    sprite_url: Optional[str] = None

class PokemonDetail(BaseModel):
    id: int
    name: str
    title: str = Field(..., description="Display title, e.g. 'Bulbasaur  (#001)'")
    sprite_url: Optional[str] = None
    types: List[TypeBadge] # Ordered by slot
    abilities: List[str] # Hidden abilities are suffixed with ' (Hidden)'
    stats: List[StatBar]
    summary: str # Shortest English flavor text, truncated
    evolutions: List[EvolutionEntry]
