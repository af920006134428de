# backend/app/main.py

from fastapi import Depends, FastAPI, HTTPException, Path, Query
from contextlib import asynccontextmanager
import logging
from typing import Optional, Union

from pokeatlas_lib import PokeAPIClient, PokeAPIError, ResourceNotFoundError, Version

from .atlas_data import get_region_view, get_route_view, get_pokemon_detail
from .models import RegionView, RouteView, PokemonDetail
from .config import settings
from .clients import get_atlas_client, close_atlas_client

# Configure logging
logger = logging.getLogger(__name__)
logging.basicConfig(level=settings.log_level, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup phase
    logger.info("Application startup...")
    await get_atlas_client() # Ensures client is created
    logger.info("PokeAPI httpx client initialized.")

    yield # Application runs here

    # Shutdown phase
    logger.info("Application shutdown...")
    await close_atlas_client()
    logger.info("Resources cleaned up.")

app = FastAPI(
    title="PokeAtlas API",
    description="Region, route encounter and Pokémon detail views built from PokeAPI data",
    version="1.0.0",
    lifespan=lifespan,
)

def _raise_for_library_error(e: PokeAPIError, what: str, primary_path: str):
    """
    Translates a library failure into the HTTP error returned to the caller.

    Only a 404 on the requested resource itself (primary_path) is a 404 here;
    a 404 on any follow-up fetch means the upstream data is inconsistent (502).
    """
    if isinstance(e, ResourceNotFoundError) and e.path == primary_path:
        logger.warning(f"{what} not found upstream ({e.path}).")
        raise HTTPException(status_code=404, detail=f"{what} not found.") from e
    logger.error(f"Failed to build {what}: {e}")
    raise HTTPException(
        status_code=502,
        detail=f"Could not retrieve {what}. The external API might be down or returned unexpected data."
    ) from e

# --- API Endpoints ---

@app.get("/")
async def read_root():
    """ Basic root endpoint to check if the API is running. """
    return {
        "message": "Welcome to the PokeAtlas API!",
        "documentation": "/docs",
        "pokeapi": settings.pokeapi_base_url,
    }

@app.get(
    "/api/versions/{slug}",
    response_model=Version,
    summary="Get a Game Version",
    tags=["Metadata"]
)
async def get_version(
    slug: str = Path(..., description="Version slug", examples=["firered"]),
    client: PokeAPIClient = Depends(get_atlas_client),
):
    slug = slug.lower()
    logger.info(f"Received request for version '{slug}'.")
    try:
        return await client.get_version(slug)
    except PokeAPIError as e:
        _raise_for_library_error(e, f"Version '{slug}'", f"version/{slug}/")

async def _region_response(client: PokeAPIClient, slug: str) -> RegionView:
    slug = slug.lower()
    logger.info(f"Received request for region '{slug}'.")
    try:
        return await get_region_view(client, slug)
    except PokeAPIError as e:
        _raise_for_library_error(e, f"Region '{slug}'", f"region/{slug}/")

@app.get(
    "/api/regions",
    response_model=RegionView,
    summary="List the Locations of the Default Region",
    description="Same as /api/regions/{slug} for the configured default region (Kanto unless overridden).",
    tags=["Atlas"]
)
async def get_default_region(client: PokeAPIClient = Depends(get_atlas_client)):
    return await _region_response(client, settings.default_region)

@app.get(
    "/api/regions/{slug}",
    response_model=RegionView,
    summary="List the Locations of a Region",
    tags=["Atlas"]
)
async def get_region(
    slug: str = Path(..., description="Region slug", examples=["kanto"]),
    client: PokeAPIClient = Depends(get_atlas_client),
):
    return await _region_response(client, slug)

@app.get(
    "/api/locations/{location_id}/encounters",
    response_model=RouteView,
    summary="Get the Encounter Table of a Location",
    description="Collects the encounters of every area of the location for one game version, sorted by Pokémon then method.",
    tags=["Atlas"]
)
async def get_location_encounters(
    location_id: int = Path(..., ge=1, description="PokeAPI location ID"),
    version: Optional[str] = Query(None, description="Game version slug. Defaults to the configured version."),
    client: PokeAPIClient = Depends(get_atlas_client),
):
    version = (version or settings.default_version).lower()
    logger.info(f"Received request for encounters of location {location_id} ({version}).")
    try:
        return await get_route_view(client, location_id, version)
    except PokeAPIError as e:
        _raise_for_library_error(e, f"Location {location_id}", f"location/{location_id}/")

@app.get(
    "/api/pokemon/{pokemon_id_or_name}",
    response_model=PokemonDetail,
    summary="Get Detailed Data for a Specific Pokémon",
    tags=["Pokemon"]
)
async def get_pokemon_details(
    pokemon_id_or_name: Union[int, str] = Path(
        ...,
        description="The National Pokédex ID (integer) or name (string) of the Pokémon.",
        examples=["pikachu", 25]
    ),
    client: PokeAPIClient = Depends(get_atlas_client),
):
    # Normalize input name to lowercase if it's a string
    identifier = pokemon_id_or_name.lower() if isinstance(pokemon_id_or_name, str) else pokemon_id_or_name
    logger.info(f"Received request for Pokémon details: '{identifier}'.")
    try:
        detail = await get_pokemon_detail(client, identifier)
    except PokeAPIError as e:
        _raise_for_library_error(e, f"Pokémon '{identifier}'", f"pokemon/{identifier}/")
    logger.info(f"Returning details for Pokémon: {detail.name} (ID: {detail.id})")
    return detail

# Run locally with: uvicorn app.main:app --app-dir backend
