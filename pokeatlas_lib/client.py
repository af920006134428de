# pokeatlas_lib/client.py

import httpx
import logging
from typing import Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from .exceptions import (
    PokeAPIConnectionError,
    PokeAPIDecodeError,
    PokeAPIStatusError,
    ResourceNotFoundError,
)
from .models import (
    EvolutionChain,
    Location,
    LocationArea,
    Pokemon,
    PokemonSpecies,
    Region,
    Version,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://pokeapi.co/api/v2/"
DEFAULT_USER_AGENT = "PokeAtlas/1.0"
DEFAULT_TIMEOUT = httpx.Timeout(10.0, connect=5.0)  # 10s total, 5s connect

ModelT = TypeVar("ModelT", bound=BaseModel)


def build_http_client(
    base_url: str = DEFAULT_BASE_URL,
    user_agent: str = DEFAULT_USER_AGENT,
    timeout: httpx.Timeout = DEFAULT_TIMEOUT,
) -> httpx.AsyncClient:
    """Creates an httpx AsyncClient preconfigured for PokeAPI."""
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=timeout,
        follow_redirects=True,
        headers={"Accept": "application/json", "User-Agent": user_agent},
        limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
    )


class PokeAPIClient:
    """
    Async PokeAPI client with one method per resource kind.

    Every call issues exactly one GET to ``<base_url>/<resource>/<key>/`` and
    returns a validated, immutable model. Nothing is cached or retried.

    Cancelling the awaiting task aborts the in-flight request and raises
    ``asyncio.CancelledError`` out of the call.

    Args:
        http_client: Optional pre-built httpx client. When given, the caller owns
            it and ``aclose()`` leaves it open.
    """

    def __init__(
        self,
        http_client: Optional[httpx.AsyncClient] = None,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: httpx.Timeout = DEFAULT_TIMEOUT,
    ):
        self._owns_client = http_client is None
        self._http = http_client or build_http_client(base_url, user_agent, timeout)

    async def __aenter__(self) -> "PokeAPIClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client and not self._http.is_closed:
            await self._http.aclose()
            logger.debug("PokeAPI httpx client closed.")

    # --- Resources ---

    async def get_version(self, slug: str = "firered") -> Version:
        return await self._get(f"version/{slug}/", Version)

    async def get_region(self, slug: str = "kanto") -> Region:
        return await self._get(f"region/{slug}/", Region)

    async def get_location(self, location_id: int) -> Location:
        return await self._get(f"location/{location_id}/", Location)

    async def get_location_area(self, area_id: int) -> LocationArea:
        return await self._get(f"location-area/{area_id}/", LocationArea)

    async def get_pokemon(self, name_or_id: Union[str, int]) -> Pokemon:
        return await self._get(f"pokemon/{name_or_id}/", Pokemon)

    async def get_species(self, species_id: int) -> PokemonSpecies:
        return await self._get(f"pokemon-species/{species_id}/", PokemonSpecies)

    async def get_evolution_chain(self, chain_id: int) -> EvolutionChain:
        return await self._get(f"evolution-chain/{chain_id}/", EvolutionChain)

    # --- Internals ---

    async def _get(self, path: str, model: Type[ModelT]) -> ModelT:
        logger.debug(f"Fetching data from PokeAPI: {path}")
        try:
            response = await self._http.get(path)
        except httpx.TimeoutException as e:
            logger.error(f"Request timed out for PokeAPI endpoint: {path}")
            raise PokeAPIConnectionError(f"Request timed out for '{path}'", path=path) from e
        except httpx.DecodingError as e:
            logger.error(f"Could not decode response body from {path!r}: {e}")
            raise PokeAPIDecodeError(f"Undecodable response for '{path}'", path=path) from e
        except httpx.RequestError as e:
            logger.error(f"An error occurred while requesting {path!r}: {e}")
            raise PokeAPIConnectionError(f"Could not reach PokeAPI for '{path}': {e}", path=path) from e

        if response.status_code == 404:
            logger.warning(f"Resource not found at {path!r}")
            raise ResourceNotFoundError(path=path)
        if not response.is_success:
            logger.error(f"HTTP error occurred: {response.status_code} {response.reason_phrase} for {path!r}")
            raise PokeAPIStatusError(response.status_code, path=path)

        if not response.content.strip():
            logger.error(f"Empty response body from {path!r}")
            raise PokeAPIDecodeError(f"Empty response for '{path}'", path=path)
        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Response from {path!r} is not valid JSON: {e}")
            raise PokeAPIDecodeError(f"Invalid JSON for '{path}'", path=path) from e
        if data is None:
            raise PokeAPIDecodeError(f"Empty response for '{path}'", path=path)

        try:
            result = model.model_validate(data)
        except ValidationError as e:
            logger.error(f"Response from {path!r} does not match {model.__name__}: {e}")
            raise PokeAPIDecodeError(f"Unexpected {model.__name__} payload for '{path}'", path=path) from e

        logger.debug(f"Successfully fetched {model.__name__} from {path}, status: {response.status_code}")
        return result
