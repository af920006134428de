# backend/app/clients.py
import httpx
import logging
from typing import Optional

from pokeatlas_lib import PokeAPIClient, build_http_client

from .config import settings

logger = logging.getLogger(__name__)

# --- Library Client Instance ---
# A single PokeAPIClient (and its connection pool) shared by all requests
_atlas_client: Optional[PokeAPIClient] = None
_http_client: Optional[httpx.AsyncClient] = None

async def get_atlas_client() -> PokeAPIClient:
    """Gets or creates the shared PokeAPI client. Also used as a FastAPI dependency."""
    global _atlas_client, _http_client
    if _atlas_client is None or _http_client is None or _http_client.is_closed:
        logger.info("Creating/Recreating httpx client for PokeAPI.")
        _http_client = build_http_client(
            base_url=settings.pokeapi_base_url,
            user_agent=settings.user_agent,
            timeout=httpx.Timeout(settings.request_timeout_seconds, connect=settings.connect_timeout_seconds),
        )
        _atlas_client = PokeAPIClient(http_client=_http_client)
    return _atlas_client

async def close_atlas_client():
    """Closes the httpx client behind the shared PokeAPI client."""
    global _atlas_client, _http_client
    if _http_client and not _http_client.is_closed:
        await _http_client.aclose()
        logger.info("PokeAPI httpx client closed.")
    elif _http_client:
        logger.warning("PokeAPI httpx client was already closed.")
    _http_client = None
    _atlas_client = None
