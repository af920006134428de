# pokeatlas_lib/exceptions.py
from typing import Optional


class PokeAPIError(Exception):
    """Base exception for every failure raised by the library."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class PokeAPIConnectionError(PokeAPIError):
    """The request never produced a response (DNS, connect, read, timeout...)."""


class PokeAPIStatusError(PokeAPIError):
    """PokeAPI answered with a non-2xx status code."""

    def __init__(self, status_code: int, path: Optional[str] = None):
        super().__init__(f"PokeAPI returned HTTP {status_code} for '{path}'", path=path)
        self.status_code = status_code


class ResourceNotFoundError(PokeAPIStatusError):
    """HTTP 404 from PokeAPI."""

    def __init__(self, path: Optional[str] = None):
        super().__init__(404, path=path)


class PokeAPIDecodeError(PokeAPIError):
    """Response body was empty, not JSON, or did not match the expected model."""


class ResourceURLError(PokeAPIError, ValueError):
    """A resource URL carries no trailing numeric id."""

    def __init__(self, url: str):
        super().__init__(f"No numeric id at the end of resource URL: {url!r}")
        self.url = url
