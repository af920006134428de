# pokeatlas_lib/utils.py
import re

from .exceptions import ResourceURLError

_TRAILING_ID_RE = re.compile(r"/(\d+)/?$")

ELLIPSIS = "…"


def extract_trailing_id(url: str) -> int:
    """
    Returns the numeric id at the end of a PokeAPI resource URL.

    ``https://pokeapi.co/api/v2/location/5/`` and ``.../location/5`` both give 5.

    Raises:
        ResourceURLError: if the last path segment is not a number.
    """
    match = _TRAILING_ID_RE.search(url or "")
    if match is None:
        raise ResourceURLError(url)
    return int(match.group(1))


def to_title(slug: str) -> str:
    """'mt-moon' -> 'Mt Moon'."""
    words = slug.replace("-", " ").split()
    return " ".join(word[:1].upper() + word[1:].lower() for word in words)


def clean_flavor_text(text: str) -> str:
    # Flavor texts come straight from the cartridges: hard line breaks and form feeds.
    return text.replace("\n", " ").replace("\f", " ").replace("\r", " ").strip()


def truncate_text(text: str, max_length: int) -> str:
    """Cuts text to at most max_length characters, ellipsis included."""
    if not text or len(text) <= max_length:
        return text
    return text[:max(max_length - 1, 0)].rstrip() + ELLIPSIS


def format_level_range(min_level: int, max_level: int) -> str:
    if min_level == max_level:
        return f"{min_level}"
    return f"{min_level}-{max_level}"
