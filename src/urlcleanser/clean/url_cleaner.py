"""URL cleaning utilities - only remove tracking parameters."""

from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, MutableSequence, Optional, Tuple
from urllib.parse import unquote, urlsplit

from .tracking_params import is_tracking_parameter
from ..logging import get_logger

logger = get_logger(__name__)

Whitelist = Optional[Iterable[str]]


@dataclass(frozen=True)
class QueryParameter:
    """A single query parameter as it appears in the URL."""

    name: str
    value: Optional[str]
    raw: str


def parse_query(query: str) -> List[QueryParameter]:
    """
    Split a raw query string into parameters, keeping order and duplicates.

    Names and values are percent-decoded ("+" is left alone); the raw piece is
    kept so the parameter can be written back exactly as it was.
    """
    params = []
    for piece in query.split("&"):
        name, sep, value = piece.partition("=")
        params.append(QueryParameter(
            name=unquote(name),
            value=unquote(value) if sep else None,
            raw=piece,
        ))
    return params


def _normalize_whitelist(whitelist: Whitelist) -> FrozenSet[str]:
    if not whitelist:
        return frozenset()
    if isinstance(whitelist, str):
        return frozenset({whitelist})
    return frozenset(whitelist)


def _is_stripped(param: QueryParameter, whitelist: FrozenSet[str]) -> bool:
    # Exact, case-sensitive whitelist match beats classification
    if param.name in whitelist:
        return False
    return is_tracking_parameter(param.name)


def _split(url: str) -> Optional[Tuple[str, str, str]]:
    """
    Split a URL into (text before "?", raw query, "#fragment" or "").

    Returns None if the URL has no query or cannot be parsed. The pieces are
    cut from the original string so everything around the query stays as is.
    """
    try:
        urlsplit(url)
    except ValueError as e:
        logger.debug(f"Could not parse URL {url!r}: {e}")
        return None

    head, hash_mark, fragment = url.partition("#")
    base, _, query = head.partition("?")
    if not query:
        return None
    return base, query, hash_mark + fragment


def _rebuild(base: str, query: str, tail: str) -> str:
    """Put a URL back together; no params means no "?"."""
    url = f"{base}?{query}{tail}" if query else f"{base}{tail}"
    urlsplit(url)
    return url


def clean_url(url: str, whitelist: Whitelist = None) -> str:
    """
    Clean URL by removing only tracking parameters.

    Args:
        url: URL to clean
        whitelist: Exact parameter names to keep even if they look like trackers

    Returns:
        URL with tracking params removed. Scheme, host, path, fragment and the
        order and encoding of the remaining params are untouched. The input is
        returned as is when it has no query, nothing was removed, or it cannot
        be parsed.
    """
    split = _split(url)
    if split is None:
        return url
    base, query, tail = split

    allowed = _normalize_whitelist(whitelist)
    params = parse_query(query)
    kept = [param for param in params if not _is_stripped(param, allowed)]

    if len(kept) == len(params):
        return url

    try:
        cleaned = _rebuild(base, "&".join(param.raw for param in kept), tail)
    except ValueError as e:
        logger.debug(f"Could not rebuild URL {url!r}: {e}")
        return url

    logger.debug(f"Removed {len(params) - len(kept)} tracking params from {url}")
    return cleaned


def contains_tracking_parameters(url: str, whitelist: Whitelist = None) -> bool:
    """Check if the URL carries at least one non-whitelisted tracking parameter."""
    split = _split(url)
    if split is None:
        return False

    allowed = _normalize_whitelist(whitelist)
    return any(_is_stripped(param, allowed) for param in parse_query(split[1]))


def tracking_parameters(url: str, whitelist: Whitelist = None) -> Dict[str, Optional[str]]:
    """
    Collect the tracking parameters found in a URL.

    Args:
        url: URL to inspect
        whitelist: Exact parameter names to ignore

    Returns:
        Dict of decoded name -> decoded value (None when the param has no
        "="). If a name repeats, the last occurrence wins.
    """
    split = _split(url)
    if split is None:
        return {}

    allowed = _normalize_whitelist(whitelist)
    found: Dict[str, Optional[str]] = {}
    for param in parse_query(split[1]):
        if _is_stripped(param, allowed):
            found[param.name] = param.value
    return found


def clean_urls_in_place(urls: MutableSequence[str], whitelist: Whitelist = None) -> None:
    """Replace every URL in a caller-owned list with its cleaned version."""
    allowed = _normalize_whitelist(whitelist)
    urls[:] = [clean_url(url, allowed) for url in urls]


@dataclass
class TrackedURL:
    """Mutable URL holder with in-place and copying cleaning methods."""

    url: str

    def __str__(self) -> str:
        return self.url

    def removing_tracking_parameters(self, whitelist: Whitelist = None) -> "TrackedURL":
        return TrackedURL(clean_url(self.url, whitelist))

    def remove_tracking_parameters(self, whitelist: Whitelist = None) -> None:
        self.url = clean_url(self.url, whitelist)

    def contains_tracking_parameters(self, whitelist: Whitelist = None) -> bool:
        return contains_tracking_parameters(self.url, whitelist)

    def tracking_parameters(self, whitelist: Whitelist = None) -> Dict[str, Optional[str]]:
        return tracking_parameters(self.url, whitelist)
