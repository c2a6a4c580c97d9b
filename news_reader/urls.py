from typing import Dict
from urllib.parse import quote, urlencode, urlsplit, urlunsplit

import httpx

from news_reader.errors import UrlParseFailed
from news_reader.models import Country, Endpoint

def build_url(base_url: str, endpoint: Endpoint, country: Country) -> str:
    """
    Compose `<base>/<endpoint>?country=<code>`.

    The endpoint is pushed as a single path segment and the query replaces
    whatever query the base URL had.
    """
    return compose_url(base_url, endpoint.value, {"country": country.value})

def compose_url(base_url: str, segment: str, params: Dict[str, str]) -> str:
    try:
        parts = urlsplit(base_url)
        parts.port  # raises ValueError on a malformed port
    except ValueError as e:
        raise UrlParseFailed(f"Url parsing failed: {base_url!r}") from e
    if not parts.scheme or not parts.netloc:
        raise UrlParseFailed(f"Url parsing failed: {base_url!r} is not an absolute URL")

    path = parts.path.rstrip("/") + "/" + quote(segment, safe="")
    # the whole query is set in one go; callers pass every parameter at once
    query = urlencode(params)
    try:
        url = httpx.URL(urlunsplit((parts.scheme, parts.netloc, path, query, "")))
    except httpx.InvalidURL as e:
        raise UrlParseFailed(f"Url parsing failed: {e}") from e
    return str(url)
