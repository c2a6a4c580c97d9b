"""
HTTP GET → body text, in a blocking and a non-blocking flavour.

Both functions share the same narrow shape (url and headers in, text out,
typed error out) so decoding and error mapping are written once.
"""
from typing import Dict, Optional

import httpx
from loguru import logger

from news_reader.errors import AsyncRequestFailed, RequestFailed, ResponseToStringFailed

def decode_body(response: httpx.Response) -> str:
    """Strictly decode an already-read body; raises UnicodeDecodeError or LookupError."""
    return response.content.decode(response.charset_encoding or "utf-8")

def get_text(client: httpx.Client, url: str, headers: Optional[Dict[str, str]] = None) -> str:
    try:
        request = client.build_request("GET", url, headers=headers)
        response = client.send(request, stream=True, follow_redirects=True)
    except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as e:
        raise RequestFailed(f"Failed fetching articles: {e}") from e

    try:
        if response.is_error:
            raise RequestFailed(
                f"Failed fetching articles: HTTP {response.status_code}",
                status_code=response.status_code,
            )
        try:
            response.read()
            text = decode_body(response)
        except (httpx.HTTPError, UnicodeDecodeError, LookupError) as e:
            raise ResponseToStringFailed(f"Failed converting response to string: {e}") from e
    finally:
        response.close()

    logger.debug("GET {} -> {} ({} bytes)", request.url, response.status_code, len(response.content))
    return text

async def aget_text(client: httpx.AsyncClient, url: str, headers: Optional[Dict[str, str]] = None) -> str:
    try:
        request = client.build_request("GET", url, headers=headers)
    except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as e:
        raise AsyncRequestFailed(f"Async request failed: could not build request: {e}") from e

    try:
        response = await client.send(request, stream=True, follow_redirects=True)
    except httpx.HTTPError as e:
        raise AsyncRequestFailed(f"Async request failed: {e}") from e

    try:
        if response.is_error:
            raise AsyncRequestFailed(f"Async request failed: HTTP {response.status_code}")
        await response.aread()
        text = decode_body(response)
    except (httpx.HTTPError, UnicodeDecodeError, LookupError) as e:
        raise AsyncRequestFailed(f"Async request failed: {e}") from e
    finally:
        await response.aclose()

    logger.debug("GET {} -> {} ({} bytes)", request.url, response.status_code, len(response.content))
    return text
