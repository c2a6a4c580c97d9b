"""
Error taxonomy for the NewsAPI client.

Every failure in the client surfaces as a subclass of NewsAPIError, so callers
can catch the base class and stay compatible when new kinds are added.
"""
from typing import Dict, Optional


class NewsAPIError(Exception):
    """Base class for all news client failures."""

    message = "News API error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class RequestFailed(NewsAPIError):
    """Network/transport failure on the blocking path, including non-2xx replies."""

    message = "Failed fetching articles"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ResponseToStringFailed(NewsAPIError):
    message = "Failed converting response to string"


class ArticlesParsingFailed(NewsAPIError):
    message = "Failed parsing the articles"


class UrlParseFailed(NewsAPIError):
    message = "Url parsing failed"


class BadRequest(NewsAPIError):
    """The service answered with a non-"ok" status."""

    def __init__(self, reason: str):
        super().__init__(f"Request failed {reason}")
        self.reason = reason


class AsyncRequestFailed(NewsAPIError):
    """Any failure on the non-blocking path: build, send, read or decode."""

    message = "Async request failed"


UNKNOWN_ERROR = "Unknown error"

# NewsAPI error code -> human readable reason
RESPONSE_ERRORS: Dict[str, str] = {
    "apiKeyDisabled": "Your API Key was disabled",
}


def map_response_error(code: Optional[str]) -> BadRequest:
    """Translate a service error code into a BadRequest. Never fails."""
    if code is None:
        return BadRequest(UNKNOWN_ERROR)
    return BadRequest(RESPONSE_ERRORS.get(code, UNKNOWN_ERROR))
