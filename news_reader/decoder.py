from loguru import logger
from pydantic import ValidationError

from news_reader.errors import ArticlesParsingFailed, map_response_error
from news_reader.models import FetchResponse

def decode_response(body: str) -> FetchResponse:
    """Parse a raw response body. Either the whole payload decodes or nothing does."""
    try:
        response = FetchResponse.model_validate_json(body)
    except ValidationError as e:
        raise ArticlesParsingFailed(f"Failed parsing the articles: {e.error_count()} error(s)") from e
    logger.debug("Decoded response: status={} articles={}", response.status, len(response.articles))
    return response

def check_response(response: FetchResponse) -> FetchResponse:
    """Return the response if the service reported "ok", otherwise raise the mapped error."""
    if response.is_ok:
        return response
    raise map_response_error(response.error_code)
