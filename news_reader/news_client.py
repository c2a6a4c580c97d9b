import httpx
from loguru import logger
from typing import Dict, Optional

from news_reader.config import Settings, get_settings
from news_reader.decoder import check_response, decode_response
from news_reader.errors import ArticlesParsingFailed, AsyncRequestFailed
from news_reader.models import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, ClientConfig, Country, Endpoint, FetchResponse
from news_reader.transport import aget_text, get_text
from news_reader.urls import build_url

class NewsAPI:
    """
    Top-headlines client.

    Setters return the client so calls can be chained:

        api = NewsAPI(key).set_endpoint(Endpoint.TOP_HEADLINES).set_country(Country.US)
        articles = api.fetch().articles

    The configuration itself is immutable; every setter swaps in an updated
    copy, so a fetch always works from one consistent snapshot.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        client: Optional[httpx.Client] = None,
        async_client: Optional[httpx.AsyncClient] = None,
    ):
        self._config = ClientConfig(
            api_key=api_key, base_url=base_url, timeout=timeout, user_agent=user_agent
        )
        self._client = client
        self._async_client = async_client

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **kwargs) -> "NewsAPI":
        settings = settings or get_settings()
        return cls(
            settings.news_api_key,
            base_url=settings.news_api_base_url,
            timeout=settings.request_timeout,
            user_agent=settings.user_agent,
            **kwargs,
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    def set_endpoint(self, endpoint: Endpoint) -> "NewsAPI":
        self._config = self._config.model_copy(update={"endpoint": Endpoint(endpoint)})
        return self

    def set_country(self, country: Country) -> "NewsAPI":
        self._config = self._config.model_copy(update={"country": Country(country)})
        return self

    def prepare_url(self) -> str:
        return build_url(self._config.base_url, self._config.endpoint, self._config.country)

    def __repr__(self) -> str:
        # api_key is a SecretStr and renders masked
        return f"NewsAPI({self._config!r})"

    def fetch(self) -> FetchResponse:
        config = self._config
        url = build_url(config.base_url, config.endpoint, config.country)
        headers = {"Authorization": config.api_key.get_secret_value()}
        logger.debug("Fetching {}", url)

        if self._client is not None:
            body = get_text(self._client, url, headers)
        else:
            with httpx.Client(timeout=config.timeout) as client:
                body = get_text(client, url, headers)

        return check_response(decode_response(body))

    async def fetch_async(self) -> FetchResponse:
        config = self._config
        url = build_url(config.base_url, config.endpoint, config.country)
        headers = {
            "Authorization": config.api_key.get_secret_value(),
            "User-Agent": config.user_agent,
        }
        logger.debug("Fetching {} (async)", url)

        if self._async_client is not None:
            body = await aget_text(self._async_client, url, headers)
        else:
            async with httpx.AsyncClient(timeout=config.timeout) as client:
                body = await aget_text(client, url, headers)

        try:
            response = decode_response(body)
        except ArticlesParsingFailed as e:
            raise AsyncRequestFailed(f"Async request failed: {e}") from e
        return check_response(response)

def get_articles(
    url: str,
    *,
    timeout: Optional[float] = DEFAULT_TIMEOUT,
    client: Optional[httpx.Client] = None,
    headers: Optional[Dict[str, str]] = None,
) -> FetchResponse:
    """
    Fetch and decode a fully formed URL as-is.

    This is the raw path: no Authorization header unless passed in `headers`,
    and the status is not checked. Callers look at `response.status` themselves.
    """
    if client is not None:
        body = get_text(client, url, headers)
    else:
        with httpx.Client(timeout=timeout) as own_client:
            body = get_text(own_client, url, headers)
    return decode_response(body)
