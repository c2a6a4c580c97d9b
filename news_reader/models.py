from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, SecretStr, model_validator
from typing import Optional, Tuple

# Service resources and markets; the enum value is the string sent on the wire
class Endpoint(str, Enum):
    TOP_HEADLINES = "top-headlines"

class Country(str, Enum):
    US = "us"

DEFAULT_BASE_URL = "https://newsapi.org/v2"
DEFAULT_USER_AGENT = "news-reader"
DEFAULT_TIMEOUT = 20.0  # seconds

class ClientConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_key: SecretStr
    endpoint: Endpoint = Endpoint.TOP_HEADLINES
    country: Country = Country.US
    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

# News item / response shapes, as returned by the service
class Article(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str
    url: str

class FetchResponse(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    status: str
    articles: Tuple[Article, ...] = ()
    error_code: Optional[str] = Field(default=None, alias="code")

    @model_validator(mode="after")
    def _ok_carries_articles(self) -> "FetchResponse":
        # error bodies ("status": "error") come without articles, successful ones never do
        if self.is_ok and "articles" not in self.model_fields_set:
            raise ValueError("'articles' is required when status is 'ok'")
        return self

    @property
    def is_ok(self) -> bool:
        return self.status == "ok"
