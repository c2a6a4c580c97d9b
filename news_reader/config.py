from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from news_reader.models import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, Country

class Settings(BaseSettings):
    news_api_key: str = ""
    news_api_base_url: str = DEFAULT_BASE_URL
    news_country: Country = Country.US
    request_timeout: Optional[float] = DEFAULT_TIMEOUT  # None disables it
    user_agent: str = DEFAULT_USER_AGENT
    log_level: str = "INFO"
    port: int = 5001

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

@lru_cache
def get_settings() -> Settings:
    """Settings are read from the environment on first use, not at import."""
    return Settings()
