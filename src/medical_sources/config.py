"""Application configuration."""

from functools import lru_cache

from pydantic_settings import BaseSettings

from medical_sources.constants import (
    GOOGLE_SCHOLAR_BASE_URL,
    OPENFDA_BASE_URL,
    PUBMED_BASE_URL,
    RXNAV_BASE_URL,
    USER_AGENT,
    WORLD_BANK_BASE_URL,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Read once at start-up and never written afterwards.
    """

    # Endpoints
    openfda_base_url: str = OPENFDA_BASE_URL
    pubmed_base_url: str = PUBMED_BASE_URL
    world_bank_base_url: str = WORLD_BANK_BASE_URL
    rxnav_base_url: str = RXNAV_BASE_URL
    google_scholar_base_url: str = GOOGLE_SCHOLAR_BASE_URL

    # API Keys
    openfda_api_key: str = ""

    # Identifying header sent to every HTTP source
    user_agent: str = USER_AGENT

    # Scraping
    headless: bool = True

    # App Settings
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        frozen = True


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
