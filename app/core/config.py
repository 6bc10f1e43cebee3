"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        api_prefix: Path prefix every router is mounted under.
        database_url: SQLAlchemy URL of the market store.
        auto_create_schema: Create the markets table on startup if missing.
        default_page_size: Listing limit used when the client sends none.
        max_page_size: Upper bound a client-supplied limit is clamped to.
        rate_limit_default: Default rate limit for all endpoints.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Market Query Service"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/v1/api"

    database_url: str = "sqlite:///./markets.db"
    auto_create_schema: bool = True

    default_page_size: int = 20
    max_page_size: int = 100

    rate_limit_default: str = "60/minute"


settings = Settings()
