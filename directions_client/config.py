"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- DIRECTIONS_API_KEY=... (GOOGLE_PLACES_API_KEY is accepted too)
- DIRECTIONS_BASE_URL=http://localhost:8080/directions/json
- DIRECTIONS_TIMEOUT_SECONDS=5
- DIRECTIONS_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DIRECTIONS_BASE_URL = "https://maps.googleapis.com/maps/api/directions/json"
MAX_RESPONSE_BYTES = 1 << 20


class DirectionsConfig(BaseSettings):
    """Provider connection configuration.

    Environment variables prefixed with DIRECTIONS_.
    """

    model_config = SettingsConfigDict(env_prefix="DIRECTIONS_", populate_by_name=True)

    api_key: str = Field(
        default="",
        validation_alias=AliasChoices("DIRECTIONS_API_KEY", "GOOGLE_PLACES_API_KEY"),
        repr=False,
    )
    base_url: str = DEFAULT_DIRECTIONS_BASE_URL
    timeout_seconds: float = 10.0
    max_response_bytes: int = MAX_RESPONSE_BYTES
    user_agent: str = "directions-client"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with DIRECTIONS_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="DIRECTIONS_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main configuration aggregating all sub-configs.

        config = get_config()
        print(config.directions.base_url)
        print(config.observability.level)
    """

    model_config = SettingsConfigDict(env_prefix="DIRECTIONS_APP_")

    directions: DirectionsConfig = Field(default_factory=DirectionsConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
