"""Configuration management for bingemap."""

from pydantic import PositiveFloat, PositiveInt, field_validator
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from urllib.parse import urlparse


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # TMDB
    tmdb_api_key: str
    request_timeout: PositiveInt = 10  # Timeout for TMDB requests in seconds
    cache_ttl: PositiveInt = 1800  # How long fetched series stay cached, in seconds
    suggestion_limit: PositiveInt = 7

    # Binge calculator defaults
    default_hours_per_day: PositiveFloat = 2.0
    default_days_per_week: PositiveInt = 7

    # Network settings
    # Proxy configuration in the format http://host:port or socks5://host:port
    proxy: str | None = None

    @field_validator("default_hours_per_day")
    @classmethod
    def validate_hours_per_day(cls, v: float) -> float:
        if v > 24:
            raise ValueError("Default hours per day cannot exceed 24")
        return v

    @field_validator("default_days_per_week")
    @classmethod
    def validate_days_per_week(cls, v: int) -> int:
        if v > 7:
            raise ValueError("Default days per week cannot exceed 7")
        return v

    @field_validator("proxy")
    @classmethod
    def validate_proxy(cls, v: str | None) -> str | None:
        if v is None:
            return v

        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https", "socks4", "socks5", "socks5h"):
            raise ValueError(
                "Proxy must be a valid URL with scheme http/https/socks4/socks5/socks5h"
            )
        if not parsed.netloc:
            raise ValueError("Proxy must have a host and port")
        return v

    # App settings
    debug: bool = False

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
