"""
Configuration management for the Fantasy Basketball Analysis tool.

Uses Pydantic settings for type-safe configuration with environment variable support.
All settings can be overridden via environment variables or a local .env file.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Example: NBA_DATA_BASE_URL="http://data.nba.net/prod/v1/2020/players"
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ==========================================================================
    # Application Metadata
    # ==========================================================================
    app_name: str = "Fantasy Basketball Analysis Tool"
    log_level: str = Field(default="INFO", description="DEBUG, INFO, WARNING, ERROR")

    # ==========================================================================
    # Data Provider
    # ==========================================================================
    nba_data_base_url: str = Field(
        default="http://data.nba.net/prod/v1/2019/players",
        description="Directory holding <personId>_profile.json documents",
    )
    request_timeout: float = Field(default=30.0, gt=0)

    # ==========================================================================
    # Stat Schema
    # ==========================================================================
    reference_person_id: int = Field(
        default=203500,
        ge=0,
        description="Player whose latest season total defines the stat layout (Steven Adams)",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
