"""Application configuration from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GRANTSYNC_",
        case_sensitive=False,
    )

    # Atlassian Cloud
    atlassian_url: str = Field(
        default="https://example.atlassian.net",
        description="Atlassian Cloud site URL",
    )
    atlassian_username: str = Field(default="", description="Account email for basic auth")
    atlassian_token: str = Field(default="", description="Atlassian API token")
    http_timeout: float = Field(default=30.0, gt=0, description="Remote call timeout in seconds")

    # Reconciliation
    directory_cache_ttl: float = Field(
        default=300.0,
        ge=0,
        description="Seconds a user/group lookup result is reused",
    )
    ignored_tokens: list[str] = Field(
        default_factory=lambda: ["atlassian-addons-project-access"],
        description="Tokens left out of attestations",
    )

    # Application
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Environment name",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Debug mode")
    host: str = Field(default="0.0.0.0", description="HTTP bind host")
    port: int = Field(default=8000, description="HTTP bind port")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
