"""
Configuration management for PawMatch.
Loads settings from environment variables and provides typed configuration access.
"""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application Settings
    environment: str = Field(default="development", description="Environment: development, staging, production")
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Enable debug mode")

    # API Server
    api_host: str = Field(default="0.0.0.0", description="Host for the HTTP server")
    api_port: int = Field(default=8080, description="Port for the HTTP server")

    # OpenAI (delegated compatibility scoring)
    openai_api_key: Optional[str] = Field(
        default=None,
        description="OpenAI API key; delegated scoring is disabled when unset"
    )
    openai_model: str = Field(
        default="gpt-3.5-turbo",
        description="Chat model used for compatibility scoring"
    )
    openai_timeout: float = Field(default=30.0, description="OpenAI request timeout in seconds")

    # Store initialization
    init_max_retries: int = Field(default=3, ge=1, description="Maximum seeding retry attempts")
    init_retry_delay: float = Field(
        default=0.1,
        ge=0,
        description="Delay in seconds before a scheduled seeding retry"
    )

    # Matching
    match_write_mode: str = Field(
        default="append",
        pattern="^(append|replace)$",
        description="append: keep prior matches as history; replace: drop a user's prior matches"
    )
    random_seed: Optional[int] = Field(
        default=None,
        description="Seed for heuristic scoring jitter (unset for non-reproducible scores)"
    )
    pet_sample_size: int = Field(default=3, ge=0, description="Pets shown by the debug endpoint")

    def has_openai(self) -> bool:
        """Check if the delegated scoring credential is configured."""
        return bool(self.openai_api_key)

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Reload settings from environment (useful for testing)."""
    global _settings
    _settings = Settings()
    return _settings


# Convenience access
settings = get_settings()
