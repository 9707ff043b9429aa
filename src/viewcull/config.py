"""viewcull configuration using pydantic-settings.

All configuration is strongly typed and supports environment variables
and .env files.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"  # "console" or "json"

    # Viewport
    VIEWPORT_MARGIN_PX: float = 200.0  # Screen-space buffer around the stage

    # Point-like padding at annotation scale 1 (document units)
    SYMBOL_PADDING_BASE: float = 50.0  # Ground rod extends ~35 units below anchor
    TEXT_PADDING_BASE: float = 40.0
    MARK_PADDING_BASE: float = 20.0


# Singleton instance for import convenience
settings = Settings()
