"""
Process environment settings.

Uses pydantic-settings for type-safe environment variable parsing.
These are the only values read from the environment; everything
else lives in the JSON config file whose path is given here.
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class RuntimeSettings(BaseSettings):
    """
    Bootstrap settings with validation and type coercion.

    Values are loaded from CAMUS_* environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="CAMUS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Path to the JSON config file
    config_path: str = ""

    environment: Literal["development", "production"] = "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


@lru_cache
def get_settings() -> RuntimeSettings:
    """
    Cached settings singleton.

    The @lru_cache ensures we only parse environment once.
    """
    return RuntimeSettings()
