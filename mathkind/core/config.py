"""
Library configuration.

Settings are read from ``MATHKIND_*`` environment variables (or a ``.env``
file) once and cached.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """mathkind settings"""

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "text"  # json or text
    LOG_FILE: Optional[str] = None

    # Catalog
    ALLOW_CATALOG_EXTENSION: bool = True  # False locks every catalog to its built-in kinds

    model_config = SettingsConfigDict(
        env_prefix="MATHKIND_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
