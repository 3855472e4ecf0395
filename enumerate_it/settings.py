"""Configuration management for EnumerateIt.

Settings are read from ``ENUMERATE_IT_*`` environment variables.
"""

from enum import Enum
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SortMode(str, Enum):
    """Ordering used by to_a() and translations()."""
    TRANSLATION = "translation"
    VALUE = "value"
    NAME = "name"
    NONE = "none"


class EnumerateItSettings(BaseSettings):
    """Root configuration for EnumerateIt."""

    locale: str = Field("en", description="Locale used to resolve labels")
    default_locale: str = Field("en", description="Fallback locale for missing translations")
    locale_paths: list[Path] = Field(
        default_factory=list,
        description="Locale YAML files or directories loaded into the translation catalog",
    )
    sort_by: SortMode = Field(SortMode.TRANSLATION, description="Default ordering for to_a()")
    polymorphic_suffix: str = Field("_object", description="Suffix of polymorphic helpers")
    log_level: str = Field("INFO", description="Level for the enumerate_it logger")

    model_config = SettingsConfigDict(env_prefix="ENUMERATE_IT_")


@lru_cache(maxsize=1)
def get_settings() -> EnumerateItSettings:
    """Get the global settings instance."""
    return EnumerateItSettings()


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
