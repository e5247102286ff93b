"""
Pydantic-based configuration settings for schemacache.

Author: Yobie Benjamin
Date: 2026-10-18
"""

from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SchemaCacheSettings(BaseSettings):
    """
    Configuration settings for a cache.

    Configuration can be provided via:
    - Environment variables with SCHEMACACHE_ prefix
    - .env file in current directory
    - Direct instantiation with kwargs

    Example:
        ```python
        # From environment
        settings = SchemaCacheSettings()

        # Direct configuration
        settings = SchemaCacheSettings(ttl=300, suffix="_prod")
        ```
    """

    model_config = SettingsConfigDict(
        env_prefix="SCHEMACACHE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    ttl: int = Field(default=60, ge=0)
    """Default TTL in seconds for writes that do not pass one."""

    suffix: str = ""
    """Appended to every key before it reaches the store."""

    gzip: bool = False
    """Compress values on set unless the call says otherwise."""

    memory_max_size: int = Field(default=500, ge=1)
    """Entry limit for the in-memory store."""

    redis_url: str | None = None
    """Connection URL for the Redis store."""

    log_level: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept lowercase level names."""
        return v.upper() if isinstance(v, str) else v

    def to_dict(self) -> dict:
        """Convert settings to dictionary."""
        return self.model_dump()


@lru_cache
def get_settings(env_file: str | None = None) -> SchemaCacheSettings:
    """
    Get cached settings instance.

    To reload settings, clear the cache with `get_settings.cache_clear()`.

    Args:
        env_file: Optional path to .env file

    Returns:
        Settings instance
    """
    if env_file:
        return SchemaCacheSettings(_env_file=env_file)
    return SchemaCacheSettings()


def load_settings_from_yaml(yaml_path: Path) -> SchemaCacheSettings:
    """
    Load settings from YAML file.

    Args:
        yaml_path: Path to YAML configuration file

    Returns:
        Settings instance
    """
    with open(yaml_path) as f:
        config_dict = yaml.safe_load(f) or {}

    return SchemaCacheSettings(**config_dict)


def load_schema_from_yaml(yaml_path: Path) -> dict[str, Any]:
    """
    Load a schema declaration from YAML.

    The file maps key patterns to rules, e.g.::

        user:*:
          type: object
          maxTTL: 3600
          properties:
            name: {type: string}

    Args:
        yaml_path: Path to YAML schema file

    Returns:
        Raw schema mapping, ready for ``compile_schema``
    """
    with open(yaml_path) as f:
        schema = yaml.safe_load(f) or {}

    if not isinstance(schema, dict):
        raise ValueError(f"Schema file {yaml_path} must contain a mapping")
    return schema
