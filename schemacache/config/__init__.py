"""
Configuration management for schemacache.

Author: Yobie Benjamin
Date: 2026-10-18
"""

from schemacache.config.settings import (
    SchemaCacheSettings,
    get_settings,
    load_schema_from_yaml,
    load_settings_from_yaml,
)

__all__ = [
    "SchemaCacheSettings",
    "get_settings",
    "load_schema_from_yaml",
    "load_settings_from_yaml",
]
