"""
Configuration module for CAPO.

Resolves a profile's settings across a search path of properties files.
Environment defaults are loaded with pydantic-settings.
"""

from capo.config.resolver import CapoConfig, normalize_key, split_search_path
from capo.config.settings import CapoSettings
from capo.config.sources import PropertiesFile, PropertiesSource, properties_filename

__all__ = [
    "CapoConfig",
    "CapoSettings",
    "PropertiesFile",
    "PropertiesSource",
    "normalize_key",
    "properties_filename",
    "split_search_path",
]
