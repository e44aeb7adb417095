"""
Configuration management with typed Pydantic models.

Provides YAML loading with environment variable interpolation.
"""

from athyg.config.loader import load_config
from athyg.config.settings import CatalogConfig, LoaderConfig, LoggingConfig

__all__ = [
    "CatalogConfig",
    "LoaderConfig",
    "LoggingConfig",
    "load_config",
]
