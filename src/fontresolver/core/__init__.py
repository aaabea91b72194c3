"""Core configuration and error types."""

from .config import ResolverConfig, load_config_from_yaml
from .exceptions import (
    ConfigurationError,
    EmptyRegistryError,
    EnvironmentUnsupportedError,
    FontLoadError,
    FontParseError,
    FontResolverError,
)

__all__ = [
    "ConfigurationError",
    "EmptyRegistryError",
    "EnvironmentUnsupportedError",
    "FontLoadError",
    "FontParseError",
    "FontResolverError",
    "ResolverConfig",
    "load_config_from_yaml",
]
