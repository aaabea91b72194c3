"""Font Resolver
=============

Resolves abstract font requests (family name plus bold/italic flags) to
concrete font files for document rendering.
"""

__version__ = "1.0.0"

from .core.config import DEFAULT_FONT_NAME, ResolverConfig
from .core.exceptions import (
    EmptyRegistryError,
    EnvironmentUnsupportedError,
    FontLoadError,
    FontParseError,
    FontResolverError,
)
from .fonts import (
    FontCatalog,
    FontFamily,
    FontRegistry,
    FontResolver,
    FontStyle,
    SystemFontLocator,
    build_registry,
)

__all__ = [
    "DEFAULT_FONT_NAME",
    "EmptyRegistryError",
    "EnvironmentUnsupportedError",
    "FontCatalog",
    "FontFamily",
    "FontLoadError",
    "FontParseError",
    "FontRegistry",
    "FontResolver",
    "FontResolverError",
    "FontStyle",
    "ResolverConfig",
    "SystemFontLocator",
    "build_registry",
]
