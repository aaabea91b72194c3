"""Font Discovery and Resolution
==============================

This module discovers installed font files, groups them into families and
resolves style-aware font requests to loadable font files.
"""

from .catalog import FontCatalog
from .loader import FontLoader
from .models import (
    BuildDiagnostic,
    BuildResult,
    FontDescription,
    FontFamily,
    FontFileRecord,
    FontRegistry,
    FontStyle,
)
from .registry import build_registry
from .resolver import FontResolver
from .system import SystemFontLocator
from .utils import describe_font_file, infer_style

__all__ = [
    "BuildDiagnostic",
    "BuildResult",
    "FontCatalog",
    "FontDescription",
    "FontFamily",
    "FontFileRecord",
    "FontLoader",
    "FontRegistry",
    "FontResolver",
    "FontStyle",
    "SystemFontLocator",
    "build_registry",
    "describe_font_file",
    "infer_style",
]
