"""
Font Catalog
============

Process-wide holder of the current font registry.

The registry itself is immutable. Rebuilding creates a new registry and
swaps it in under a lock, so readers always see a complete snapshot.
"""

import logging
import threading
from collections.abc import Iterable

from ..core.config import ResolverConfig
from .models import BuildDiagnostic, BuildResult, FontRegistry, FontStyle
from .registry import Describer, build_registry
from .system import SystemFontLocator
from .utils import describe_font_file

logger = logging.getLogger(__name__)


class FontCatalog:
    """
    Owns the published FontRegistry and the diagnostics of its last build.

    Construct it empty, from explicit paths, or from the system font
    locations, and pass it to every FontResolver that should share it.
    """

    def __init__(
        self,
        registry: FontRegistry | None = None,
        locator: SystemFontLocator | None = None,
        describe: Describer = describe_font_file,
    ):
        self._result = BuildResult(registry=registry if registry is not None else FontRegistry())
        self._lock = threading.Lock()
        self.locator = locator
        self.describe = describe

    @classmethod
    def from_paths(
        cls, paths: Iterable[str], describe: Describer = describe_font_file
    ) -> "FontCatalog":
        """Build a catalog from explicit font file paths."""
        catalog = cls(describe=describe)
        catalog.rebuild(paths)
        return catalog

    @classmethod
    def from_system(
        cls,
        config: ResolverConfig | None = None,
        locator: SystemFontLocator | None = None,
        describe: Describer = describe_font_file,
    ) -> "FontCatalog":
        """
        Build a catalog from the fonts installed on this machine.

        Raises:
            EnvironmentUnsupportedError: If the platform has no known font locations
        """
        config = config or ResolverConfig()
        if locator is None:
            locator = SystemFontLocator(
                system=config.system,
                extra_dirs=config.extra_font_dirs,
                use_fontconfig=config.use_fontconfig,
                include_system=config.include_system_fonts,
            )
        catalog = cls(locator=locator, describe=describe)
        catalog.rebuild()
        return catalog

    @property
    def registry(self) -> FontRegistry:
        """Current registry snapshot."""
        return self._result.registry

    @property
    def diagnostics(self) -> tuple[BuildDiagnostic, ...]:
        """Items skipped by the last build."""
        return self._result.diagnostics

    def rebuild(self, paths: Iterable[str] | None = None) -> BuildResult:
        """
        Rebuild the registry and publish it.

        Concurrent rebuilds are serialized: each one publishes before the
        next begins enumerating. Readers never wait on the lock.

        Args:
            paths: Font files to register; enumerated by the locator if None

        Returns:
            BuildResult of the new registry
        """
        if paths is None and self.locator is None:
            raise ValueError("No font paths given and no locator configured")

        with self._lock:
            if paths is None:
                paths = self.locator.enumerate()
            result = build_registry(paths, self.describe)
            # Registry and diagnostics are published as one reference
            self._result = result

        for diagnostic in result.diagnostics:
            logger.debug(f"Skipped during font build: {diagnostic}")
        return result

    def list_families(self) -> list[str]:
        """List registered family names."""
        families = self._result.registry.families.values()
        return sorted((family.name for family in families), key=str.lower)

    def get_statistics(self) -> dict[str, int]:
        """Get registry statistics."""
        result = self._result
        registry = result.registry
        stats = {
            "font_families": len(registry.families),
            "font_files": len(registry.paths),
            "variants": sum(len(f.variants) for f in registry.families.values()),
            "skipped": len(result.diagnostics),
        }

        # Count by style
        for style in FontStyle:
            stats[style.value] = sum(
                1 for family in registry.families.values() if style in family.variants
            )

        return stats
