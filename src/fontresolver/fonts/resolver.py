"""
Font Resolver
=============

Resolves a family name plus bold/italic flags to a font handle and loads the
bytes behind a handle. Lookups only read the in-memory registry.
"""

import logging

from ..core.config import DEFAULT_FONT_NAME, ResolverConfig
from ..core.exceptions import EmptyRegistryError
from .catalog import FontCatalog
from .loader import FontLoader
from .models import FontFamily, FontRegistry, FontStyle
from .utils import font_basename

logger = logging.getLogger(__name__)

# (is_bold, is_italic) -> the one exact style attempted before Regular.
# A bold+italic request never falls back to Bold or Italic alone.
STYLE_DECISION_TABLE: dict[tuple[bool, bool], tuple[FontStyle, ...]] = {
    (True, True): (FontStyle.BOLD_ITALIC, FontStyle.REGULAR),
    (True, False): (FontStyle.BOLD, FontStyle.REGULAR),
    (False, True): (FontStyle.ITALIC, FontStyle.REGULAR),
    (False, False): (FontStyle.REGULAR,),
}


def select_variant(family: FontFamily, is_bold: bool, is_italic: bool) -> str:
    """Pick the file for a style request from a known family."""
    for style in STYLE_DECISION_TABLE[(bool(is_bold), bool(is_italic))]:
        path = family.get(style)
        if path is not None:
            return path
    return family.first_variant()


class FontResolver:
    """
    Style-aware font lookup over a FontCatalog.

    Unknown families resolve to an arbitrary registered font unless
    ``return_null_if_missing`` is set, in which case None is returned.
    """

    DEFAULT_FONT_NAME = DEFAULT_FONT_NAME

    def __init__(
        self,
        catalog: FontCatalog,
        config: ResolverConfig | None = None,
        loader: FontLoader | None = None,
    ):
        """
        Initialize font resolver.

        Args:
            catalog: Catalog holding the font registry
            config: Resolver configuration; read from the environment if None
            loader: Byte loader used by ``get_font``
        """
        self.catalog = catalog
        self.config = config or ResolverConfig()
        self.loader = loader or FontLoader()
        self.return_null_if_missing = self.config.return_null_if_missing

    @property
    def default_font_name(self) -> str:
        """Canonical fallback family advertised to callers."""
        return self.config.default_font_name

    def resolve_path(
        self, family_name: str, is_bold: bool = False, is_italic: bool = False
    ) -> str | None:
        """
        Resolve a font request to the full path of a font file.

        Raises:
            EmptyRegistryError: If no fonts were ever registered
        """
        registry = self.catalog.registry
        return self._resolve_in(registry, family_name, is_bold, is_italic)

    def resolve(
        self, family_name: str, is_bold: bool = False, is_italic: bool = False
    ) -> str | None:
        """
        Resolve a font request to a font handle.

        Args:
            family_name: Requested family, matched case-insensitively
            is_bold: Bold requested
            is_italic: Italic requested

        Returns:
            File base name of the selected font, or None when the family is
            unknown and ``return_null_if_missing`` is set

        Raises:
            EmptyRegistryError: If no fonts were ever registered
        """
        path = self.resolve_path(family_name, is_bold, is_italic)
        return font_basename(path) if path is not None else None

    def _resolve_in(
        self, registry: FontRegistry, family_name: str, is_bold: bool, is_italic: bool
    ) -> str | None:
        if registry.is_empty:
            raise EmptyRegistryError()

        family = registry.get_family(family_name)
        if family is not None:
            return select_variant(family, is_bold, is_italic)

        if self.return_null_if_missing:
            logger.debug(f"Font family not found: {family_name}")
            return None

        fallback = registry.first_family()
        logger.info(f"Font family {family_name} not found, using {fallback.name}")
        return fallback.first_variant()

    def get_font(self, handle: str) -> bytes:
        """
        Load the font bytes behind a handle.

        Raises:
            FontLoadError: If the handle matches no readable font file
        """
        return self.loader.load(handle, self.catalog.registry.paths)

    load = get_font
