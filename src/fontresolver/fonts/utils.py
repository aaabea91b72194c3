"""
Font Utilities
==============

Font file description and style inference.

``describe_font_file`` is the only place that opens font binaries during
discovery; it reads the naming and style information with fontTools and
reports one ``FontDescription`` per face.
"""

import logging
import os
import re

from fontTools.ttLib import TTCollection, TTFont

from ..core.exceptions import FontParseError
from .models import FontDescription, FontStyle

logger = logging.getLogger(__name__)

SINGLE_FONT_EXTENSIONS = (".ttf", ".otf")
COLLECTION_EXTENSIONS = (".ttc", ".otc")
FONT_EXTENSIONS = SINGLE_FONT_EXTENSIONS + COLLECTION_EXTENSIONS

# OS/2 fsSelection and head macStyle bits
_FS_SELECTION_ITALIC = 1 << 0
_FS_SELECTION_BOLD = 1 << 5
_MAC_STYLE_BOLD = 1 << 0
_MAC_STYLE_ITALIC = 1 << 1

_STYLE_TAGS = {
    "regular": FontStyle.REGULAR,
    "normal": FontStyle.REGULAR,
    "book": FontStyle.REGULAR,
    "roman": FontStyle.REGULAR,
    "plain": FontStyle.REGULAR,
    "bold": FontStyle.BOLD,
    "italic": FontStyle.ITALIC,
    "oblique": FontStyle.ITALIC,
    "bolditalic": FontStyle.BOLD_ITALIC,
    "boldoblique": FontStyle.BOLD_ITALIC,
    "italicbold": FontStyle.BOLD_ITALIC,
}


def is_single_font_file(path: str) -> bool:
    return path.lower().endswith(SINGLE_FONT_EXTENSIONS)


def is_collection_file(path: str) -> bool:
    return path.lower().endswith(COLLECTION_EXTENSIONS)


def is_font_file(path: str) -> bool:
    """Check whether the path has a recognised font container extension."""
    return path.lower().endswith(FONT_EXTENSIONS)


def infer_style(style_tag: object) -> FontStyle:
    """
    Map a style classification to a FontStyle.

    Accepts FontStyle members and tags such as ``"BoldItalic"`` or
    ``"bold italic"``. Anything unrecognised maps to Regular.
    """
    if isinstance(style_tag, FontStyle):
        return style_tag
    if not isinstance(style_tag, str):
        return FontStyle.REGULAR
    return _STYLE_TAGS.get(_normalize_tag(style_tag), FontStyle.REGULAR)


def _normalize_tag(style_tag: str) -> str:
    return re.sub(r"[\s_\-]+", "", style_tag).lower()


def describe_font_file(font_path: str) -> list[FontDescription]:
    """
    Describe every face contained in a font file.

    Args:
        font_path: Path to a .ttf/.otf font or a .ttc/.otc collection

    Returns:
        One FontDescription per face; empty for unrecognised extensions

    Raises:
        FontParseError: If the file cannot be read as a font
    """
    try:
        if is_collection_file(font_path):
            collection = TTCollection(font_path, lazy=True)
            try:
                return [_describe_font(font, font_path) for font in collection.fonts]
            finally:
                collection.close()

        if is_single_font_file(font_path):
            font = TTFont(font_path, lazy=True)
            try:
                return [_describe_font(font, font_path)]
            finally:
                font.close()

    except FontParseError:
        raise
    except Exception as e:
        raise FontParseError(font_path, str(e) or type(e).__name__) from e

    logger.debug(f"Skipping non-font file {font_path}")
    return []


def _describe_font(font: TTFont, font_path: str) -> FontDescription:
    """Read family name and style tag from a single face."""
    if "name" not in font:
        raise FontParseError(font_path, "missing name table")

    name_table = font["name"]
    family_name = _get_font_name(name_table, 1)
    if not family_name:
        raise FontParseError(font_path, "missing family name")

    subfamily = _get_font_name(name_table, 2)
    style_tag = _classify_subfamily(subfamily) if subfamily else _style_from_flags(font)

    return FontDescription(family_name=family_name, style_tag=style_tag)


def _get_font_name(name_table, name_id: int) -> str | None:
    """Extract font name from name table."""
    # Prefer English (language ID 1033 for US English)
    for record in name_table.names:
        if record.nameID == name_id and record.langID in (1033, 0):
            value = record.toUnicode().strip()
            if value:
                return value

    # Fallback to any available name
    for record in name_table.names:
        if record.nameID == name_id:
            value = record.toUnicode().strip()
            if value:
                return value

    return None


def _classify_subfamily(subfamily: str) -> str:
    """
    Reduce a subfamily name to Regular, Bold, Italic or BoldItalic.

    Only the four standard style names are reduced. Weight and width
    variants such as SemiBold, ExtraBold or Bold Condensed are returned
    unchanged.
    """
    style = _STYLE_TAGS.get(_normalize_tag(subfamily))
    return style.value if style is not None else subfamily


def _style_from_flags(font: TTFont) -> str:
    """Derive the style tag from OS/2 fsSelection or head macStyle bits."""
    is_bold = is_italic = False

    if "OS/2" in font:
        fs_selection = font["OS/2"].fsSelection
        is_bold = bool(fs_selection & _FS_SELECTION_BOLD)
        is_italic = bool(fs_selection & _FS_SELECTION_ITALIC)
    elif "head" in font:
        mac_style = font["head"].macStyle
        is_bold = bool(mac_style & _MAC_STYLE_BOLD)
        is_italic = bool(mac_style & _MAC_STYLE_ITALIC)

    if is_bold and is_italic:
        return FontStyle.BOLD_ITALIC.value
    if is_bold:
        return FontStyle.BOLD.value
    if is_italic:
        return FontStyle.ITALIC.value
    return FontStyle.REGULAR.value


def font_basename(path: str) -> str:
    """Base name of a font path, for both POSIX and Windows separators."""
    return os.path.basename(path.replace("\\", "/"))
