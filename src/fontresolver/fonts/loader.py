"""
Font Byte Loader
================

Reads the bytes of a resolved font handle from the candidate font paths.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from ..core.exceptions import FontLoadError
from .utils import font_basename

logger = logging.getLogger(__name__)


class FontLoader:
    """Map font handles back to files and read them."""

    def find_path(self, handle: str, paths: Iterable[str]) -> str | None:
        """
        Find the first candidate path matching a handle.

        A path matches when its base name contains the handle's base name,
        ignoring case.
        """
        needle = font_basename(handle).lower()
        if not needle:
            return None
        for path in paths:
            if needle in font_basename(path).lower():
                return path
        return None

    def load(self, handle: str, paths: Iterable[str]) -> bytes:
        """
        Read the font file behind a handle.

        Args:
            handle: Font handle (a file base name) as returned by the resolver
            paths: Candidate font paths to search

        Returns:
            Raw font file contents

        Raises:
            FontLoadError: If no path matches or the file cannot be read
        """
        font_path = self.find_path(handle, paths)
        if font_path is None:
            logger.error(f"No font file found for handle {handle}")
            raise FontLoadError(handle)

        try:
            data = Path(font_path).read_bytes()
        except OSError as e:
            logger.error(f"Failed to read font {font_path}: {e}")
            raise FontLoadError(handle, font_path, str(e)) from e

        logger.debug(f"Loaded {len(data)} bytes for {handle} from {font_path}")
        return data
