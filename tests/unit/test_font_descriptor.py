"""
Unit tests for reading family and style information from font files.
"""

import pytest
from fontTools.ttLib import TTFont

from fontresolver.core.exceptions import FontParseError
from fontresolver.fonts import FontDescription, describe_font_file
from fontresolver.fonts.utils import (
    _classify_subfamily,
    _style_from_flags,
    font_basename,
    is_collection_file,
    is_font_file,
)


class TestDescribeFontFile:
    """Test describe_font_file with real font files."""

    def test_single_font(self, font_factory):
        """Test describing a TrueType font."""
        path = font_factory("Example-Bold.ttf", "Example Sans", "Bold")

        assert describe_font_file(str(path)) == [FontDescription("Example Sans", "Bold")]

    @pytest.mark.parametrize(
        ("subfamily", "expected"),
        [
            ("Regular", "Regular"),
            ("Italic", "Italic"),
            ("Bold Italic", "BoldItalic"),
            ("Light", "Light"),
            ("SemiBold", "SemiBold"),
        ],
    )
    def test_subfamily_classification(self, font_factory, subfamily, expected):
        """Test that the subfamily name drives the style tag."""
        path = font_factory(f"Example-{subfamily}.ttf", "Example", subfamily)

        [description] = describe_font_file(str(path))

        assert description.style_tag == expected

    def test_collection(self, font_factory, collection_factory):
        """Test describing every face of a font collection."""
        regular = font_factory("Coll-Regular.ttf", "Collected", "Regular")
        bold = font_factory("Coll-Bold.ttf", "Collected", "Bold")
        collection = collection_factory("Collected.ttc", [regular, bold])

        descriptions = describe_font_file(str(collection))

        assert descriptions == [
            FontDescription("Collected", "Regular"),
            FontDescription("Collected", "Bold"),
        ]

    def test_corrupted_font_raises_parse_error(self, tmp_path):
        """Test that garbage data is reported as FontParseError."""
        path = tmp_path / "broken.ttf"
        path.write_bytes(b"definitely not a font file")

        with pytest.raises(FontParseError) as exc_info:
            describe_font_file(str(path))

        assert exc_info.value.path == str(path)

    def test_missing_file_raises_parse_error(self, tmp_path):
        """Test that unreadable files are reported as FontParseError."""
        with pytest.raises(FontParseError):
            describe_font_file(str(tmp_path / "missing.otf"))

    def test_unknown_extension_is_ignored(self, tmp_path):
        """Test that non-font files are not opened."""
        path = tmp_path / "notes.txt"
        path.write_text("hello")

        assert describe_font_file(str(path)) == []


class TestStyleHelpers:
    """Test style classification helpers."""

    @pytest.mark.parametrize(
        ("subfamily", "expected"),
        [
            ("Bold", "Bold"),
            ("SemiBold", "SemiBold"),
            ("ExtraBold", "ExtraBold"),
            ("Bold Condensed", "Bold Condensed"),
            ("SemiBold Italic", "SemiBold Italic"),
            ("Bold-Italic", "BoldItalic"),
            ("Bold Oblique", "BoldItalic"),
            ("Oblique", "Italic"),
            ("Book", "Regular"),
            ("Condensed", "Condensed"),
        ],
    )
    def test_classify_subfamily(self, subfamily, expected):
        """Test subfamily name reduction."""
        assert _classify_subfamily(subfamily) == expected

    @pytest.mark.parametrize(
        ("fs_selection", "expected"),
        [
            (0x40, "Regular"),
            (0x20, "Bold"),
            (0x01, "Italic"),
            (0x21, "BoldItalic"),
        ],
    )
    def test_style_from_os2_flags(self, font_factory, fs_selection, expected):
        """Test style detection from OS/2 fsSelection bits."""
        path = font_factory(f"Flags-{fs_selection}.ttf", "Flags", "Regular")
        font = TTFont(str(path))
        font["OS/2"].fsSelection = fs_selection

        assert _style_from_flags(font) == expected

    def test_style_from_head_flags(self, font_factory):
        """Test style detection from head macStyle when OS/2 is absent."""
        path = font_factory("Head.ttf", "Head", "Regular")
        font = TTFont(str(path))
        del font["OS/2"]
        font["head"].macStyle = 0x03

        assert _style_from_flags(font) == "BoldItalic"


class TestPathHelpers:
    """Test extension and file name helpers."""

    def test_is_font_file(self):
        assert is_font_file("/fonts/Arial.TTF")
        assert is_font_file("C:\\Windows\\Fonts\\cambria.ttc")
        assert not is_font_file("/fonts/Arial.woff2")
        assert is_collection_file("/fonts/Cambria.TTC")
        assert not is_collection_file("/fonts/Arial.ttf")

    def test_font_basename(self):
        assert font_basename("/usr/share/fonts/DejaVuSans.ttf") == "DejaVuSans.ttf"
        assert font_basename("C:\\Windows\\Fonts\\arial.ttf") == "arial.ttf"
