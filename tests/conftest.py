"""
Pytest configuration and fixtures for font resolver tests.
"""

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import TTCollection, TTFont

from fontresolver.fonts import FontCatalog, FontDescription, FontResolver
from fontresolver.core.config import ResolverConfig


def build_test_font(path: Path, family: str, style: str = "Regular", **os2_values) -> Path:
    """Write a minimal TrueType font with the given family and subfamily names."""
    pen = TTGlyphPen(None)
    pen.moveTo((0, 0))
    pen.lineTo((0, 500))
    pen.lineTo((500, 500))
    pen.lineTo((500, 0))
    pen.closePath()

    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder([".notdef"])
    fb.setupCharacterMap({})
    fb.setupGlyf({".notdef": pen.glyph()})
    fb.setupHorizontalMetrics({".notdef": (500, 0)})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": family, "styleName": style})
    fb.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200, **os2_values)
    fb.setupPost()

    path.parent.mkdir(parents=True, exist_ok=True)
    fb.save(str(path))
    return path


def build_test_collection(path: Path, members: list[Path]) -> Path:
    """Bundle existing font files into a .ttc collection."""
    path.parent.mkdir(parents=True, exist_ok=True)
    collection = TTCollection()
    collection.fonts = [TTFont(str(member)) for member in members]
    collection.save(str(path))
    return path


@pytest.fixture
def font_factory(tmp_path):
    """Factory creating real font files under a temporary directory."""

    def _make(filename: str, family: str, style: str = "Regular", **os2_values) -> Path:
        return build_test_font(tmp_path / "fonts" / filename, family, style, **os2_values)

    return _make


@pytest.fixture
def collection_factory(tmp_path):
    """Factory bundling font files into a collection under a temporary directory."""

    def _make(filename: str, members: list[Path]) -> Path:
        return build_test_collection(tmp_path / "fonts" / filename, members)

    return _make


@pytest.fixture
def font_dir(font_factory, tmp_path):
    """Directory holding a small installed-fonts tree."""
    font_factory("TestSans-Regular.ttf", "Test Sans", "Regular")
    font_factory("TestSans-Bold.ttf", "Test Sans", "Bold")
    font_factory("TestSans-Italic.ttf", "Test Sans", "Italic")
    font_factory("TestSans-BoldItalic.ttf", "Test Sans", "Bold Italic")
    font_factory("serif/TestSerif-Bold.ttf", "Test Serif", "Bold")
    (tmp_path / "fonts" / "broken.ttf").write_bytes(b"this is not a font")
    (tmp_path / "fonts" / "README.txt").write_text("not a font either")
    return tmp_path / "fonts"


@pytest.fixture
def fake_fonts():
    """Descriptions returned by a fake descriptor, keyed by path."""
    return {
        "/fonts/arial.ttf": [FontDescription("Arial", "Regular")],
        "/fonts/arialbd.ttf": [FontDescription("Arial", "Bold")],
        "/fonts/ariali.ttf": [FontDescription("Arial", "Italic")],
        "/fonts/arialbi.ttf": [FontDescription("Arial", "BoldItalic")],
        "/fonts/Courier-Bold.ttf": [FontDescription("Courier New", "Bold")],
        "/fonts/Times.ttf": [FontDescription("Times New Roman", "Regular")],
        "/fonts/Times-Bold.ttf": [FontDescription("Times New Roman", "Bold")],
    }


@pytest.fixture
def fake_describe(fake_fonts):
    """Descriptor backed by the fake_fonts mapping."""

    def _describe(path: str) -> list[FontDescription]:
        return fake_fonts[path]

    return _describe


@pytest.fixture
def fake_catalog(fake_fonts, fake_describe):
    """Catalog built from the fake descriptor."""
    return FontCatalog.from_paths(list(fake_fonts), describe=fake_describe)


@pytest.fixture
def resolver(fake_catalog):
    """Resolver with default configuration over the fake catalog."""
    return FontResolver(fake_catalog, ResolverConfig(_env_file=None))
