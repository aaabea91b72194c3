"""
Basic Usage Examples
====================

This module demonstrates basic usage patterns for the font resolver.
"""

from pathlib import Path

from fontresolver import (
    EmptyRegistryError,
    FontCatalog,
    FontLoadError,
    FontResolver,
    ResolverConfig,
)


def example_system_fonts():
    """
    Resolve fonts installed on this machine with default settings.
    """
    print("=== System Fonts ===")

    catalog = FontCatalog.from_system()
    resolver = FontResolver(catalog)

    try:
        handle = resolver.resolve(resolver.default_font_name, is_bold=True, is_italic=False)
    except EmptyRegistryError as e:
        print(f"No fonts available: {e}")
        return

    print(f"Bold {resolver.default_font_name} resolved to {handle}")
    font_bytes = resolver.get_font(handle)
    print(f"Loaded {len(font_bytes)} bytes")


def example_strict_lookup():
    """
    Signal missing families instead of silently substituting another font.
    """
    print("\n=== Strict Lookup ===")

    config = ResolverConfig(return_null_if_missing=True)
    resolver = FontResolver(FontCatalog.from_system(config), config)

    for family in ("Arial", "DejaVu Sans", "Some Missing Family"):
        handle = resolver.resolve(family)
        print(f"{family}: {handle or 'not installed'}")


def example_private_font_directory(font_dir: Path):
    """
    Resolve only against fonts shipped with a document template.
    """
    print("\n=== Private Font Directory ===")

    config = ResolverConfig(extra_font_dirs=[font_dir], include_system_fonts=False)
    catalog = FontCatalog.from_system(config)

    for diagnostic in catalog.diagnostics:
        print(f"Skipped: {diagnostic}")

    resolver = FontResolver(catalog, config)
    for family in catalog.list_families():
        handle = resolver.resolve(family, is_bold=True, is_italic=True)
        try:
            size = len(resolver.get_font(handle))
        except FontLoadError as e:
            print(f"{family}: {e}")
            continue
        print(f"{family} bold italic -> {handle} ({size // 1024}KB)")


if __name__ == "__main__":
    example_system_fonts()
    example_strict_lookup()
    example_private_font_directory(Path("templates/fonts"))
