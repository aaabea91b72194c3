"""
Font Registry Builder
=====================

Turns candidate font paths into an immutable FontRegistry.

Per-file and per-family failures never abort a build: they are logged and
returned as diagnostics next to the registry.
"""

import logging
from collections.abc import Callable, Iterable, Sequence

from .models import (
    BuildDiagnostic,
    BuildResult,
    FontDescription,
    FontFamily,
    FontFileRecord,
    FontRegistry,
    FontStyle,
)
from .utils import describe_font_file, infer_style, is_font_file

logger = logging.getLogger(__name__)

Describer = Callable[[str], Iterable[FontDescription]]


def build_registry(
    paths: Iterable[str], describe: Describer = describe_font_file
) -> BuildResult:
    """
    Build a font registry from candidate font file paths.

    Args:
        paths: Candidate font files, in enumeration order
        describe: Callable returning the faces contained in a font file

    Returns:
        BuildResult holding the registry and the diagnostics of skipped items
    """
    paths = tuple(str(p) for p in paths)
    diagnostics: list[BuildDiagnostic] = []

    records = collect_records(paths, describe, diagnostics)

    # Group by case-preserved family name, in first-seen order
    groups: dict[str, list[FontFileRecord]] = {}
    for record in records:
        groups.setdefault(record.family_name, []).append(record)

    families: dict[str, FontFamily] = {}
    for family_name, group in groups.items():
        try:
            family = fold_family(family_name, group)
            if family.key in families:
                raise ValueError(
                    f"family key '{family.key}' already registered by "
                    f"'{families[family.key].name}'"
                )
            families[family.key] = family
        except Exception as e:
            logger.warning(f"Skipping font family {family_name}: {e}")
            diagnostics.append(BuildDiagnostic(source=family_name, stage="family", error=str(e)))

    registry = FontRegistry(families=families, paths=paths)
    logger.info(
        f"Built font registry: {len(families)} families from {len(records)} faces "
        f"({len(diagnostics)} skipped)"
    )
    return BuildResult(registry=registry, diagnostics=tuple(diagnostics))


def collect_records(
    paths: Sequence[str],
    describe: Describer,
    diagnostics: list[BuildDiagnostic],
) -> list[FontFileRecord]:
    """Describe each font file and convert its faces to records."""
    records: list[FontFileRecord] = []

    for font_path in paths:
        if not is_font_file(font_path):
            logger.debug(f"Skipping non-font file {font_path}")
            continue

        try:
            descriptions = list(describe(font_path))
        except Exception as e:
            logger.warning(f"Failed to describe font {font_path}: {e}")
            diagnostics.append(BuildDiagnostic(source=font_path, stage="describe", error=str(e)))
            continue

        for description in descriptions:
            try:
                record = make_record(font_path, description)
                records.append(record)
                logger.debug(f"Discovered font face {record}")
            except Exception as e:
                logger.warning(f"Skipping face in {font_path}: {e}")
                diagnostics.append(
                    BuildDiagnostic(source=font_path, stage="record", error=str(e))
                )

    return records


def make_record(font_path: str, description: FontDescription) -> FontFileRecord:
    """Create a record from a (family_name, style_tag) description."""
    family_name, style_tag = description
    if not isinstance(family_name, str) or not family_name.strip():
        raise ValueError(f"invalid family name {family_name!r}")
    return FontFileRecord(path=font_path, family_name=family_name, style=infer_style(style_tag))


def fold_family(family_name: str, records: Sequence[FontFileRecord]) -> FontFamily:
    """
    Fold the records of one family into a FontFamily.

    A family with a single record stores it as Regular whatever its style.
    Otherwise each record is stored under its inferred style and the first
    record seen for a style wins.
    """
    if not records:
        raise ValueError(f"no font files for family '{family_name}'")

    if len(records) == 1:
        return FontFamily(name=family_name, variants={FontStyle.REGULAR: records[0].path})

    variants: dict[FontStyle, str] = {}
    for record in records:
        variants.setdefault(record.style, record.path)
    return FontFamily(name=family_name, variants=variants)
