"""
Font data models and types.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import NamedTuple


class FontStyle(str, Enum):
    """Style of a single font file variant."""

    REGULAR = "Regular"
    BOLD = "Bold"
    ITALIC = "Italic"
    BOLD_ITALIC = "BoldItalic"


class FontDescription(NamedTuple):
    """Family name and raw style tag reported by the font file descriptor."""

    family_name: str
    style_tag: str


@dataclass(frozen=True)
class FontFileRecord:
    """One face discovered in a font file."""

    path: str
    family_name: str
    style: FontStyle

    @property
    def filename(self) -> str:
        """Get the font filename."""
        return Path(self.path).name

    def __str__(self) -> str:
        return f"{self.family_name} {self.style.value} ({self.filename})"


@dataclass(frozen=True)
class FontFamily:
    """A font family and the file backing each of its styles."""

    name: str
    variants: Mapping[FontStyle, str]

    def __post_init__(self):
        if not self.variants:
            raise ValueError(f"Font family {self.name!r} has no variants")
        object.__setattr__(self, "variants", MappingProxyType(dict(self.variants)))

    @property
    def key(self) -> str:
        """Registry key: the lower-cased family name."""
        return self.name.lower()

    def get(self, style: FontStyle) -> str | None:
        return self.variants.get(style)

    def first_variant(self) -> str:
        """Path of the first registered variant."""
        return next(iter(self.variants.values()))

    def __str__(self) -> str:
        styles = ", ".join(style.value for style in self.variants)
        return f"{self.name} [{styles}]"


@dataclass(frozen=True)
class FontRegistry:
    """Immutable snapshot of every discovered font family."""

    families: Mapping[str, FontFamily] = field(default_factory=dict)
    paths: tuple[str, ...] = ()

    def __post_init__(self):
        families = {}
        for name, family in self.families.items():
            key = name.lower()
            if key in families:
                raise ValueError(f"Duplicate font family key {key!r}")
            families[key] = family
        object.__setattr__(self, "families", MappingProxyType(families))
        object.__setattr__(self, "paths", tuple(self.paths))

    def __len__(self) -> int:
        return len(self.families)

    def __contains__(self, family_name: object) -> bool:
        return isinstance(family_name, str) and family_name.lower() in self.families

    @property
    def is_empty(self) -> bool:
        return not self.families

    def get_family(self, family_name: str) -> FontFamily | None:
        """Look up a family, ignoring case."""
        return self.families.get(family_name.lower())

    def first_family(self) -> FontFamily:
        return next(iter(self.families.values()))


@dataclass(frozen=True)
class BuildDiagnostic:
    """A file or family excluded from the registry, and why."""

    source: str
    stage: str  # describe, record, family
    error: str

    def __str__(self) -> str:
        return f"[{self.stage}] {self.source}: {self.error}"


@dataclass(frozen=True)
class BuildResult:
    """Registry produced by a build together with its diagnostics."""

    registry: FontRegistry
    diagnostics: tuple[BuildDiagnostic, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.diagnostics
