"""Custom exceptions for the font resolution system."""

from typing import Any


class FontResolverError(Exception):
    """Base exception for all font resolver errors."""

    def __init__(self, message: str, details: Any | None = None):
        super().__init__(message)
        self.details = details


class ConfigurationError(FontResolverError):
    """Exception raised for configuration errors."""


class EnvironmentUnsupportedError(FontResolverError):
    """Exception raised when the platform has no known font locations."""

    def __init__(self, system: str):
        super().__init__(f"Font discovery is not implemented for platform: {system}")
        self.system = system


class FontParseError(FontResolverError):
    """Exception raised when a font file cannot be described."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Failed to parse font file {path}: {reason}")
        self.path = path


class EmptyRegistryError(FontResolverError):
    """Exception raised when no fonts were ever registered."""

    def __init__(self):
        super().__init__("No fonts installed on this device")


class FontLoadError(FontResolverError, OSError):
    """Exception raised when a resolved font handle cannot be read."""

    def __init__(self, handle: str, path: str | None = None, reason: str | None = None):
        message = f"No font file found for {handle}"
        if path:
            message += f" ({path})"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.handle = handle
        self.path = path
