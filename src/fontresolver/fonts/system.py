"""
System Font Locator
===================

Enumerates candidate font files from the standard font locations of the
running operating system.
"""

import logging
import os
import platform
import shutil
import subprocess
from collections.abc import Iterable
from pathlib import Path

from ..core.exceptions import EnvironmentUnsupportedError
from .utils import is_font_file

logger = logging.getLogger(__name__)

UNIX_SYSTEMS = ("linux", "freebsd", "openbsd", "netbsd", "dragonfly")
SUPPORTED_SYSTEMS = ("windows", "darwin", *UNIX_SYSTEMS)


class SystemFontLocator:
    """
    Locator for font files installed on the local machine.

    Scans configured extra directories first, then the platform font
    directories. On Unix-like systems fontconfig is queried before the
    directory scan.
    """

    def __init__(
        self,
        system: str | None = None,
        extra_dirs: Iterable[str | Path] = (),
        use_fontconfig: bool = True,
        include_system: bool = True,
    ):
        """
        Initialize system font locator.

        Args:
            system: Platform name (``platform.system()`` style); detected if None
            extra_dirs: Additional directories scanned before system locations
            use_fontconfig: Query ``fc-list`` on Unix-like systems
            include_system: Scan platform font locations; when False only
                ``extra_dirs`` are scanned and any platform is accepted

        Raises:
            EnvironmentUnsupportedError: If the platform has no known font locations
        """
        self.system = (system or platform.system()).lower()
        if include_system and self.system not in SUPPORTED_SYSTEMS:
            raise EnvironmentUnsupportedError(self.system)

        self.extra_dirs = [Path(d).expanduser() for d in extra_dirs]
        self.include_system = include_system
        self.use_fontconfig = include_system and use_fontconfig and self.system in UNIX_SYSTEMS

        logger.debug(f"SystemFontLocator initialized for {self.system}")

    def get_font_directories(self) -> list[Path]:
        """Get system font directories based on operating system."""
        directories = []

        if self.system == "windows":
            directories.append(Path(os.environ.get("WINDIR", "C:\\Windows")) / "Fonts")
            local_appdata = os.environ.get("LOCALAPPDATA")
            if local_appdata:
                directories.append(Path(local_appdata) / "Microsoft" / "Windows" / "Fonts")

        elif self.system == "darwin":
            directories.extend(
                [
                    Path("/System/Library/Fonts"),
                    Path("/Library/Fonts"),
                    Path.home() / "Library" / "Fonts",
                ]
            )

        else:
            directories.extend(
                [
                    Path("/usr/share/fonts"),
                    Path("/usr/local/share/fonts"),
                    Path.home() / ".fonts",
                    Path.home() / ".local" / "share" / "fonts",
                ]
            )

        return [d for d in directories if d.is_dir()]

    def enumerate(self) -> list[str]:
        """
        List candidate font file paths.

        Returns:
            De-duplicated font file paths in discovery order
        """
        seen: set[str] = set()
        paths: list[str] = []

        def _add(candidates: Iterable[str]) -> None:
            for candidate in candidates:
                if candidate not in seen:
                    seen.add(candidate)
                    paths.append(candidate)

        for font_dir in self.extra_dirs:
            _add(self.scan_directory(font_dir))

        if self.use_fontconfig:
            _add(self._query_fontconfig())

        if self.include_system:
            for font_dir in self.get_font_directories():
                _add(self.scan_directory(font_dir))

        logger.info(f"Found {len(paths)} candidate font files on {self.system}")
        return paths

    def scan_directory(self, font_dir: Path) -> list[str]:
        """Recursively scan a font directory for font files, sorted by path."""
        if not font_dir.is_dir():
            logger.debug(f"Font directory does not exist: {font_dir}")
            return []

        found = []
        try:
            for font_file in font_dir.rglob("*"):
                if is_font_file(font_file.name) and font_file.is_file():
                    found.append(str(font_file))
        except PermissionError:
            logger.debug(f"Permission denied accessing {font_dir}")
        except OSError as e:
            logger.warning(f"Error scanning {font_dir}: {e}")

        return sorted(found)

    def _query_fontconfig(self) -> list[str]:
        """List font files known to fontconfig."""
        fc_list_path = shutil.which("fc-list")
        if not fc_list_path:
            logger.debug("fc-list not found in PATH")
            return []

        try:
            result = subprocess.run(
                [fc_list_path, "--format=%{file}\\n"],
                capture_output=True,
                text=True,
                timeout=30,
                check=False,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.warning(f"Failed to query fontconfig: {e}")
            return []

        if result.returncode != 0:
            logger.warning(f"fc-list exited with status {result.returncode}")
            return []

        files = {line.strip() for line in result.stdout.splitlines() if line.strip()}
        return sorted(f for f in files if is_font_file(f) and Path(f).is_file())

    def get_system_font_info(self) -> dict[str, object]:
        """Get system font information."""
        return {
            "system": self.system,
            "font_directories": [str(d) for d in self.get_font_directories()],
            "extra_directories": [str(d) for d in self.extra_dirs],
            "include_system": self.include_system,
            "use_fontconfig": self.use_fontconfig,
        }
