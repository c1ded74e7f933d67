"""Path resolution for closestmatch storage."""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "PathResolver",
    "default_resolver",
]


class PathResolver:
    """Resolves paths for closestmatch storage.

    Storage layout:
        ~/.closestmatch/
        └── config.json
    """

    def __init__(self, base: Path | None = None) -> None:
        """Initialize path resolver.

        Args:
            base: Base directory for storage. Defaults to ~/.closestmatch.
        """
        self.base = base or Path.home() / ".closestmatch"

    def global_config(self) -> Path:
        """Path to global configuration file."""
        return self.base / "config.json"


# Default resolver instance
default_resolver = PathResolver()
