"""CLI context state management."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from closestmatch.infrastructure.config import GlobalConfig

__all__ = ["CLIContext"]


@dataclass
class CLIContext:
    """Global CLI context for verbosity and loaded configuration.

    Uses singleton pattern to share state across all CLI commands.

    Note: Mutable dataclass to allow setting verbose/quiet flags at runtime.
    Assumes single-threaded CLI environment.
    """

    verbose: bool = False
    quiet: bool = False
    config: GlobalConfig | None = None

    _instance: ClassVar[CLIContext | None] = None

    @classmethod
    def get(cls) -> CLIContext:
        """Get the singleton CLI context instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def get_config(self) -> GlobalConfig:
        """Get global config, loading and caching on first access.

        Returns:
            Loaded or default GlobalConfig instance.
        """
        config = self.config
        if config is None:
            from closestmatch.infrastructure.config import load_global_config

            config = self.config = load_global_config()

        return config

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance.

        Useful for testing to ensure clean state.
        """
        cls._instance = None
