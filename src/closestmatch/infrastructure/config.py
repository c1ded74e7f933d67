"""Global configuration persistence.

Handles reading and writing global config.json with schema versioning
and atomic write operations.
"""

from __future__ import annotations

import json
import tempfile
from dataclasses import asdict, dataclass, replace
from pathlib import Path
from typing import Any

import structlog

from closestmatch.infrastructure.paths import PathResolver, default_resolver

__all__ = [
    "CONFIG_KEYS",
    "ConfigError",
    "GlobalConfig",
    "load_global_config",
    "parse_bool",
    "save_global_config",
    "update_config",
]

logger = structlog.get_logger()

# Current schema version - increment when making breaking changes
# v1: Initial schema with show_all_by_default and fold_input
SCHEMA_VERSION = "1"

# Maximum config file size (1MB)
MAX_CONFIG_SIZE = 1 * 1024 * 1024

# CLI-facing key -> GlobalConfig field
CONFIG_KEYS: dict[str, str] = {
    "show-all": "show_all_by_default",
    "fold": "fold_input",
}

_TRUE_VALUES = frozenset({"true", "yes", "on", "1"})
_FALSE_VALUES = frozenset({"false", "no", "off", "0"})


class ConfigError(Exception):
    """Raised when configuration operations fail."""


@dataclass(frozen=True)
class GlobalConfig:
    """Immutable global configuration for closestmatch.

    Attributes:
        show_all_by_default: When true, `find` returns every tied candidate
            unless overridden with --first.
        fold_input: When true, compare accent-stripped, lower-cased text
            unless overridden with --exact.
    """

    show_all_by_default: bool = False
    fold_input: bool = False


def parse_bool(value: str) -> bool:
    """Parse a boolean setting value.

    Args:
        value: One of true/false, yes/no, on/off, 1/0 (case-insensitive).

    Returns:
        Parsed boolean.

    Raises:
        ConfigError: If the value is not recognized.
    """
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigError(f"Invalid boolean value: {value!r} (use true or false)")


def update_config(config: GlobalConfig, key: str, value: str) -> GlobalConfig:
    """Return a copy of config with one setting changed.

    Args:
        config: Current configuration.
        key: CLI-facing key (see CONFIG_KEYS).
        value: Raw value from the command line.

    Returns:
        Updated GlobalConfig.

    Raises:
        ConfigError: If the key is unknown or the value is invalid.
    """
    field = CONFIG_KEYS.get(key)
    if field is None:
        raise ConfigError(f"Unknown config key: {key}")
    return replace(config, **{field: parse_bool(value)})


def save_global_config(
    config: GlobalConfig, resolver: PathResolver | None = None
) -> None:
    """Save global configuration to a JSON file.

    Uses atomic write (temp file + rename) to prevent corruption.

    Args:
        config: Configuration to save.
        resolver: Path resolver (defaults to default_resolver).

    Raises:
        ConfigError: If saving fails.
    """
    if resolver is None:
        resolver = default_resolver

    path = resolver.global_config()
    data = _config_to_dict(config)

    tmp_path: Path | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)

        with tempfile.NamedTemporaryFile(
            mode="w",
            dir=path.parent,
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        ) as tmp:
            tmp_path = Path(tmp.name)
            json.dump(data, tmp, indent=2)

        tmp_path.replace(path)

        logger.debug("config_saved", path=str(path))

    except OSError as e:
        if tmp_path is not None:
            tmp_path.unlink(missing_ok=True)
        raise ConfigError(f"Failed to save config: {e}") from e


def load_global_config(resolver: PathResolver | None = None) -> GlobalConfig:
    """Load global configuration from a JSON file.

    Gracefully handles missing files, invalid JSON, and oversized files.
    Returns default config if file doesn't exist or is invalid.

    Args:
        resolver: Path resolver (defaults to default_resolver).

    Returns:
        GlobalConfig instance (uses defaults if file missing or invalid).
    """
    if resolver is None:
        resolver = default_resolver

    path = resolver.global_config()

    if not path.exists():
        logger.debug("config_not_found", path=str(path))
        return GlobalConfig()

    try:
        file_size = path.stat().st_size
        if file_size > MAX_CONFIG_SIZE:
            logger.warning(
                "config_too_large",
                path=str(path),
                size=file_size,
                max_size=MAX_CONFIG_SIZE,
            )
            return GlobalConfig()

        content = path.read_text(encoding="utf-8")
        data = json.loads(content)

        if not isinstance(data, dict):
            raise TypeError(f"expected object, got {type(data).__name__}")

        version = data.get("version")
        if version and version != SCHEMA_VERSION:
            logger.warning(
                "config_version_mismatch",
                path=str(path),
                expected=SCHEMA_VERSION,
                found=version,
            )
            # Still try to load - be forward-compatible

        return _dict_to_config(data)

    except json.JSONDecodeError as e:
        logger.warning("config_invalid_json", path=str(path), error=str(e))
        return GlobalConfig()
    except (KeyError, TypeError, ValueError) as e:
        logger.warning("config_parse_error", path=str(path), error=str(e))
        return GlobalConfig()
    except OSError as e:
        logger.warning("config_read_error", path=str(path), error=str(e))
        return GlobalConfig()


def _config_to_dict(config: GlobalConfig) -> dict[str, Any]:
    """Convert config to JSON-serializable dict with version field."""
    data = asdict(config)
    data["version"] = SCHEMA_VERSION
    return data


def _dict_to_config(data: dict[str, Any]) -> GlobalConfig:
    """Convert dict to GlobalConfig.

    Raises:
        TypeError: If a field has a non-boolean value.
    """
    values: dict[str, bool] = {}
    for field in CONFIG_KEYS.values():
        if field not in data:
            continue
        value = data[field]
        if not isinstance(value, bool):
            raise TypeError(f"{field} must be a boolean, got {type(value).__name__}")
        values[field] = value
    return GlobalConfig(**values)
