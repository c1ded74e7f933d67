"""Candidate list loading.

Reads candidate strings from plain text files (one per line) or YAML
files holding a sequence, or a mapping with a ``candidates`` sequence.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog
import yaml

from closestmatch.infrastructure.text import to_text

if TYPE_CHECKING:
    from pathlib import Path

__all__ = [
    "CandidateFileError",
    "load_candidates",
    "parse_candidates_text",
    "parse_candidates_yaml",
]

logger = structlog.get_logger()

# Maximum candidate file size (10MB)
MAX_CANDIDATES_SIZE = 10 * 1024 * 1024

YAML_SUFFIXES = frozenset({".yaml", ".yml"})


class CandidateFileError(Exception):
    """Raised when a candidate file cannot be loaded."""


def parse_candidates_text(content: str) -> list[str]:
    """Parse newline-delimited candidates.

    Only line feeds separate candidates; a trailing carriage return is
    dropped. Blank lines are skipped and other whitespace, including form
    feeds and Unicode line separators, is kept as part of the candidate.

    Args:
        content: File content.

    Returns:
        Candidates in file order.
    """
    lines = (line.removesuffix("\r") for line in content.split("\n"))
    return [line for line in lines if line.strip()]


def parse_candidates_yaml(content: str) -> list[str]:
    """Parse candidates from YAML content.

    Args:
        content: YAML document with a sequence, or a mapping with a
            ``candidates`` sequence.

    Returns:
        Candidates in document order.

    Raises:
        CandidateFileError: If the YAML is invalid or has the wrong shape.
    """
    try:
        data: Any = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise CandidateFileError(f"Invalid YAML in candidate file: {e}") from e

    if data is None:
        return []

    if isinstance(data, dict):
        if "candidates" not in data:
            raise CandidateFileError("YAML mapping must have a 'candidates' key")
        data = data["candidates"]
        if data is None:
            return []

    if not isinstance(data, list):
        raise CandidateFileError(
            f"Candidates must be a YAML sequence, got {type(data).__name__}"
        )

    for item in data:
        if isinstance(item, (dict, list)):
            raise CandidateFileError(
                f"Candidates must be scalars, got {type(item).__name__}"
            )

    return [to_text(item) for item in data]


def load_candidates(path: Path) -> list[str]:
    """Load candidates from a file.

    Files ending in ``.yaml`` or ``.yml`` are parsed as YAML; anything
    else is read as UTF-8 text with one candidate per line.

    Args:
        path: Candidate file.

    Returns:
        Candidates in file order.

    Raises:
        CandidateFileError: If the file is missing, too large, unreadable
            or malformed.
    """
    try:
        file_size = path.stat().st_size
        if file_size > MAX_CANDIDATES_SIZE:
            raise CandidateFileError(
                f"Candidate file too large: {path} "
                f"({file_size} bytes, max {MAX_CANDIDATES_SIZE})"
            )
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise CandidateFileError(f"Candidate file is not valid UTF-8: {path}") from e
    except OSError as e:
        raise CandidateFileError(f"Failed to read candidate file: {e}") from e

    if path.suffix.lower() in YAML_SUFFIXES:
        candidates = parse_candidates_yaml(content)
    else:
        candidates = parse_candidates_text(content)

    logger.debug("candidates_loaded", path=str(path), count=len(candidates))
    return candidates
