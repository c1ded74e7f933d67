"""Text normalization at the engine boundary.

Every value handed to the matching engine passes through ``to_text`` first,
so the algorithms only ever see ``str``.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Any

__all__ = [
    "fold_text",
    "to_text",
]

# Combining diacritical marks left behind by NFD decomposition
_COMBINING_MARKS = re.compile("[\u0300-\u036f]")


def to_text(value: Any) -> str:
    """Coerce any value to text.

    Args:
        value: Value to coerce. ``None`` becomes the empty string, bytes are
            decoded as UTF-8 and everything else goes through ``str()``.

    Returns:
        The value as a ``str``.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def fold_text(value: Any) -> str:
    """Fold text for loose comparison.

    Strips accents, lower-cases and trims surrounding whitespace, so that
    ``"  Vegéta "`` and ``"vegeta"`` compare equal.

    Args:
        value: Value to fold (coerced with ``to_text`` first).

    Returns:
        Folded text.
    """
    decomposed = unicodedata.normalize("NFD", to_text(value))
    return _COMBINING_MARKS.sub("", decomposed).lower().strip()
