"""Path scope resolution for header-check.

Public API surface -- all consumers import from this package.
"""

from .resolver import (
    SEPARATOR,
    is_enabled,
    matches_root,
    normalize_path,
    normalize_root,
)

__all__ = [
    "SEPARATOR",
    "is_enabled",
    "matches_root",
    "normalize_path",
    "normalize_root",
]
