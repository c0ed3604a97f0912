"""Heading completion state and its persistence.

Public API surface -- all consumers import from this package.
"""

from .models import (
    CompletionRecord,
    PluginData,
    Settings,
    clean_roots,
    parse_roots,
)
from .store import CompletionStore

__all__ = [
    "CompletionRecord",
    "CompletionStore",
    "PluginData",
    "Settings",
    "clean_roots",
    "parse_roots",
]
