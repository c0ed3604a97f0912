"""Exception hierarchy for header-check."""

from __future__ import annotations


class HeaderCheckError(RuntimeError):
    """Base class for header-check failures surfaced to callers."""


class StoreError(HeaderCheckError):
    """Raised when the completion state cannot be written to disk."""


class ConfigError(HeaderCheckError):
    """Raised when .header-check/config.yaml cannot be parsed."""


__all__ = ["ConfigError", "HeaderCheckError", "StoreError"]
