"""Persisted data types for heading completion state.

The on-disk record has this shape::

    {
        "headerDone": {"Study/Bio.md": {"12": true}},
        "settings": {"includeRoots": ["Questions/"], "excludeRoots": []}
    }

Any absent field takes its default. Entries that cannot be interpreted are
dropped while reading rather than rejecting the whole record.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)


def clean_roots(roots: Iterable[Any] | None) -> list[str]:
    """Trim root strings and drop blanks and non-strings, keeping order."""
    cleaned: list[str] = []
    for root in roots or ():
        if not isinstance(root, str):
            logger.debug("Skipping non-string root: %r", root)
            continue
        stripped = root.strip()
        if stripped:
            cleaned.append(stripped)
    return cleaned


def parse_roots(text: str) -> list[str]:
    """Split multi-line settings text into roots, one per line."""
    return clean_roots(text.splitlines())


@dataclass
class Settings:
    """Include/exclude root lists deciding where tracking is active."""

    include_roots: list[str] = field(default_factory=list)
    exclude_roots: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "includeRoots": list(self.include_roots),
            "excludeRoots": list(self.exclude_roots),
        }

    @classmethod
    def from_dict(cls, data: Any) -> Settings:
        if not isinstance(data, dict):
            return cls()

        def _roots(key: str) -> list[str]:
            value = data.get(key)
            if value is None:
                return []
            if not isinstance(value, list):
                logger.warning("Ignoring settings.%s: expected a list, got %s", key, type(value).__name__)
                return []
            return clean_roots(value)

        return cls(
            include_roots=_roots("includeRoots"),
            exclude_roots=_roots("excludeRoots"),
        )


def _parse_line_key(key: Any) -> int | None:
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        line = key
    elif isinstance(key, str):
        try:
            line = int(key.strip())
        except ValueError:
            return None
    else:
        return None
    return line if line >= 0 else None


@dataclass
class CompletionRecord:
    """Sparse mapping of document path to the set of done heading lines.

    A path only has an entry while at least one of its headings is done.
    """

    done: dict[str, set[int]] = field(default_factory=dict)

    def contains(self, path: str, line: int) -> bool:
        lines = self.done.get(path)
        return bool(lines) and line in lines

    def add(self, path: str, line: int) -> None:
        self.done.setdefault(path, set()).add(line)

    def discard(self, path: str, line: int) -> None:
        lines = self.done.get(path)
        if lines is None:
            return
        lines.discard(line)
        if not lines:
            del self.done[path]

    def to_dict(self) -> dict[str, dict[str, bool]]:
        return {
            path: {str(line): True for line in sorted(lines)}
            for path, lines in self.done.items()
            if lines
        }

    @classmethod
    def from_dict(cls, data: Any) -> CompletionRecord:
        if not isinstance(data, dict):
            return cls()

        done: dict[str, set[int]] = {}
        for path, file_map in data.items():
            if not isinstance(path, str) or not isinstance(file_map, dict):
                logger.debug("Skipping malformed headerDone entry for %r", path)
                continue
            lines: set[int] = set()
            for key, value in file_map.items():
                line = _parse_line_key(key)
                if line is None:
                    logger.debug("Skipping invalid line key %r in %s", key, path)
                    continue
                if value:
                    lines.add(line)
            if lines:
                done[path] = lines
        return cls(done=done)


@dataclass
class PluginData:
    """The single persisted record: completion state plus settings."""

    header_done: CompletionRecord = field(default_factory=CompletionRecord)
    settings: Settings = field(default_factory=Settings)

    def to_dict(self) -> dict[str, Any]:
        return {
            "headerDone": self.header_done.to_dict(),
            "settings": self.settings.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Any) -> PluginData:
        if not isinstance(data, dict):
            return cls()
        return cls(
            header_done=CompletionRecord.from_dict(data.get("headerDone")),
            settings=Settings.from_dict(data.get("settings")),
        )
