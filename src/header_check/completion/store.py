"""JSON-backed store for heading completion state.

The whole record (done headings plus settings) is rewritten after every
mutation using an atomic write (temp file + rename). Memory is authoritative:
if a save fails the in-memory state is kept and the error is raised to the
caller, who may retry :meth:`CompletionStore.save`.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from collections.abc import Sequence
from pathlib import Path

from header_check.completion.models import PluginData, Settings, clean_roots
from header_check.core.errors import StoreError

logger = logging.getLogger(__name__)


def _validate_line(line: int) -> int:
    if isinstance(line, bool) or not isinstance(line, int):
        raise ValueError(f"Heading line must be an integer, got {line!r}")
    if line < 0:
        raise ValueError(f"Heading line must be non-negative, got {line}")
    return line


class CompletionStore:
    """Durable (path, line) -> done mapping with toggle semantics.

    Access is serialized with a re-entrant lock because :meth:`toggle` is a
    read-modify-write-persist sequence.
    """

    def __init__(self, storage_path: Path) -> None:
        self.storage_path = storage_path
        self._data = PluginData()
        self._lock = threading.RLock()

    @classmethod
    def open(cls, storage_path: Path) -> CompletionStore:
        """Create a store and load its state from ``storage_path``."""
        store = cls(storage_path)
        store.load()
        return store

    @property
    def settings(self) -> Settings:
        with self._lock:
            return Settings(
                include_roots=list(self._data.settings.include_roots),
                exclude_roots=list(self._data.settings.exclude_roots),
            )

    def load(self) -> None:
        """Populate in-memory state from disk.

        A missing, unreadable or malformed file yields empty defaults.
        """
        with self._lock:
            self._data = self._read()

    def _read(self) -> PluginData:
        path = self.storage_path
        if not path.exists():
            logger.debug("No completion state at %s; starting empty", path)
            return PluginData()

        try:
            with path.open("r", encoding="utf-8") as fh:
                payload = json.load(fh)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.warning("Could not read completion state from %s (%s); starting empty", path, exc)
            return PluginData()

        if not isinstance(payload, dict):
            logger.warning("Completion state in %s is not an object; starting empty", path)
            return PluginData()

        return PluginData.from_dict(payload)

    def save(self) -> None:
        """Write the full record to disk, replacing previous content."""
        with self._lock:
            payload = self._data.to_dict()
            path = self.storage_path
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
                fd, tmp_path = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
            except OSError as exc:
                raise StoreError(f"Failed to save completion state to {path}: {exc}") from exc

            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    json.dump(payload, fh, indent=2, sort_keys=True)
                    fh.write("\n")
                os.replace(tmp_path, path)
            except OSError as exc:
                try:
                    os.unlink(tmp_path)
                except OSError:
                    pass
                raise StoreError(f"Failed to save completion state to {path}: {exc}") from exc

            logger.info("Saved completion state to %s", path)

    def is_done(self, path: str, line: int) -> bool:
        """Return True when the heading at ``line`` of ``path`` is marked done."""
        if isinstance(line, bool) or not isinstance(line, int) or line < 0:
            return False
        with self._lock:
            return self._data.header_done.contains(path, line)

    def toggle(self, path: str, line: int) -> bool:
        """Flip the done flag for ``(path, line)``, persist, and return the new state.

        Raises:
            ValueError: ``line`` is not a non-negative integer. Nothing changes.
            StoreError: the save failed. The flag has already been flipped in
                memory; retry :meth:`save`, not :meth:`toggle`.
        """
        _validate_line(line)
        with self._lock:
            record = self._data.header_done
            new_state = not record.contains(path, line)
            if new_state:
                record.add(path, line)
            else:
                record.discard(path, line)
            logger.debug("Toggled %s:%d -> %s", path, line, "done" if new_state else "not done")
            self.save()
            return new_state

    def update_settings(self, include_roots: Sequence[str], exclude_roots: Sequence[str]) -> Settings:
        """Replace both root lists and persist immediately."""
        settings = Settings(
            include_roots=clean_roots(include_roots),
            exclude_roots=clean_roots(exclude_roots),
        )
        with self._lock:
            self._data.settings = settings
            logger.info(
                "Updated settings: %d include root(s), %d exclude root(s)",
                len(settings.include_roots),
                len(settings.exclude_roots),
            )
            self.save()
        return self.settings

    def done_lines(self, path: str) -> list[int]:
        with self._lock:
            return sorted(self._data.header_done.done.get(path, ()))

    def paths(self) -> list[str]:
        """Return paths that have at least one done heading."""
        with self._lock:
            return sorted(path for path, lines in self._data.header_done.done.items() if lines)


__all__ = ["CompletionStore"]
