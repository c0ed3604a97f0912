"""Host-facing operations over one completion store."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from header_check.completion.models import Settings
from header_check.completion.store import CompletionStore
from header_check.core.config import load_config, locate_vault_root, resolve_data_file
from header_check.scope.resolver import is_enabled

logger = logging.getLogger(__name__)


class HeaderCheckService:
    """The four operations a rendering host needs.

    Settings are read from the store on every call and handed to the scope
    resolver explicitly, so the resolver itself stays stateless.
    """

    def __init__(self, store: CompletionStore) -> None:
        self.store = store

    @classmethod
    def for_vault(cls, vault_root: Path | None = None) -> HeaderCheckService:
        """Open the store configured for ``vault_root`` (discovered when omitted)."""
        root = vault_root if vault_root is not None else locate_vault_root()
        data_file = resolve_data_file(root, load_config(root))
        logger.debug("Using completion state at %s", data_file)
        return cls(CompletionStore.open(data_file))

    @property
    def settings(self) -> Settings:
        return self.store.settings

    def is_path_enabled(self, path: str) -> bool:
        settings = self.store.settings
        return is_enabled(path, settings.include_roots, settings.exclude_roots)

    def is_heading_done(self, path: str, line: int) -> bool:
        return self.store.is_done(path, line)

    def toggle_heading(self, path: str, line: int) -> bool:
        return self.store.toggle(path, line)

    def update_settings(self, include_roots: Sequence[str], exclude_roots: Sequence[str]) -> None:
        self.store.update_settings(include_roots, exclude_roots)


__all__ = ["HeaderCheckService"]
