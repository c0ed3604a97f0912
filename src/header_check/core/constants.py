"""Shared path and environment constants for header-check vault layout."""

from __future__ import annotations

STATE_DIR = ".header-check"
CONFIG_FILENAME = "config.yaml"
DATA_FILENAME = "data.json"

VAULT_ENV_VAR = "HEADER_CHECK_VAULT"
DATA_FILE_ENV_VAR = "HEADER_CHECK_DATA_FILE"

__all__ = [
    "CONFIG_FILENAME",
    "DATA_FILENAME",
    "DATA_FILE_ENV_VAR",
    "STATE_DIR",
    "VAULT_ENV_VAR",
]
