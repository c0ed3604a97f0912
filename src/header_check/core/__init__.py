"""Core utilities and configuration exports."""

from .config import (
    HeaderCheckConfig,
    load_config,
    locate_vault_root,
    resolve_data_file,
    save_config,
    state_dir,
)
from .constants import (
    CONFIG_FILENAME,
    DATA_FILE_ENV_VAR,
    DATA_FILENAME,
    STATE_DIR,
    VAULT_ENV_VAR,
)
from .errors import ConfigError, HeaderCheckError, StoreError

__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DATA_FILE_ENV_VAR",
    "DATA_FILENAME",
    "HeaderCheckConfig",
    "HeaderCheckError",
    "STATE_DIR",
    "StoreError",
    "VAULT_ENV_VAR",
    "load_config",
    "locate_vault_root",
    "resolve_data_file",
    "save_config",
    "state_dir",
]
