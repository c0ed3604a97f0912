"""Vault-scoped configuration stored in .header-check/config.yaml.

Only the ``storage`` section is read. Unrelated sections are preserved when
the file is written back.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from ruamel.yaml import YAML

from header_check.core.constants import (
    CONFIG_FILENAME,
    DATA_FILE_ENV_VAR,
    DATA_FILENAME,
    STATE_DIR,
    VAULT_ENV_VAR,
)
from header_check.core.errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class HeaderCheckConfig:
    """Storage configuration for a vault.

    Attributes:
        data_file: Location of the persisted record. Relative values are
            resolved against the vault's ``.header-check/`` directory.
    """

    data_file: str = DATA_FILENAME

    def to_dict(self) -> dict[str, object]:
        return {"storage": {"data_file": self.data_file}}

    @classmethod
    def from_dict(cls, data: dict[str, object] | None) -> "HeaderCheckConfig":
        if not isinstance(data, dict):
            return cls()

        storage = data.get("storage")
        if not isinstance(storage, dict):
            return cls()

        data_file = storage.get("data_file")
        if isinstance(data_file, str) and data_file.strip():
            return cls(data_file=data_file.strip())

        if data_file is not None:
            logger.warning("Ignoring invalid storage.data_file value: %r", data_file)
        return cls()


def state_dir(vault_root: Path) -> Path:
    return vault_root / STATE_DIR


def _config_path(vault_root: Path) -> Path:
    return state_dir(vault_root) / CONFIG_FILENAME


def locate_vault_root(start: Path | None = None) -> Path:
    """Resolve the vault root for the current invocation.

    ``HEADER_CHECK_VAULT`` wins when set. Otherwise the nearest ancestor of
    ``start`` (default: the working directory) containing ``.header-check/``
    is used, falling back to ``start`` itself.
    """
    env_value = os.getenv(VAULT_ENV_VAR, "").strip()
    if env_value:
        return Path(env_value).expanduser()

    current = (start or Path.cwd()).resolve()
    for candidate in (current, *current.parents):
        if (candidate / STATE_DIR).is_dir():
            return candidate
    return current


def load_config(vault_root: Path) -> HeaderCheckConfig:
    """Load configuration from .header-check/config.yaml."""
    config_path = _config_path(vault_root)
    if not config_path.exists():
        logger.debug("Config file not found: %s", config_path)
        return HeaderCheckConfig()

    yaml = YAML()
    try:
        with config_path.open("r", encoding="utf-8") as handle:
            payload = yaml.load(handle) or {}
    except Exception as exc:
        raise ConfigError(f"Failed to parse {config_path}: {exc}") from exc

    return HeaderCheckConfig.from_dict(payload if isinstance(payload, dict) else None)


def save_config(vault_root: Path, config: HeaderCheckConfig) -> Path:
    """Persist configuration, preserving sections this tool does not own."""
    config_path = _config_path(vault_root)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    yaml = YAML()
    yaml.preserve_quotes = True

    payload: object = {}
    if config_path.exists():
        with config_path.open("r", encoding="utf-8") as handle:
            payload = yaml.load(handle) or {}
    if not isinstance(payload, dict):
        payload = {}

    payload.update(config.to_dict())

    with config_path.open("w", encoding="utf-8") as handle:
        yaml.dump(payload, handle)

    logger.info("Saved config to %s", config_path)
    return config_path


def resolve_data_file(vault_root: Path, config: HeaderCheckConfig | None = None) -> Path:
    """Return the path of the persisted record for ``vault_root``.

    ``HEADER_CHECK_DATA_FILE`` overrides whatever the config file says.
    """
    env_value = os.getenv(DATA_FILE_ENV_VAR, "").strip()
    if env_value:
        return Path(env_value).expanduser()

    if config is None:
        config = load_config(vault_root)

    data_file = Path(config.data_file).expanduser()
    if data_file.is_absolute():
        return data_file
    return state_dir(vault_root) / data_file


__all__ = [
    "HeaderCheckConfig",
    "load_config",
    "locate_vault_root",
    "resolve_data_file",
    "save_config",
    "state_dir",
]
