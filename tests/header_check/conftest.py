"""Shared fixtures for header-check tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from header_check.completion.store import CompletionStore
from header_check.core.constants import DATA_FILE_ENV_VAR, VAULT_ENV_VAR


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(VAULT_ENV_VAR, raising=False)
    monkeypatch.delenv(DATA_FILE_ENV_VAR, raising=False)


@pytest.fixture
def vault(tmp_path: Path) -> Path:
    root = tmp_path / "vault"
    (root / ".header-check").mkdir(parents=True)
    return root


@pytest.fixture
def data_file(vault: Path) -> Path:
    return vault / ".header-check" / "data.json"


@pytest.fixture
def store(data_file: Path) -> CompletionStore:
    return CompletionStore.open(data_file)


@pytest.fixture
def write_state(data_file: Path):
    def _write(payload: Any) -> Path:
        data_file.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(payload, str):
            data_file.write_text(payload, encoding="utf-8")
        else:
            data_file.write_text(json.dumps(payload), encoding="utf-8")
        return data_file

    return _write
