"""Tests for the host-facing service operations."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from header_check.completion.store import CompletionStore
from header_check.core.constants import DATA_FILE_ENV_VAR
from header_check.service import HeaderCheckService


@pytest.fixture
def service(store: CompletionStore) -> HeaderCheckService:
    return HeaderCheckService(store)


def test_everything_enabled_by_default(service: HeaderCheckService) -> None:
    assert service.is_path_enabled("Notes/Today.md") is True


def test_update_settings_changes_scope(service: HeaderCheckService, data_file: Path) -> None:
    service.update_settings(["Questions/"], ["Questions/Archive"])

    assert service.is_path_enabled("Questions/Math/Q1.md") is True
    assert service.is_path_enabled("Questions/Archive/Q2.md") is False
    assert service.is_path_enabled("Notes/Today.md") is False

    payload = json.loads(data_file.read_text(encoding="utf-8"))
    assert payload["settings"]["excludeRoots"] == ["Questions/Archive"]


def test_toggle_and_query_heading(service: HeaderCheckService) -> None:
    assert service.is_heading_done("Study/Bio.md", 12) is False
    assert service.toggle_heading("Study/Bio.md", 12) is True
    assert service.is_heading_done("Study/Bio.md", 12) is True
    assert service.toggle_heading("Study/Bio.md", 12) is False


def test_done_state_independent_of_scope(service: HeaderCheckService) -> None:
    service.toggle_heading("Archive/Old.md", 2)
    service.update_settings([], ["Archive/"])

    assert service.is_path_enabled("Archive/Old.md") is False
    assert service.is_heading_done("Archive/Old.md", 2) is True


def test_for_vault_uses_configured_data_file(vault: Path) -> None:
    (vault / ".header-check" / "config.yaml").write_text(
        "storage:\n  data_file: custom.json\n", encoding="utf-8"
    )
    (vault / ".header-check" / "custom.json").write_text(
        json.dumps({"headerDone": {"A.md": {"3": True}}}), encoding="utf-8"
    )

    service = HeaderCheckService.for_vault(vault)
    assert service.is_heading_done("A.md", 3) is True
    assert service.store.storage_path == vault / ".header-check" / "custom.json"


def test_for_vault_env_data_file(vault: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    override = tmp_path / "override.json"
    monkeypatch.setenv(DATA_FILE_ENV_VAR, str(override))

    service = HeaderCheckService.for_vault(vault)
    service.toggle_heading("A.md", 0)

    assert override.exists()
    assert not (vault / ".header-check" / "data.json").exists()
