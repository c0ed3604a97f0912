"""``header-check init`` command."""

from __future__ import annotations

from pathlib import Path

import typer

from header_check.cli.helpers import console, run_or_exit, vault_from_context
from header_check.core.config import (
    HeaderCheckConfig,
    load_config,
    resolve_data_file,
    save_config,
    state_dir,
)
from header_check.core.constants import CONFIG_FILENAME


def init(ctx: typer.Context) -> None:
    """Create .header-check/ with a default config.yaml in the vault."""
    vault_root = vault_from_context(ctx) or Path.cwd()

    def _run() -> tuple[Path, Path]:
        config_path = state_dir(vault_root) / CONFIG_FILENAME
        config = load_config(vault_root) if config_path.exists() else HeaderCheckConfig()
        return save_config(vault_root, config), resolve_data_file(vault_root, config)

    config_path, data_file = run_or_exit(_run)
    console.print(f"[green]Initialized header-check in[/green] {vault_root}")
    console.print(f"  config: {config_path}")
    console.print(f"  state:  {data_file}")


__all__ = ["init"]
