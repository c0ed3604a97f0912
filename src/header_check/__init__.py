"""Heading completion tracking for text document vaults.

Tracks which headings of a document are marked done, persists that state,
and decides per path whether tracking is active from include/exclude roots.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from header_check.cli.commands import register_commands
from header_check.completion import CompletionStore, Settings
from header_check.core.constants import VAULT_ENV_VAR
from header_check.core.errors import ConfigError, HeaderCheckError, StoreError
from header_check.scope import is_enabled, matches_root, normalize_root
from header_check.service import HeaderCheckService

__version__ = "0.1.0"

app = typer.Typer(
    name="header-check",
    help="Mark document headings as done and control where tracking applies",
    add_completion=False,
    no_args_is_help=True,
)


@app.callback()
def callback(
    ctx: typer.Context,
    vault: Optional[Path] = typer.Option(
        None,
        "--vault",
        envvar=VAULT_ENV_VAR,
        help="Vault root (default: nearest directory containing .header-check/)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Heading completion tracking."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = {"vault": vault}


register_commands(app)


def main() -> None:
    app()


__all__ = [
    "CompletionStore",
    "ConfigError",
    "HeaderCheckError",
    "HeaderCheckService",
    "Settings",
    "StoreError",
    "app",
    "is_enabled",
    "main",
    "matches_root",
    "normalize_root",
]

if __name__ == "__main__":
    main()
