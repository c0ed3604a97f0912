"""CLI command modules for header-check."""

from __future__ import annotations

import typer

from . import headings, init_cmd, scope
from . import settings as settings_module


def register_commands(app: typer.Typer) -> None:
    """Attach all header-check commands to the root Typer app."""
    app.command()(init_cmd.init)
    app.command()(scope.enabled)
    app.command()(headings.done)
    app.command()(headings.toggle)
    app.command(name="list")(headings.list_done)
    app.add_typer(settings_module.app, name="settings")


__all__ = ["register_commands"]
