"""``header-check enabled`` command."""

from __future__ import annotations

import typer
from rich.markup import escape

from header_check.cli.helpers import console, open_service, print_json, run_or_exit


def enabled(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Document path relative to the vault"),
    json_output: bool = typer.Option(False, "--json", help="Emit JSON result"),
) -> None:
    """Report whether heading tracking applies to a path.

    Exits with status 1 when the path is outside the configured roots.
    """
    service = run_or_exit(lambda: open_service(ctx))
    is_enabled = service.is_path_enabled(path)

    if json_output:
        print_json({"path": path, "enabled": is_enabled})
    elif is_enabled:
        console.print(f"[green]enabled[/green] {escape(path)}")
    else:
        console.print(f"[yellow]disabled[/yellow] {escape(path)}")

    if not is_enabled:
        raise typer.Exit(1)


__all__ = ["enabled"]
