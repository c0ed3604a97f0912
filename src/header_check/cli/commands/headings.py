"""Commands that query and toggle heading completion state."""

from __future__ import annotations

from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from header_check.cli.helpers import console, open_service, print_json, run_or_exit


def done(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Document path relative to the vault (e.g. Study/Bio.md)"),
    line: int = typer.Argument(..., help="Zero-based line where the heading starts"),
    json_output: bool = typer.Option(False, "--json", help="Emit JSON result"),
) -> None:
    """Show whether a heading is marked done."""
    service = run_or_exit(lambda: open_service(ctx))
    is_done = service.is_heading_done(path, line)

    if json_output:
        print_json({"path": path, "line": line, "done": is_done})
        return

    state = "[green]done[/green]" if is_done else "[dim]not done[/dim]"
    console.print(f"{escape(path)}:{line} {state}")


def toggle(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Document path relative to the vault"),
    line: int = typer.Argument(..., min=0, help="Zero-based line where the heading starts"),
    force: bool = typer.Option(False, "--force", help="Toggle even when the path is outside the configured roots"),
    json_output: bool = typer.Option(False, "--json", help="Emit JSON result"),
) -> None:
    """Toggle a heading between done and not done."""
    service = run_or_exit(lambda: open_service(ctx))

    if not force and not service.is_path_enabled(path):
        console.print(
            f"[yellow]Heading tracking is disabled for {escape(path)}.[/yellow] "
            "Adjust the include/exclude roots or pass --force."
        )
        raise typer.Exit(1)

    new_state = run_or_exit(lambda: service.toggle_heading(path, line))

    if json_output:
        print_json({"path": path, "line": line, "done": new_state})
        return

    if new_state:
        console.print(f"[green]✓[/green] {escape(path)}:{line} marked done")
    else:
        console.print(f"{escape(path)}:{line} marked not done")


def list_done(
    ctx: typer.Context,
    path: Optional[str] = typer.Argument(None, help="Only list headings in this document"),
    json_output: bool = typer.Option(False, "--json", help="Emit JSON result"),
) -> None:
    """List headings that are marked done."""
    service = run_or_exit(lambda: open_service(ctx))
    store = service.store

    paths = [path] if path is not None else store.paths()
    entries = {p: store.done_lines(p) for p in paths}
    entries = {p: lines for p, lines in entries.items() if lines}

    if json_output:
        print_json({"headings": entries})
        return

    if not entries:
        console.print("[dim]No headings marked done.[/dim]")
        return

    table = Table(title="Done Headings")
    table.add_column("Path", style="cyan")
    table.add_column("Lines", style="bold")
    table.add_column("Tracked", justify="center")

    for p, lines in entries.items():
        tracked = "[green]yes[/green]" if service.is_path_enabled(p) else "[yellow]no[/yellow]"
        table.add_row(escape(p), ", ".join(str(line) for line in lines), tracked)

    console.print(table)


__all__ = ["done", "list_done", "toggle"]
