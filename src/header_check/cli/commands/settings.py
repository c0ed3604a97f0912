"""Settings commands for include/exclude roots."""

from __future__ import annotations

import typer
from rich.markup import escape
from rich.table import Table

from header_check.cli.helpers import console, open_service, print_json, run_or_exit
from header_check.completion.models import Settings, parse_roots

app = typer.Typer(help="Show or change where heading tracking is active")


def _split_option_values(values: list[str]) -> list[str]:
    roots: list[str] = []
    for value in values:
        roots.extend(parse_roots(value))
    return roots


def _render(settings: Settings) -> None:
    table = Table(title="Heading Tracking Scope", show_lines=True)
    table.add_column("Rule", style="cyan")
    table.add_column("Roots")

    include = "\n".join(escape(root) for root in settings.include_roots) or "[dim](everywhere)[/dim]"
    exclude = "\n".join(escape(root) for root in settings.exclude_roots) or "[dim](none)[/dim]"
    table.add_row("Include", include)
    table.add_row("Exclude", exclude)
    console.print(table)


@app.command("show")
def show_command(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Emit JSON result"),
) -> None:
    """Show the configured include and exclude roots."""
    settings = run_or_exit(lambda: open_service(ctx)).settings

    if json_output:
        print_json(settings.to_dict())
        return

    _render(settings)


@app.command("set")
def set_command(
    ctx: typer.Context,
    include: list[str] = typer.Option(
        [],
        "--include",
        "-i",
        help="Folder or file to enable tracking in (repeatable, or one root per line)",
    ),
    exclude: list[str] = typer.Option(
        [],
        "--exclude",
        "-x",
        help="Folder or file where tracking is never enabled (repeatable, or one root per line)",
    ),
    clear_include: bool = typer.Option(False, "--clear-include", help="Enable tracking everywhere"),
    clear_exclude: bool = typer.Option(False, "--clear-exclude", help="Remove all exclude roots"),
    json_output: bool = typer.Option(False, "--json", help="Emit JSON result"),
) -> None:
    """Replace include and/or exclude roots.

    Lists that are neither given nor cleared keep their current value.
    """
    if clear_include and include:
        raise typer.BadParameter("--include cannot be combined with --clear-include")
    if clear_exclude and exclude:
        raise typer.BadParameter("--exclude cannot be combined with --clear-exclude")

    def _run() -> Settings:
        service = open_service(ctx)
        current = service.settings

        include_roots = current.include_roots
        if clear_include:
            include_roots = []
        elif include:
            include_roots = _split_option_values(include)

        exclude_roots = current.exclude_roots
        if clear_exclude:
            exclude_roots = []
        elif exclude:
            exclude_roots = _split_option_values(exclude)

        service.update_settings(include_roots, exclude_roots)
        return service.settings

    settings = run_or_exit(_run)

    if json_output:
        print_json(settings.to_dict())
        return

    console.print("[green]Settings saved[/green]")
    _render(settings)


__all__ = ["app"]
