"""Shared helpers for header-check CLI commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, TypeVar

import typer
from rich.console import Console
from rich.markup import escape

from header_check.core.errors import HeaderCheckError
from header_check.service import HeaderCheckService

console = Console()

T = TypeVar("T")


def print_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2, sort_keys=True, default=str))


def vault_from_context(ctx: typer.Context) -> Path | None:
    obj = ctx.find_root().obj
    if isinstance(obj, dict):
        return obj.get("vault")
    return None


def open_service(ctx: typer.Context) -> HeaderCheckService:
    return HeaderCheckService.for_vault(vault_from_context(ctx))


def run_or_exit(fn: Callable[[], T]) -> T:
    """Run ``fn``, turning header-check and argument errors into exit code 1."""
    try:
        return fn()
    except (HeaderCheckError, ValueError) as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(1) from exc


__all__ = ["console", "open_service", "print_json", "run_or_exit", "vault_from_context"]
