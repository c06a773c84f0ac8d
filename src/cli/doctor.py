"""Doctor command for environment diagnostics."""

from __future__ import annotations

import sys

import typer
from rich.console import Console
from rich.table import Table

from adapters.console_io import SeededRandomSource
from cli.ui_components import build_settings_table
from core.config import AppSettings
from core.services.exercises import choose_target

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_target_range(settings: AppSettings) -> tuple[bool, str]:
    """Draw once from the configured range to make sure it is usable."""

    try:
        target = choose_target(SeededRandomSource(0), settings.target_min, settings.target_max)
    except ValueError as exc:
        return False, str(exc)
    return True, f"[{settings.target_min}, {settings.target_max}] (sample draw: {target})"


def _seeded_target(settings: AppSettings) -> tuple[bool, str]:
    """Report the secret number a fixed seed produces, as `guess` would draw it."""

    if settings.seed is None:
        return False, "No seed set -> a new secret number every run"
    target = choose_target(SeededRandomSource(settings.seed), settings.target_min, settings.target_max)
    return True, f"seed={settings.seed} -> secret number {target}"


@app.command()
def run(ctx: typer.Context) -> None:
    """Run baseline diagnostics and show the effective settings."""

    settings: AppSettings = ctx.obj

    table = Table(title="NUMDRILLS Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    ok_range, detail_range = _check_target_range(settings)
    table.add_row("Target range", "OK" if ok_range else "FAIL", detail_range)

    ok_seed, detail_seed = _seeded_target(settings)
    table.add_row("Reproducible guess", "OK" if ok_seed else "OPTIONAL", detail_seed)

    interactive = sys.stdin.isatty()
    table.add_row("Interactive stdin", "OK" if interactive else "PIPED", "TTY" if interactive else "redirected input")

    _console.print(table)
    _console.print(build_settings_table(settings))

    if not ok_range:
        raise typer.Exit(code=1)
