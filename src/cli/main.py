"""CLI principal (Typer).

Por qué Typer:
- Comandos sin flags, ayuda autogenerada y `CliRunner` para tests.
- Rich para diagnósticos y logging en stderr; stdout queda solo para la
  salida de los ejercicios.

Cada comando construye sus adaptadores y delega en `core.services.exercises`.
Los errores fatales (`EndOfInput`, tamaño inválido) se convierten aquí en
código de salida 1.
"""

from __future__ import annotations

import logging
import sys

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from adapters.console_io import ConsoleSink, StdinLineSource, build_random_source
from cli import doctor
from cli.ui_components import print_banner
from core.config import AppSettings
from core.domain.errors import EndOfInput, InvalidInput
from core.services.exercises import INVALID_NUMBER, run_below, run_fibonacci, run_guess

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="Interactive number exercises: Fibonacci, bounded input, guessing game.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console(highlight=False)
_err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, level: str = "WARNING") -> None:
    """Logging a stderr vía RichHandler para no ensuciar la salida de los ejercicios."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else level,
        format="%(message)s",
        handlers=[RichHandler(console=_err_console, rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _settings(ctx: typer.Context) -> AppSettings:
    return ctx.obj


def _prepare(settings: AppSettings, subtitle: str) -> None:
    if settings.show_banner and sys.stdin.isatty():
        print_banner(_err_console, subtitle)


def _fatal(message: str) -> typer.Exit:
    _err_console.print(f"[bold red]Error:[/bold red] {message}", highlight=False)
    return typer.Exit(code=1)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging on stderr."),
) -> None:
    """Load settings once and configure logging for every command."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        _err_console.print(f"[bold red]Invalid configuration:[/bold red]\n{escape(str(exc))}", highlight=False)
        raise typer.Exit(code=2) from exc

    setup_logging(verbose, settings.log_level)
    ctx.obj = settings


@app.command()
def fibonacci(ctx: typer.Context) -> None:
    """Print the first N Fibonacci numbers (N read once from stdin)."""

    settings = _settings(ctx)
    _prepare(settings, "Fibonacci")
    try:
        run_fibonacci(StdinLineSource(), ConsoleSink(_console), settings)
    except InvalidInput as exc:
        raise _fatal(escape(f"{INVALID_NUMBER} ({exc})")) from exc
    except EndOfInput as exc:
        raise _fatal(escape(str(exc))) from exc


@app.command()
def below(ctx: typer.Context) -> None:
    """Ask for a number up to the threshold and count up to it."""

    settings = _settings(ctx)
    _prepare(settings, f"Below {settings.range_threshold}")
    try:
        report = run_below(StdinLineSource(), ConsoleSink(_console), settings)
    except EndOfInput as exc:
        raise _fatal(escape(str(exc))) from exc
    logger.debug("below: %s", report.model_dump())


@app.command()
def guess(ctx: typer.Context) -> None:
    """Guess the secret number with too small / too big hints."""

    settings = _settings(ctx)
    _prepare(settings, f"Guess [{settings.target_min}, {settings.target_max}]")
    try:
        report = run_guess(StdinLineSource(), ConsoleSink(_console), build_random_source(settings), settings)
    except EndOfInput as exc:
        raise _fatal(escape(str(exc))) from exc
    logger.debug("guess: %s", report.model_dump())


def run() -> None:
    app()


if __name__ == "__main__":
    run()
