"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.config import AppSettings


def print_banner(console: Console, subtitle: str = "Fibonacci • Below • Guess") -> None:
    """Imprime el banner de bienvenida.

    Por qué aquí:
    - Evita dependencias circulares (main <-> doctor).
    - La CLI solo lo muestra en sesiones interactivas, nunca con stdin redirigido.
    """

    title = Text("NUMDRILLS", style="bold cyan")
    body = Align.center(Text.assemble(title, "\n", Text(subtitle, style="dim")), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_settings_table(settings: AppSettings) -> Table:
    """Tabla con la configuración efectiva (env + .env + defaults)."""

    table = Table(title="Effective settings")
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_column("Description", style="dim")

    for name, field in AppSettings.model_fields.items():
        value = getattr(settings, name)
        table.add_row(name, "-" if value is None else str(value), field.description or "")
    return table
