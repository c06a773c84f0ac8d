"""Adaptadores concretos de E/S.

Por qué un módulo aparte:
- El Core solo conoce los Protocols de `core.interfaces.io`.
- Centraliza stdin, Rich y `random` para que la CLI los construya en un sitio.
"""

from __future__ import annotations

import random
import sys
from typing import TextIO

from rich.console import Console

from core.config import AppSettings
from core.domain.errors import EndOfInput


class StdinLineSource:
    """Lee líneas de un stream de texto (stdin por defecto)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def read_line(self) -> str:
        stream = self._stream if self._stream is not None else sys.stdin
        # Undecodable bytes become U+FFFD, so they fail parsing like any other text.
        if getattr(stream, "errors", "replace") != "replace" and hasattr(stream, "reconfigure"):
            stream.reconfigure(errors="replace")
        line = stream.readline()
        # readline() returns "" only at EOF; an empty line is still "\n".
        if line == "":
            raise EndOfInput()
        return line


class ConsoleSink:
    """Escribe en una `rich.console.Console`.

    Los resultados salen sin markup ni cortes de línea (`soft_wrap`) para que
    la salida sea estable al redirigirla; los diagnósticos van en amarillo.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(highlight=False)

    def emit(self, line: str) -> None:
        self._console.print(line, markup=False, soft_wrap=True)

    def diagnostic(self, line: str) -> None:
        self._console.print(line, style="yellow", markup=False, soft_wrap=True)


class SeededRandomSource:
    """`random.Random` con semilla opcional; misma semilla, misma secuencia."""

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def randint(self, low: int, high: int) -> int:
        return self._rng.randint(low, high)


def build_random_source(settings: AppSettings | None = None) -> SeededRandomSource:
    """Crea la fuente de azar a partir de la configuración."""

    settings = settings or AppSettings()
    return SeededRandomSource(settings.seed)
