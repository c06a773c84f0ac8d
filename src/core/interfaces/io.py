"""Contratos de entrada/salida y de aleatoriedad.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir stdin/Rich/`random` por dobles en memoria en tests.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import RawLine


@runtime_checkable
class LineSource(Protocol):
    """Fuente de líneas de texto (típicamente stdin)."""

    def read_line(self) -> RawLine:
        """Devuelve la siguiente línea, con su terminador.

        Debe lanzar `EndOfInput` cuando no quedan datos.
        """

        ...


@runtime_checkable
class OutputSink(Protocol):
    """Destino de texto legible por humanos."""

    def emit(self, line: str) -> None:
        """Prompts y resultados."""

        ...

    def diagnostic(self, line: str) -> None:
        """Mensajes de entrada inválida o fuera de rango."""

        ...


@runtime_checkable
class RandomSource(Protocol):
    """Generador uniforme de enteros."""

    def randint(self, low: int, high: int) -> int:
        """Entero en el intervalo cerrado `[low, high]`."""

        ...
