"""Errores del dominio.

Solo hay dos tipos de fallo:
- `InvalidInput`: recuperable dentro de un loop (se vuelve a preguntar).
- `EndOfInput`: siempre fatal; se propaga hasta la CLI.
"""

from __future__ import annotations

from core.domain.models import IntegerKind


class NumdrillsError(RuntimeError):
    pass


class InvalidInput(NumdrillsError, ValueError):
    """The text could not be parsed as the expected integer kind."""

    def __init__(self, text: str, kind: IntegerKind) -> None:
        super().__init__(f"Expected {kind.label()}, got {text!r}")
        self.text = text
        self.kind = kind


class EndOfInput(NumdrillsError, EOFError):
    """No further input is available from the line source."""

    def __init__(self, message: str = "No more input available") -> None:
        super().__init__(message)
