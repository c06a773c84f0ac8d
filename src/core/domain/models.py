"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación y documentación autocontenida (Field) sin acoplar
  el Core a la consola.
- `LoopReport` se puede serializar/loggear tal cual desde la CLI.

Nota:
- `RawLine` y `ParsedInteger` son simples `str`/`int` efímeros; no merecen
  un modelo propio, solo un alias para documentar intención.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

RawLine = str
ParsedInteger = int


class IntegerKind(str, Enum):
    """Qué textos se aceptan como entero."""

    SIGNED = "signed"
    UNSIGNED = "unsigned"

    def label(self) -> str:
        return "integer" if self is IntegerKind.SIGNED else "non-negative integer"


class LoopOutcome(str, Enum):
    """Señal de control: repetir el prompt o terminar el loop."""

    CONTINUE = "continue"
    TERMINATE = "terminate"


class Comparison(str, Enum):
    """Resultado three-way de comparar un intento con el objetivo."""

    LESS = "less"
    GREATER = "greater"
    EQUAL = "equal"

    @classmethod
    def of(cls, value: int, target: int) -> "Comparison":
        if value < target:
            return cls.LESS
        if value > target:
            return cls.GREATER
        return cls.EQUAL


class LoopReport(BaseModel):
    """Resumen de una ejecución de `ValidatedInputLoop.run()`.

    Por qué existe:
    - Permite a la CLI (y a los tests) inspeccionar lo ocurrido sin volver a
      parsear la salida de texto.
    """

    iterations: int = Field(
        default=0,
        ge=0,
        description="Líneas leídas de la fuente (válidas o no).",
    )
    invalid_inputs: int = Field(
        default=0,
        ge=0,
        description="Líneas que no se pudieron parsear como entero.",
    )
    accepted: list[int] = Field(
        default_factory=list,
        description="Valores parseados correctamente, en orden de llegada.",
    )
    outcome: LoopOutcome = Field(
        default=LoopOutcome.CONTINUE,
        description="Última señal devuelta por el loop.",
    )
