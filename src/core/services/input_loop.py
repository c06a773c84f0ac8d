"""Read / parse / validate / act loop shared by every exercise.

The loop knows nothing about what a valid number *means*: that decision is a
caller-supplied action returning a `LoopOutcome`. Parse failures are
recoverable and handled here; `EndOfInput` is never caught so it reaches the
CLI boundary untouched.
"""

from __future__ import annotations

import logging
import re
from typing import Callable

from core.domain.errors import InvalidInput
from core.domain.models import IntegerKind, LoopOutcome, LoopReport, RawLine
from core.interfaces.io import LineSource, OutputSink

logger = logging.getLogger(__name__)

Action = Callable[[int], LoopOutcome]

# ASCII digits only; `int()` alone would also take "1_000" or "١٢".
_PATTERNS: dict[IntegerKind, re.Pattern[str]] = {
    IntegerKind.SIGNED: re.compile(r"[+-]?[0-9]+"),
    IntegerKind.UNSIGNED: re.compile(r"\+?[0-9]+"),
}


def parse_integer(raw: RawLine, kind: IntegerKind = IntegerKind.SIGNED) -> int:
    """Trim `raw` (line terminator included) and parse it as `kind`.

    Raises `InvalidInput` for anything that is not a plain decimal integer.
    """

    text = raw.strip()
    if not _PATTERNS[kind].fullmatch(text):
        raise InvalidInput(text, kind)
    return int(text)


def read_integer(
    source: LineSource,
    sink: OutputSink,
    *,
    prompt: str | None = None,
    kind: IntegerKind = IntegerKind.SIGNED,
) -> int:
    """One-shot read with no re-prompt: `InvalidInput` propagates."""

    if prompt:
        sink.emit(prompt)
    return parse_integer(source.read_line(), kind)


class ValidatedInputLoop:
    """Prompt until the action says `TERMINATE`.

    Reglas:
    - Cada iteración emite el prompt, lee una línea y la parsea.
    - Una línea inválida produce exactamente un diagnóstico y `CONTINUE`;
      la acción no se invoca, así que su estado no cambia.
    """

    def __init__(
        self,
        source: LineSource,
        sink: OutputSink,
        action: Action,
        *,
        prompt: str | None = None,
        kind: IntegerKind = IntegerKind.SIGNED,
        invalid_message: str = "Enter a number!",
    ) -> None:
        self._source = source
        self._sink = sink
        self._action = action
        self._prompt = prompt
        self._kind = kind
        self._invalid_message = invalid_message
        self.report = LoopReport()

    def next(self) -> LoopOutcome:
        if self._prompt:
            self._sink.emit(self._prompt)

        raw = self._source.read_line()
        self.report.iterations += 1

        try:
            value = parse_integer(raw, self._kind)
        except InvalidInput as exc:
            logger.debug("Rejected input %r (%s)", exc.text, exc.kind.value)
            self.report.invalid_inputs += 1
            self._sink.diagnostic(self._invalid_message)
            outcome = LoopOutcome.CONTINUE
        else:
            logger.debug("Parsed %d", value)
            self.report.accepted.append(value)
            outcome = self._action(value)

        self.report.outcome = outcome
        return outcome

    def run(self) -> LoopReport:
        while self.next() is not LoopOutcome.TERMINATE:
            pass
        logger.debug(
            "Loop finished after %d iteration(s), %d invalid",
            self.report.iterations,
            self.report.invalid_inputs,
        )
        return self.report
