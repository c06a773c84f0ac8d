"""The three exercises built on top of `ValidatedInputLoop`.

Each `run_*` helper wires a line source, an output sink and the settings into
the loop, so the CLI only deals with presentation and exit codes. Side effects
are limited to the sink; the random source is consulted once per game.
"""

from __future__ import annotations

import logging
from typing import Iterator

from core.config import AppSettings
from core.domain.models import Comparison, IntegerKind, LoopOutcome, LoopReport
from core.interfaces.io import LineSource, OutputSink, RandomSource
from core.services.input_loop import ValidatedInputLoop, read_integer

logger = logging.getLogger(__name__)

FIBONACCI_PROMPT = "Enter size of fibonacci series required"
FIBONACCI_HEADER = "The fibonacci series are: "
BELOW_PROMPT = "Enter a number below {threshold}"
BELOW_REJECT = "{value} is greater than {threshold}, enter again!"
GUESS_TITLE = "Guess the number"
GUESS_PROMPT = "Please input your guess"
INVALID_NUMBER = "Enter a number!"
INVALID_GUESS = "Please enter a number!"

_FEEDBACK = {
    Comparison.LESS: "Too small",
    Comparison.GREATER: "Too big",
    Comparison.EQUAL: "Numbers are Equal",
}


def fibonacci(n: int, first: int = 0, second: int = 1) -> Iterator[int]:
    """Yield the first `n` terms starting from `(first, second)`.

    Non-positive `n` yields nothing.
    """

    for _ in range(n):
        yield first
        first, second = second, first + second


class BoundedRangeAction:
    """Accept values up to `threshold`, then count from 1 up to (excluding) it."""

    def __init__(self, sink: OutputSink, threshold: int = 10) -> None:
        self._sink = sink
        self.threshold = threshold

    def __call__(self, value: int) -> LoopOutcome:
        if value > self.threshold:
            self._sink.diagnostic(BELOW_REJECT.format(value=value, threshold=self.threshold))
            return LoopOutcome.CONTINUE
        for i in range(1, value):
            self._sink.emit(str(i))
        return LoopOutcome.TERMINATE


class ComparisonAction:
    """Three-way feedback against a fixed target."""

    def __init__(self, sink: OutputSink, target: int) -> None:
        self._sink = sink
        self.target = target
        self.attempts = 0

    def __call__(self, guess: int) -> LoopOutcome:
        self.attempts += 1
        self._sink.emit(f"You guessed: {guess}")
        result = Comparison.of(guess, self.target)
        self._sink.emit(_FEEDBACK[result])
        if result is Comparison.EQUAL:
            return LoopOutcome.TERMINATE
        return LoopOutcome.CONTINUE


def choose_target(rng: RandomSource, low: int = 1, high: int = 100) -> int:
    """Pick the secret number from the closed interval `[low, high]`."""

    if low > high:
        raise ValueError(f"Empty target range [{low}, {high}]")
    target = rng.randint(low, high)
    if not low <= target <= high:
        raise ValueError(f"Random source returned {target}, outside [{low}, {high}]")
    return target


def run_fibonacci(source: LineSource, sink: OutputSink, settings: AppSettings) -> list[int]:
    """Read the size once and print that many terms.

    A non-numeric size is fatal here (`InvalidInput` propagates) because there
    is no loop to go back to.
    """

    size = read_integer(source, sink, prompt=FIBONACCI_PROMPT)
    logger.debug("Fibonacci size %d", size)
    sink.emit(FIBONACCI_HEADER)
    terms = []
    for term in fibonacci(size, settings.fibonacci_first, settings.fibonacci_second):
        sink.emit(str(term))
        terms.append(term)
    return terms


def run_below(source: LineSource, sink: OutputSink, settings: AppSettings) -> LoopReport:
    threshold = settings.range_threshold
    loop = ValidatedInputLoop(
        source,
        sink,
        BoundedRangeAction(sink, threshold),
        prompt=BELOW_PROMPT.format(threshold=threshold),
        invalid_message=INVALID_NUMBER,
    )
    return loop.run()


def run_guess(
    source: LineSource,
    sink: OutputSink,
    rng: RandomSource,
    settings: AppSettings,
) -> LoopReport:
    sink.emit(GUESS_TITLE)
    target = choose_target(rng, settings.target_min, settings.target_max)
    logger.debug("Secret number chosen in [%d, %d]", settings.target_min, settings.target_max)

    action = ComparisonAction(sink, target)
    loop = ValidatedInputLoop(
        source,
        sink,
        action,
        prompt=GUESS_PROMPT,
        kind=IntegerKind.UNSIGNED,
        invalid_message=INVALID_GUESS,
    )
    report = loop.run()
    logger.info("Guessed %d in %d attempt(s)", target, action.attempts)
    return report
