"""Tests for the read / parse / validate / act loop."""

import pytest

from conftest import ScriptedLineSource
from core.domain.errors import EndOfInput, InvalidInput
from core.domain.models import IntegerKind, LoopOutcome
from core.services.input_loop import ValidatedInputLoop, parse_integer, read_integer


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("5\n", 5),
        ("  42  \r\n", 42),
        ("-7\n", -7),
        ("+3", 3),
        ("0007", 7),
    ],
)
def test_parse_signed(raw, expected):
    assert parse_integer(raw, IntegerKind.SIGNED) == expected


@pytest.mark.parametrize("raw", ["", "\n", "abc", "4.5", "1_000", "1 2", "--1", "٣"])
def test_parse_rejects_non_integers(raw):
    with pytest.raises(InvalidInput):
        parse_integer(raw, IntegerKind.SIGNED)


def test_parse_unsigned_rejects_negative():
    assert parse_integer("+12\n", IntegerKind.UNSIGNED) == 12
    with pytest.raises(InvalidInput) as excinfo:
        parse_integer("-1\n", IntegerKind.UNSIGNED)
    assert excinfo.value.text == "-1"
    assert excinfo.value.kind is IntegerKind.UNSIGNED


def test_invalid_input_is_a_value_error():
    with pytest.raises(ValueError):
        parse_integer("nope")


def test_next_continues_on_invalid_input_without_calling_action(sink):
    calls = []

    def action(value):
        calls.append(value)
        return LoopOutcome.TERMINATE

    loop = ValidatedInputLoop(ScriptedLineSource(["abc"]), sink, action, prompt="Number?")

    assert loop.next() is LoopOutcome.CONTINUE
    assert calls == []
    assert sink.transcript == [("out", "Number?"), ("diag", "Enter a number!")]
    assert loop.report.invalid_inputs == 1
    assert loop.report.accepted == []


def test_run_until_terminate(sink):
    def action(value):
        return LoopOutcome.TERMINATE if value == 3 else LoopOutcome.CONTINUE

    source = ScriptedLineSource(["1", "x", "2", "3", "4"])
    report = ValidatedInputLoop(source, sink, action, invalid_message="bad").run()

    assert report.iterations == 4
    assert report.invalid_inputs == 1
    assert report.accepted == [1, 2, 3]
    assert report.outcome is LoopOutcome.TERMINATE
    assert sink.diagnostics == ["bad"]
    assert source.reads == 4


def test_end_of_input_propagates(sink):
    loop = ValidatedInputLoop(
        ScriptedLineSource(["12"]), sink, lambda value: LoopOutcome.CONTINUE, prompt="?"
    )
    with pytest.raises(EndOfInput):
        loop.run()
    assert loop.report.iterations == 1


def test_read_integer_is_one_shot(sink):
    source = ScriptedLineSource(["oops", "5"])
    with pytest.raises(InvalidInput):
        read_integer(source, sink, prompt="Size?")
    assert source.reads == 1
    assert sink.outputs == ["Size?"]
