"""Tests for the concrete stdin / Rich / random adapters."""

import io

import pytest
from rich.console import Console

from adapters.console_io import ConsoleSink, SeededRandomSource, StdinLineSource, build_random_source
from core.config import AppSettings
from core.domain.errors import EndOfInput, InvalidInput
from core.interfaces.io import LineSource, OutputSink, RandomSource
from core.services.input_loop import parse_integer


def test_stdin_source_reads_until_eof():
    source = StdinLineSource(io.StringIO("5\n\nlast"))
    assert source.read_line() == "5\n"
    assert source.read_line() == "\n"
    assert source.read_line() == "last"
    with pytest.raises(EndOfInput):
        source.read_line()


def test_console_sink_prints_plain_text():
    buffer = io.StringIO()
    sink = ConsoleSink(Console(file=buffer, highlight=False, width=80))
    sink.emit("[red]1[/red]")
    sink.diagnostic("Too big")
    assert buffer.getvalue().splitlines() == ["[red]1[/red]", "Too big"]


def test_seeded_source_is_reproducible():
    a = SeededRandomSource(99)
    b = SeededRandomSource(99)
    assert [a.randint(1, 100) for _ in range(10)] == [b.randint(1, 100) for _ in range(10)]


def test_build_random_source_uses_settings_seed():
    assert build_random_source(AppSettings(seed=5)).seed == 5


def test_adapters_satisfy_protocols():
    assert isinstance(StdinLineSource(), LineSource)
    assert isinstance(ConsoleSink(), OutputSink)
    assert isinstance(SeededRandomSource(), RandomSource)


def test_stdin_source_replaces_undecodable_bytes():
    stream = io.TextIOWrapper(io.BytesIO(b"\xff1\n7\n"), encoding="utf-8")
    source = StdinLineSource(stream)
    line = source.read_line()
    assert line == "\ufffd1\n"
    with pytest.raises(InvalidInput):
        parse_integer(line)
    assert source.read_line() == "7\n"


def test_console_sink_does_not_wrap_long_lines():
    buffer = io.StringIO()
    sink = ConsoleSink(Console(file=buffer, highlight=False, width=40))
    term = "9" * 150
    sink.emit(term)
    assert buffer.getvalue().splitlines() == [term]
