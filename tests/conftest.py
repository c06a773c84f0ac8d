"""Shared fixtures: in-memory line source, recording sink, fixed random."""

from __future__ import annotations

import os
from collections.abc import Iterable

import pytest

from core.domain.errors import EndOfInput


class ScriptedLineSource:
    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = [line if line.endswith("\n") else line + "\n" for line in lines]
        self.reads = 0

    def read_line(self) -> str:
        if self.reads >= len(self._lines):
            raise EndOfInput()
        line = self._lines[self.reads]
        self.reads += 1
        return line


class RecordingSink:
    def __init__(self) -> None:
        self.transcript: list[tuple[str, str]] = []

    def emit(self, line: str) -> None:
        self.transcript.append(("out", line))

    def diagnostic(self, line: str) -> None:
        self.transcript.append(("diag", line))

    @property
    def lines(self) -> list[str]:
        return [text for _, text in self.transcript]

    @property
    def outputs(self) -> list[str]:
        return [text for kind, text in self.transcript if kind == "out"]

    @property
    def diagnostics(self) -> list[str]:
        return [text for kind, text in self.transcript if kind == "diag"]


class FixedRandomSource:
    def __init__(self, value: int) -> None:
        self.value = value
        self.calls: list[tuple[int, int]] = []

    def randint(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        return self.value


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep NUMDRILLS_* variables and stray .env files out of the tests."""

    for key in list(os.environ):
        if key.upper().startswith("NUMDRILLS_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def source_factory():
    return ScriptedLineSource
