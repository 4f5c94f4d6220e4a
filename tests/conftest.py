"""Shared fixtures: a scripted console and an in-memory studyset backend."""
from __future__ import annotations

import shutil
import tempfile
from pathlib import Path
from typing import Iterable

import numpy as np
import pytest

from crammer.config import CrammerConfig
from crammer.console import Tone
from crammer.errors import PersistenceError
from crammer.setfile import SetFileContents, format_line, parse_lines
from crammer.store import Store
from crammer.types import Notecard


class ScriptedConsole:
    """Feeds canned input lines and records every (text, tone) written."""

    def __init__(self, lines: Iterable[str] = ()):
        self.lines = list(lines)
        self.chunks: list[tuple[str, Tone]] = []
        self.prompts: list[str] = []
        self.cleared = 0

    def feed(self, *lines: str) -> None:
        self.lines.extend(lines)

    def read_line(self, prompt: str = "") -> str | None:
        self.prompts.append(prompt)
        if not self.lines:
            return None
        return self.lines.pop(0)

    def write(self, text: str, tone: Tone = Tone.PLAIN) -> None:
        self.chunks.append((text, tone))

    def write_line(self, text: str = "", tone: Tone = Tone.PLAIN) -> None:
        self.write(text + "\n", tone)

    def clear(self) -> None:
        self.cleared += 1

    @property
    def text(self) -> str:
        return "".join(t for t, _ in self.chunks)

    def output_lines(self) -> list[str]:
        return self.text.splitlines()

    def toned(self, tone: Tone) -> list[str]:
        return [t for t, tn in self.chunks if tn == tone]


class MemoryBackend:
    """Keeps studyset "files" as lists of lines."""

    def __init__(self, files: dict[str, list[str]] | None = None):
        self.files: dict[str, list[str]] = dict(files or {})
        self.fail_writes = False
        self.fail_names: set[str] = set()
        self.writes = 0

    def names(self) -> list[str]:
        return sorted(self.files)

    def read(self, name: str) -> SetFileContents:
        return parse_lines(self.files[name])

    def write(self, name: str, cards: Iterable[Notecard]) -> None:
        if self.fail_writes or name in self.fail_names:
            raise PersistenceError(name, "read-only")
        self.files[name] = [format_line(c) for c in cards]
        self.writes += 1


class SequenceRng:
    """Stands in for numpy's Generator.integers with a fixed index script."""

    def __init__(self, indices: Iterable[int]):
        self.indices = list(indices)
        self.calls: list[int] = []

    def integers(self, high: int) -> int:
        self.calls.append(high)
        idx = self.indices.pop(0)
        assert 0 <= idx < high
        return idx


@pytest.fixture
def workspace_dir() -> Path:
    """Create temporary data directory."""
    tmp = tempfile.mkdtemp()
    yield Path(tmp)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def backend() -> MemoryBackend:
    return MemoryBackend()


@pytest.fixture
def store(backend: MemoryBackend) -> Store:
    return Store(backend)


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def config() -> CrammerConfig:
    return CrammerConfig(journal="")
