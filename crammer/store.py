from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, Protocol

from .errors import PersistenceError
from .journal import Journal
from .setfile import SetFileContents, read_set_file, write_set_file
from .types import Notecard, Studyset
from .utils import ensure_dir, ensure_set_path


class StudysetBackend(Protocol):
    def names(self) -> list[str]: ...

    def read(self, name: str) -> SetFileContents: ...

    def write(self, name: str, cards: Iterable[Notecard]) -> None: ...


@dataclass
class DirectoryBackend:
    """One ``<name><extension>`` file per studyset inside ``data_dir``."""
    data_dir: Path
    extension: str = ".set"
    delimiter: str = "="

    def path_for(self, name: str) -> Path:
        return ensure_set_path(self.data_dir, name, self.extension)

    def names(self) -> list[str]:
        if not self.data_dir.is_dir():
            return []
        return sorted(
            p.name[: len(p.name) - len(self.extension)]
            for p in self.data_dir.glob("*" + self.extension)
            if p.is_file()
        )

    def read(self, name: str) -> SetFileContents:
        try:
            return read_set_file(self.path_for(name), self.delimiter)
        except (OSError, UnicodeDecodeError, ValueError) as e:
            raise PersistenceError(name, str(e)) from e

    def write(self, name: str, cards: Iterable[Notecard]) -> None:
        try:
            ensure_dir(self.data_dir)
            write_set_file(self.path_for(name), cards, self.delimiter)
        except (OSError, ValueError) as e:
            raise PersistenceError(name, str(e)) from e


@dataclass
class LoadReport:
    loaded: list[str] = field(default_factory=list)
    malformed: dict[str, list[int]] = field(default_factory=dict)
    failed: list[PersistenceError] = field(default_factory=list)


class Store:
    """In-memory registry of every studyset, keyed by name.

    The store does not check name uniqueness on add; callers do.
    """

    def __init__(self, backend: StudysetBackend, journal: Journal | None = None):
        self.backend = backend
        self.journal = journal or Journal(None)
        self.studysets: dict[str, Studyset] = {}

    def add_studyset(self, studyset: Studyset) -> None:
        self.studysets[studyset.name] = studyset

    def get_studyset(self, name: str) -> Studyset | None:
        return self.studysets.get(name)

    def remove_studyset(self, name: str) -> None:
        self.studysets.pop(name, None)

    def has_studyset(self, name: str) -> bool:
        return name in self.studysets

    def names(self) -> list[str]:
        return list(self.studysets)

    def __len__(self) -> int:
        return len(self.studysets)

    def __iter__(self) -> Iterator[Studyset]:
        return iter(self.studysets.values())

    def load(self) -> LoadReport:
        """Register every persisted studyset.

        Lines without a delimiter are skipped and journaled; the rest of the
        file still loads. Unreadable files are journaled and left out.
        """
        report = LoadReport()
        for name in self.backend.names():
            try:
                contents = self.backend.read(name)
            except PersistenceError as e:
                self.journal.record("load", name, e.reason)
                report.failed.append(e)
                continue

            studyset = Studyset(name)
            for card in contents.cards:
                studyset.add_term(card.term, card.definition)
            self.add_studyset(studyset)
            report.loaded.append(name)

            if contents.malformed_lines:
                report.malformed[name] = list(contents.malformed_lines)
                for lineno in contents.malformed_lines:
                    self.journal.record("load", name, f"skipped malformed line {lineno}: no delimiter")
        return report

    def save(self) -> None:
        """Rewrite every studyset's file.

        A failing set does not stop the others from being written; once all
        have been tried, one PersistenceError lists every failure.
        """
        errors: list[PersistenceError] = []
        for studyset in self.studysets.values():
            try:
                self.backend.write(studyset.name, studyset.terms())
            except PersistenceError as e:
                self.journal.record("save", studyset.name, e.reason)
                errors.append(e)
        if errors:
            raise PersistenceError.combine(errors)
