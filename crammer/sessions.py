"""Interactive sub-modes: set creation, studying and editing.

Each mode is a small state machine driven by ``run_session``: ``open`` once,
then ``prompt``/``feed`` per input line, then ``close`` when the sentinel
(or end of input) arrives. Feeding never sees the sentinel itself.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np

from .console import Console, Tone
from .errors import CommandNotFound, CrammerError, EmptySet, EntrySyntaxError, PersistenceError, TermNotFound
from .store import Store
from .types import Notecard, Studyset
from .utils import tokenize


ENTRY_TEMPLATE = "<term> - <definition>"
ADD_TEMPLATE = "add <term> - <definition>"
REMOVE_TEMPLATE = "remove <term>"


def is_sentinel(line: str, sentinel: str = "done") -> bool:
    return line.strip().lower() == sentinel.lower()


def parse_entry(text: str, separator: str = "-", template: str = ENTRY_TEMPLATE) -> tuple[str, str]:
    """Split ``term - definition`` at the first separator; both halves stripped."""
    term, sep, definition = text.partition(separator)
    if not sep:
        raise EntrySyntaxError(template)
    return term.strip(), definition.strip()


class DrawPool:
    """Cards not yet shown in the current cycle of a study session.

    Each draw picks uniformly among the remaining cards and removes the pick.
    When a draw finds the pool empty it first refills it from the studyset.
    """

    def __init__(self, studyset: Studyset, rng: np.random.Generator):
        self.studyset = studyset
        self.rng = rng
        self.cards: list[Notecard] = studyset.clone_terms()
        self.refills = 0

    def __len__(self) -> int:
        return len(self.cards)

    def draw(self) -> Notecard:
        if not self.cards:
            self.cards = self.studyset.clone_terms()
            self.refills += 1
            if not self.cards:
                raise EmptySet(self.studyset.name)
        idx = int(self.rng.integers(len(self.cards)))
        return self.cards.pop(idx)


class Session(ABC):
    def __init__(self, console: Console):
        self.console = console

    def open(self) -> None:
        pass

    def prompt(self) -> None:
        pass

    @abstractmethod
    def feed(self, line: str) -> None:
        ...

    def close(self) -> None:
        pass


def run_session(session: Session, console: Console, sentinel: str = "done") -> None:
    """Drive ``session`` until the sentinel line or end of input.

    Errors raised while feeding a line are reported and the mode continues.
    """
    session.open()
    while True:
        session.prompt()
        line = console.read_line()
        if line is None or is_sentinel(line, sentinel):
            break
        try:
            session.feed(line)
        except CrammerError as e:
            console.write_line(str(e), Tone.ERROR)
    session.close()


class CreationSession(Session):
    """``new <name>``: collect ``term - definition`` lines into a fresh set."""

    def __init__(self, console: Console, store: Store, name: str, *, separator: str = "-", sentinel: str = "done"):
        super().__init__(console)
        self.store = store
        self.studyset = Studyset(name)
        self.separator = separator
        self.sentinel = sentinel

    def open(self) -> None:
        self.console.write_line(f"{self.studyset.name} studyset created. Now it needs some contents.", Tone.NOTICE)
        self.console.write_line(
            f'Add notecards by entering "{ENTRY_TEMPLATE}". Enter "{self.sentinel}" when finished.',
            Tone.HINT,
        )
        self.console.write_line()

    def feed(self, line: str) -> None:
        term, definition = parse_entry(line, self.separator)
        self.studyset.add_term(term, definition)
        self.console.write_line(f"Added {term}.", Tone.NOTICE)

    def close(self) -> None:
        name = self.studyset.name
        self.store.add_studyset(self.studyset)
        try:
            self.store.save()
        except PersistenceError as e:
            # A set whose own file cannot be written is not kept.
            if any(n == name for n, _ in e.failures):
                self.store.remove_studyset(name)
            raise
        self.console.write_line()
        self.console.write_line(f"{self.studyset.length()} notecards added to {self.studyset.name}.", Tone.NOTICE)
        self.console.write_line()


@dataclass
class StudyStats:
    shown: int = 0
    answered: int = 0
    exact: int = 0


class StudySession(Session):
    """``study <studyset>``: show random terms, reveal definitions."""

    def __init__(self, console: Console, studyset: Studyset, rng: np.random.Generator, *, sentinel: str = "done"):
        super().__init__(console)
        if studyset.length() == 0:
            raise EmptySet(studyset.name)
        self.studyset = studyset
        self.pool = DrawPool(studyset, rng)
        self.sentinel = sentinel
        self.current: Notecard | None = None
        self.stats = StudyStats()

    def open(self) -> None:
        self.console.clear()
        self.console.write_line(f"Opened {self.studyset.name} for studying.", Tone.NOTICE)
        self.console.write_line(f'Enter "{self.sentinel}" when finished.', Tone.HINT)
        self.console.write_line()

    def prompt(self) -> None:
        self.current = self.pool.draw()
        self.stats.shown += 1
        self.console.write(self.current.term + " ", Tone.NOTICE)

    def feed(self, line: str) -> None:
        card = self.current
        if card is None:
            return
        exact = line == card.definition
        self.stats.answered += 1
        if exact:
            self.stats.exact += 1
        self.console.write("  > ", Tone.EMPHASIS)
        self.console.write_line(card.definition, Tone.EMPHASIS if exact else Tone.PLAIN)

    def close(self) -> None:
        self.console.write_line()
        self.console.write_line(f"shown={self.stats.shown} answered={self.stats.answered} exact={self.stats.exact}", Tone.HINT)
        self.console.write_line()


class EditSession(Session):
    """``edit <studyset>``: ``add <term> - <definition>`` / ``remove <term>``."""

    def __init__(self, console: Console, store: Store, studyset: Studyset, *, separator: str = "-", sentinel: str = "done"):
        super().__init__(console)
        self.store = store
        self.studyset = studyset
        self.separator = separator
        self.sentinel = sentinel

    def open(self) -> None:
        self.console.write_line(f"Opened {self.studyset.name} for editing.", Tone.NOTICE)
        self.console.write_line(
            f'Enter "{ADD_TEMPLATE}" to add a notecard, or "{REMOVE_TEMPLATE}" to delete one. '
            f'Return with "{self.sentinel}".',
            Tone.HINT,
        )
        self.console.write_line()

    def feed(self, line: str) -> None:
        tokens = tokenize(line)
        if not tokens:
            return

        action, rest = tokens[0], " ".join(tokens[1:])
        if action == "add":
            self._add(rest)
        elif action == "remove":
            self._remove(rest)
        else:
            raise CommandNotFound("Command not found.")

    def _add(self, rest: str) -> None:
        if not rest:
            raise EntrySyntaxError(ADD_TEMPLATE)
        term, definition = parse_entry(rest, self.separator, ADD_TEMPLATE)
        self.studyset.add_term(term, definition)
        self.console.write_line(f"Added {term}.", Tone.NOTICE)

    def _remove(self, term: str) -> None:
        if not term:
            raise EntrySyntaxError(REMOVE_TEMPLATE)
        if not self.studyset.has_term(term):
            raise TermNotFound(term)
        self.studyset.remove_term(term)
        self.console.write_line(f"Removed {term}.", Tone.NOTICE)

    def close(self) -> None:
        self.store.save()
        self.console.write_line()
        self.console.write_line("Changes saved.", Tone.NOTICE)
        self.console.write_line()
