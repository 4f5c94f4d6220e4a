"""Command directory and interpreter for the interactive shell."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import numpy as np

from .config import CrammerConfig
from .console import Console, Tone
from .errors import CommandNotFound, CrammerError, DuplicateName, EmptySet, EntrySyntaxError, SetNotFound, UsageMismatch
from .sessions import CreationSession, EditSession, StudySession, run_session
from .store import Store
from .types import Studyset
from .utils import tokenize, validate_set_name


@dataclass(frozen=True)
class CommandInfo:
    """Usage template (fixed word count) and one-line help for a command."""
    usage: tuple[str, ...]
    help: str

    @property
    def arity(self) -> int:
        return len(self.usage)


# Insertion order is the order "?" prints in.
COMMAND_DIRECTORY: dict[str, CommandInfo] = {
    "?": CommandInfo(("?",), "view command directory"),
    "exit": CommandInfo(("exit",), "save and exit"),
    "new": CommandInfo(("new", "<name>"), "create a new studyset"),
    "study": CommandInfo(("study", "<studyset>"), "study notecards from a studyset in a random order"),
    "edit": CommandInfo(("edit", "<studyset>"), "add or remove notecards from a studyset"),
    "list": CommandInfo(("list", "<studyset>"), "view all notecards in a studyset"),
    "sets": CommandInfo(("sets",), "view all studysets"),
}


class CommandInterpreter:
    """Reads command lines, validates arity and dispatches to handlers.

    The interpreter owns the store it mutates; it never saves on ``exit``
    (the caller decides whether to flush once the loop ends).
    """

    def __init__(
        self,
        store: Store,
        console: Console,
        config: CrammerConfig | None = None,
        rng: np.random.Generator | None = None,
    ):
        self.store = store
        self.console = console
        self.config = config or CrammerConfig()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.running = True
        self._handlers: dict[str, Callable[[list[str]], None]] = {
            "?": self.cmd_help,
            "exit": self.cmd_exit,
            "new": self.cmd_new,
            "study": self.cmd_study,
            "edit": self.cmd_edit,
            "list": self.cmd_list,
            "sets": self.cmd_sets,
        }

    def run(self) -> None:
        self.console.write_line('Type "?" for help.', Tone.HINT)
        self.console.write_line()
        while self.running:
            line = self.console.read_line("> ")
            if line is None:
                self.running = False
                break
            self.enter(line)

    def enter(self, line: str) -> bool:
        """Process one command line; returns whether the shell keeps running."""
        tokens = tokenize(line)
        if not tokens:
            return self.running
        try:
            self.dispatch(tokens)
        except CrammerError as e:
            self.console.write_line(str(e), Tone.ERROR)
            self.console.write_line()
        return self.running

    def dispatch(self, tokens: list[str]) -> None:
        info = COMMAND_DIRECTORY.get(tokens[0])
        if info is None:
            raise CommandNotFound()
        if len(tokens) != info.arity:
            raise UsageMismatch(list(info.usage))
        self._handlers[tokens[0]](tokens[1:])

    def _require_set(self, name: str) -> Studyset:
        studyset = self.store.get_studyset(name)
        if studyset is None:
            raise SetNotFound(name)
        return studyset

    def _require_cards(self, name: str) -> Studyset:
        studyset = self._require_set(name)
        if studyset.length() == 0:
            raise EmptySet(name)
        return studyset

    # --- handlers -----------------------------------------------------------

    def cmd_help(self, args: list[str]) -> None:
        for info in COMMAND_DIRECTORY.values():
            self.console.write_line(" ".join(info.usage) + " - " + info.help, Tone.HINT)
        self.console.write_line()

    def cmd_exit(self, args: list[str]) -> None:
        self.running = False

    def cmd_new(self, args: list[str]) -> None:
        name = args[0]
        if self.store.has_studyset(name):
            raise DuplicateName(name)
        try:
            validate_set_name(name)
        except ValueError as e:
            raise EntrySyntaxError("new <name> (a plain file name)") from e

        session = CreationSession(
            self.console,
            self.store,
            name,
            separator=self.config.entry_separator,
            sentinel=self.config.sentinel,
        )
        run_session(session, self.console, self.config.sentinel)

    def cmd_study(self, args: list[str]) -> None:
        studyset = self._require_cards(args[0])
        session = StudySession(self.console, studyset, self.rng, sentinel=self.config.sentinel)
        run_session(session, self.console, self.config.sentinel)

    def cmd_edit(self, args: list[str]) -> None:
        studyset = self._require_set(args[0])
        session = EditSession(
            self.console,
            self.store,
            studyset,
            separator=self.config.entry_separator,
            sentinel=self.config.sentinel,
        )
        run_session(session, self.console, self.config.sentinel)

    def cmd_list(self, args: list[str]) -> None:
        studyset = self._require_cards(args[0])
        for card in studyset.terms():
            self.console.write(card.term, Tone.TERM)
            self.console.write(" - ", Tone.NOTICE)
            self.console.write_line(card.definition, Tone.PLAIN)
        self.console.write_line()

    def cmd_sets(self, args: list[str]) -> None:
        if len(self.store) == 0:
            self.console.write_line("You have no studysets.", Tone.ERROR)
            self.console.write_line()
            return
        for name in self.store.names():
            self.console.write_line(name, Tone.NOTICE)
        self.console.write_line()
