"""Console collaborator used by the interpreter.

The core only says *how* a piece of text should stand out (a ``Tone``);
``RichConsole`` decides what that looks like on a terminal.
"""
from __future__ import annotations

from enum import Enum
from typing import IO, Protocol

from rich.console import Console as _RichConsole


class Tone(Enum):
    """How a piece of output should be presented."""
    PLAIN = "plain"
    EMPHASIS = "emphasis"  # correct guess
    ERROR = "error"
    NOTICE = "notice"  # confirmations, set names
    HINT = "hint"  # instructions, help directory
    TERM = "term"  # notecard terms in listings
    BRAND = "brand"


TONE_STYLES: dict[Tone, str] = {
    Tone.PLAIN: "white",
    Tone.EMPHASIS: "bold green",
    Tone.ERROR: "red",
    Tone.NOTICE: "cyan",
    Tone.HINT: "yellow",
    Tone.TERM: "blue",
    Tone.BRAND: "bold blue",
}


class Console(Protocol):
    def read_line(self, prompt: str = "") -> str | None: ...

    def write(self, text: str, tone: Tone = Tone.PLAIN) -> None: ...

    def write_line(self, text: str = "", tone: Tone = Tone.PLAIN) -> None: ...

    def clear(self) -> None: ...


class RichConsole:
    """Terminal console backed by rich."""

    def __init__(
        self,
        color: bool = True,
        console: _RichConsole | None = None,
        *,
        file: IO[str] | None = None,
        force_terminal: bool | None = None,
    ):
        self.console = console or _RichConsole(
            file=file,
            force_terminal=force_terminal,
            color_system="auto" if color else None,
            highlight=False,
        )

    def read_line(self, prompt: str = "") -> str | None:
        """One input line, or None on end of input (Ctrl-D) or Ctrl-C."""
        try:
            return self.console.input(prompt, markup=False)
        except EOFError:
            return None
        except KeyboardInterrupt:
            self.console.print()
            return None

    def write(self, text: str, tone: Tone = Tone.PLAIN) -> None:
        self.console.print(text, style=TONE_STYLES[tone], end="", markup=False, highlight=False)

    def write_line(self, text: str = "", tone: Tone = Tone.PLAIN) -> None:
        self.write(text + "\n", tone)

    def clear(self) -> None:
        self.console.clear()
