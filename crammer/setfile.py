"""Plain-text studyset files.

One line per notecard::

    term=definition

The first delimiter splits term from definition; any later delimiter
characters belong to the definition. No header, quoting or escaping.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from .types import Notecard


@dataclass
class SetFileContents:
    cards: list[Notecard] = field(default_factory=list)
    malformed_lines: list[int] = field(default_factory=list)  # 1-based


def format_line(card: Notecard, delimiter: str = "=") -> str:
    return f"{card.term}{delimiter}{card.definition}\n"


def parse_line(line: str, delimiter: str = "=") -> Notecard | None:
    """Parse one file line; None when the delimiter is missing."""
    line = line.rstrip("\r\n")
    term, sep, definition = line.partition(delimiter)
    if not sep:
        return None
    return Notecard(term, definition)


def parse_lines(lines: Iterable[str], delimiter: str = "=") -> SetFileContents:
    out = SetFileContents()
    for lineno, line in enumerate(lines, start=1):
        if not line.rstrip("\r\n"):
            continue
        card = parse_line(line, delimiter)
        if card is None:
            out.malformed_lines.append(lineno)
            continue
        out.cards.append(card)
    return out


def read_set_file(path: str | Path, delimiter: str = "=") -> SetFileContents:
    with open(path, "r", encoding="utf-8", newline="") as f:
        return parse_lines(f, delimiter)


def write_set_file(path: str | Path, cards: Iterable[Notecard], delimiter: str = "=") -> None:
    # Mode "w" truncates an existing file.
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        for card in cards:
            f.write(format_line(card, delimiter))
