from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True, eq=False)
class Notecard:
    """A term/definition pairing, like a vocab word.

    Identity is the term alone: two cards with the same term compare equal
    whatever their definitions. Removal relies on this.
    """
    term: str
    definition: str

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Notecard):
            return NotImplemented
        return self.term == other.term

    def __hash__(self) -> int:
        return hash(self.term)

    def __str__(self) -> str:
        return f"{self.term} - {self.definition}"


@dataclass
class Studyset:
    """A named, ordered collection of notecards.

    Adding a term that is already present does not replace it; both entries
    are kept in insertion order.
    """
    name: str
    cards: list[Notecard] = field(default_factory=list)

    def add_term(self, term: str, definition: str) -> Notecard:
        card = Notecard(term, definition)
        self.cards.append(card)
        return card

    def remove_term(self, term: str) -> None:
        # list.remove() matches on Notecard.__eq__, i.e. the first card with this term.
        try:
            self.cards.remove(Notecard(term, ""))
        except ValueError:
            pass

    def has_term(self, term: str) -> bool:
        return Notecard(term, "") in self.cards

    def clone_terms(self) -> list[Notecard]:
        return [Notecard(c.term, c.definition) for c in self.cards]

    def terms(self) -> list[Notecard]:
        return self.cards

    def length(self) -> int:
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Notecard]:
        return iter(self.cards)
