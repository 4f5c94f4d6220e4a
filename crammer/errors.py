"""User-facing error taxonomy.

Every error here is recoverable: the interpreter reports ``str(exc)`` and
goes back to waiting for input.
"""
from __future__ import annotations


class CrammerError(Exception):
    """Base class; the message is what the user sees."""


class CommandNotFound(CrammerError):
    def __init__(self, message: str = "Command not recognized.") -> None:
        super().__init__(message)


class UsageMismatch(CrammerError):
    def __init__(self, usage: list[str]) -> None:
        self.usage = list(usage)
        super().__init__("Improper syntax; try " + " ".join(usage))


class DuplicateName(CrammerError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__("That name is already in use!")


class SetNotFound(CrammerError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__("Studyset not found.")


class EmptySet(CrammerError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__("That studyset has no notecards.")


class EntrySyntaxError(CrammerError):
    """A sub-mode line (or a set name) that does not fit its template."""

    def __init__(self, template: str) -> None:
        self.template = template
        super().__init__("Improper syntax; try " + template)


class TermNotFound(CrammerError):
    def __init__(self, term: str) -> None:
        self.term = term
        super().__init__("Notecard not found.")


class PersistenceError(CrammerError):
    """A studyset file could not be read or written.

    ``failures`` holds one ``(name, reason)`` pair per studyset affected.
    """

    def __init__(self, name: str, reason: str, failures: list[tuple[str, str]] | None = None) -> None:
        self.name = name
        self.reason = reason
        self.failures = list(failures) if failures else [(name, reason)]
        super().__init__(f"Could not access studyset file for {name}: {reason}")

    @classmethod
    def combine(cls, errors: list["PersistenceError"]) -> "PersistenceError":
        failures = [f for e in errors for f in e.failures]
        if len(failures) == 1:
            return cls(*failures[0])
        names = ", ".join(n for n, _ in failures)
        reasons = "; ".join(r for _, r in failures)
        return cls(names, reasons, failures)
