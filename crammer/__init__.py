"""Crammer: a command-line flashcard study tool.

This package intentionally stays small:
- studysets of term/definition notecards
- one plain ``term=definition`` text file per studyset
- an interactive shell for creating, studying, editing and listing sets

Structured export formats (Anki/CSV/JSON) are out of scope.
"""

from __future__ import annotations

__all__ = ["__version__", "BUILD_NAME"]

__version__ = "0.3.0"

# Shown in the welcome banner, e.g. "ion.03".
BUILD_NAME = "ion"
