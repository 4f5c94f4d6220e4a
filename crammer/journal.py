from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .utils import append_jsonl, utc_now_iso


@dataclass
class Journal:
    """Append-only record of recoverable faults (errors.jsonl)."""
    path: Path | None

    def record(self, stage: str, name: str, message: str) -> None:
        if self.path is None:
            return
        try:
            append_jsonl(self.path, {"at": utc_now_iso(), "stage": stage, "name": name, "message": message})
        except OSError:
            # The journal is best-effort; the fault itself has already been reported to the user.
            pass
