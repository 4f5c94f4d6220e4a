from __future__ import annotations

import json
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


_WS_RE = re.compile(r"\s+")


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat()


def ensure_dir(path: str | Path) -> None:
    Path(path).mkdir(parents=True, exist_ok=True)


def append_jsonl(path: str | Path, obj: dict[str, Any]) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, "a", encoding="utf-8") as f:
        f.write(json.dumps(obj, ensure_ascii=False) + "\n")


def load_json(path: str | Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def tokenize(line: str) -> list[str]:
    """Split an input line on runs of whitespace; blank lines give []."""
    return [t for t in _WS_RE.split(line.strip()) if t]


def validate_set_name(name: str) -> str:
    """Check that ``name`` can serve as a file base name.

    Rules:
    - Reject empty names and '.'/'..'
    - Reject path separators
    """
    raw = str(name or "")
    if not raw.strip():
        raise ValueError("unsafe_set_name: empty")
    if raw in (".", ".."):
        raise ValueError(f"unsafe_set_name: relative_segment: {raw}")
    if "/" in raw or "\\" in raw:
        raise ValueError(f"unsafe_set_name: path_separator: {raw}")
    return raw


def ensure_set_path(data_dir: str | Path, name: str, extension: str) -> Path:
    """Return the file path backing studyset ``name`` inside ``data_dir``.

    Besides the name rules above, drive prefixes are rejected and the
    resolved path must remain directly within data_dir.
    """
    base = Path(data_dir).resolve()
    raw = validate_set_name(name)

    p = Path(raw + extension)
    if p.is_absolute() or p.drive:
        raise ValueError(f"unsafe_set_name: absolute_or_drive_path: {raw}")

    abs_p = (base / p).resolve()
    if abs_p.parent != base:
        raise ValueError(f"unsafe_set_name: escapes_data_dir: {raw}")
    return abs_p
