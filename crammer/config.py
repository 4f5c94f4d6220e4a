from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from .utils import load_json


@dataclass(frozen=True)
class CrammerConfig:
    data_dir: str = "."
    extension: str = ".set"
    delimiter: str = "="  # term/definition split inside a studyset file
    entry_separator: str = "-"  # term/definition split in typed entries
    sentinel: str = "done"
    journal: str = "errors.jsonl"  # relative to data_dir; "" disables
    color: bool = True
    seed: int | None = None

    @property
    def journal_path(self) -> Path | None:
        if not self.journal:
            return None
        return Path(self.data_dir) / self.journal

    def with_overrides(self, **overrides: Any) -> "CrammerConfig":
        """Copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def load_config(config_path: str | Path | None = None) -> CrammerConfig:
    if config_path is None:
        return CrammerConfig()

    data = load_json(config_path)
    if not isinstance(data, dict):
        raise ValueError(f"config must be a JSON object: {config_path}")

    known = {f.name for f in fields(CrammerConfig)}
    cfg = CrammerConfig(**{k: v for k, v in data.items() if k in known})
    if not cfg.extension:
        raise ValueError(f"extension must not be empty: {config_path}")
    return cfg
