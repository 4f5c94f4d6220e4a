from __future__ import annotations

import argparse
from pathlib import Path

from . import BUILD_NAME, __version__
from .commands import CommandInterpreter
from .config import load_config
from .console import Console, RichConsole, Tone
from .errors import PersistenceError
from .journal import Journal
from .store import DirectoryBackend, LoadReport, Store


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="crammer", description="Create and study flashcard studysets")
    p.add_argument("--data-dir", default=None, help="Directory holding <name>.set files (default: current directory)")
    p.add_argument("--config", default=None, help="Config path (JSON)")
    p.add_argument("--seed", type=int, default=None, help="Seed for the study draw order")
    p.add_argument("--no-color", action="store_true", help="Disable colored output")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def _welcome(console: Console) -> None:
    build = f"{BUILD_NAME}.{__version__.split('.')[1].zfill(2)}"
    console.write("Welcome to ")
    console.write("Crammer", Tone.BRAND)
    console.write(" [Version ")
    console.write(build, Tone.HINT)
    console.write_line("]")
    console.write_line()


def _report_load(console: Console, report: LoadReport) -> None:
    for name, lines in report.malformed.items():
        joined = ",".join(str(n) for n in lines)
        console.write_line(f"{name}: skipped malformed lines {joined}", Tone.ERROR)
    for err in report.failed:
        console.write_line(str(err), Tone.ERROR)
    if report.malformed or report.failed:
        console.write_line()


def main(argv: list[str] | None = None, console: Console | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        cfg = load_config(args.config)
    except (OSError, ValueError, TypeError) as e:
        print(f"config_failed: {e}")
        return 2
    cfg = cfg.with_overrides(
        data_dir=args.data_dir,
        seed=args.seed,
        color=False if args.no_color else None,
    )

    console = console or RichConsole(color=cfg.color)
    backend = DirectoryBackend(Path(cfg.data_dir), extension=cfg.extension, delimiter=cfg.delimiter)
    store = Store(backend, Journal(cfg.journal_path))

    console.clear()
    report = store.load()
    _welcome(console)
    _report_load(console, report)

    CommandInterpreter(store, console, cfg).run()

    try:
        store.save()
    except PersistenceError as e:
        console.write_line(str(e), Tone.ERROR)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
