"""Entry point for running crammer as a module.

Usage:
    python -m crammer [--data-dir DIR] [--config PATH] [--seed N]
"""
from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
