#!/usr/bin/env python3
"""Sliding Puzzle Game.

Usage::

    python main.py                      # 9×9, 1000 scramble steps
    python main.py -s 3 --steps 50      # small, lightly scrambled board
    python main.py -s 4 --seed 7        # reproducible scramble
    python main.py --allow-after-solve  # keep accepting moves once solved
"""

import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.config import DEFAULT_SIZE, MAX_SIZE, MIN_SIZE, GameConfig  # noqa: E402
from backend.engine.gamegenerator import DEFAULT_SCRAMBLE_STEPS  # noqa: E402


class LogLevel(StrEnum):
    debug = "DEBUG"
    info = "INFO"
    warning = "WARNING"
    error = "ERROR"


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.value,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        min=MIN_SIZE, max=MAX_SIZE,
        help=f"Grid size ({MIN_SIZE}-{MAX_SIZE}).",
    ),
    steps: int = typer.Option(
        DEFAULT_SCRAMBLE_STEPS, "--steps",
        min=0,
        help="Random blank moves used to scramble the board.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for a reproducible scramble.",
    ),
    allow_after_solve: bool = typer.Option(
        False, "--allow-after-solve",
        help="Keep accepting moves after the puzzle is solved.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level",
        case_sensitive=False,
        help="Logging verbosity.",
    ),
) -> None:
    """Sliding Puzzle Game."""
    _configure_logging(log_level)

    config = GameConfig(
        size=size,
        scramble_steps=steps,
        seed=seed,
        lock_after_solve=not allow_after_solve,
    )

    from frontend.cli.rich.app import run

    run(config)


if __name__ == "__main__":
    app()
