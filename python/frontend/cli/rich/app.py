"""Rich terminal frontend with tables, colours, and panels.

A thin caller of the engine: it turns typed commands into tile moves,
draws whatever grid the session holds, and refuses to draw a board that
failed validation.
"""

from __future__ import annotations

import random

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from backend.config import GameConfig
from backend.engine.gameplay import GamePlay, MoveOutcome, MoveStatus
from backend.engine.gamesolver import SearchLimitExceeded, Solver
from backend.models.grid import Direction, Grid

console = Console()

# Boards above this size are too large for a breadth-first hint.
HINT_MAX_SIZE = 3

_DIRECTION_KEYS: dict[str, Direction] = {
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}


# -- board rendering ----------------------------------------------------------


def _render_grid(grid: Grid) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(grid.cell_count - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(grid.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(grid.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif grid.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _describe_outcome(outcome: MoveOutcome) -> str:
    if outcome.status is MoveStatus.MOVED:
        return ""
    if outcome.status is MoveStatus.BLANK:
        return "[yellow]The blank cannot be moved.[/yellow]"
    if outcome.status is MoveStatus.NOT_FOUND:
        return f"[yellow]There is no tile {outcome.label}.[/yellow]"
    if outcome.status is MoveStatus.LOCKED:
        return "[yellow]The puzzle is already solved.[/yellow]"
    if outcome.status is MoveStatus.ILLEGAL:
        if outcome.label is None:
            return "[yellow]No tile can move that way.[/yellow]"
        return f"[red]❌ {outcome.label} is not next to the blank.[/red]"
    return ""


# -- solver helpers -----------------------------------------------------------


def _apply_hint(game: GamePlay) -> tuple[str, MoveOutcome | None]:
    """Play the first move of a shortest solution. Returns a status message."""
    grid = game.grid
    if grid.is_solved():
        return "[green]Already solved![/green]", None
    if game.size > HINT_MAX_SIZE:
        return f"[yellow]Hints are only available up to {HINT_MAX_SIZE}×{HINT_MAX_SIZE}.[/yellow]", None
    try:
        hint = Solver.hint(grid)
    except SearchLimitExceeded:
        hint = None
    if hint is None:
        return "[yellow]No hint available.[/yellow]", None
    outcome = game.attempt_move(hint)
    return f"[cyan]Hint:[/cyan] moved [bold]{hint}[/bold]  {_describe_outcome(outcome)}", outcome


# -- screens ------------------------------------------------------------------


def _draw_game(game: GamePlay, status: str = "") -> None:
    console.clear()

    size = game.size
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")

    controls = Text()
    controls.append("  number", style="bold cyan")
    controls.append("  move tile   ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  slide   ", style="dim")
    controls.append("N", style="bold cyan")
    controls.append("  hint   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  restart   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    panel = Panel(
        Align.center(_render_grid(game.grid)),
        title=f"[bold cyan]Sliding Puzzle  {size}×{size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(stats))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _draw_win(game: GamePlay) -> None:
    console.clear()

    size = game.size
    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("CONGRATULATIONS!", style="bold green")
    congrats.append(f"  Solved in {game.state.moves} moves!  ", style="green")
    congrats.append("★\n", style="bold yellow")

    panel = Panel(
        Group(Align.center(_render_grid(game.grid)), Align.center(congrats)),
        title=f"[bold green]Sliding Puzzle  {size}×{size}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))


def _draw_corrupt(game: GamePlay) -> None:
    """Report a board that failed validation instead of drawing it."""
    console.clear()
    panel = Panel(
        Text(game.validation.describe(), style="bold red"),
        title="[bold red]Corrupt board[/bold red]",
        border_style="red",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))


# -- game loop ----------------------------------------------------------------


def _new_game(config: GameConfig, rng: random.Random) -> GamePlay:
    return GamePlay.from_config(config, rng)


def _play(config: GameConfig) -> None:
    rng = config.make_rng()
    game = _new_game(config, rng)
    status = ""

    while True:
        if not game.validation.ok:
            _draw_corrupt(game)
            choice = Prompt.ask("  Restart or quit", choices=["r", "q"], console=console)
            if choice == "q":
                return
            game = _new_game(config, rng)
            continue

        _draw_game(game, status)
        status = ""
        key = Prompt.ask("  Move", default="", show_default=False, console=console)
        key = key.strip().lower()

        if key == "q":
            return
        if key == "r":
            game = _new_game(config, rng)
            status = "[yellow]New game![/yellow]"
            continue

        if key == "n":
            status, outcome = _apply_hint(game)
        elif key in _DIRECTION_KEYS:
            outcome = game.move(_DIRECTION_KEYS[key])
            status = _describe_outcome(outcome)
        elif key.isdecimal():
            outcome = game.attempt_move(int(key))
            status = _describe_outcome(outcome)
        else:
            status = "[yellow]Enter a tile number, W/A/S/D, N, R or Q.[/yellow]" if key else ""
            outcome = None

        if outcome is not None and outcome.status is MoveStatus.SOLVED:
            _draw_win(game)
            choices = ["r", "q"] if game.lock_after_solve else ["r", "c", "q"]
            choice = Prompt.ask("  Play again", choices=choices, console=console)
            if choice == "q":
                return
            if choice == "r":
                game = _new_game(config, rng)


# -- public entry point -------------------------------------------------------


def run(config: GameConfig) -> None:
    """Launch the Rich CLI."""
    _play(config)
    console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
