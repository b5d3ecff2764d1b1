"""
Rich-based rendering for boards and analysis results.

Provides:
- Board grid with quadrant separators
- Position summary (side to move, outcome, score, digests)
- Tables for playout and position-count results
"""

import logging
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..analysis import DepthCount, PlayoutStats
from ..core import Board, Cell

console = Console()
logger = logging.getLogger(__name__)

CELL_STYLES = {
    Cell.EMPTY: ("·", "dim"),
    Cell.P1: ("●", "bold red"),
    Cell.P2: ("●", "bold blue"),
}


def render_board(board: Board) -> Text:
    """Render the grid as rich text, cells in serialized (row-major) order."""
    text = Text()
    for y in range(6):
        if y == 3:
            text.append("──────┼──────\n", style="dim")
        for x in range(6):
            if x == 3:
                text.append("│ ", style="dim")
            glyph, style = CELL_STYLES[board.get_cell(x, y)]
            text.append(glyph, style=style)
            text.append(" ")
        text.append("\n")
    return text


class BoardDisplay:
    """
    Rich-based display for the CLI.
    """

    def __init__(self, target: Optional[Console] = None):
        """
        Initialize display.

        Args:
            target: Console to print to (default: module console)
        """
        self.console = target or console

    def log(self, message: str, style: str = ""):
        """Log a message using rich console."""
        self.console.print(message, style=style)

    def log_info(self, message: str):
        self.console.print(f"[blue]ℹ[/blue] {message}")

    def log_success(self, message: str):
        self.console.print(f"[green]✓[/green] {message}")

    def log_error(self, message: str):
        self.console.print(f"[red]✗[/red] {message}")

    def show_header(self, title: str):
        self.console.rule(f"[bold blue]{title}[/bold blue]")

    def position_table(self, board: Board) -> Table:
        """Create position summary table."""
        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column("Field", style="cyan")
        table.add_column("Value", style="white")

        table.add_row("State", board.to_string())
        table.add_row("Moves", str(board.move_count))
        table.add_row("To play", f"Player {int(board.to_play)}")
        table.add_row("Outcome", board.outcome().describe())
        table.add_row("Score", str(board.score()))
        table.add_row("Digest", f"{board.simple_digest():#017x}")
        table.add_row("Canonical", f"{board.canonical_digest():#017x}")
        return table

    def show_board(self, board: Board):
        """Show grid and summary side by side."""
        grid = Table.grid(padding=(0, 3))
        grid.add_row(render_board(board), self.position_table(board))
        self.console.print(Panel(grid, title="Position", expand=False))

    def show_playout_stats(self, stats: PlayoutStats):
        table = Table(title="Playouts")
        table.add_column("Result", style="cyan")
        table.add_column("Games", justify="right")
        table.add_column("Share", justify="right")

        for label, count in (
            ("Player 1 wins", stats.p1_wins),
            ("Player 2 wins", stats.p2_wins),
            ("Draws", stats.draws),
        ):
            share = count / stats.games * 100 if stats.games else 0.0
            table.add_row(label, f"{count:,}", f"{share:.1f}%")

        self.console.print(table)
        self.log_info(f"Average game length: {stats.average_plies:.1f} plies")

    def show_depth_counts(self, counts: List[DepthCount]):
        table = Table(title="Positions by depth")
        table.add_column("Depth", justify="right", style="cyan")
        table.add_column("Positions", justify="right")
        table.add_column("Unique", justify="right")
        table.add_column("Terminal", justify="right")

        for entry in counts:
            table.add_row(
                str(entry.depth),
                f"{entry.positions:,}",
                f"{entry.unique:,}",
                f"{entry.terminal:,}",
            )
        self.console.print(table)


def setup_rich_logging(level: str = "INFO"):
    """Configure logging to work nicely with rich console."""
    from rich.logging import RichHandler

    # Remove existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s"))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[rich_handler],
        format="%(message)s",
    )
