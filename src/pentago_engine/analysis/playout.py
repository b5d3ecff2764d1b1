"""
Random playouts.

Plays games to the end with `Board.apply_random_move` and tallies the
results, the same loop a Monte-Carlo search runs at its leaves.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from tqdm import tqdm

from ..core import Board, Outcome, make_random_source

logger = logging.getLogger(__name__)


@dataclass
class PlayoutStats:
    """Aggregated playout results."""

    games: int = 0
    p1_wins: int = 0
    p2_wins: int = 0
    draws: int = 0
    total_plies: int = 0

    def record(self, outcome: Outcome, plies: int) -> None:
        if outcome is Outcome.P1_WINS:
            self.p1_wins += 1
        elif outcome is Outcome.P2_WINS:
            self.p2_wins += 1
        elif outcome is Outcome.DRAW:
            self.draws += 1
        else:
            raise ValueError(f"Cannot record unfinished game ({outcome})")
        self.games += 1
        self.total_plies += plies

    @property
    def average_plies(self) -> float:
        return self.total_plies / self.games if self.games else 0.0


class PlayoutRunner:
    """
    Runs random games from a starting position.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        start: Optional[Board] = None,
        show_progress: bool = True,
    ):
        """
        Initialize playout runner.

        Args:
            seed: Seed for the random word source (None for OS entropy)
            start: Position to play from (default: empty board)
            show_progress: Show a tqdm progress bar
        """
        self.rand = make_random_source(seed)
        self.start = start.copy() if start is not None else Board()
        self.show_progress = show_progress

    def play_one(self) -> Board:
        """Play one game to the end and return the final board."""
        board = self.start.copy()
        while not board.outcome().is_terminal:
            board.apply_random_move(self.rand)
        return board

    def run(self, games: int) -> PlayoutStats:
        """
        Play a number of games.

        Args:
            games: Number of playouts

        Returns:
            Aggregated results
        """
        if games < 0:
            raise ValueError(f"Number of games must be non-negative, got {games}")

        logger.info(f"Running {games:,} playouts from move {self.start.move_count}")
        stats = PlayoutStats()

        for _ in tqdm(range(games), desc="Playouts", unit=" game", disable=not self.show_progress):
            board = self.play_one()
            stats.record(board.outcome(), board.move_count - self.start.move_count)

        logger.info(
            f"P1 wins: {stats.p1_wins:,} | P2 wins: {stats.p2_wins:,} | "
            f"Draws: {stats.draws:,} | Avg length: {stats.average_plies:.1f} plies"
        )
        return stats


def run_playouts(games: int, seed: Optional[int] = None, start: Optional[Board] = None) -> PlayoutStats:
    """Convenience wrapper: run playouts without a progress bar."""
    return PlayoutRunner(seed=seed, start=start, show_progress=False).run(games)
