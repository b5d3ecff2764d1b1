"""
Position counting by depth.

Walks the move tree depth-first on a single board with apply/undo and
records, for every depth, how many positions were reached and how many
of them were distinct by canonical digest. Useful both as a move
generator check and to measure how much symmetry deduplication saves.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from tqdm import tqdm

from ..core import Board, generate_legal_moves, generate_unique_moves

logger = logging.getLogger(__name__)


@dataclass
class DepthCount:
    """Counts for one depth below the start position."""

    depth: int
    positions: int = 0  # nodes reached (with repeats)
    terminal: int = 0  # finished games among them
    digests: Set[int] = field(default_factory=set, repr=False)

    @property
    def unique(self) -> int:
        return len(self.digests)


class PositionCounter:
    """
    Depth-first position counter.
    """

    def __init__(self, unique_moves: bool = True, start: Optional[Board] = None, show_progress: bool = True):
        """
        Initialize position counter.

        Args:
            unique_moves: Skip moves leading to an equivalent position
            start: Root position (default: empty board)
            show_progress: Show a tqdm progress bar over the root moves
        """
        self.unique_moves = unique_moves
        self.start = start.copy() if start is not None else Board()
        self.show_progress = show_progress

    def _moves(self, board: Board):
        if self.unique_moves:
            return generate_unique_moves(board)
        return generate_legal_moves(board)

    def count(self, max_depth: int) -> List[DepthCount]:
        """
        Count positions down to max_depth.

        Args:
            max_depth: Number of plies to search below the root

        Returns:
            One DepthCount per depth, root (depth 0) first
        """
        if max_depth < 0:
            raise ValueError(f"Depth must be non-negative, got {max_depth}")

        counts: Dict[int, DepthCount] = {d: DepthCount(d) for d in range(max_depth + 1)}
        board = self.start.copy()
        self._visit(board, 0, counts)

        if max_depth > 0 and not board.outcome().is_terminal:
            root_moves = list(self._moves(board))
            for move in tqdm(root_moves, desc="Root moves", unit=" move", disable=not self.show_progress):
                board.apply_move(move)
                self._search(board, 1, max_depth, counts)
                board.undo_move(move)

        result = [counts[d] for d in range(max_depth + 1)]
        for entry in result:
            logger.debug(
                f"Depth {entry.depth}: {entry.positions:,} positions, "
                f"{entry.unique:,} unique, {entry.terminal:,} terminal"
            )
        logger.info(
            f"Counted {sum(e.positions for e in result):,} positions to depth {max_depth}"
        )
        return result

    def _visit(self, board: Board, depth: int, counts: Dict[int, DepthCount]) -> None:
        entry = counts[depth]
        entry.positions += 1
        entry.digests.add(board.canonical_digest())
        if board.outcome().is_terminal:
            entry.terminal += 1

    def _search(self, board: Board, depth: int, max_depth: int, counts: Dict[int, DepthCount]) -> None:
        self._visit(board, depth, counts)
        if depth == max_depth or board.outcome().is_terminal:
            return

        for move in list(self._moves(board)):
            board.apply_move(move)
            self._search(board, depth + 1, max_depth, counts)
            board.undo_move(move)


def count_positions(max_depth: int, unique_moves: bool = True, start: Optional[Board] = None) -> List[DepthCount]:
    """Convenience wrapper: count positions without a progress bar."""
    return PositionCounter(unique_moves=unique_moves, start=start, show_progress=False).count(max_depth)
