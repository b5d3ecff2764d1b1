"""
Move generation on top of the board.

Generation is lazy: moves are yielded in cell order, rotations in code
order, with the swap (when legal) first.
"""

import random
from typing import Iterator, Optional, Set

from .board import Board, RandomSource
from .layout import NUM_CELLS, UNIQUE_DEPTH, XY_BITS
from .moves import NUM_ROTATIONS, SWAP, Move


def generate_legal_moves(board: Board) -> Iterator[Move]:
    """
    Yield every legal move for the side to play.

    Nothing is yielded once the game is over.
    """
    if board.outcome().is_terminal:
        return

    if board.can_swap():
        yield SWAP

    occupied = board.occupied
    for cell in range(NUM_CELLS):
        if occupied & XY_BITS[cell]:
            continue
        for rotation in range(NUM_ROTATIONS):
            yield Move(cell, rotation)


def generate_unique_moves(board: Board) -> Iterator[Move]:
    """
    Yield legal moves, skipping ones that lead to an already seen position.

    Two moves are equivalent when the resulting boards share a digest
    (canonical early on, so symmetric replies collapse too). Filtering
    stops at UNIQUE_DEPTH moves, where duplicates become rare and the
    extra move/undo per candidate is no longer worth it.
    """
    if board.move_count >= UNIQUE_DEPTH:
        yield from generate_legal_moves(board)
        return

    seen: Set[int] = set()
    for move in generate_legal_moves(board):
        board.apply_move(move)
        digest = board.canonical_digest()
        board.undo_move(move)

        if digest in seen:
            continue
        seen.add(digest)
        yield move


def make_random_source(seed: Optional[int] = None) -> RandomSource:
    """
    Build a random word source for `Board.apply_random_move`.

    Args:
        seed: Seed for reproducible sequences (None for OS entropy)

    Returns:
        Callable returning an independent uniform 64-bit value per call
    """
    rng = random.Random(seed)
    return lambda: rng.getrandbits(64)
