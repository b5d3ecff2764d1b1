"""Core board representation and rules."""

from .types import Cell, Outcome, Side
from .moves import SWAP, Move
from .board import Board, RandomSource
from .hash import canonical_digest, simple_digest
from .evaluate import compute_outcome, compute_score
from .layout import FULLHASH_DEPTH, UNIQUE_DEPTH
from .rules import (
    generate_legal_moves,
    generate_unique_moves,
    make_random_source,
)

__all__ = [
    "Cell",
    "Outcome",
    "Side",
    "SWAP",
    "Move",
    "Board",
    "RandomSource",
    "canonical_digest",
    "simple_digest",
    "compute_outcome",
    "compute_score",
    "FULLHASH_DEPTH",
    "UNIQUE_DEPTH",
    "generate_legal_moves",
    "generate_unique_moves",
    "make_random_source",
]
