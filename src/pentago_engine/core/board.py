"""
Mutable bit-packed board.

A board holds one occupancy mask per side plus their union, using the bit
layout from `layout`. Moves mutate the board in place and can be undone,
so a search can walk the tree with a single instance.

Outcome, score and digest are computed lazily and cached on the board.
The cache is written from inside the query methods, so a single instance
must not be queried from several threads at once; give each thread its
own `copy()`.
"""

from typing import Callable, Optional, Tuple

from .evaluate import compute_outcome, compute_score
from .hash import canonical_digest, simple_digest
from .layout import BIT_TO_XY, BOARD_MASK, BOARD_SIZE, NUM_CELLS, NUM_QUADRANTS, XY_BITS
from .moves import NUM_ROTATIONS, Move
from .symmetry import flip_side, rotate_quadrant, rotate_side
from .types import Cell, Outcome, Side

# Supplies one independent uniform 64-bit value per call
RandomSource = Callable[[], int]

# Random bits above the 36 cell bits pick the rotation
ROTATION_SHIFT = NUM_CELLS
CCW_FLAG = 0x4


class Board:
    """
    Board state: occupancy masks, move count and side to move.

    Invariant: occupied == p1 | p2, and p1 & p2 == 0.
    """

    __slots__ = (
        "_p1",
        "_p2",
        "_occupied",
        "_move_count",
        "_to_play",
        "_outcome",
        "_score",
        "_digest",
    )

    def __init__(self) -> None:
        self._p1 = 0
        self._p2 = 0
        self._occupied = 0
        self._move_count = 0
        self._to_play = Side.P1
        self._outcome: Optional[Outcome] = None
        self._score: Optional[int] = None
        self._digest: Optional[int] = None

    @classmethod
    def from_string(cls, state: str) -> "Board":
        """
        Build a board from its 36-character serialized form.

        Cells are listed left to right, top to bottom, as '0' (empty),
        '1' (player one) or '2' (player two). The move count is the number
        of pieces on the board and player one moves next when it is even.

        Raises:
            ValueError: If the string has the wrong length or symbols
        """
        if len(state) != NUM_CELLS:
            raise ValueError(
                f"Board string has {len(state)} cells, expected {NUM_CELLS}"
            )

        board = cls()
        for index, symbol in enumerate(state):
            if symbol == "1":
                board._p1 |= XY_BITS[index]
            elif symbol == "2":
                board._p2 |= XY_BITS[index]
            elif symbol != "0":
                raise ValueError(f"Invalid cell symbol {symbol!r} at index {index}")

        board._occupied = board._p1 | board._p2
        board._move_count = bin(board._occupied).count("1")
        board._to_play = Side.P1 if board._move_count % 2 == 0 else Side.P2
        return board

    def to_string(self) -> str:
        """Serialize to the 36-character form read by `from_string`."""
        return "".join(
            self.get_cell(index % BOARD_SIZE, index // BOARD_SIZE).symbol
            for index in range(NUM_CELLS)
        )

    def copy(self) -> "Board":
        """Independent copy, caches included."""
        other = Board.__new__(Board)
        for name in Board.__slots__:
            setattr(other, name, getattr(self, name))
        return other

    def key(self) -> Tuple[int, int, int, Side]:
        """(p1, p2, move_count, to_play): everything that defines the state."""
        return (self._p1, self._p2, self._move_count, self._to_play)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.key() == other.key()

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Board({self.to_string()!r}, move_count={self._move_count}, to_play={self._to_play.name})"

    def __str__(self) -> str:
        rows = []
        for y in range(BOARD_SIZE):
            if y == BOARD_SIZE // 2:
                rows.append("------+------")
            cells = [".XO"[self.get_cell(x, y)] for x in range(BOARD_SIZE)]
            rows.append(" ".join(cells[:3]) + " | " + " ".join(cells[3:]))
        return "\n".join(rows)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def p1(self) -> int:
        return self._p1

    @property
    def p2(self) -> int:
        return self._p2

    @property
    def occupied(self) -> int:
        return self._occupied

    @property
    def move_count(self) -> int:
        return self._move_count

    @property
    def to_play(self) -> Side:
        return self._to_play

    def side_mask(self, side: Side) -> int:
        return self._p1 if side is Side.P1 else self._p2

    def get_cell(self, x: int, y: int) -> Cell:
        """Contents of the cell at column x, row y (0-based, from top-left)."""
        bit = XY_BITS[x + BOARD_SIZE * y]
        if self._p1 & bit:
            return Cell.P1
        if self._p2 & bit:
            return Cell.P2
        return Cell.EMPTY

    def moves_remaining(self) -> int:
        return 0 if self.outcome().is_terminal else NUM_CELLS - self._move_count

    def moves_available(self) -> int:
        """Upper bound on legal moves: every empty cell times 8 rotations."""
        return self.moves_remaining() * NUM_ROTATIONS

    def can_swap(self) -> bool:
        """Swap is only allowed as the reply to the very first placement."""
        return self._move_count == 1 and self._to_play is Side.P2

    def is_valid_move(self, move: Move) -> bool:
        if move.is_swap:
            return self.can_swap()
        return move.in_range() and not self._occupied & XY_BITS[move.cell]

    def outcome(self) -> Outcome:
        if self._outcome is None:
            self._outcome = compute_outcome(self._p1, self._p2, self._move_count)
        return self._outcome

    def score(self) -> int:
        """Heuristic value for the side that just moved (not the side to play)."""
        if self._score is None:
            self._score = compute_score(self._p1, self._p2, self._to_play)
        return self._score

    def simple_digest(self) -> int:
        return simple_digest(self._p1, self._p2)

    def canonical_digest(self) -> int:
        """Digest that is identical for symmetric positions early in the game."""
        if self._digest is None:
            self._digest = canonical_digest(self._p1, self._p2, self._move_count)
        return self._digest

    def rotated(self) -> "Board":
        """Copy of this position turned 90 degrees counterclockwise."""
        return self._transformed(rotate_side)

    def mirrored(self) -> "Board":
        """Copy of this position mirrored along the top-left/bottom-right diagonal."""
        return self._transformed(flip_side)

    def _transformed(self, transform: Callable[[int], int]) -> "Board":
        other = self.copy()
        other._p1 = transform(self._p1)
        other._p2 = transform(self._p2)
        other._occupied = other._p1 | other._p2
        other._invalidate()
        return other

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def apply_move(self, move: Move) -> bool:
        """
        Play a move.

        The board must not be terminal; this is checked with an assertion.

        Returns:
            False (and leaves the board untouched) if the move is illegal
        """
        assert not self.outcome().is_terminal, "move applied to a finished game"

        if move.is_swap:
            if not self.can_swap():
                return False
            self._swap_sides(Side.P1)
            return True

        if not self.is_valid_move(move):
            return False

        self._place(move)
        return True

    def apply_random_move(self, rand: RandomSource) -> Move:
        """
        Play a uniformly random placement and rotation.

        Empty cells are narrowed by AND-ing with fresh random words until a
        single candidate is left; a word that would remove every candidate
        is skipped. The unused high bits of the last word choose the
        rotation.

        Returns:
            The move that was played
        """
        assert not self.outcome().is_terminal, "move applied to a finished game"

        candidates = ~self._occupied & BOARD_MASK
        while True:
            word = rand()
            if candidates & word:
                candidates &= word
            if not candidates & (candidates - 1):
                break

        rotation = word >> ROTATION_SHIFT
        clockwise = not rotation & CCW_FLAG
        quadrant = rotation % NUM_QUADRANTS
        move = Move(BIT_TO_XY[candidates.bit_length() - 1], quadrant * 2 + int(clockwise))
        self._place(move)
        return move

    def undo_move(self, move: Move) -> bool:
        """
        Take back the last move.

        Only partly checked: the move must be the one most recently played.
        A placement whose cell does not hold the mover's piece once the
        rotation is reversed is rejected.

        Returns:
            False (and leaves the board untouched) if the move cannot be undone
        """
        if move.is_swap:
            if self._move_count != 1 or self._to_play is not Side.P1:
                return False
            self._swap_sides(Side.P2)
            return True

        if not move.in_range() or self._move_count == 0:
            return False

        mover = self._to_play.opponent
        p1 = rotate_quadrant(self._p1, move.quadrant, not move.clockwise)
        p2 = rotate_quadrant(self._p2, move.quadrant, not move.clockwise)

        bit = XY_BITS[move.cell]
        if mover is Side.P1:
            if not p1 & bit:
                return False
            p1 &= ~bit
        else:
            if not p2 & bit:
                return False
            p2 &= ~bit

        self._p1 = p1
        self._p2 = p2
        self._occupied = p1 | p2
        self._move_count -= 1
        self._to_play = mover
        self._invalidate()
        return True

    def _place(self, move: Move) -> None:
        bit = XY_BITS[move.cell]
        p1, p2 = self._p1, self._p2
        if self._to_play is Side.P1:
            p1 |= bit
        else:
            p2 |= bit

        self._p1 = rotate_quadrant(p1, move.quadrant, move.clockwise)
        self._p2 = rotate_quadrant(p2, move.quadrant, move.clockwise)
        self._occupied = self._p1 | self._p2
        self._move_count += 1
        self._to_play = self._to_play.opponent
        self._invalidate()

    def _swap_sides(self, to_play: Side) -> None:
        self._p1, self._p2 = self._p2, self._p1
        self._to_play = to_play
        self._invalidate()

    def _invalidate(self) -> None:
        self._outcome = None
        self._score = None
        self._digest = None
