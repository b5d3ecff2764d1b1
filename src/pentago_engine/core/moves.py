"""
Move representation.

A placement move is a cell index (x + 6*y, 0..35) and a rotation code in
[0, 8): quadrant * 2 + direction, with direction 0 = counterclockwise and
1 = clockwise. The swap move (pie rule) is a distinguished value.
"""

from dataclasses import dataclass

from .layout import BOARD_SIZE, NUM_CELLS, NUM_QUADRANTS

NUM_ROTATIONS = NUM_QUADRANTS * 2
FILES = "abcdef"
SWAP_TEXT = "swap"


@dataclass(frozen=True)
class Move:
    """Immutable move value."""

    cell: int  # x + 6*y, or -1 for swap
    rotation: int  # quadrant * 2 + direction, or -1 for swap

    @classmethod
    def place(cls, x: int, y: int, quadrant: int, clockwise: bool) -> "Move":
        """Build a placement move from coordinates."""
        return cls(x + BOARD_SIZE * y, quadrant * 2 + int(clockwise))

    @property
    def is_swap(self) -> bool:
        return self.cell == -1 and self.rotation == -1

    @property
    def x(self) -> int:
        return self.cell % BOARD_SIZE

    @property
    def y(self) -> int:
        return self.cell // BOARD_SIZE

    @property
    def quadrant(self) -> int:
        return self.rotation >> 1

    @property
    def direction(self) -> int:
        return self.rotation & 1

    @property
    def clockwise(self) -> bool:
        return self.direction == 1

    def in_range(self) -> bool:
        """True if cell and rotation codes are inside their valid ranges."""
        return 0 <= self.cell < NUM_CELLS and 0 <= self.rotation < NUM_ROTATIONS

    def __str__(self) -> str:
        if self.is_swap:
            return SWAP_TEXT
        if not self.in_range():
            return f"<invalid {self.cell}/{self.rotation}>"
        direction = "cw" if self.clockwise else "ccw"
        return f"{FILES[self.x]}{self.y + 1}/{self.quadrant}{direction}"

    @classmethod
    def parse(cls, text: str) -> "Move":
        """
        Parse move notation such as ``c4/2cw`` or ``swap``.

        File a-f is the column, rank 1-6 the row counted from the top,
        then the quadrant (0-3) and the direction (cw or ccw).

        Raises:
            ValueError: If the text is not valid notation
        """
        text = text.strip().lower()
        if text == SWAP_TEXT:
            return SWAP

        cell_part, sep, rotation_part = text.partition("/")
        if not sep or len(cell_part) != 2:
            raise ValueError(f"Invalid move notation: {text!r}")

        file_char, rank_char = cell_part
        if file_char not in FILES or rank_char not in "123456":
            raise ValueError(f"Invalid cell in move: {text!r}")

        quadrant_char, direction = rotation_part[:1], rotation_part[1:]
        if not quadrant_char or quadrant_char not in "0123" or direction not in ("cw", "ccw"):
            raise ValueError(f"Invalid rotation in move: {text!r}")

        return cls.place(
            FILES.index(file_char),
            int(rank_char) - 1,
            int(quadrant_char),
            direction == "cw",
        )


SWAP = Move(-1, -1)
