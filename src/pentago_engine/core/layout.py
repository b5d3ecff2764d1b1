"""
Bit layout of the 6x6 board and the lookup tables derived from it.

Each quadrant owns a contiguous 9-bit field. Within a field, offsets 0-7
walk the outer ring of the quadrant clockwise starting at a corner, and
offset 8 is the center:

    quadrant 0 (top-left)     board bit numbers
     0  1  2                   0  1  2 15 16  9
     7  8  3                   7  8  3 14 17 10
     6  5  4                   6  5  4 13 12 11
                              29 30 31 22 23 24
                              28 35 32 21 26 25
                              27 34 33 20 19 18

Quadrant q is quadrant 0 turned q times clockwise about the board center,
so quadrants run 0=top-left, 1=top-right, 2=bottom-right, 3=bottom-left.
This gives two properties the move and hashing code rely on:

- turning one quadrant by 90 degrees moves every ring bit two places
  along its 8-bit ring, leaving the center alone
- turning the whole board by 90 degrees moves every bit by one 9-bit field

All tables are built once at import from the geometry above and are
immutable afterwards.
"""

from array import array
from typing import List, Tuple

BOARD_SIZE = 6
NUM_CELLS = BOARD_SIZE * BOARD_SIZE
NUM_QUADRANTS = 4
QUADRANT_BITS = 9
RING_BITS = 8

QUADRANT_MASK = (1 << QUADRANT_BITS) - 1  # one full 9-bit field
RING_MASK = (1 << RING_BITS) - 1  # the 8 ring bits of a field
BOARD_MASK = (1 << (QUADRANT_BITS * NUM_QUADRANTS)) - 1

# Local (x, y) of each offset inside quadrant 0, indexed by offset
QUADRANT_CELLS: Tuple[Tuple[int, int], ...] = (
    (0, 0), (1, 0), (2, 0),
    (2, 1), (2, 2), (1, 2),
    (0, 2), (0, 1),
    (1, 1),
)

# Canonicalization and move deduplication thresholds (by move count)
FULLHASH_DEPTH = 7
UNIQUE_DEPTH = 10

# Points for a line holding n pieces of a single side
SCORE_TABLE: Tuple[int, ...] = (0, 1, 3, 9, 27, 127)

WIN_LENGTH = 5
DIGEST_BITS = 15  # 3**9 = 19683 fits in 15 bits


def rotate_point_cw(x: int, y: int) -> Tuple[int, int]:
    """Turn a board coordinate 90 degrees clockwise about the board center."""
    return BOARD_SIZE - 1 - y, x


def _build_xy_to_bit() -> Tuple[int, ...]:
    table = [-1] * NUM_CELLS
    for quadrant in range(NUM_QUADRANTS):
        for offset, (x, y) in enumerate(QUADRANT_CELLS):
            for _ in range(quadrant):
                x, y = rotate_point_cw(x, y)
            table[x + BOARD_SIZE * y] = quadrant * QUADRANT_BITS + offset
    assert sorted(table) == list(range(NUM_CELLS))
    return tuple(table)


XY_TO_BIT = _build_xy_to_bit()
XY_BITS: Tuple[int, ...] = tuple(1 << bit for bit in XY_TO_BIT)
BIT_TO_XY: Tuple[int, ...] = tuple(XY_TO_BIT.index(bit) for bit in range(NUM_CELLS))


def _line_mask(x: int, y: int, dx: int, dy: int) -> int:
    mask = 0
    for step in range(WIN_LENGTH):
        mask |= XY_BITS[(x + dx * step) + BOARD_SIZE * (y + dy * step)]
    return mask


def _build_win_lines() -> Tuple[int, ...]:
    lines: List[int] = []
    span = BOARD_SIZE - WIN_LENGTH + 1  # starting positions along a row
    for fixed in range(BOARD_SIZE):
        for start in range(span):
            lines.append(_line_mask(start, fixed, 1, 0))  # rows
            lines.append(_line_mask(fixed, start, 0, 1))  # columns
    for x in range(span):
        for y in range(span):
            lines.append(_line_mask(x, y, 1, 1))  # down-right diagonals
            lines.append(_line_mask(BOARD_SIZE - 1 - x, y, -1, 1))  # down-left
    return tuple(lines)


WIN_LINES = _build_win_lines()


def _build_flip_offsets() -> Tuple[int, ...]:
    # Mirror quadrant 0 along the board diagonal: (x, y) -> (y, x)
    return tuple(QUADRANT_CELLS.index((y, x)) for (x, y) in QUADRANT_CELLS)


FLIP_OFFSETS = _build_flip_offsets()


def _build_flip_quadrant() -> Tuple[int, ...]:
    table = []
    for pattern in range(1 << QUADRANT_BITS):
        flipped = 0
        for offset in range(QUADRANT_BITS):
            if pattern & (1 << offset):
                flipped |= 1 << FLIP_OFFSETS[offset]
        table.append(flipped)
    return tuple(table)


FLIP_QUADRANT = _build_flip_quadrant()


def _build_digest_lookup() -> array:
    """
    Map an 18-bit (p1 << 9 | p2) quadrant pair to its base-3 value.

    Every cell is a base-3 digit: 0 empty, 1 player one, 2 player two.
    Pairs where both sides claim a cell cannot occur on a legal board and
    map to 0.
    """
    p1_digits = [0] * (1 << QUADRANT_BITS)
    p2_digits = [0] * (1 << QUADRANT_BITS)
    for pattern in range(1 << QUADRANT_BITS):
        value = 0
        for offset in range(QUADRANT_BITS):
            if pattern & (1 << offset):
                value += 3 ** offset
        p1_digits[pattern] = value
        p2_digits[pattern] = 2 * value

    size = 1 << QUADRANT_BITS
    return array(
        "H",
        (
            0 if p1 & p2 else p1_digits[p1] + p2_digits[p2]
            for p1 in range(size)
            for p2 in range(size)
        ),
    )


DIGEST_LOOKUP = _build_digest_lookup()
