"""
Positional digests for transposition tables.

The simple digest packs each quadrant as a 9-digit base-3 number (15 bits)
and concatenates the four quadrants into 60 bits. It is exact: two boards
share a simple digest only if they have the same pieces on the same cells.

Early in the game many positions are rotations or reflections of each
other, so below FULLHASH_DEPTH moves the canonical digest is the minimum
of the simple digest over the board's 8 symmetric images.
"""

from .layout import (
    DIGEST_BITS,
    DIGEST_LOOKUP,
    FULLHASH_DEPTH,
    NUM_QUADRANTS,
    QUADRANT_BITS,
    QUADRANT_MASK,
)
from .symmetry import flip_side, rotate_digest


def simple_digest(p1: int, p2: int) -> int:
    """
    Exact 60-bit digest of a position.

    Args:
        p1: Player one's occupancy mask
        p2: Player two's occupancy mask

    Returns:
        Four 15-bit base-3 quadrant values, quadrant 0 in the low bits
    """
    digest = 0
    for quadrant in range(NUM_QUADRANTS):
        shift = quadrant * QUADRANT_BITS
        index = (((p1 >> shift) & QUADRANT_MASK) << QUADRANT_BITS) | ((p2 >> shift) & QUADRANT_MASK)
        digest |= DIGEST_LOOKUP[index] << (quadrant * DIGEST_BITS)
    return digest


def _min_over_rotations(digest: int) -> int:
    best = digest
    for _ in range(NUM_QUADRANTS - 1):
        digest = rotate_digest(digest)
        if digest < best:
            best = digest
    return best


def canonical_digest(p1: int, p2: int, move_count: int) -> int:
    """
    Digest shared by every rotation and reflection of a position.

    From FULLHASH_DEPTH moves on, symmetric transpositions are rare enough
    that the plain simple digest is returned instead.
    """
    if move_count >= FULLHASH_DEPTH:
        return simple_digest(p1, p2)

    best = _min_over_rotations(simple_digest(p1, p2))
    mirrored = _min_over_rotations(simple_digest(flip_side(p1), flip_side(p2)))
    return min(best, mirrored)
