"""
Quadrant rotation (the move mechanic) and whole-board symmetries.

All functions work on a single side's occupancy mask. Quadrant rotation
is a shift of the quadrant's 8-bit ring by two places; the center bit of
the quadrant never moves. Whole-board rotation and the diagonal mirror
are only used to canonicalize hashes.
"""

from .layout import (
    DIGEST_BITS,
    FLIP_QUADRANT,
    NUM_QUADRANTS,
    QUADRANT_BITS,
    QUADRANT_MASK,
    RING_BITS,
    RING_MASK,
)

# A 90 degree turn moves each ring cell past one corner and one edge
RING_STEP = 2

DIGEST_SLOT_MASK = (1 << DIGEST_BITS) - 1


def rotate_quadrant_cw(mask: int, quadrant: int) -> int:
    """Rotate one quadrant of a side mask 90 degrees clockwise."""
    ring = RING_MASK << (quadrant * QUADRANT_BITS)
    bits = mask & ring
    return (
        (mask & ~ring)
        | ((bits << RING_STEP) & ring)
        | ((bits >> (RING_BITS - RING_STEP)) & ring)
    )


def rotate_quadrant_ccw(mask: int, quadrant: int) -> int:
    """Rotate one quadrant of a side mask 90 degrees counterclockwise."""
    ring = RING_MASK << (quadrant * QUADRANT_BITS)
    bits = mask & ring
    return (
        (mask & ~ring)
        | ((bits >> RING_STEP) & ring)
        | ((bits << (RING_BITS - RING_STEP)) & ring)
    )


def rotate_quadrant(mask: int, quadrant: int, clockwise: bool) -> int:
    if clockwise:
        return rotate_quadrant_cw(mask, quadrant)
    return rotate_quadrant_ccw(mask, quadrant)


def rotate_side(mask: int) -> int:
    """
    Rotate a whole side mask 90 degrees counterclockwise.

    Quadrant q + 1 is quadrant q turned clockwise, so moving every field
    down one slot (and the lowest field to the top) turns the board the
    other way.
    """
    top = (NUM_QUADRANTS - 1) * QUADRANT_BITS
    return (mask >> QUADRANT_BITS) | ((mask & QUADRANT_MASK) << top)


def flip_side(mask: int) -> int:
    """
    Mirror a whole side mask along the top-left to bottom-right diagonal.

    Quadrants 0 and 2 lie on the axis and map onto themselves; quadrants
    1 and 3 trade places. Every field is also mirrored internally.
    """
    flipped = 0
    for quadrant in range(NUM_QUADRANTS):
        pattern = (mask >> (quadrant * QUADRANT_BITS)) & QUADRANT_MASK
        target = (NUM_QUADRANTS - quadrant) % NUM_QUADRANTS
        flipped |= FLIP_QUADRANT[pattern] << (target * QUADRANT_BITS)
    return flipped


def rotate_digest(digest: int) -> int:
    """
    Rotate a packed 4-slot digest the same way `rotate_side` rotates a mask.

    Valid because slot q of the digest is computed from quadrant q alone,
    using offsets that mean the same cell in every quadrant's own frame.
    """
    top = (NUM_QUADRANTS - 1) * DIGEST_BITS
    return (digest >> DIGEST_BITS) | ((digest & DIGEST_SLOT_MASK) << top)
