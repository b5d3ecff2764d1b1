"""Tests for quadrant rotation and whole-board symmetries."""

import random

import pytest

from pentago_engine.core.hash import simple_digest
from pentago_engine.core.layout import XY_BITS
from pentago_engine.core.symmetry import (
    flip_side,
    rotate_digest,
    rotate_quadrant,
    rotate_quadrant_ccw,
    rotate_quadrant_cw,
    rotate_side,
)


def random_sides(seed):
    """Two disjoint random side masks."""
    rng = random.Random(seed)
    p1 = p2 = 0
    for bit in range(36):
        roll = rng.randrange(3)
        if roll == 1:
            p1 |= 1 << bit
        elif roll == 2:
            p2 |= 1 << bit
    return p1, p2


def cell(x, y):
    return XY_BITS[x + 6 * y]


@pytest.mark.parametrize("quadrant", range(4))
def test_four_quarter_turns_are_identity(quadrant):
    """Rotating a quadrant four times restores every bit."""
    for seed in range(20):
        mask, _ = random_sides(seed)
        turned = mask
        for _ in range(4):
            turned = rotate_quadrant_cw(turned, quadrant)
        assert turned == mask


@pytest.mark.parametrize("quadrant", range(4))
def test_cw_and_ccw_are_inverses(quadrant):
    """Counterclockwise undoes clockwise."""
    for seed in range(20):
        mask, _ = random_sides(seed)
        assert rotate_quadrant_ccw(rotate_quadrant_cw(mask, quadrant), quadrant) == mask
        assert rotate_quadrant(mask, quadrant, True) == rotate_quadrant_cw(mask, quadrant)
        assert rotate_quadrant(mask, quadrant, False) == rotate_quadrant_ccw(mask, quadrant)


def test_rotation_moves_corner_clockwise():
    """Top-left corner of a quadrant goes to its top-right corner."""
    assert rotate_quadrant_cw(cell(0, 0), 0) == cell(2, 0)
    assert rotate_quadrant_cw(cell(3, 0), 1) == cell(5, 0)
    assert rotate_quadrant_cw(cell(3, 3), 2) == cell(5, 3)
    assert rotate_quadrant_cw(cell(0, 3), 3) == cell(2, 3)


def test_rotation_moves_corner_counterclockwise():
    """Top-left corner of a quadrant goes to its bottom-left corner."""
    assert rotate_quadrant_ccw(cell(0, 0), 0) == cell(0, 2)
    assert rotate_quadrant_ccw(cell(3, 3), 2) == cell(3, 5)


def test_rotation_moves_edges():
    """Edge cells turn with the quadrant."""
    assert rotate_quadrant_cw(cell(1, 0), 0) == cell(2, 1)
    assert rotate_quadrant_cw(cell(4, 5), 2) == cell(3, 4)
    assert rotate_quadrant_ccw(cell(2, 1), 0) == cell(1, 0)


@pytest.mark.parametrize("quadrant", range(4))
def test_rotation_keeps_center_and_other_quadrants(quadrant):
    """Only the ring of the chosen quadrant moves."""
    centers = cell(1, 1) | cell(4, 1) | cell(4, 4) | cell(1, 4)
    assert rotate_quadrant_cw(centers, quadrant) == centers

    others = 0
    for x in range(6):
        for y in range(6):
            q = (0, 1, 3, 2)[(y // 3) * 2 + x // 3]
            if q != quadrant:
                others |= cell(x, y)
    assert rotate_quadrant_cw(others, quadrant) == others


def test_rotate_side_turns_board_counterclockwise():
    """(x, y) moves to (y, 5 - x) for every cell."""
    for x in range(6):
        for y in range(6):
            assert rotate_side(cell(x, y)) == cell(y, 5 - x)


def test_flip_side_mirrors_diagonal():
    """(x, y) moves to (y, x) for every cell."""
    for x in range(6):
        for y in range(6):
            assert flip_side(cell(x, y)) == cell(y, x)


def test_group_relations():
    """r^4 = 1, f^2 = 1 and f r f = r^-1."""
    for seed in range(10):
        mask, _ = random_sides(seed)
        turned = mask
        for _ in range(4):
            turned = rotate_side(turned)
        assert turned == mask
        assert flip_side(flip_side(mask)) == mask

        inverse = rotate_side(rotate_side(rotate_side(mask)))
        assert flip_side(rotate_side(flip_side(mask))) == inverse


def test_rotate_digest_matches_board_rotation():
    """Rotating the digest equals hashing the rotated board."""
    for seed in range(20):
        p1, p2 = random_sides(seed)
        assert rotate_digest(simple_digest(p1, p2)) == simple_digest(rotate_side(p1), rotate_side(p2))
