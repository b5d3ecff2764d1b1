"""Tests for simple and canonical digests."""

import pytest

from pentago_engine.core import FULLHASH_DEPTH, Board, Move, canonical_digest, make_random_source, simple_digest
from pentago_engine.core.symmetry import rotate_digest

EMPTY = "0" * 36


def place(cells, state=EMPTY):
    chars = list(state)
    for (x, y), symbol in cells.items():
        chars[x + 6 * y] = symbol
    return "".join(chars)


def rotate_string(state):
    """Turn a serialized board 90 degrees counterclockwise: (x, y) -> (y, 5 - x)."""
    out = ["0"] * 36
    for x in range(6):
        for y in range(6):
            out[y + 6 * (5 - x)] = state[x + 6 * y]
    return "".join(out)


def mirror_string(state):
    """Mirror a serialized board along the main diagonal: (x, y) -> (y, x)."""
    out = ["0"] * 36
    for x in range(6):
        for y in range(6):
            out[y + 6 * x] = state[x + 6 * y]
    return "".join(out)


def all_images(state):
    images = []
    for start in (state, mirror_string(state)):
        current = start
        for _ in range(4):
            images.append(current)
            current = rotate_string(current)
    return images


def random_state(seed, plies):
    rand = make_random_source(seed)
    board = Board()
    for _ in range(plies):
        if board.outcome().is_terminal:
            break
        board.apply_random_move(rand)
    return board.to_string()


def test_empty_board_digest_is_zero():
    """Zero is a real digest, not a cache marker."""
    board = Board()
    assert board.simple_digest() == 0
    assert board.canonical_digest() == 0
    assert board.canonical_digest() == 0


def test_simple_digest_fits_60_bits():
    board = Board.from_string("2" * 36)
    assert board.simple_digest() < 1 << 60
    assert board.simple_digest() == sum(((3 ** 9 - 1) << (15 * q)) for q in range(4))


def test_simple_digest_is_exact():
    """Different contents always give different simple digests."""
    digests = set()
    for index in range(36):
        for symbol in "12":
            state = EMPTY[:index] + symbol + EMPTY[index + 1:]
            digests.add(Board.from_string(state).simple_digest())
    assert len(digests) == 72


def test_rotation_scenario_three_moves():
    """Two boards a quarter turn apart share a canonical digest."""
    state = place({(0, 0): "1", (1, 0): "2", (3, 4): "1"})
    board = Board.from_string(state)
    turned = Board.from_string(rotate_string(state))

    assert board.move_count == 3
    assert turned.move_count == 3
    assert board.simple_digest() != turned.simple_digest()
    assert board.canonical_digest() == turned.canonical_digest()


@pytest.mark.parametrize("seed", range(8))
@pytest.mark.parametrize("plies", [1, 2, 3, 4, FULLHASH_DEPTH - 1])
def test_canonical_digest_is_symmetry_invariant(seed, plies):
    """All 8 images of an early position hash the same."""
    state = random_state(seed, plies)
    expected = Board.from_string(state).canonical_digest()

    for image in all_images(state):
        assert Board.from_string(image).canonical_digest() == expected


def test_board_images_match_string_images():
    state = random_state(3, 5)
    board = Board.from_string(state)

    assert board.rotated().to_string() == rotate_string(state)
    assert board.mirrored().to_string() == mirror_string(state)


def test_canonical_is_minimum_of_images():
    state = random_state(4, 4)
    board = Board.from_string(state)
    images = [Board.from_string(image).simple_digest() for image in all_images(state)]
    assert board.canonical_digest() == min(images)


def test_distinct_positions_keep_distinct_canonical_digests():
    corner = Board.from_string(place({(0, 0): "1"}))
    edge = Board.from_string(place({(1, 0): "1"}))
    other_side = Board.from_string(place({(0, 0): "2"}))

    digests = {corner.canonical_digest(), edge.canonical_digest(), other_side.canonical_digest()}
    assert len(digests) == 3


def test_no_canonicalization_past_threshold():
    state = random_state(2, FULLHASH_DEPTH)
    board = Board.from_string(state)
    assert board.move_count >= FULLHASH_DEPTH
    assert board.canonical_digest() == board.simple_digest()
    assert canonical_digest(board.p1, board.p2, board.move_count) == simple_digest(board.p1, board.p2)


def test_rotate_digest_cycle():
    digest = Board.from_string(random_state(6, 6)).simple_digest()
    rotated = digest
    for _ in range(4):
        rotated = rotate_digest(rotated)
    assert rotated == digest


def test_digest_queries_do_not_change_board():
    board = Board.from_string(random_state(1, 3))
    before = board.key()
    board.canonical_digest()
    assert board.key() == before


def test_digest_cache_follows_moves():
    board = Board()
    board.apply_move(Move.place(0, 0, quadrant=1, clockwise=True))
    first = board.canonical_digest()
    board.apply_move(Move.place(5, 5, quadrant=0, clockwise=True))
    assert board.canonical_digest() != first
    board.undo_move(Move.place(5, 5, quadrant=0, clockwise=True))
    assert board.canonical_digest() == first
