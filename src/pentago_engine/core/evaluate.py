"""
Terminal detection and static scoring.

Both are pure scans of the two side masks against the 32 win lines.
"""

from .layout import NUM_CELLS, SCORE_TABLE, WIN_LINES
from .types import Outcome, Side


def compute_outcome(p1: int, p2: int, move_count: int) -> Outcome:
    """
    Classify a position.

    A side wins by filling every cell of at least one win line. If a
    rotation completes lines for both sides at once the game is a draw.

    Args:
        p1: Player one's occupancy mask
        p2: Player two's occupancy mask
        move_count: Number of placements made so far

    Returns:
        Outcome of the position
    """
    p1_wins = False
    p2_wins = False

    for line in WIN_LINES:
        if (p1 & line) == line:
            p1_wins = True
        elif (p2 & line) == line:
            p2_wins = True

    if p1_wins and p2_wins:
        return Outcome.DRAW
    if p1_wins:
        return Outcome.P1_WINS
    if p2_wins:
        return Outcome.P2_WINS
    return Outcome.DRAW if move_count >= NUM_CELLS else Outcome.IN_PROGRESS


def compute_score(p1: int, p2: int, to_play: Side) -> int:
    """
    Static evaluation from the perspective of the side that just moved.

    Every line held by one side only is worth SCORE_TABLE[pieces on it];
    contested lines are worth nothing.
    """
    score = 0
    for line in WIN_LINES:
        mine = p1 & line
        theirs = p2 & line
        if mine and not theirs:
            score += SCORE_TABLE[bin(mine).count("1")]
        elif theirs and not mine:
            score -= SCORE_TABLE[bin(theirs).count("1")]

    # Accumulated for player one; flip so it favours whoever moved last
    return -score if to_play is Side.P1 else score
