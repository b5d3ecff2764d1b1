"""
Small enumerations shared by the board, the evaluators and the CLI.
"""

from enum import Enum, IntEnum


class Side(IntEnum):
    """A player. The value doubles as the cell symbol in the serialized form."""

    P1 = 1
    P2 = 2

    @property
    def opponent(self) -> "Side":
        return Side.P2 if self is Side.P1 else Side.P1


class Cell(IntEnum):
    """Contents of a single cell."""

    EMPTY = 0
    P1 = 1
    P2 = 2

    @property
    def symbol(self) -> str:
        return str(int(self))


class Outcome(Enum):
    """Terminal classification of a position."""

    IN_PROGRESS = "in_progress"
    DRAW = "draw"
    P1_WINS = "p1_wins"
    P2_WINS = "p2_wins"

    @property
    def is_terminal(self) -> bool:
        return self is not Outcome.IN_PROGRESS

    @classmethod
    def win_for(cls, side: Side) -> "Outcome":
        return cls.P1_WINS if side is Side.P1 else cls.P2_WINS

    def describe(self) -> str:
        """Human-readable result."""
        if self is Outcome.P1_WINS:
            return "Player 1 wins"
        if self is Outcome.P2_WINS:
            return "Player 2 wins"
        if self is Outcome.DRAW:
            return "Draw"
        return "Game in progress"
