"""
Main CLI for the Pentago board engine.
"""

import argparse
import logging
import sys
from typing import List, Optional

from ..analysis import PlayoutRunner, PositionCounter
from ..core import Board, Move
from ..utils.rich_display import BoardDisplay, setup_rich_logging


def setup_logging(level: str = "INFO") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _load_board(state: Optional[str], display: BoardDisplay) -> Optional[Board]:
    if state is None:
        return Board()
    try:
        return Board.from_string(state)
    except ValueError as e:
        display.log_error(str(e))
        return None


def show_command(args) -> int:
    """Render a position, optionally after playing some moves."""
    display = BoardDisplay()
    logger = logging.getLogger(__name__)

    board = _load_board(args.state, display)
    if board is None:
        return 1

    for text in args.moves:
        try:
            move = Move.parse(text)
        except ValueError as e:
            display.log_error(str(e))
            return 1

        if board.outcome().is_terminal:
            display.log_error(f"Game is already over, cannot play {move}")
            return 1
        if not board.apply_move(move):
            display.log_error(f"Illegal move {move}")
            return 1
        logger.debug(f"Played {move}")

    display.show_board(board)
    return 0


def playout_command(args) -> int:
    """Run random playouts."""
    display = BoardDisplay()

    start = _load_board(args.state, display)
    if start is None:
        return 1
    if start.outcome().is_terminal:
        display.log_error("Start position is already finished")
        return 1

    display.show_header(f"Random playouts ({args.games:,} games)")
    runner = PlayoutRunner(seed=args.seed, start=start)
    try:
        stats = runner.run(args.games)
    except ValueError as e:
        display.log_error(str(e))
        return 1
    display.show_playout_stats(stats)
    return 0


def perft_command(args) -> int:
    """Count positions by depth."""
    display = BoardDisplay()

    start = _load_board(args.state, display)
    if start is None:
        return 1

    mode = "all moves" if args.all else "unique moves"
    display.show_header(f"Position count to depth {args.depth} ({mode})")
    counter = PositionCounter(unique_moves=not args.all, start=start)
    try:
        counts = counter.count(args.depth)
    except ValueError as e:
        display.log_error(str(e))
        return 1
    display.show_depth_counts(counts)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pentago board engine")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    parser.add_argument(
        "--rich-logging", action="store_true", help="Route log records through the rich console"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Show command
    show_parser = subparsers.add_parser("show", help="Render a position")
    show_parser.add_argument(
        "state", nargs="?", default=None, help="36-character board string (default: empty board)"
    )
    show_parser.add_argument(
        "--moves", nargs="*", default=[], help="Moves to play first, e.g. c4/2cw swap"
    )
    show_parser.set_defaults(func=show_command)

    # Playout command
    playout_parser = subparsers.add_parser("playout", help="Run random playouts")
    playout_parser.add_argument("--games", type=int, default=1000, help="Number of games")
    playout_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    playout_parser.add_argument("--state", default=None, help="Start position (36-character string)")
    playout_parser.set_defaults(func=playout_command)

    # Perft command
    perft_parser = subparsers.add_parser("perft", help="Count positions by depth")
    perft_parser.add_argument("--depth", type=int, default=2, help="Plies below the start position")
    perft_parser.add_argument(
        "--all", action="store_true", help="Expand every legal move instead of unique ones"
    )
    perft_parser.add_argument("--state", default=None, help="Start position (36-character string)")
    perft_parser.set_defaults(func=perft_command)

    return parser


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.rich_logging:
        setup_rich_logging(args.log_level)
    else:
        setup_logging(args.log_level)

    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
