"""
Jump61 CLI - Command-line interface for the engine.

Usage:
    jump61 play [--size N] [--depth D] [--max-moves M] [--json]
        Play the AI against itself from an empty board
    jump61 move [--size N] [--depth D] [--moves "R C" ...] [--json]
        Replay MOVES (each by the side to move) and print the AI's choice
"""

import argparse
import logging
import sys

from .api.schemas import BoardSnapshot, DecisionInfo
from .bots import AIPlayer, SearchLimits
from .config import Settings
from .engine_core import Board, Jump61Error, Side


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Jump61 - chain-reaction grid game with an automated opponent",
        prog="jump61",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    play_parser = subparsers.add_parser("play", help="AI versus AI from an empty board")
    _add_common(play_parser)
    play_parser.add_argument("--max-moves", type=int, default=200, help="Stop after this many moves")

    move_parser = subparsers.add_parser("move", help="Print the AI's move for a position")
    _add_common(move_parser)
    move_parser.add_argument(
        "--moves", nargs="*", default=[], metavar="R C",
        help='Moves to replay first, e.g. --moves "1 1" "1 2"',
    )

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 1

    try:
        settings = Settings.from_env(board_size=args.size, search_depth=args.depth)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        if args.command == "play":
            return cmd_play(args, settings)
        return cmd_move(args, settings)
    except Jump61Error as e:
        print(f"Error: {e}")
        return 1


def _add_common(subparser):
    subparser.add_argument("--size", type=int, help="Board size (default from JUMP61_BOARD_SIZE)")
    subparser.add_argument("--depth", type=int, help="Search depth (default from JUMP61_SEARCH_DEPTH)")
    subparser.add_argument("--json", action="store_true", help="Print JSON snapshots")


def cmd_play(args, settings):
    """Play the AI against itself."""
    board = Board(settings.board_size)
    limits = SearchLimits(max_depth=settings.search_depth)
    players = {side: AIPlayer(side, limits=limits) for side in (Side.RED, Side.BLUE)}

    while board.winner() is None and board.num_moves < args.max_moves:
        decision = players[board.whose_move()].select_move(board)
        board.add_spot(decision.side, decision.index)
        if args.json:
            print(DecisionInfo.from_decision(decision).model_dump_json())
        else:
            print(f"{decision.side.value} plays {decision.move_string}")
            print(board.to_display_string())

    winner = board.winner()
    if args.json:
        print(BoardSnapshot.from_board(board).model_dump_json())
    elif winner is None:
        print(f"No winner after {board.num_moves} moves")
    else:
        print(f"{winner.value.capitalize()} wins after {board.num_moves} moves")
    return 0


def cmd_move(args, settings):
    """Replay moves and report the AI's choice."""
    board = Board(settings.board_size)
    for text in args.moves:
        row, col = _parse_move(text)
        board.add_spot_at(board.whose_move(), row, col)

    side = board.whose_move()
    ai = AIPlayer(side, limits=SearchLimits(max_depth=settings.search_depth))
    decision = ai.select_move(board)
    if args.json:
        print(DecisionInfo.from_decision(decision).model_dump_json())
    else:
        print(str(board))
        print(f"{side.value} should play {decision.move_string}")
    return 0


def _parse_move(text):
    parts = text.replace(",", " ").split()
    if len(parts) != 2 or not all(p.isdigit() for p in parts):
        raise Jump61Error(f"Bad move: {text!r} (expected \"R C\")")
    return int(parts[0]), int(parts[1])


if __name__ == "__main__":
    sys.exit(main())
