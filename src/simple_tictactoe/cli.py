from __future__ import annotations

import argparse
import csv
import logging
import sys

from .board import Board
from .errors import InvalidBoardError
from .game import run_game

DIST_NAME = "simple-tictactoe"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt", description="Two-player text Tic-Tac-Toe")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")

    sub.add_parser(
        "play",
        help='Play a game on stdin/stdout, one "row col" pair per line (default command)',
    )

    p_state = sub.add_parser(
        "state",
        help="Classify a board (9 chars of X/O/_, row-major)",
    )
    p_state.add_argument("--board", help="Board string, e.g., XO_OX___X (omit with --stdin)")
    p_state.add_argument(
        "--stdin", action="store_true", help="Read many boards from stdin and stream CSV output"
    )

    return p


def _print_version() -> None:
    from importlib.metadata import PackageNotFoundError, version

    try:
        print(version(DIST_NAME))
    except PackageNotFoundError:
        print("unknown")


def _cmd_play() -> int:
    state = run_game(sys.stdin, sys.stdout)
    return 0 if state.is_terminal else 1


def _cmd_state(ns: argparse.Namespace) -> int:
    if ns.stdin:
        w = csv.writer(sys.stdout)
        w.writerow(["board", "state"])
        for line in sys.stdin:
            raw = line.strip()
            if not raw:
                continue
            try:
                board = Board.from_cells(raw)
            except InvalidBoardError:
                logging.debug("skipping malformed board %r", raw)
                continue
            w.writerow([board.cells, board.evaluate().meaning])
        return 0

    try:
        board = Board.from_cells(ns.board or "")
    except InvalidBoardError as e:
        logging.error("%s", e)
        return 2
    state = board.evaluate()
    if state.is_terminal:
        logging.info("state=%s", state.meaning)
    else:
        logging.info("state=%s to_move=%s", state.meaning, board.to_move)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if getattr(ns, "version", False):
        _print_version()
        return 0

    if ns.cmd in (None, "play"):
        return _cmd_play()

    if ns.cmd == "state":
        if not ns.stdin and ns.board is None:
            parser.error("state requires --board or --stdin")
        return _cmd_state(ns)

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
