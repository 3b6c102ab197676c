"""Command-line interface for the backtracking solvers."""

from __future__ import annotations

import argparse
import logging
import sys

from ..core.backtracker import SearchStats, solve
from ..core.config import Config
from ..puzzles.queens import QueensConfig
from ..puzzles.trunks import Suitcase, TrunkConfig
from ..settings import CFG
from . import parser

logger = logging.getLogger(__name__)

DEFAULT_SUITCASES = [
    Suitcase(1, 3, "A"),
    Suitcase(2, 1, "B"),
    Suitcase(1, 2, "C"),
    Suitcase(1, 1, "D"),
    Suitcase(1, 1, "E"),
]


def default_trunk() -> TrunkConfig:
    return TrunkConfig.new(3, 3, DEFAULT_SUITCASES)


def _queens(args: argparse.Namespace) -> Config:
    if args.size < 1:
        raise ValueError(f"board size must be positive, got {args.size}")
    if not (0 <= args.row < args.size and 0 <= args.col < args.size):
        raise ValueError(f"start ({args.row}, {args.col}) is off a {args.size}x{args.size} board")
    return QueensConfig.new(args.row, args.col, args.size)


def _trunk(args: argparse.Namespace) -> Config:
    if args.file is None:
        logger.info("no trunk file given, using the default trunk")
        return default_trunk()
    config = parser.load_puzzle(args.file)
    if not isinstance(config, TrunkConfig):
        raise ValueError(f"{args.file}: expected a trunk puzzle, got {config.name}")
    return config


def _file(args: argparse.Namespace) -> Config:
    return parser.load_puzzle(args.path)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="backtrack", description="Depth-first backtracking puzzle solver")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log search progress at DEBUG level")
    ap.add_argument("--stats", action="store_true", help="Print search statistics after solving")
    sub = ap.add_subparsers(dest="command", required=True)

    q = sub.add_parser("queens", help="Place non-attacking queens")
    q.add_argument("row", nargs="?", type=int, default=0, help="Row of the starting queen")
    q.add_argument("col", nargs="?", type=int, default=0, help="Column of the starting queen")
    q.add_argument("--size", type=int, default=CFG.QUEENS_SIZE, help="Board side length")
    q.set_defaults(build=_queens)

    t = sub.add_parser("trunk", help="Pack suitcases into a trunk")
    t.add_argument("file", nargs="?", default=None, help="Trunk file; the built-in 3x3 trunk if omitted")
    t.set_defaults(build=_trunk)

    f = sub.add_parser("file", help="Solve any YAML or plain-text puzzle file")
    f.add_argument("path", help="Path to the puzzle file")
    f.set_defaults(build=_file)

    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else CFG.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        config = args.build(args)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    stats = SearchStats()
    solution = solve(config, stats)
    print(solution if solution is not None else "No solution found")
    if args.stats:
        print(stats)
    return 0 if solution is not None else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
