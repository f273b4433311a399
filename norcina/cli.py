"""Command line entry point: scramble a cube and print a solution."""

from __future__ import annotations

import argparse
import random

from norcina import kociemba
from norcina.cube import Cube
from norcina.moves import parse_alg
from norcina.search import solve_manhattan


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="norcina", description="Solve a 3x3x3 cube.")
    parser.add_argument(
        "--scramble",
        help='moves to apply to a solved cube, for example "R U D F2 R L D2"',
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=123,
        help="seed for a random cube, used when no scramble is given (default: 123)",
    )
    parser.add_argument(
        "--method",
        choices=("kociemba", "manhattan"),
        default="kociemba",
        help="search method (default: kociemba)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.scramble is not None:
        try:
            moves = parse_alg(args.scramble)
        except ValueError as error:
            parser.error(str(error))
        cube = Cube.SOLVED.mov(moves)
    else:
        cube = Cube.random(random.Random(args.seed))

    print(cube)
    solver = kociemba.solve if args.method == "kociemba" else solve_manhattan
    solution = solver(cube).alg()
    print(f"Solution is {solution}.")
    print(f"Therefore, scramble is {solution.reversed()}.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())