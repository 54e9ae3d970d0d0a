"""Command line entry point for the calculators."""

from __future__ import annotations

import argparse
import sys

from surveycalc.basic import CalculationError, Operation, angle_notice, render
from surveycalc.geodesy import Bearing, direct, format_direct, inverse


def build_parser() -> argparse.ArgumentParser:
    """Argument parser with the basic, direct and inverse commands."""
    parser = argparse.ArgumentParser(
        prog="surveycalc",
        description="Basic and geodetic calculators.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    basic = commands.add_parser("basic", help="arithmetic and trigonometry")
    basic.add_argument("operation", choices=[op.value for op in Operation])
    basic.add_argument("first", type=float)
    basic.add_argument("second", type=float, nargs="?")

    direct_cmd = commands.add_parser("direct", help="point from start, distance and bearing")
    direct_cmd.add_argument("xa", type=float)
    direct_cmd.add_argument("ya", type=float)
    direct_cmd.add_argument("distance", type=float)
    direct_cmd.add_argument("degrees", type=float)
    direct_cmd.add_argument("minutes", type=float, nargs="?", default=0.0)
    direct_cmd.add_argument("seconds", type=float, nargs="?", default=0.0)

    inverse_cmd = commands.add_parser("inverse", help="distance and bearing between points")
    inverse_cmd.add_argument("xa", type=float)
    inverse_cmd.add_argument("ya", type=float)
    inverse_cmd.add_argument("xb", type=float)
    inverse_cmd.add_argument("yb", type=float)

    return parser


def _run_basic(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    operation = Operation(args.operation)
    if operation.operand_count() == 1 and args.second is not None:
        parser.error(f"{operation.value} takes a single operand")
    second = 0.0 if args.second is None else args.second
    if operation.takes_degrees():
        notice = angle_notice(args.first)
        if notice is not None:
            print(notice, file=sys.stderr)
    try:
        text = render(operation, args.first, second)
    except CalculationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(text)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the command line interface and return the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "basic":
        return _run_basic(parser, args)
    if args.command == "direct":
        x, y = direct(args.xa, args.ya, args.distance,
                      Bearing(args.degrees, args.minutes, args.seconds))
        print(format_direct(x, y))
        return 0
    print(inverse(args.xa, args.ya, args.xb, args.yb).describe())
    return 0


if __name__ == "__main__":
    sys.exit(main())