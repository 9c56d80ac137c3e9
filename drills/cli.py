"""Command-line entry point for the drills."""

from __future__ import annotations

import argparse
import sys

from drills.arrays import format_array
from drills.calculator import format_calculation
from drills.matrices import format_matrix, transpose
from drills.numbers import fibonacci_series, multiplication_table


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="drills", description="Small programming drills.")
    commands = parser.add_subparsers(dest="command", required=True)

    calc = commands.add_parser("calc", help="apply + - * / to two numbers")
    calc.add_argument("op")
    calc.add_argument("n1", type=float)
    calc.add_argument("n2", type=float)

    table = commands.add_parser("table", help="multiplication table of a number")
    table.add_argument("num", type=int)

    fib = commands.add_parser("fibonacci", help="first N Fibonacci terms")
    fib.add_argument("count", type=int)

    trans = commands.add_parser("transpose", help="transpose a ROWS x COLS matrix")
    trans.add_argument("rows", type=int)
    trans.add_argument("cols", type=int)
    trans.add_argument("values", type=int, nargs="*")

    rev = commands.add_parser("reverse", help="reverse a list of integers")
    rev.add_argument("values", type=int, nargs="*")

    total = commands.add_parser("sum", help="sum a list of integers")
    total.add_argument("values", type=int, nargs="*")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one drill and print its result; returns the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "calc":
        try:
            print(format_calculation(args.op, args.n1, args.n2))
        except ZeroDivisionError:
            print("Error! Division by zero is not possible!")
            return 1
        except ValueError:
            print("Invalid Input!")
            return 1
    elif args.command == "table":
        print("\n".join(multiplication_table(args.num)))
    elif args.command == "fibonacci":
        print(f"Fibonacci Series : {format_array(fibonacci_series(args.count))}")
    elif args.command == "transpose":
        if args.rows < 0 or args.cols < 0 or len(args.values) != args.rows * args.cols:
            parser.error(f"expected {args.rows} x {args.cols} values")
        matrix = [
            args.values[start : start + args.cols]
            for start in range(0, args.rows * args.cols, args.cols or 1)
        ]
        print("Transpose of the Matrix : ")
        print(format_matrix(transpose(matrix)))
    elif args.command == "reverse":
        print(f"Reversed Array : {format_array(args.values[::-1])}")
    elif args.command == "sum":
        print(f"Sum of All Elements = {sum(args.values)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())