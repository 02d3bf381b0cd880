"""Small introductory programs: arrays, tables, greetings and Armstrong numbers."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterable
from itertools import accumulate, product

MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Digits examined by the Armstrong search run from 0 up to (not including) this.
_DIGIT_LIMIT = 9
_ARMSTRONG_POWER = 3
_NAME_LIMIT = 49


def format_array(label: str, values: Iterable[int]) -> str:
    """Render ``values`` as ``label :v1,v2,...,``."""
    return f"{label} :" + "".join(f"{value}," for value in values)


def cumulative_sums(values: Iterable[int]) -> list[int]:
    """Return the running totals of ``values``."""
    return list(accumulate(values))


def sqrt_table(rows: int) -> list[str]:
    """Return one line per number 1..rows with its square root and square."""
    return [
        f"{i:6d} {math.sqrt(i):12.4f} {i * i:10d} " for i in range(1, rows + 1)
    ]


def greeting(name: str) -> str:
    """Return the greeting for ``name``."""
    return f"Hello {name}!"


def armstrong_numbers() -> list[int]:
    """Three-digit numbers above 100 equal to the sum of the cubes of their digits.

    Only digits 0 to 8 are examined.
    """
    found = []
    for hundreds, tens, units in product(range(_DIGIT_LIMIT), repeat=3):
        number = hundreds * 100 + tens * 10 + units
        if number > 100 and number == sum(
            digit**_ARMSTRONG_POWER for digit in (hundreds, tens, units)
        ):
            found.append(number)
    return found


def _read_int(prompt: str) -> int:
    print(prompt, end="", flush=True)
    line = sys.stdin.readline()
    try:
        return int(line.strip())
    except ValueError:
        raise SystemExit(f"not a number: {line.strip()!r}") from None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Introductory exercises.")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("arrays", help="running totals of the month lengths")
    sqrt_parser = commands.add_parser("sqrt", help="table of roots and squares")
    sqrt_parser.add_argument("rows", nargs="?", type=int)
    commands.add_parser("hello", help="ask for a name and greet it")
    commands.add_parser("armstrong", help="list three-digit Armstrong numbers")
    args = parser.parse_args(argv)

    if args.command == "arrays":
        print(format_array("a", MONTH_DAYS))
        print()
        print(format_array("b", cumulative_sums(MONTH_DAYS)))
    elif args.command == "sqrt":
        rows = args.rows if args.rows is not None else _read_int("Row number:")
        print("number, square_root, square")
        print("--------------------------------------")
        for line in sqrt_table(rows):
            print(line)
    elif args.command == "hello":
        print("What is your name?")
        name = sys.stdin.readline()[:_NAME_LIMIT].rstrip("\n")
        print(greeting(name))
    else:
        for number in armstrong_numbers():
            print(f"{number} ")
        print(f"Finished after {_DIGIT_LIMIT * _DIGIT_LIMIT} iterations", end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())