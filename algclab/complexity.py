"""Exercises that count the basic operations performed by small algorithms."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import NamedTuple, Optional

_U32_MASK = (1 << 32) - 1


class Counted(NamedTuple):
    """A result together with the number of operations it took."""

    value: object
    operations: int


class DedupResult(NamedTuple):
    """Outcome of :func:`remove_duplicates`."""

    values: list[int]
    comparisons: int
    shifts: int


def _check_natural(n: int) -> None:
    if n < 0:
        raise ValueError(f"n must not be negative: {n}")


def f1(n: int) -> Counted:
    """Count every pair (i, j) with 1 <= i, j <= n."""
    _check_natural(n)
    result = operations = 0
    for _ in range(1, n + 1):
        for _ in range(1, n + 1):
            result += 1
            operations += 1
    return Counted(result & _U32_MASK, operations)


def f2(n: int) -> Counted:
    """Count every pair (i, j) with 1 <= j <= i <= n."""
    _check_natural(n)
    result = operations = 0
    for i in range(1, n + 1):
        for _ in range(1, i + 1):
            result += 1
            operations += 1
    return Counted(result & _U32_MASK, operations)


def f3(n: int) -> Counted:
    """Sum j over every pair (i, j) with 1 <= i <= j <= n."""
    _check_natural(n)
    result = operations = 0
    for i in range(1, n + 1):
        for j in range(i, n + 1):
            result += j
            operations += 1
    return Counted(result & _U32_MASK, operations)


def f4(n: int) -> Counted:
    """Add each i in 1..n once per decimal digit it has."""
    _check_natural(n)
    result = operations = 0
    for i in range(1, n + 1):
        j = i
        while j >= 1:
            result += i
            operations += 1
            j //= 10
    return Counted(result & _U32_MASK, operations)


def _check_pairs(values: Sequence[int]) -> None:
    if len(values) < 2:
        raise ValueError("at least two values are required")


def count_changes(values: Sequence[int]) -> Counted:
    """Count positions whose value differs from the one before."""
    _check_pairs(values)
    changes = comparisons = 0
    for previous, current in zip(values, values[1:]):
        comparisons += 1
        if current != previous:
            changes += 1
    return Counted(changes, comparisons)


def index_beating_most(values: Sequence[int]) -> Counted:
    """Index of the first element greater than the most earlier elements.

    The value is None when no element is greater than any earlier one.
    """
    _check_pairs(values)
    best = 0
    best_index: Optional[int] = None
    comparisons = 0
    for index, value in enumerate(values):
        beaten = 0
        for earlier in values[:index]:
            comparisons += 1
            if value > earlier:
                beaten += 1
                if beaten > best:
                    best = beaten
                    best_index = index
    return Counted(best_index, comparisons)


def is_consecutive(values: Sequence[int]) -> Counted:
    """Whether each element is one more than the previous; stops at the first break."""
    additions = 0
    for previous, current in zip(values, values[1:]):
        additions += 1
        if previous + 1 != current:
            return Counted(False, additions)
    return Counted(True, additions)


def remove_duplicates(values: Sequence[int]) -> DedupResult:
    """Keep the first occurrence of each value, counting comparisons and shifts."""
    items = list(values)
    comparisons = shifts = 0
    i = 0
    while i < len(items):
        k = i + 1
        while k < len(items):
            comparisons += 1
            if items[i] == items[k]:
                del items[k]
                shifts += len(items) - k
            else:
                k += 1
        i += 1
    return DedupResult(items, comparisons, shifts)


def _t1(n: int) -> tuple[int, int]:
    if n == 0:
        return 0, 1
    value, calls = _t1(n // 3)
    return value + n, calls + 1


def _t2(n: int) -> tuple[int, int]:
    if n <= 2:
        return n, 1
    low, low_calls = _t2(n // 3)
    high, high_calls = _t2((n + 2) // 3)
    return low + high + n, low_calls + high_calls + 1


def _t3(n: int) -> tuple[int, int]:
    if n <= 2:
        return n, 1
    if n % 3 == 0:
        value, calls = _t3(n // 3)
        return 2 * value + n, calls + 1
    low, low_calls = _t3(n // 3)
    high, high_calls = _t3((n + 2) // 3)
    return low + high + n, low_calls + high_calls + 1


def t1(n: int) -> Counted:
    """T1(n) = T1(n/3) + n, with the number of recursive calls made."""
    _check_natural(n)
    value, calls = _t1(n)
    return Counted(value, calls - 1)


def t2(n: int) -> Counted:
    """T2(n) = T2(n/3) + T2((n+2)/3) + n, with the number of recursive calls made."""
    _check_natural(n)
    value, calls = _t2(n)
    return Counted(value, calls - 1)


def t3(n: int) -> Counted:
    """T2 computed with one call when n is a multiple of 3, with the recursive calls made."""
    _check_natural(n)
    value, calls = _t3(n)
    return Counted(value, calls - 1)


def _motzkin(n: int) -> tuple[int, int]:
    if n < 2:
        return 1, 0
    total, mults = _motzkin(n - 1)
    for k in range(n - 1):
        left, left_mults = _motzkin(k)
        right, right_mults = _motzkin(n - 2 - k)
        total += left * right
        mults += left_mults + right_mults + 1
    return total, mults


def motzkin_recursive(n: int) -> Counted:
    """The n-th Motzkin number by plain recursion, with multiplications performed."""
    _check_natural(n)
    value, mults = _motzkin(n)
    return Counted(value, mults)


def motzkin_dynamic(n: int) -> Counted:
    """The n-th Motzkin number from a table of earlier ones, with multiplications performed."""
    _check_natural(n)
    table: list[int] = []
    mults = 0
    for i in range(n + 1):
        if i < 2:
            table.append(1)
            continue
        total = table[i - 1]
        for k in range(i - 1):
            total += table[k] * table[i - 2 - k]
            mults += 1
        table.append(total)
    return Counted(table[n], mults)


_CHANGE_ARRAYS = (
    (3, 3, 3, 3, 3, 3, 3, 3, 3, 3),
    (4, 3, 3, 3, 3, 3, 3, 3, 3, 3),
    (4, 5, 3, 3, 3, 3, 3, 3, 3, 3),
    (4, 5, 1, 3, 3, 3, 3, 3, 3, 3),
    (4, 5, 1, 2, 3, 3, 3, 3, 3, 3),
    (4, 5, 1, 2, 6, 3, 3, 3, 3, 3),
    (4, 5, 1, 2, 6, 8, 3, 3, 3, 3),
    (4, 5, 1, 2, 6, 8, 7, 3, 3, 3),
    (4, 5, 1, 2, 6, 8, 7, 9, 3, 3),
    (4, 5, 1, 2, 6, 8, 7, 9, 3, 0),
)

_BEATING_ARRAYS = (
    (1, 9, 2, 8, 3, 4, 5, 3, 7, 2),
    (2, 2, 2, 2, 2, 2, 2, 2, 2, 2),
    (1, 7, 4, 6, 5, 2, 3, 2, 1, 0),
) + _CHANGE_ARRAYS

_CONSECUTIVE_ARRAYS = (
    (1, 3, 4, 5, 5, 6, 7, 7, 8, 9),
    (1, 2, 4, 5, 5, 6, 7, 8, 8, 9),
    (1, 2, 3, 6, 8, 8, 8, 9, 9, 9),
    (1, 2, 3, 4, 6, 7, 7, 8, 8, 9),
    (1, 2, 3, 4, 5, 7, 7, 8, 8, 9),
    (1, 2, 3, 4, 5, 6, 8, 8, 9, 9),
    (1, 2, 3, 4, 5, 6, 7, 9, 9, 9),
    (1, 2, 3, 4, 5, 6, 7, 8, 8, 9),
    (1, 2, 3, 4, 5, 6, 7, 8, 9, 9),
    (1, 2, 3, 4, 5, 6, 7, 8, 9, 10),
)

_DEDUP_ARRAYS = (
    (1, 2, 2, 2, 3, 3, 4, 5, 8, 8),
    (1, 2, 2, 2, 3, 3, 3, 3, 8, 8),
    (1, 2, 3, 2, 1, 3, 4),
    (1, 2, 5, 4, 7, 0, 3, 9, 6, 8),
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
)


def _bracketed(values: Sequence[int]) -> str:
    return "[" + "".join(f"{value}," for value in values) + "]"


def _read_count(argument: Optional[int]) -> int:
    if argument is not None:
        return argument
    print("n -> ", end="", flush=True)
    line = sys.stdin.readline()
    try:
        return int(line.strip())
    except ValueError:
        raise SystemExit(f"not a number: {line.strip()!r}") from None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Operation-counting exercises.")
    commands = parser.add_subparsers(dest="command", required=True)
    f_parser = commands.add_parser("f", help="iterations of f1..f4")
    f_parser.add_argument("n", nargs="?", type=int)
    commands.add_parser("changes", help="count value changes")
    commands.add_parser("beating", help="element beating most earlier ones")
    commands.add_parser("consecutive", help="check consecutive sequences")
    commands.add_parser("dedup", help="remove duplicate values")
    commands.add_parser("t", help="recursive calls of T1, T2 and T3")
    commands.add_parser("motzkin", help="Motzkin numbers, recursive and dynamic")
    args = parser.parse_args(argv)

    if args.command == "f":
        n = _read_count(args.n)
        print(
            "n, f1(n), no iteracoes, f2(n), no iteracoes, "
            "f3(n), no iteracoes, f4(n), no iteracoes"
        )
        for i in range(n):
            (a, ca), (b, cb), (c, cc), (d, cd) = f1(i), f2(i), f3(i), f4(i)
            print(
                f"{i} {a:6d} {ca:14d} {b:4d} {cb:14d} "
                f"{c:4d} {cc:14d} {d:4d} {cd:14d}"
            )
    elif args.command == "changes":
        print("Resultado Operacoes")
        for values in _CHANGE_ARRAYS:
            changes, comparisons = count_changes(values)
            print(f"{changes} {comparisons}")
    elif args.command == "beating":
        for values in _BEATING_ARRAYS:
            index, comparisons = index_beating_most(values)
            if index is None:
                print(f"valor:  - comparacoes:  {comparisons}  indice: -1")
            else:
                print(
                    f"valor:  {values[index]} comparacoes:  {comparisons}"
                    f"  indice: {index}"
                )
    elif args.command == "consecutive":
        for values in _CONSECUTIVE_ARRAYS:
            consecutive, additions = is_consecutive(values)
            print(f"Resultado: {int(not consecutive)}, Operacoes: {additions}")
    elif args.command == "dedup":
        for values in _DEDUP_ARRAYS:
            result = remove_duplicates(values)
            print(
                f"{_bracketed(values)}{_bracketed(result.values)}"
                f" -> Comparacoes: {result.comparisons} Shifs: {result.shifts}"
            )
    elif args.command == "t":
        print(
            "n\tT1(n)\tN de Chamadas Recursivas\tT2(n)\tN de Chamadas Recursivas"
            "\tT3(n)\tN de Chamadas Recursivas"
        )
        print("-" * 131)
        for n in range(201):
            (a, ca), (b, cb), (c, cc) = t1(n), t2(n), t3(n)
            print(f"{n} {a:10d} {ca:16d} {b:20d} {cb:20d} {c:20d} {cc:15d}")
    else:
        print(
            "n:  |  mottskin (rec) |  mults (rec)  |  "
            "mottskin (dynamic)  |  mults (dynamic)"
        )
        for i in range(16):
            rec, rec_mults = motzkin_recursive(i)
            dyn, dyn_mults = motzkin_dynamic(i)
            print(f"{i} {rec:13d} {rec_mults:13d}{dyn:23d} {dyn_mults:15d}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())