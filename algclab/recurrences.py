"""Four ways to compute P(n) = 3 P(n-1) + 2 P(n-2), P(0) = 0, P(1) = 1."""

from __future__ import annotations

import argparse
import math
import time
from decimal import ROUND_HALF_EVEN, Context, Decimal

_U64_MASK = (1 << 64) - 1

_C1 = 0.24253562503633297352
_C2 = 1.27019663313689157536

DEFAULT_N = 35


def _check(n: int) -> None:
    if n < 0:
        raise ValueError(f"n must not be negative: {n}")


def p_recursive(n: int) -> int:
    """P(n) by direct recursion, as an unsigned 64-bit value."""
    _check(n)
    if n < 2:
        return n
    return (3 * p_recursive(n - 1) + 2 * p_recursive(n - 2)) & _U64_MASK


def p_iterative(n: int) -> int:
    """P(n) by iteration, as an unsigned 64-bit value."""
    _check(n)
    if n < 2:
        return n
    previous, current = 0, 1
    for _ in range(2, n + 1):
        previous, current = current, (3 * current + 2 * previous) & _U64_MASK
    return current


def p_closed_form(n: int) -> int:
    """P(n) from the closed form of the recurrence, rounded to an integer."""
    _check(n)
    ctx = Context(prec=80)
    root = ctx.sqrt(Decimal(17))
    half = Decimal("0.5")
    a = ctx.power(ctx.multiply(half, ctx.add(Decimal(3), root)), n)
    b = ctx.power(ctx.multiply(half, ctx.subtract(Decimal(3), root)), n)
    value = ctx.divide(ctx.subtract(a, b), root)
    return int(value.to_integral_value(rounding=ROUND_HALF_EVEN)) & _U64_MASK


def p_exponential(n: int) -> int:
    """P(n) approximated by c1 * exp(c2 * n), rounded to the nearest integer."""
    _check(n)
    return math.floor(_C1 * math.exp(_C2 * n) + 0.5) & _U64_MASK


class Stopwatch:
    """Measures processor time between successive readings."""

    def __init__(self) -> None:
        self._last = time.process_time()

    def elapsed(self) -> float:
        """Seconds since the previous reading (or creation); starts a new lap."""
        now = time.process_time()
        delta = now - self._last
        self._last = now
        return delta


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Time four ways of computing P(n).")
    parser.add_argument("n", nargs="?", type=int, default=DEFAULT_N)
    args = parser.parse_args(argv)
    if args.n < 0:
        parser.error("n must not be negative")
    methods = (
        ("Recursive", p_recursive),
        ("Iteration", p_iterative),
        ("Recurrent", p_closed_form),
        ("Exponencial", p_exponential),
    )
    for name, method in methods:
        watch = Stopwatch()
        value = method(args.n)
        seconds = watch.elapsed()
        print(f"P({args.n}), {name} -> {value}, after {seconds:3.4f} seconds")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())