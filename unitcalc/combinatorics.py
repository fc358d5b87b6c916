"""Factorials, combinations and arrangements, with a small interactive command."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Sequence


def factorial(n: int) -> int:
    """Return n! for a non-negative integer n."""
    if n < 0:
        raise ValueError(f"factorial is undefined for negative numbers: {n}")
    return math.factorial(n)


def _check_args(n: int, k: int) -> None:
    if not (n > 1 and n > k and k > 0):
        raise ValueError(f"invalid arguments: n={n}, k={k} (need n > 1, n > k, k > 0)")


def combination(n: int, k: int) -> int:
    """Return the number of k-element combinations of n elements, C(n, k)."""
    _check_args(n, k)
    return factorial(n) // (factorial(k) * factorial(n - k))


def arrangement(n: int, k: int) -> int:
    """Return the number of k-element arrangements of n elements, A(n, k)."""
    _check_args(n, k)
    return factorial(n) // factorial(n - k)


def _ask_int(prompt: str) -> int:
    print(prompt)
    return int(input().strip())


def main(argv: Sequence[str] | None = None) -> int:
    """Compute C(n, k) or A(n, k); values not given on the command line are asked for."""
    parser = argparse.ArgumentParser(description="Combinations and arrangements.")
    parser.add_argument("n", type=int, nargs="?")
    parser.add_argument("k", type=int, nargs="?")
    parser.add_argument("option", type=int, nargs="?", help="1 = combination, 2 = arrangement")
    args = parser.parse_args(sys.argv[1:] if argv is None else list(argv))

    try:
        n = args.n if args.n is not None else _ask_int(" entered n elements ")
        k = args.k if args.k is not None else _ask_int(" entered k elements ")
        if args.option is None:
            print("\n option :")
            print("1. combination (C)")
            print("2. arrangement (A)")
            option = int(input().strip())
        else:
            option = args.option
    except (ValueError, EOFError):
        print("error!")
        return 1

    print("--------------------------")
    operations = {
        1: ("combination", "C", combination),
        2: ("arrangement", "A", arrangement),
    }
    if option not in operations:
        print("error!")
        return 1

    name, symbol, func = operations[option]
    try:
        result = func(n, k)
    except ValueError:
        print("error")
        return 1
    print(f"{name} {symbol}({n}, {k}) = {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())