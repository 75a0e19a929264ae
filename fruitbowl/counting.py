"""Count how often each number appears in a sequence."""

from __future__ import annotations

import argparse
from collections import Counter
from collections.abc import Iterable

NUMBERS = (1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 1, 2, 3, 4, 1, 2, 3, 1)


def count_frequencies(numbers: Iterable[int]) -> list[tuple[int, int]]:
    """Return (number, frequency) pairs, in order of first appearance."""
    return list(Counter(numbers).items())


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(
        description="Count the frequency of each number in a list."
    ).parse_args(argv)
    numbers = list(NUMBERS)
    result = count_frequencies(numbers)
    print(f"The frequency of each number in the vector is: {result}")
    print(f"The original vector is: {numbers}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())