"""Shuffled fruit salads built on a list, a deque and a linked sequence."""

from __future__ import annotations

import argparse
import random
import sys
from collections import deque
from collections.abc import Iterable

BASE_FRUIT = ("apple", "banana", "cherry", "date", "elderberry", "fig", "grape")
EXTRA_FRUIT = ("pomegranate", "kiwi", "lemon")


def format_salad(items: Iterable[str]) -> str:
    """Join the fruit with commas."""
    return ", ".join(items)


def _shuffled(items: Iterable[str], rng: random.Random | None) -> list[str]:
    rng = rng if rng is not None else random.Random()
    result = list(items)
    rng.shuffle(result)
    return result


def linked_list_salad(rng: random.Random | None = None) -> list[str]:
    """Shuffle three fruits, then add Pomegranate, Fig and Cherry at the end."""
    salad = deque(_shuffled(EXTRA_FRUIT, rng))
    salad.extend(("Pomegranate", "Fig", "Cherry"))
    return list(salad)


def deque_salad(rng: random.Random | None = None) -> list[str]:
    """Shuffle ten fruits, put Pomegranate in front and Fig and Cherry behind."""
    salad = deque(_shuffled(BASE_FRUIT + EXTRA_FRUIT, rng))
    salad.appendleft("Pomegranate")
    salad.extend(("Fig", "Cherry"))
    return list(salad)


def vector_salad(rng: random.Random | None = None) -> list[str]:
    """Shuffle the seven base fruits."""
    return _shuffled(BASE_FRUIT, rng)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print a shuffled fruit salad.")
    parser.add_argument(
        "kind",
        nargs="?",
        choices=("vector", "deque", "linked-list"),
        default="vector",
        help="which salad to make",
    )
    opts = parser.parse_args(argv)
    if opts.kind == "vector":
        sys.stdout.write(format_salad(vector_salad()))
    else:
        salad = deque_salad() if opts.kind == "deque" else linked_list_salad()
        sys.stdout.write("Fruit salad: \n" + format_salad(salad))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())