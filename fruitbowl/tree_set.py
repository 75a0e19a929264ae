"""Pick a number of distinct fruits at random and keep them sorted."""

from __future__ import annotations

import argparse
import random

ALL_FRUIT = (
    "apple",
    "banana",
    "cherry",
    "date",
    "elderberry",
    "fig",
    "grape",
    "honeydew",
    "pineapple",
)

AMOUNTS = (1, 3, 5, 7, 9)


def pick_sorted_fruit(amount: int, rng: random.Random | None = None) -> list[str]:
    """Insert shuffled fruit into a sorted set until it holds ``amount`` items.

    At least one fruit is always inserted; at most every known fruit is.
    """
    rng = rng if rng is not None else random.Random()
    shuffled = list(ALL_FRUIT)
    rng.shuffle(shuffled)
    chosen: set[str] = set()
    for fruit in shuffled:
        chosen.add(fruit)
        if len(chosen) >= amount:
            break
    return sorted(chosen)


def _format_set(items: list[str]) -> str:
    return "{" + ", ".join(f'"{item}"' for item in items) + "}"


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(
        description="Show sorted sets of randomly chosen fruit."
    ).parse_args(argv)
    for amount in AMOUNTS:
        fruit = pick_sorted_fruit(amount)
        print(f"When amount is {amount}: inserted fruit are {_format_set(fruit)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())