"""Draw fruit at random and count how many distinct ones turn up."""

from __future__ import annotations

import argparse
import random

ALL_FRUIT = (
    "Apple",
    "Banana",
    "Cherry",
    "Date",
    "Elderberry",
    "Fig",
    "Grape",
    "Honeydew",
    "Pineapple",
)

DRAWS = 100


def generate_random_fruit(rng: random.Random | None = None) -> str:
    """Return one fruit chosen at random."""
    rng = rng if rng is not None else random.Random()
    return rng.choice(ALL_FRUIT)


def collect_random_fruit(draws: int = DRAWS, rng: random.Random | None = None) -> set[str]:
    """Draw ``draws`` fruits and return the distinct ones."""
    rng = rng if rng is not None else random.Random()
    return {generate_random_fruit(rng) for _ in range(draws)}


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(
        description="Count distinct fruit among random draws."
    ).parse_args(argv)
    print("Generate random fruit")
    fruit = collect_random_fruit()
    print(f"Number of random fruit are {len(fruit)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())