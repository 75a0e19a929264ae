"""A random fruit salad served in priority order: pineapple, then mango, then the rest."""

from __future__ import annotations

import argparse
import heapq
import random
from dataclasses import dataclass

ALL_FRUIT = (
    "Apple",
    "Orange",
    "Pear",
    "Peach",
    "Banana",
    "Fig",
    "Pineapple",
    "Mango",
    "Watermelon",
    "Strewberry",
)

PINEAPPLE_SERVINGS = 3

_RANKS = {"Pineapple": 2, "Mango": 1}


@dataclass(frozen=True)
class Fruit:
    """A fruit ordered by priority: pineapple > mango > any other fruit.

    Two fruits of the same priority compare as equal in ordering even when
    their names differ; equality itself still compares names.
    """

    name: str

    @property
    def rank(self) -> int:
        return _RANKS.get(self.name, 0)

    def __lt__(self, other: Fruit) -> bool:
        if not isinstance(other, Fruit):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: Fruit) -> bool:
        if not isinstance(other, Fruit):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: Fruit) -> bool:
        if not isinstance(other, Fruit):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: Fruit) -> bool:
        if not isinstance(other, Fruit):
            return NotImplemented
        return self.rank >= other.rank

    def __str__(self) -> str:
        return self.name


def generate_fruit_salad(rng: random.Random | None = None) -> list[Fruit]:
    """Draw fruit until three pineapples are in, and return them in ascending priority."""
    rng = rng if rng is not None else random.Random()
    heap: list[Fruit] = []
    pineapples = 0
    while pineapples < PINEAPPLE_SERVINGS:
        fruit = Fruit(rng.choice(ALL_FRUIT))
        if fruit.name == "Pineapple":
            pineapples += 1
        heapq.heappush(heap, fruit)
    return [heapq.heappop(heap) for _ in range(len(heap))]


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(
        description="Make a random fruit salad with three servings of pineapple."
    ).parse_args(argv)
    salad = generate_fruit_salad()
    print("Random Fruit Salad With 3 Servings of Pineapple:")
    for fruit in salad:
        print(fruit.name)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())