"""Make a fruit salad of a chosen number of fruits."""

from __future__ import annotations

import argparse
import random

FRUITS = (
    "Arbutus",
    "Loquat",
    "Strawberry Tree Berry",
    "Pomegranate",
    "Fig",
    "Cherry",
    "Orange",
    "Pear",
    "Peach",
    "Apple",
)


def create_fruit_salad(num_fruits: int, rng: random.Random | None = None) -> list[str]:
    """Shuffle the known fruit and return the first ``num_fruits`` of them."""
    rng = rng if rng is not None else random.Random()
    fruits = list(FRUITS)
    rng.shuffle(fruits)
    return fruits[:num_fruits]


def _non_negative(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid digit found in string: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"invalid digit found in string: {value!r}")
    return number


def _format_list(items: list[str]) -> str:
    return "[" + ", ".join(f'"{item}"' for item in items) + "]"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Number of fruits to include in the salad"
    )
    parser.add_argument("--version", action="version", version="1.0")
    parser.add_argument("-n", "--number", type=_non_negative, required=True)
    opts = parser.parse_args(argv)
    salad = create_fruit_salad(opts.number)
    print(f"Created fruilt salad with {opts.number} fruits: {_format_list(salad)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())