"""Make a fruit salad from fruit given on the command line or in a CSV file."""

from __future__ import annotations

import argparse
import random
from pathlib import Path


def create_fruit_salad(fruits: list[str], rng: random.Random | None = None) -> list[str]:
    """Return the given fruit in a random order."""
    rng = rng if rng is not None else random.Random()
    salad = list(fruits)
    rng.shuffle(salad)
    return salad


def csv_to_list(text: str) -> list[str]:
    """Split comma separated values and trim whitespace around each one."""
    return [item.strip() for item in text.split(",")]


def display_fruit_salad(fruits: list[str]) -> None:
    """Print the salad, one fruit per line."""
    print("Your fruit salad contains:")
    for fruit in fruits:
        print(fruit)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Make a Fruit Salad")
    parser.add_argument("--version", action="version", version="1.0")
    parser.add_argument(
        "-f",
        "--fruit",
        help="Fruits input as a string of comma separated values",
    )
    parser.add_argument("csvfile", nargs="?", help="CSV file listing the fruit")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    opts = parser.parse_args(argv)
    if opts.csvfile is not None:
        try:
            text = Path(opts.csvfile).read_text()
        except OSError as exc:
            parser.error(f"Could not read file: {exc}")
        fruits = csv_to_list(text)
    else:
        fruits = csv_to_list(opts.fruit or "")
    display_fruit_salad(create_fruit_salad(fruits))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())