"""Weigh programming languages from 1 to 100 by their age."""

from __future__ import annotations

import argparse
from collections.abc import Mapping

CURRENT_YEAR = 2024


def init_languages() -> dict[str, int]:
    """Return popular languages mapped to the year each appeared."""
    return {
        "JavaScript": 1995,
        "HTML/CSS": 1990,
        "Python": 1991,
        "SQL": 1974,
        "TypeScript": 2012,
        "Bash/Shell": 1989,
        "Java": 1995,
        "C#": 2000,
        "C++": 1985,
        "C": 1972,
        "PHP": 1995,
        "PowerShell": 2006,
        "Go": 2007,
        "Rust": 2010,
    }


def calculate_weights(years_active: Mapping[str, int]) -> dict[str, int]:
    """Map each language to a weight from 1 (newest) to 100 (oldest).

    Ages are measured from the current year and scaled linearly; when all
    languages have the same age every weight is 1.
    """
    ages = {language: CURRENT_YEAR - year for language, year in years_active.items()}
    if not ages:
        return {}
    youngest = min(ages.values())
    span = max(ages.values()) - youngest
    weights = {}
    for language, age in ages.items():
        normalized = (age - youngest) / span if span else 0.0
        weights[language] = int(normalized * 99.0) + 1
    return weights


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(
        description="Weigh programming languages by age."
    ).parse_args(argv)
    weights = calculate_weights(init_languages())
    print("Language weighing from 1-100 by age (1 is newest and 100 is oldest):")
    for language, weight in weights.items():
        print(f"{language}: {weight}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())