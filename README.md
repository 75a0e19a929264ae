# fruitbowl

A collection of small, self-contained programs. Each one shows a single idea:
a collection type, random choice, thread synchronisation or a ranking
algorithm. Most of them make fruit salads. Only the standard library is used.

## Installation

```
pip install .
```

Use `pip install .[test]` to install pytest as well, then run `pytest`.

## Commands

| Command | What it does |
| --- | --- |
| `fruitbowl-heap` | Draws random fruit until three pineapples have been drawn, then prints every fruit drawn, ordered from lowest to highest priority: other fruit first, then mango, then pineapple. |
| `fruitbowl-tree-set` | For amounts 1, 3, 5, 7 and 9, picks that many shuffled fruit and prints them as a sorted set. |
| `fruitbowl-custom` | Shuffles fruit that you name, either in a file of comma separated values or with `-f`/`--fruit "apple, pear"`, and prints one per line. A file that cannot be read is reported as a usage error. |
| `fruitbowl-salad` | Makes a salad of `-n`/`--number N` fruits taken from a fixed list of ten. `N` must be a non-negative whole number. |
| `fruitbowl-random-set` | Draws a random fruit 100 times and reports how many distinct fruit came up. |
| `fruitbowl-shuffled` | Prints one shuffled salad. The optional argument chooses which: `vector` (the default, seven fruits), `deque` (ten shuffled fruits with Pomegranate in front and Fig and Cherry behind) or `linked-list` (three shuffled fruits followed by Pomegranate, Fig and Cherry). |
| `fruitbowl-philosophers` | Runs the dining philosophers problem with 15 philosophers and 4 forks, one thread each, and prints the total time. `--eating-time SECONDS` sets how long each one eats (default 1). |
| `fruitbowl-count` | Counts how often each number appears in a sample list. |
| `fruitbowl-languages` | Weights programming languages from 1 (newest) to 100 (oldest) by age. |
| `fruitbowl-pagerank` | Computes PageRank over a small graph of sports websites and prints a short explanation of the algorithm. |

Examples:

```
fruitbowl-custom fruit.csv
fruitbowl-custom --fruit "apple, pear, fig"
fruitbowl-salad --number 4
fruitbowl-shuffled deque
fruitbowl-philosophers --eating-time 0.1
fruitbowl-pagerank
```

## Using it as a library

The functions that involve chance take an optional `random.Random` instance.
Pass a seeded one to get the same result every time:

```python
import random

from fruitbowl.cli_salad import create_fruit_salad
from fruitbowl.counting import count_frequencies
from fruitbowl.pagerank import PageRank

salad = create_fruit_salad(3, random.Random(42))
frequencies = count_frequencies([1, 2, 2, 3, 3, 3])  # [(1, 1), (2, 2), (3, 3)]
ranks = PageRank(0.85, 100).rank([[1, 2], [0], [0, 3], [0], [0, 1]])
```

What else there is:

- `fruitbowl.heap_salad`: `Fruit`, ordered by priority, and `generate_fruit_salad`.
- `fruitbowl.tree_set`: `pick_sorted_fruit(amount)`.
- `fruitbowl.custom_salad`: `create_fruit_salad(fruits)`, `csv_to_list(text)` and
  `display_fruit_salad(fruits)`.
- `fruitbowl.random_set`: `generate_random_fruit()` and `collect_random_fruit(draws)`.
- `fruitbowl.shuffled_salads`: `vector_salad`, `deque_salad`, `linked_list_salad`
  and `format_salad`.
- `fruitbowl.philosophers`: `Fork`, `Philosopher` and `dine(seating, fork_count,
  eating_time, out)`, which returns the elapsed seconds; `out` receives each
  line instead of printing it.
- `fruitbowl.languages`: `init_languages()` and `calculate_weights(years_active)`.
- `fruitbowl.pagerank`: `PageRank(damping, iterations).rank(graph)`; a link to a
  node that does not exist raises `IndexError`.

## Limits

- `csv_to_list` splits on commas only; it knows nothing of quoting, and line
  breaks are only trimmed from the ends of each value.
- In `PageRank.rank`, a node with no outgoing links passes none of its rank on.
- `calculate_weights` measures ages from the fixed year 2024.