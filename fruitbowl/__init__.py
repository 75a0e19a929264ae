"""Small example programs on collections, randomness, concurrency and ranking."""

__version__ = "0.1.0"

__all__ = [
    "cli_salad",
    "counting",
    "custom_salad",
    "heap_salad",
    "languages",
    "pagerank",
    "philosophers",
    "random_set",
    "shuffled_salads",
    "tree_set",
]