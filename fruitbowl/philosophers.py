"""The dining philosophers: many threads sharing a few forks without deadlock."""

from __future__ import annotations

import argparse
import threading
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

SEATING: tuple[tuple[str, int, int], ...] = (
    ("Jürgen Habermas", 0, 1),
    ("Friedrich Engels", 1, 2),
    ("Karl Marx", 2, 3),
    ("Thomas Piketty", 3, 0),
    ("Michel Foucault", 0, 1),
    ("Socrates", 1, 2),
    ("Plato", 2, 3),
    ("Aristotle", 3, 0),
    ("Pythagoras", 0, 1),
    ("Heraclitus", 1, 2),
    ("Democritus", 2, 3),
    ("Diogenes", 3, 0),
    ("Epicurus", 0, 1),
    ("Zeno of Citium", 1, 2),
    ("Thales of Miletus", 2, 3),
)

FORK_COUNT = 4
EATING_TIME = 1.0

Output = Callable[[str], None]


@dataclass(eq=False)
class Fork:
    """A fork that only one philosopher can hold at a time."""

    id: int
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


@dataclass(eq=False)
class Philosopher:
    """A philosopher sitting between two forks."""

    id: int
    name: str
    left_fork: Fork
    right_fork: Fork

    def eat(self, eating_time: float = EATING_TIME, out: Output | None = None) -> None:
        """Pick up both forks, eat for ``eating_time`` seconds and put them down.

        Even-numbered philosophers take the left fork first, odd-numbered ones
        the right fork, which breaks the symmetry that leads to deadlock.
        """
        emit = out if out is not None else print
        if self.id % 2 == 0:
            first, second = self.left_fork, self.right_fork
        else:
            first, second = self.right_fork, self.left_fork

        emit(f"{self.name} picked up fork {first.id}.")
        with first.lock:
            emit(f"{self.name} picked up fork {second.id}.")
            with second.lock:
                emit(f"{self.name} is eating.")
                time.sleep(eating_time)
                emit(f"{self.name} finished eating.")
                emit(f"{self.name} put down fork {first.id}.")
                emit(f"{self.name} put down fork {second.id}.")


def dine(
    seating: Iterable[tuple[str, int, int]] = SEATING,
    fork_count: int = FORK_COUNT,
    eating_time: float = EATING_TIME,
    out: Output | None = None,
) -> float:
    """Let every philosopher eat once, each in a thread; return the elapsed seconds.

    ``seating`` holds (name, left fork, right fork) entries; the position of
    an entry is the philosopher's id.
    """
    forks = [Fork(fork_id) for fork_id in range(fork_count)]
    philosophers = []
    for philosopher_id, (name, left, right) in enumerate(seating):
        for fork_id in (left, right):
            if not 0 <= fork_id < fork_count:
                raise ValueError(
                    f"{name} sits at fork {fork_id}, but there are only {fork_count} forks"
                )
        philosophers.append(Philosopher(philosopher_id, name, forks[left], forks[right]))

    errors: list[BaseException] = []

    def run(philosopher: Philosopher) -> None:
        try:
            philosopher.eat(eating_time, out)
        except BaseException as exc:  # reported to the caller after joining
            errors.append(exc)

    start = time.perf_counter()
    threads = [threading.Thread(target=run, args=(p,)) for p in philosophers]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    elapsed = time.perf_counter() - start

    if errors:
        raise errors[0]
    return elapsed


def _non_negative_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value!r}")
    return number


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Simulate fifteen philosophers sharing four forks."
    )
    parser.add_argument(
        "--eating-time",
        type=_non_negative_float,
        default=EATING_TIME,
        help="seconds each philosopher spends eating",
    )
    opts = parser.parse_args(argv)
    print("Dining Philosophers Problem:  15 Philosophers, 4 Forks...Yikes!!")
    elapsed = dine(eating_time=opts.eating_time)
    print(f"Total time: {elapsed:.6f}s")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())