import threading

import pytest

from fruitbowl.philosophers import SEATING, Fork, Philosopher, dine, main


def test_even_philosopher_takes_left_fork_first():
    left, right = Fork(0), Fork(1)
    lines = []
    Philosopher(0, "Plato", left, right).eat(0, lines.append)
    assert lines == [
        "Plato picked up fork 0.",
        "Plato picked up fork 1.",
        "Plato is eating.",
        "Plato finished eating.",
        "Plato put down fork 0.",
        "Plato put down fork 1.",
    ]


def test_odd_philosopher_takes_right_fork_first():
    left, right = Fork(0), Fork(1)
    lines = []
    Philosopher(1, "Socrates", left, right).eat(0, lines.append)
    assert lines[0] == "Socrates picked up fork 1."
    assert lines[1] == "Socrates picked up fork 0."
    assert lines[4] == "Socrates put down fork 1."


def test_forks_are_released_after_eating():
    left, right = Fork(0), Fork(1)
    Philosopher(2, "Zeno", left, right).eat(0, lambda line: None)
    assert not left.lock.locked()
    assert not right.lock.locked()


def test_every_philosopher_eats_once_in_order():
    lines = []
    lock = threading.Lock()

    def record(line):
        with lock:
            lines.append(line)

    elapsed = dine(eating_time=0, out=record)
    assert elapsed >= 0
    assert len(lines) == len(SEATING) * 6
    for name, _, _ in SEATING:
        own = [line[len(name) + 1:] for line in lines if line.startswith(f"{name} ")]
        assert len(own) == 6
        assert own[0].startswith("picked up fork")
        assert own[1].startswith("picked up fork")
        assert own[2:4] == ["is eating.", "finished eating."]
        assert own[4].startswith("put down fork")
        assert own[5].startswith("put down fork")


def test_no_two_eaters_share_a_fork():
    forks_of = {name: {left, right} for name, left, right in SEATING}
    eating = set()
    conflicts = []
    lock = threading.Lock()

    def record(line):
        with lock:
            for name in forks_of:
                if line == f"{name} is eating.":
                    for other in eating:
                        if forks_of[name] & forks_of[other]:
                            conflicts.append((name, other))
                    eating.add(name)
                elif line == f"{name} finished eating.":
                    eating.discard(name)

    eating_time = 0.005
    elapsed = dine(eating_time=eating_time, out=record)
    assert elapsed >= 7 * eating_time
    assert conflicts == []
    assert eating == set()


def test_forks_limit_concurrency():
    eating_time = 0.02
    elapsed = dine(eating_time=eating_time, out=lambda line: None)
    # At most two philosophers can eat at once, so fifteen meals take at least 7.5 turns.
    assert elapsed >= 7 * eating_time


def test_fork_out_of_range_is_rejected():
    with pytest.raises(ValueError):
        dine(seating=[("Plato", 0, 5)], fork_count=2, eating_time=0, out=lambda line: None)


def test_main_prints_header_and_total(capsys):
    assert main(["--eating-time", "0"]) == 0
    output = capsys.readouterr().out.splitlines()
    assert output[0] == "Dining Philosophers Problem:  15 Philosophers, 4 Forks...Yikes!!"
    assert output[-1].startswith("Total time: ")
    assert "Karl Marx is eating." in output


def test_main_rejects_negative_eating_time():
    with pytest.raises(SystemExit):
        main(["--eating-time", "-1"])