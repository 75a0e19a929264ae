import random

import pytest

from fruitbowl.shuffled_salads import (
    BASE_FRUIT,
    EXTRA_FRUIT,
    deque_salad,
    format_salad,
    linked_list_salad,
    main,
    vector_salad,
)


def test_format_salad():
    assert format_salad(["apple", "banana", "cherry"]) == "apple, banana, cherry"
    assert format_salad(["fig"]) == "fig"
    assert format_salad([]) == ""


@pytest.mark.parametrize("seed", range(5))
def test_linked_list_salad(seed):
    salad = linked_list_salad(random.Random(seed))
    assert salad[-3:] == ["Pomegranate", "Fig", "Cherry"]
    assert sorted(salad[:-3]) == sorted(EXTRA_FRUIT)


@pytest.mark.parametrize("seed", range(5))
def test_deque_salad(seed):
    salad = deque_salad(random.Random(seed))
    assert salad[0] == "Pomegranate"
    assert salad[-2:] == ["Fig", "Cherry"]
    assert sorted(salad[1:-2]) == sorted(BASE_FRUIT + EXTRA_FRUIT)


@pytest.mark.parametrize("seed", range(5))
def test_vector_salad(seed):
    assert sorted(vector_salad(random.Random(seed))) == sorted(BASE_FRUIT)


def test_main_vector(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert not out.endswith("\n")
    assert sorted(out.split(", ")) == sorted(BASE_FRUIT)


def test_main_deque(capsys):
    assert main(["deque"]) == 0
    header, body = capsys.readouterr().out.split("\n", 1)
    assert header == "Fruit salad: "
    items = body.split(", ")
    assert items[0] == "Pomegranate"
    assert items[-2:] == ["Fig", "Cherry"]


def test_main_linked_list(capsys):
    assert main(["linked-list"]) == 0
    header, body = capsys.readouterr().out.split("\n", 1)
    assert header == "Fruit salad: "
    assert body.split(", ")[-3:] == ["Pomegranate", "Fig", "Cherry"]


def test_main_rejects_unknown_kind():
    with pytest.raises(SystemExit) as info:
        main(["tree"])
    assert info.value.code == 2