import random

from termsweeper.utils import get_rng, insert_and_drop_last


def test_rng_is_shared():
    rng = get_rng()
    assert rng is get_rng()
    assert isinstance(rng, random.Random)
    assert 0.0 <= rng.random() < 1.0


def test_insert_in_middle_drops_last():
    items = [1, 2, 3, 4, 5]
    insert_and_drop_last(items, 1, 9)
    assert items == [1, 9, 2, 3, 4]


def test_insert_at_front():
    items = ["a", "b", "c"]
    insert_and_drop_last(items, 0, "z")
    assert items == ["z", "a", "b"]


def test_insert_at_last_replaces_it():
    items = [1, 2, 3]
    insert_and_drop_last(items, 2, 7)
    assert items == [1, 2, 7]


def test_index_out_of_range_leaves_unchanged():
    items = [1, 2, 3]
    insert_and_drop_last(items, 3, 7)
    insert_and_drop_last(items, -1, 7)
    assert items == [1, 2, 3]


def test_empty_list_unchanged():
    items = []
    insert_and_drop_last(items, 0, 1)
    assert items == []


def test_length_preserved():
    items = list(range(10))
    for index in range(10):
        insert_and_drop_last(items, index, -index)
        assert len(items) == 10
    assert items[0] == 0 and items[9] == -9