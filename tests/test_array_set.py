import pytest

from adtkit.array_set import (
    ArraySet,
    CapacityExceededError,
    DuplicateItemError,
    ItemNotFoundError,
)


def make(items, capacity=6):
    result = ArraySet(capacity)
    for item in items:
        result.insert(item)
    return result


def test_new_set_is_empty():
    s = ArraySet()
    assert len(s) == 0
    assert not s
    assert s.to_list() == []


def test_default_capacity_is_six():
    s = ArraySet()
    assert s.capacity == 6
    for i in range(6):
        s.insert(i)
    with pytest.raises(CapacityExceededError):
        s.insert(6)


def test_insert_and_membership():
    s = make(["one", "two", "three"])
    assert len(s) == 3
    assert "two" in s
    assert "ten" not in s
    assert s.to_list() == ["one", "two", "three"]
    assert list(s) == ["one", "two", "three"]


def test_duplicate_insert_raises_and_keeps_size():
    s = make(["one", "two"])
    with pytest.raises(DuplicateItemError):
        s.insert("one")
    assert len(s) == 2


def test_capacity_exceeded():
    s = make(["a", "b"], capacity=2)
    with pytest.raises(CapacityExceededError):
        s.insert("c")
    assert s.to_list() == ["a", "b"]


def test_duplicate_checked_before_capacity():
    s = make(["a"], capacity=1)
    with pytest.raises(DuplicateItemError):
        s.insert("a")


def test_erase_moves_last_item_into_gap():
    s = make(["a", "b", "c"])
    s.erase("a")
    assert s.to_list() == ["c", "b"]
    s.erase("b")
    assert s.to_list() == ["c"]


def test_erase_missing_raises():
    s = make(["a"])
    s.erase("a")
    with pytest.raises(ItemNotFoundError):
        s.erase("a")


def test_clear():
    s = make([1, 2, 3])
    s.clear()
    assert len(s) == 0
    assert 1 not in s
    s.insert(1)
    assert s.to_list() == [1]


def test_count_is_zero_or_one():
    s = make(["x"])
    assert s.count("x") == 1
    assert s.count("y") == 0


def test_copy_is_independent():
    original = make([0, 1, 2, 3], capacity=8)
    duplicate = original.copy()
    duplicate.erase(3)
    assert 3 in original
    assert 3 not in duplicate
    assert duplicate.capacity == original.capacity


def test_union_contains_items_of_both():
    result = make([1, 2, 3]).union(make([3, 4]))
    assert result.to_list() == [1, 2, 3, 4]
    assert result.capacity == 6


def test_union_beyond_default_capacity_raises():
    left = make([1, 2, 3, 4])
    right = make([5, 6, 7])
    with pytest.raises(CapacityExceededError):
        left.union(right)


def test_intersection_keeps_order_of_first_set():
    result = make([4, 1, 3, 2]).intersection(make([2, 3, 9]))
    assert result.to_list() == [3, 2]


def test_intersection_with_disjoint_set_is_empty():
    assert not make([1, 2]).intersection(make([3, 4]))


def test_difference():
    left = make([1, 2, 3, 4])
    right = make([1, 3])
    result = left.difference(right)
    assert sorted(result) == [2, 4]
    assert left.to_list() == [1, 2, 3, 4]


def test_set_operations_invariants():
    left = make([1, 2, 3])
    right = make([2, 3, 4])
    union = left.union(right)
    inter = left.intersection(right)
    diff = left.difference(right)
    assert len(union) == len(left) + len(right) - len(inter)
    assert all(item in left and item in right for item in inter)
    assert all(item in left and item not in right for item in diff)
    assert len(diff) + len(inter) == len(left)