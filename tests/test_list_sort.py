import random

import pytest

from ccds.linked_list import LinkedList
from ccds.list_sort import (
    BubbleVariant,
    MergeVariant,
    SortOrder,
    sort_bubble,
    sort_check,
    sort_merge,
)

ARR_LEN = 15


def cmp_int(a, b):
    return a - b


def cmp_key(a, b):
    return a[0] - b[0]


@pytest.fixture
def random_values():
    rng = random.Random(1234)
    return [rng.randrange(1000) for _ in range(ARR_LEN)]


@pytest.mark.parametrize("variant", list(BubbleVariant))
def test_bubble_sort_basic(random_values, variant):
    lst = LinkedList(random_values)
    sort_bubble(lst, cmp_int, variant)
    assert sort_check(lst, cmp_int) is SortOrder.ASCENDING
    assert list(lst) == sorted(random_values)
    assert len(lst) == ARR_LEN


@pytest.mark.parametrize("variant", [1, 2, 3])
def test_bubble_sort_accepts_int_variant(random_values, variant):
    lst = LinkedList(random_values)
    sort_bubble(lst, cmp_int, variant)
    assert list(lst) == sorted(random_values)


def test_bubble_sort_default(random_values):
    lst = LinkedList(random_values)
    sort_bubble(lst, cmp_int)
    assert list(lst) == sorted(random_values)


@pytest.mark.parametrize("variant", list(MergeVariant))
def test_merge_sort_basic(random_values, variant):
    lst = LinkedList(random_values)
    sort_merge(lst, cmp_int, variant)
    assert sort_check(lst, cmp_int) is SortOrder.ASCENDING
    assert list(lst) == sorted(random_values)
    assert len(lst) == ARR_LEN


def test_merge_sort_default(random_values):
    lst = LinkedList(random_values)
    sort_merge(lst, cmp_int)
    assert list(lst) == sorted(random_values)


def test_sorts_keep_copy_independent(random_values):
    original = LinkedList(random_values)
    copied = original.copy()
    sort_merge(copied, cmp_int, MergeVariant.BOTTOM_UP)
    assert list(original) == random_values
    assert list(copied) == sorted(random_values)


@pytest.mark.parametrize(
    "sorter",
    [
        lambda lst: sort_bubble(lst, cmp_key, BubbleVariant.TRADITIONAL),
        lambda lst: sort_bubble(lst, cmp_key, BubbleVariant.ADAPTIVE),
        lambda lst: sort_bubble(lst, cmp_key, BubbleVariant.GET_END),
        lambda lst: sort_merge(lst, cmp_key, MergeVariant.TOP_DOWN),
        lambda lst: sort_merge(lst, cmp_key, MergeVariant.BOTTOM_UP),
    ],
)
def test_sorts_are_stable(sorter):
    data = [(2, "a"), (1, "b"), (2, "c"), (1, "d"), (0, "e"), (2, "f")]
    lst = LinkedList(data)
    sorter(lst)
    assert list(lst) == [(0, "e"), (1, "b"), (1, "d"), (2, "a"), (2, "c"), (2, "f")]


@pytest.mark.parametrize("values", [[], [7]])
def test_sorting_trivial_lists(values):
    a = LinkedList(values)
    b = LinkedList(values)
    sort_bubble(a, cmp_int)
    sort_merge(b, cmp_int)
    assert list(a) == values
    assert list(b) == values


def test_invalid_bubble_variant():
    with pytest.raises(ValueError):
        sort_bubble(LinkedList([2, 1]), cmp_int, 4)


def test_invalid_merge_variant():
    with pytest.raises(ValueError):
        sort_merge(LinkedList([2, 1]), cmp_int, 3)


def test_missing_comparator():
    with pytest.raises(ValueError):
        sort_bubble(LinkedList([2, 1]), None)
    with pytest.raises(ValueError):
        sort_check(LinkedList([2, 1]), None)


@pytest.mark.parametrize(
    "values, expected",
    [
        ([], SortOrder.ASCENDING),
        ([5], SortOrder.ASCENDING),
        ([3, 3, 3], SortOrder.ASCENDING),
        ([1, 2, 2, 5], SortOrder.ASCENDING),
        ([9, 4, 4, 1], SortOrder.DESCENDING),
        ([1, 3, 2], SortOrder.UNSORTED),
        ([3, 1, 2], SortOrder.UNSORTED),
        ([2, 2, 1, 3], SortOrder.UNSORTED),
    ],
)
def test_sort_check(values, expected):
    assert sort_check(LinkedList(values), cmp_int) is expected


def test_sort_order_values():
    assert [int(order) for order in SortOrder] == [0, 1, 2]
    assert sort_check(LinkedList([1, 2]), cmp_int) == 1