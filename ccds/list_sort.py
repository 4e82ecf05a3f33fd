"""In-place sorting and order checking for :class:`~ccds.linked_list.LinkedList`."""

from __future__ import annotations

from enum import Enum, IntEnum
from itertools import pairwise
from typing import Any, Callable, List, Union

from ccds.linked_list import LinkedList, ListNode

Comparator = Callable[[Any, Any], int]


class SortOrder(IntEnum):
    """Order found by :func:`sort_check`."""

    UNSORTED = 0
    ASCENDING = 1
    DESCENDING = 2


class BubbleVariant(Enum):
    """Flavours of bubble sort."""

    TRADITIONAL = 1
    ADAPTIVE = 2
    GET_END = 3


class MergeVariant(Enum):
    """Flavours of merge sort."""

    TOP_DOWN = 1
    BOTTOM_UP = 2


def _swap(a: ListNode, b: ListNode) -> None:
    a.data, b.data = b.data, a.data


def _bubble_pass(nodes: List[ListNode], limit: int, cmp: Comparator) -> int:
    """Run one pass over the first ``limit`` nodes.

    Returns the position just after the last swap, or 0 if nothing moved.
    """
    last_swap = 0
    for position, (left, right) in enumerate(pairwise(nodes[:limit]), start=1):
        if cmp(left.data, right.data) > 0:
            _swap(left, right)
            last_swap = position + 1
    return last_swap


def _bubble_traditional(nodes: List[ListNode], cmp: Comparator) -> None:
    for _ in range(len(nodes) - 1):
        _bubble_pass(nodes, len(nodes), cmp)


def _bubble_adaptive(nodes: List[ListNode], cmp: Comparator) -> None:
    for _ in range(len(nodes) - 1):
        if not _bubble_pass(nodes, len(nodes), cmp):
            break


def _bubble_get_end(nodes: List[ListNode], cmp: Comparator) -> None:
    limit = len(nodes)
    for _ in range(len(nodes) - 1):
        limit = _bubble_pass(nodes, limit, cmp)
        if limit == 0:
            break


_BUBBLE = {
    BubbleVariant.TRADITIONAL: _bubble_traditional,
    BubbleVariant.ADAPTIVE: _bubble_adaptive,
    BubbleVariant.GET_END: _bubble_get_end,
}


def sort_bubble(
    lst: LinkedList,
    cmp: Comparator,
    variant: Union[BubbleVariant, int] = BubbleVariant.GET_END,
) -> None:
    """Bubble sort ``lst`` in place by swapping node data; the sort is stable."""
    if cmp is None:
        raise ValueError("a comparison function is required")
    variant = BubbleVariant(variant)
    _BUBBLE[variant](list(lst.nodes()), cmp)


def _merge_top_down(lst: LinkedList, cmp: Comparator) -> None:
    if len(lst) <= 1:
        return
    right = lst.split_middle()
    _merge_top_down(lst, cmp)
    _merge_top_down(right, cmp)
    lst.merge(right, cmp)


def _take_block(source: LinkedList, size: int) -> LinkedList:
    block = LinkedList()
    while len(block) < size and not source.is_empty():
        block.insert_tail(source.remove_head())
    return block


def _merge_bottom_up(lst: LinkedList, cmp: Comparator) -> None:
    block_size = 1
    while block_size < len(lst):
        merged = LinkedList()
        while not lst.is_empty():
            left = _take_block(lst, block_size)
            right = _take_block(lst, block_size)
            left.merge(right, cmp)
            merged.concat(left)
        lst.concat(merged)
        block_size <<= 1


_MERGE = {
    MergeVariant.TOP_DOWN: _merge_top_down,
    MergeVariant.BOTTOM_UP: _merge_bottom_up,
}


def sort_merge(
    lst: LinkedList,
    cmp: Comparator,
    variant: Union[MergeVariant, int] = MergeVariant.TOP_DOWN,
) -> None:
    """Merge sort ``lst`` in place; the sort is stable."""
    if cmp is None:
        raise ValueError("a comparison function is required")
    variant = MergeVariant(variant)
    _MERGE[variant](lst, cmp)


def sort_check(lst: LinkedList, cmp: Comparator) -> SortOrder:
    """Report whether ``lst`` is ascending, descending or unsorted.

    Empty lists and lists of equal elements count as ascending.
    """
    if cmp is None:
        raise ValueError("a comparison function is required")
    expected = SortOrder.UNSORTED
    all_same = True
    for left, right in pairwise(lst):
        result = cmp(left, right)
        if result != 0:
            all_same = False
        if expected is SortOrder.UNSORTED:
            if result < 0:
                expected = SortOrder.ASCENDING
            elif result > 0:
                expected = SortOrder.DESCENDING
        elif (result < 0 and expected is SortOrder.DESCENDING) or (
            result > 0 and expected is SortOrder.ASCENDING
        ):
            return SortOrder.UNSORTED
    if all_same:
        return SortOrder.ASCENDING
    return expected