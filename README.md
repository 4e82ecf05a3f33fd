# ccds

Small data structures built around a circular doubly linked list. The package has
no dependencies outside the standard library.

- `ccds.linked_list`: `LinkedList`, a doubly linked list with a sentinel root, and
  its `ListNode`. It supports insertion and removal at the head and tail, removal of
  a given node, concatenation (`concat`), merging of two sorted lists (`merge`),
  copying (`copy`) and splitting in half (`split_middle`).
- `ccds.list_sort`: in-place sorts for a `LinkedList`. `sort_bubble` takes a
  `BubbleVariant` (`TRADITIONAL`, `ADAPTIVE` or `GET_END`, the default), and
  `sort_merge` takes a `MergeVariant` (`TOP_DOWN`, the default, or `BOTTOM_UP`).
  Both sorts are stable. `sort_check` returns a `SortOrder`: `ASCENDING`,
  `DESCENDING` or `UNSORTED`. Empty lists and lists of equal elements count as
  ascending.
- `ccds.pool`: `Pool`, a fixed-capacity object pool. It creates all of its objects
  up front. A released object goes to the front of the free list.
- `ccds.list_pool`: `ListNodePool` and `PooledList`, a linked list that takes its
  nodes from a fixed-size node pool.
- `ccds.list_queue`: the `Queue` interface and `ListQueue`, a FIFO queue.
- `ccds.list_stack`: the `Stack` interface and `ListStack`, a LIFO stack.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Usage

### Linked lists and sorting

A comparison function takes two elements. It returns a negative number, zero or a
positive number, in the same way as the classic `cmp`.

```python
from ccds.linked_list import LinkedList
from ccds.list_sort import BubbleVariant, SortOrder, sort_bubble, sort_check, sort_merge

def by_value(a, b):
    return a - b

items = LinkedList([5, 3, 9, 1])
items.insert_head(0)
items.insert_tail(7)

sort_merge(items, by_value)
assert list(items) == [0, 1, 3, 5, 7, 9]
assert sort_check(items, by_value) is SortOrder.ASCENDING

others = LinkedList([4, 2, 8])
sort_bubble(others, by_value, BubbleVariant.ADAPTIVE)
assert list(others) == [2, 4, 8]

tail_half = items.split_middle()   # items keeps [0, 1, 3]; tail_half holds [5, 7, 9]
items.merge(others, by_value)      # others is emptied into items, in order
assert list(items) == [0, 1, 2, 3, 4, 8]
```

If a `LinkedList` is given a `remove_fn`, `clear()` passes each element to it.

### Queues and stacks

```python
from ccds.list_queue import ListQueue
from ccds.list_stack import ListStack

queue = ListQueue()
queue.enqueue(1)
queue.enqueue(2)
assert queue.peek() == 1
assert queue.dequeue() == 1

stack = ListStack()
stack.push("a")
stack.push("b")
assert stack.pop() == "b"
assert len(stack) == 1
```

Both are unbounded, so `ListQueue.is_full()` always returns `False`.

### Pools

```python
from ccds.pool import Pool

pool = Pool(3, dict)
first = pool.acquire()
rest = pool.acquire_batch(5)        # returns at most the 2 objects that are left
assert len(rest) == 2 and pool.is_full()
pool.release(first)
assert pool.acquire() is first      # the most recently released object comes back first
```

A list with pooled nodes:

```python
from ccds.list_pool import ListNodePool, PooledList

nodes = ListNodePool(100)
values = PooledList(nodes)
values.insert_tail("first")
values.insert_head("zero")
assert list(values) == ["zero", "first"]
assert nodes.available() == 98
values.destroy()
assert nodes.available() == 100
```

## Errors

- Taking an element from an empty `LinkedList`, `PooledList` or `ListQueue` raises
  `ListEmptyError`.
- Popping or peeking an empty `ListStack` raises `StackEmptyError`.
- Acquiring from a pool with no free objects raises `PoolEmptyError`.
- Removing a node that is not in the list raises `ValueError`. So does releasing an
  object that does not belong to the pool or that is not acquired.

## Running the tests

```
pytest
```