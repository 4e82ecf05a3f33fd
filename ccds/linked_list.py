"""Circular doubly linked list with a sentinel root node."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Optional


class ListEmptyError(IndexError):
    """Raised when an element is requested from an empty list."""


class ListNode:
    """A node of a :class:`LinkedList`; a lone node links to itself."""

    __slots__ = ("next", "prev", "data")

    def __init__(self, data: Any = None) -> None:
        self.data = data
        self.next: ListNode = self
        self.prev: ListNode = self

    def __repr__(self) -> str:
        return f"ListNode({self.data!r})"


class LinkedList:
    """Doubly linked list whose optional ``remove_fn`` disposes of data on clear."""

    def __init__(
        self,
        iterable: Optional[Iterable[Any]] = None,
        remove_fn: Optional[Callable[[Any], object]] = None,
    ) -> None:
        self._root = ListNode()
        self._size = 0
        self.remove_fn = remove_fn
        if iterable is not None:
            for item in iterable:
                self.insert_tail(item)

    # -- linking helpers -------------------------------------------------

    def _link(self, node: ListNode, prev: ListNode, nxt: ListNode) -> ListNode:
        node.prev = prev
        node.next = nxt
        prev.next = node
        nxt.prev = node
        self._size += 1
        return node

    def _unlink(self, node: ListNode) -> Any:
        node.prev.next = node.next
        node.next.prev = node.prev
        node.next = node
        node.prev = node
        self._size -= 1
        return node.data

    def _reset_root(self) -> None:
        self._root.next = self._root
        self._root.prev = self._root
        self._size = 0

    # -- container protocol ---------------------------------------------

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for node in self.nodes():
            yield node.data

    def __reversed__(self) -> Iterator[Any]:
        node = self._root.prev
        while node is not self._root:
            prev = node.prev
            yield node.data
            node = prev

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def is_empty(self) -> bool:
        return self._size == 0

    # -- insertion and removal ------------------------------------------

    def insert_head(self, data: Any) -> ListNode:
        """Insert ``data`` at the front and return its node."""
        return self._link(ListNode(data), self._root, self._root.next)

    def insert_tail(self, data: Any) -> ListNode:
        """Insert ``data`` at the back and return its node."""
        return self._link(ListNode(data), self._root.prev, self._root)

    def remove_head(self) -> Any:
        if self._size == 0:
            raise ListEmptyError("list is empty")
        return self._unlink(self._root.next)

    def remove_tail(self) -> Any:
        if self._size == 0:
            raise ListEmptyError("list is empty")
        return self._unlink(self._root.prev)

    def remove_node(self, node: ListNode) -> Any:
        """Unlink ``node`` from this list and return its data."""
        if not any(current is node for current in self.nodes()):
            raise ValueError("node is not part of this list")
        return self._unlink(node)

    def head(self) -> Any:
        if self._size == 0:
            raise ListEmptyError("list is empty")
        return self._root.next.data

    def tail(self) -> Any:
        if self._size == 0:
            raise ListEmptyError("list is empty")
        return self._root.prev.data

    def nodes(self) -> Iterator[ListNode]:
        """Yield the nodes front to back; the yielded node may be removed."""
        node = self._root.next
        while node is not self._root:
            nxt = node.next
            yield node
            node = nxt

    # -- whole-list operations ------------------------------------------

    def concat(self, other: "LinkedList") -> None:
        """Move every element of ``other`` to the end of this list."""
        if other is self:
            raise ValueError("cannot concatenate a list with itself")
        if other._size == 0:
            return
        first = other._root.next
        last = other._root.prev
        tail = self._root.prev
        tail.next = first
        first.prev = tail
        last.next = self._root
        self._root.prev = last
        self._size += other._size
        other._reset_root()

    def merge(self, other: "LinkedList", cmp: Callable[[Any, Any], int]) -> None:
        """Merge the sorted ``other`` into this sorted list, emptying ``other``.

        Equal elements already in this list stay in front of those from ``other``.
        """
        if other is self:
            raise ValueError("cannot merge a list with itself")
        cursor = self._root.next
        while other._size:
            incoming = other._root.next
            while cursor is not self._root and cmp(cursor.data, incoming.data) <= 0:
                cursor = cursor.next
            if cursor is self._root:
                self.concat(other)
                break
            other._unlink(incoming)
            self._link(incoming, cursor.prev, cursor)

    def copy(self, copy_fn: Optional[Callable[[Any], Any]] = None) -> "LinkedList":
        """Return a new list holding ``copy_fn(data)`` (or the data itself) in order."""
        duplicate = LinkedList(remove_fn=self.remove_fn)
        for data in self:
            duplicate.insert_tail(copy_fn(data) if copy_fn is not None else data)
        return duplicate

    def split_middle(self) -> "LinkedList":
        """Keep the first half here and return the second half as a new list.

        With an odd length the extra element stays in this list.
        """
        right = LinkedList(remove_fn=self.remove_fn)
        keep = (self._size + 1) // 2
        moved = self._size - keep
        if moved == 0:
            return right
        start = self._root.next
        for _ in range(keep):
            start = start.next
        last = self._root.prev
        before = start.prev
        before.next = self._root
        self._root.prev = before
        right._root.next = start
        start.prev = right._root
        last.next = right._root
        right._root.prev = last
        right._size = moved
        self._size = keep
        return right

    def clear(self) -> None:
        """Remove every element, passing each to ``remove_fn`` if one is set."""
        while self._size:
            data = self._unlink(self._root.next)
            if self.remove_fn is not None:
                self.remove_fn(data)