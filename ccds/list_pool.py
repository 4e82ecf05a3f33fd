"""Linked list whose nodes come from a fixed-capacity node pool."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

from ccds.linked_list import ListEmptyError, ListNode
from ccds.pool import Pool


class ListNodePool:
    """A fixed number of :class:`ListNode` objects shared by pooled lists."""

    def __init__(self, capacity: int) -> None:
        self._pool: Pool[ListNode] = Pool(capacity, ListNode)

    def acquire(self) -> ListNode:
        """Take a free node; raises :class:`~ccds.pool.PoolEmptyError` when none is left."""
        return self._pool.acquire()

    def release(self, node: ListNode) -> None:
        """Return ``node`` to the pool, clearing its links and data first."""
        node.next = node
        node.prev = node
        node.data = None
        self._pool.release(node)

    def reset(self) -> None:
        """Mark every node as free again."""
        self._pool.reset()

    def available(self) -> int:
        """Number of nodes still free."""
        return self._pool.available()

    @property
    def capacity(self) -> int:
        return self._pool.capacity()

    def __repr__(self) -> str:
        return f"ListNodePool(capacity={self.capacity}, available={self.available()})"


class PooledList:
    """Doubly linked list that draws its nodes from a :class:`ListNodePool`."""

    def __init__(
        self,
        pool: ListNodePool,
        remove_fn: Optional[Callable[[Any], object]] = None,
    ) -> None:
        if pool is None:
            raise ValueError("a node pool is required")
        self.pool = pool
        self.remove_fn = remove_fn
        self._root = ListNode()
        self._size = 0

    def _link(self, data: Any, prev: ListNode, nxt: ListNode) -> ListNode:
        node = self.pool.acquire()
        node.data = data
        node.prev = prev
        node.next = nxt
        prev.next = node
        nxt.prev = node
        self._size += 1
        return node

    def _unlink(self, node: ListNode) -> Any:
        data = node.data
        node.prev.next = node.next
        node.next.prev = node.prev
        self._size -= 1
        self.pool.release(node)
        return data

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for node in self.nodes():
            yield node.data

    def __repr__(self) -> str:
        return f"PooledList({list(self)!r})"

    def is_empty(self) -> bool:
        return self._size == 0

    def insert_head(self, data: Any) -> ListNode:
        """Insert ``data`` at the front and return its node."""
        return self._link(data, self._root, self._root.next)

    def insert_tail(self, data: Any) -> ListNode:
        """Insert ``data`` at the back and return its node."""
        return self._link(data, self._root.prev, self._root)

    def remove_head(self) -> Any:
        if self._size == 0:
            raise ListEmptyError("list is empty")
        return self._unlink(self._root.next)

    def remove_tail(self) -> Any:
        if self._size == 0:
            raise ListEmptyError("list is empty")
        return self._unlink(self._root.prev)

    def remove_node(self, node: ListNode) -> Any:
        """Unlink ``node`` from this list, return it to the pool and return its data."""
        if node is None or not any(current is node for current in self.nodes()):
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

    def destroy(self) -> None:
        """Empty the list, passing data to ``remove_fn`` and nodes back to the pool."""
        for node in self.nodes():
            if self.remove_fn is not None:
                self.remove_fn(node.data)
            self._unlink(node)