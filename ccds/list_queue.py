"""First-in, first-out queue backed by a linked list."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from ccds.linked_list import LinkedList


class Queue(ABC):
    """Interface shared by queue implementations."""

    @abstractmethod
    def enqueue(self, data: Any) -> None:
        """Add ``data`` at the back of the queue."""

    @abstractmethod
    def dequeue(self) -> Any:
        """Remove and return the element at the front of the queue."""

    @abstractmethod
    def peek(self) -> Any:
        """Return the element at the front without removing it."""

    @abstractmethod
    def is_empty(self) -> bool:
        """True when the queue holds no elements."""

    @abstractmethod
    def is_full(self) -> bool:
        """True when no more elements can be enqueued."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of elements in the queue."""


class ListQueue(Queue):
    """Unbounded queue; ``remove_fn`` disposes of elements left on :meth:`clear`."""

    def __init__(self, remove_fn: Optional[Callable[[Any], object]] = None) -> None:
        self._list = LinkedList(remove_fn=remove_fn)

    def enqueue(self, data: Any) -> None:
        self._list.insert_tail(data)

    def dequeue(self) -> Any:
        """Remove the front element; raises :class:`~ccds.linked_list.ListEmptyError` if empty."""
        return self._list.remove_head()

    def peek(self) -> Any:
        """Return the front element; raises :class:`~ccds.linked_list.ListEmptyError` if empty."""
        return self._list.head()

    def is_empty(self) -> bool:
        return self._list.is_empty()

    def is_full(self) -> bool:
        """A list-backed queue has no fixed capacity, so it is never full."""
        return False

    def __len__(self) -> int:
        return len(self._list)

    def clear(self) -> None:
        """Drop every element, passing each to ``remove_fn`` if one is set."""
        self._list.clear()

    def __repr__(self) -> str:
        return f"ListQueue({list(self._list)!r})"