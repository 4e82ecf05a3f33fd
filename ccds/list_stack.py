"""Last-in, first-out stack backed by a linked list."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from ccds.linked_list import LinkedList, ListEmptyError


class StackEmptyError(IndexError):
    """Raised when an element is requested from an empty stack."""


class Stack(ABC):
    """Interface shared by stack implementations."""

    @abstractmethod
    def push(self, data: Any) -> None:
        """Put ``data`` on top of the stack."""

    @abstractmethod
    def pop(self) -> Any:
        """Remove and return the top element."""

    @abstractmethod
    def peek(self) -> Any:
        """Return the top element without removing it."""


class ListStack(Stack):
    """Unbounded stack; ``remove_fn`` disposes of elements left on :meth:`clear`."""

    def __init__(self, remove_fn: Optional[Callable[[Any], object]] = None) -> None:
        self._list = LinkedList(remove_fn=remove_fn)

    def push(self, data: Any) -> None:
        self._list.insert_tail(data)

    def pop(self) -> Any:
        """Remove the top element; raises :class:`StackEmptyError` if empty."""
        try:
            return self._list.remove_tail()
        except ListEmptyError:
            raise StackEmptyError("stack is empty") from None

    def peek(self) -> Any:
        """Return the top element; raises :class:`StackEmptyError` if empty."""
        try:
            return self._list.tail()
        except ListEmptyError:
            raise StackEmptyError("stack is empty") from None

    def is_empty(self) -> bool:
        return self._list.is_empty()

    def __len__(self) -> int:
        return len(self._list)

    def clear(self) -> None:
        """Drop every element, passing each to ``remove_fn`` if one is set."""
        self._list.clear()

    def __repr__(self) -> str:
        return f"ListStack({list(self._list)!r})"