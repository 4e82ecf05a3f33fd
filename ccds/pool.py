"""Fixed-capacity object pool with a last-in, first-out free list."""

from __future__ import annotations

from typing import Callable, Generic, List, Optional, TypeVar

T = TypeVar("T")


class PoolEmptyError(LookupError):
    """Raised when every object of a pool is already in use."""


class Pool(Generic[T]):
    """A pool of ``capacity`` objects created up front by ``factory``.

    Objects are handed out by :meth:`acquire` and given back with
    :meth:`release`. Released objects go to the front of the free list,
    so the most recently released object is the next one acquired.
    """

    def __init__(
        self,
        capacity: int,
        factory: Callable[[], T],
        remove_fn: Optional[Callable[[T], object]] = None,
    ) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be a positive integer")
        self._capacity = capacity
        self._remove_fn = remove_fn
        self._items: List[T] = [factory() for _ in range(capacity)]
        self._index = {id(item): i for i, item in enumerate(self._items)}
        if len(self._index) != capacity:
            raise ValueError("factory must return a distinct object on each call")
        self._allocated: List[bool] = []
        self._free: List[int] = []
        self.reset()

    def reset(self) -> None:
        """Mark every object as free again, in their original order."""
        self._allocated = [False] * self._capacity
        # The end of the list is the head of the free list.
        self._free = list(range(self._capacity - 1, -1, -1))

    def acquire(self) -> T:
        """Take a free object from the pool."""
        if not self._free:
            raise PoolEmptyError("pool has no free objects")
        index = self._free.pop()
        self._allocated[index] = True
        return self._items[index]

    def acquire_batch(self, count: int) -> List[T]:
        """Take up to ``count`` objects; fewer are returned if the pool runs out."""
        if count < 0:
            raise ValueError("count must not be negative")
        taken: List[T] = []
        while self._free and len(taken) < count:
            taken.append(self.acquire())
        return taken

    def release(self, item: T) -> None:
        """Give an object back to the pool."""
        index = self._index.get(id(item))
        if index is None or self._items[index] is not item:
            raise ValueError("object does not belong to this pool")
        if not self._allocated[index]:
            raise ValueError("object is not currently acquired")
        if self._remove_fn is not None:
            self._remove_fn(item)
        self._allocated[index] = False
        self._free.append(index)

    def available(self) -> int:
        """Number of objects that can still be acquired."""
        return len(self._free)

    def capacity(self) -> int:
        """Total number of objects the pool holds."""
        return self._capacity

    def is_full(self) -> bool:
        """True when every object is in use."""
        return not self._free

    def __repr__(self) -> str:
        return f"Pool(capacity={self._capacity}, available={len(self._free)})"