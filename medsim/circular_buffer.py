"""Bounded FIFO queue that refuses new items once it is full."""

from __future__ import annotations

from collections import deque
from typing import Deque, Generic, Optional, TypeVar

T = TypeVar("T")


class CircularBuffer(Generic[T]):
    """Fixed-capacity FIFO queue shared between a producer and a consumer."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._items: Deque[T] = deque()

    def push(self, item: T) -> bool:
        """Append ``item``; return False and drop it if the buffer is full."""
        if self.is_full():
            return False
        self._items.append(item)
        return True

    def pop(self) -> Optional[T]:
        """Remove and return the oldest item, or None if the buffer is empty."""
        if not self._items:
            return None
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"CircularBuffer(capacity={self.capacity}, size={len(self)})"