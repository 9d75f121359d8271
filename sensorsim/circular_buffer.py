"""Fixed-capacity ring buffer that overwrites its oldest entry when full."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

BUFFER_SIZE = 32


class CircularBuffer:
    """Keeps the most recent ``capacity`` values, oldest first."""

    def __init__(self, capacity: int = BUFFER_SIZE) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._items: deque[float] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        """Maximum number of values held at once."""
        return self._items.maxlen or 0

    def push(self, value: float) -> None:
        """Append a value, dropping the oldest one if the buffer is full."""
        self._items.append(float(value))

    def get_all(self) -> list[float]:
        """Return a copy of the stored values from oldest to newest."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[float]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"CircularBuffer(capacity={self.capacity}, items={list(self._items)!r})"