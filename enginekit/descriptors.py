"""Index allocation for a fixed-size shader resource view descriptor heap."""

from __future__ import annotations

MAX_SRV_COUNT = 128


class DescriptorHeapFullError(RuntimeError):
    """Raised when every descriptor slot is in use."""


class DescriptorAllocator:
    """Hands out descriptor indices in order; index 0 is reserved."""

    def __init__(self, capacity: int = MAX_SRV_COUNT) -> None:
        self.capacity = capacity
        self._use_index = 1

    @property
    def index(self) -> int:
        """The index the next allocation will return."""
        return self._use_index

    def can_allocate(self) -> bool:
        """Whether another index is free."""
        return self._use_index < self.capacity

    def allocate(self) -> int:
        """Take the next free index."""
        if not self.can_allocate():
            raise DescriptorHeapFullError(
                f"descriptor heap is full ({self.capacity} slots)"
            )
        index = self._use_index
        self._use_index += 1
        return index

    def increment_index(self) -> None:
        """Advance past the current index without checking the capacity."""
        self._use_index += 1