from __future__ import annotations
from typing import Iterator, List, Tuple


class BoundedMinHeap:
    """A binary min-heap that keeps at most ``capacity`` of the largest values.

    Admission policy
    ----------------
    • A value ``<=`` the current root is discarded (unless the heap is empty).
      This drops values too small for the top-K and collapses repeats of the
      cutoff value.
    • Otherwise the value is appended and sifted up; if that takes the heap
      past ``capacity`` the root is popped.

    The backing list is in heap order, not sorted order.
    """

    __slots__ = ("_data", "_capacity")

    def __init__(self, capacity: int) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise TypeError(f"capacity must be an int, got {type(capacity).__name__}")
        if capacity <= 0:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self._capacity = capacity
        self._data: List[int] = []

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _sift_up(self, idx: int) -> None:
        data = self._data
        while idx > 0:
            parent = (idx - 1) // 2
            if data[parent] <= data[idx]:
                break
            data[parent], data[idx] = data[idx], data[parent]
            idx = parent

    def _sift_down(self, idx: int) -> None:
        data = self._data
        n = len(data)
        while True:
            child = 2 * idx + 1
            if child < 0 or child >= n:  # no children left
                break
            right = child + 1
            # Ties go to the right child.
            if right < n and data[child] >= data[right]:
                child = right
            if data[child] >= data[idx]:
                break
            data[idx], data[child] = data[child], data[idx]
            idx = child

    # -----------------------------
    # Public API
    # -----------------------------
    @property
    def capacity(self) -> int:
        return self._capacity

    def count(self) -> int:
        """Number of values currently retained."""
        return len(self._data)

    def push(self, value: int) -> None:
        """Offer ``value`` to the heap (O(log n)).

        No-op when the heap is non-empty and ``value`` is not strictly greater
        than the current minimum.
        """
        data = self._data
        if data and value <= data[0]:
            return
        data.append(value)
        self._sift_up(len(data) - 1)
        if len(data) > self._capacity:
            self.pop()

    def pop(self) -> Tuple[int, bool]:
        """Remove and return ``(minimum, True)``, or ``(0, False)`` when empty."""
        data = self._data
        if not data:
            return 0, False
        top = data[0]
        data[0], data[-1] = data[-1], data[0]
        data.pop()
        self._sift_down(0)
        return top, True

    def peek(self) -> Tuple[int, bool]:
        """Return ``(minimum, True)`` without removing it, or ``(0, False)``."""
        if not self._data:
            return 0, False
        return self._data[0], True

    def render(self) -> str:
        """Comma-joined values in heap-array order."""
        return ",".join(str(v) for v in self._data)

    def to_list(self) -> List[int]:
        return list(self._data)

    def sorted_values(self) -> List[int]:
        """Ascending copy of the retained values (presentation only)."""
        return sorted(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __iter__(self) -> Iterator[int]:
        # Iterate over the internal array (heap order, not sorted order)
        return iter(self._data)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"BoundedMinHeap(capacity={self._capacity}, data={self._data!r})"
