from .heap import BoundedMinHeap

__all__ = [
    "BoundedMinHeap",
]
