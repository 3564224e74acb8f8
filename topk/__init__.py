"""Keep the K largest distinct integers seen in a one-pass stream."""

from .datastructures import BoundedMinHeap

__all__ = ["BoundedMinHeap"]
