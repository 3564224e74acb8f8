from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from ..datastructures import BoundedMinHeap
from .sources import DEFAULT_KEEP

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunSummary:
    """What happened during one pass over a stream."""

    capacity: int
    offered: int
    retained: int
    minimum: Optional[int]
    maximum: Optional[int]
    elapsed_ms: float


def feed(heap: BoundedMinHeap, values: Iterable[int]) -> int:
    """Push every value into ``heap``; return how many values were offered."""
    push = heap.push
    offered = 0
    for value in values:
        push(value)
        offered += 1
    return offered


def top_k(values: Iterable[int], keep: int = DEFAULT_KEEP) -> BoundedMinHeap:
    """Return a heap holding the ``keep`` largest distinct values of ``values``."""
    heap = BoundedMinHeap(keep)
    feed(heap, values)
    return heap


def run(values: Iterable[int], keep: int = DEFAULT_KEEP) -> Tuple[BoundedMinHeap, RunSummary]:
    """Fill a new heap from ``values`` and summarize the pass."""
    heap = BoundedMinHeap(keep)
    start = time.perf_counter()
    offered = feed(heap, values)
    elapsed_ms = (time.perf_counter() - start) * 1000

    retained = heap.sorted_values()
    summary = RunSummary(
        capacity=keep,
        offered=offered,
        retained=len(retained),
        minimum=retained[0] if retained else None,
        maximum=retained[-1] if retained else None,
        elapsed_ms=elapsed_ms,
    )
    logger.info(
        "offered %d values, retained %d/%d (min=%s, max=%s) in %.1f ms",
        summary.offered, summary.retained, summary.capacity,
        summary.minimum, summary.maximum, summary.elapsed_ms,
    )
    return heap, summary
