import csv

from ..datastructures import BoundedMinHeap


def render_heap(heap: BoundedMinHeap, sort: bool = False) -> str:
    """Comma-joined values, in heap order or ascending when ``sort`` is set."""
    if not sort:
        return heap.render()
    return ",".join(str(v) for v in heap.sorted_values())


def write_csv(heap: BoundedMinHeap, path: str) -> int:
    """Write the retained values to ``path`` as ``rank,value`` rows.

    Rank 1 is the largest retained value. Returns the number of rows written.
    """
    values = sorted(heap, reverse=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=["rank", "value"])
        writer.writeheader()
        for rank, value in enumerate(values, start=1):
            writer.writerow({"rank": rank, "value": value})
    return len(values)
