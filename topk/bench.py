"""
Push/pop benchmark for BoundedMinHeap.

Times each operation over exponentially growing inputs of random integers and
writes one CSV row per (operation, input size).
"""

import csv
import logging
import random
import statistics
import sys
import time

from .datastructures import BoundedMinHeap
from .stream.sources import DEFAULT_KEEP

logger = logging.getLogger(__name__)


# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_list(size: int):
    """Generate a list of random integers of given size."""
    return [random.randint(-1000000, 1000000) for _ in range(size)]


def measure_operation_time(operation, input_size: int, capacity: int, iterations: int = 5):
    """Run the operation multiple times and return average + std deviation (ms)."""
    times = []
    for _ in range(iterations):
        data = generate_random_list(input_size)
        start = time.perf_counter()
        operation(data, capacity)
        end = time.perf_counter()
        times.append((end - start) * 1000)  # convert to milliseconds

    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_dev


def measure_space(heap: BoundedMinHeap) -> int:
    """Approximate bytes held by the heap, its backing list, and its values."""
    total = sys.getsizeof(heap) + sys.getsizeof(heap._data)
    for item in heap._data:
        total += sys.getsizeof(item)
    return total


def measure_space_efficiency(operation, input_size: int, capacity: int, iterations: int = 3):
    """Return average memory used by the heap after the operation (bytes)."""
    sizes = []
    for _ in range(iterations):
        data = generate_random_list(input_size)
        sizes.append(measure_space(operation(data, capacity)))
    return statistics.mean(sizes)


# ----------------------------
# Operations to Benchmark
# ----------------------------

def bench_push(data, capacity):
    heap = BoundedMinHeap(capacity)
    for item in data:
        heap.push(item)
    return heap


def bench_pop(data, capacity):
    heap = bench_push(data, capacity)
    while heap:
        heap.pop()
    return heap


OPERATIONS = {
    "push": bench_push,
    "pop": bench_pop,
}


# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(output_file: str, base_input: int = 100, steps: int = 8,
                   capacity: int = DEFAULT_KEEP, iterations: int = 5) -> int:
    """Run exponential performance tests and write results to ``output_file``.

    Returns the number of result rows written.
    """
    input_sizes = [base_input * (2 ** i) for i in range(steps)]
    rows = 0

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow([
            "Input Size",
            "Operation",
            "Capacity",
            "Average Time (ms)",
            "Standard Deviation (ms)",
            "Average Space (bytes)",
        ])

        for op_name, op_func in OPERATIONS.items():
            for size in input_sizes:
                avg_time, std_time = measure_operation_time(op_func, size, capacity, iterations)
                avg_space = measure_space_efficiency(op_func, size, capacity)
                writer.writerow([size, op_name, capacity, f"{avg_time:.3f}", f"{std_time:.3f}", f"{avg_space:.0f}"])
                rows += 1
                logger.info(
                    "%-6s | size: %-8d | avg time: %.3f ms | std: %.3f ms | avg space: %.0f bytes",
                    op_name, size, avg_time, std_time, avg_space,
                )

    return rows
