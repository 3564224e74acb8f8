import random

import pytest

from topk.datastructures import BoundedMinHeap

KEEP = 50
START = -999_999
END = 1_000_000


def assert_heap_property(heap):
    data = heap.to_list()
    for i in range(1, len(data)):
        assert data[(i - 1) // 2] <= data[i], f"heap property broken at index {i}: {data}"


# ----------------------------
# Construction
# ----------------------------

def test_empty_heap():
    heap = BoundedMinHeap(KEEP)
    assert heap.count() == 0
    assert len(heap) == 0
    assert not heap
    assert heap.capacity == KEEP
    assert heap.render() == ""


@pytest.mark.parametrize("capacity", [0, -1, -50])
def test_non_positive_capacity_is_rejected(capacity):
    with pytest.raises(ValueError):
        BoundedMinHeap(capacity)


@pytest.mark.parametrize("capacity", [1.5, "50", None, True])
def test_non_int_capacity_is_rejected(capacity):
    with pytest.raises(TypeError):
        BoundedMinHeap(capacity)


# ----------------------------
# Push
# ----------------------------

def test_heap_with_one_value():
    heap = BoundedMinHeap(KEEP)
    heap.push(1)
    assert heap.count() == 1
    assert heap.peek() == (1, True)


def test_heap_with_same_value():
    heap = BoundedMinHeap(KEEP)
    heap.push(1)
    heap.push(2)
    heap.push(1)
    assert heap.count() == 2
    assert heap.sorted_values() == [1, 2]


def test_value_below_root_is_skipped_even_when_not_full():
    heap = BoundedMinHeap(KEEP)
    heap.push(5)
    heap.push(3)
    assert heap.to_list() == [5]


def test_duplicate_above_root_is_kept():
    heap = BoundedMinHeap(KEEP)
    for v in (1, 5, 5):
        heap.push(v)
    assert heap.sorted_values() == [1, 5, 5]


def test_floor_rejection_when_full():
    heap = BoundedMinHeap(3)
    for v in (10, 20, 30):
        heap.push(v)
    before = heap.to_list()

    heap.push(10)
    heap.push(9)
    heap.push(-(2 ** 70))

    assert heap.count() == 3
    assert heap.to_list() == before


def test_eviction_of_smallest_when_over_capacity():
    heap = BoundedMinHeap(2)
    for v in (3, 5, 4):
        heap.push(v)
    assert heap.render() == "4,5"


def test_extreme_values():
    heap = BoundedMinHeap(3)
    for v in (-(2 ** 63), 2 ** 63 - 1, 2 ** 63, -(2 ** 63) + 1, 2 ** 64):
        heap.push(v)
        assert_heap_property(heap)
    assert heap.sorted_values() == [2 ** 63 - 1, 2 ** 63, 2 ** 64]


def test_random_streams_keep_invariants():
    rng = random.Random(1234)
    for capacity in (1, 2, 7, 50):
        heap = BoundedMinHeap(capacity)
        values = rng.sample(range(-10_000, 10_000), 2_000)
        for v in values:
            heap.push(v)
            assert heap.count() <= capacity
            assert_heap_property(heap)
        top = set(sorted(values)[-capacity:])
        assert set(heap) <= top
        assert max(heap) == max(values)


# ----------------------------
# Pop
# ----------------------------

def test_pop_of_empty_heap():
    heap = BoundedMinHeap(KEEP)
    assert heap.pop() == (0, False)
    assert heap.peek() == (0, False)


def test_pop_of_heap_with_1_element():
    heap = BoundedMinHeap(KEEP)
    heap.push(1)
    assert heap.pop() == (1, True)
    assert heap.count() == 0
    assert heap.pop() == (0, False)


def test_pop_returns_ascending_order():
    heap = BoundedMinHeap(10)
    for v in (1, 9, 4, 7, 2, 8):
        heap.push(v)
    popped = []
    while heap:
        value, ok = heap.pop()
        assert ok
        assert_heap_property(heap)
        popped.append(value)
    assert popped == sorted(popped)


def test_sift_down_prefers_right_child_on_tie():
    heap = BoundedMinHeap(10)
    for v in (1, 5, 5, 9):
        heap.push(v)
    assert heap.render() == "1,5,5,9"
    assert heap.pop() == (1, True)
    assert heap.render() == "5,5,9"


def test_root_rises_after_pop():
    heap = BoundedMinHeap(10)
    for v in (1, 2, 3):
        heap.push(v)
    heap.pop()
    heap.push(1)
    heap.push(2)
    assert heap.sorted_values() == [2, 3]


# ----------------------------
# Large streams
# ----------------------------

def test_a_large_number_of_values():
    heap = BoundedMinHeap(KEEP)
    for i in range(START, END + 1):
        heap.push(i)

    assert heap.count() == KEEP
    values = heap.sorted_values()
    assert values[0] == END - KEEP + 1
    assert values[-1] == END
    assert values == list(range(END - KEEP + 1, END + 1))
    assert heap.render().split(",")[0] == str(END - KEEP + 1)


def test_a_large_number_of_values_alternating_sign():
    heap = BoundedMinHeap(KEEP)
    for i in range(START, END + 1):
        heap.push(-i if i % 2 == 0 else i)

    assert heap.count() == KEEP
    values = heap.sorted_values()
    assert values[0] == END - KEEP
    assert values[-1] == END - 1


def test_pop_of_heap_with_many_elements():
    heap = BoundedMinHeap(KEEP)
    for i in range(START, END + 1):
        heap.push(i)

    assert heap.pop() == (END - KEEP + 1, True)
    assert heap.count() == KEEP - 1
    assert_heap_property(heap)


# ----------------------------
# Rendering
# ----------------------------

def test_render_is_heap_order():
    heap = BoundedMinHeap(KEEP)
    for v in (3, 9, 4):
        heap.push(v)
    assert heap.render() == "3,9,4"
    assert str(heap) == heap.render()
    assert list(heap) == [3, 9, 4]
    assert repr(heap) == "BoundedMinHeap(capacity=50, data=[3, 9, 4])"
