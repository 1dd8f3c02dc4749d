import os
import sys
import random
from collections import Counter

import pytest

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from heapkit import is_heap, is_heap_until, make_heap, pop_heap, push_heap, sort_heap, by_key, reverse

# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_list(size: int, rng: random.Random, hi: int = 50):
    """Generate a list of random integers (small range so duplicates occur)."""
    return [rng.randint(0, hi) for _ in range(size)]


def greater(a, b):
    return a > b


SIZES = [0, 1, 2, 3, 7, 8, 31, 64, 100]

# ----------------------------
# make_heap
# ----------------------------

def test_make_heap_concrete_scenario():
    data = [3, 1, 4, 1, 5, 9, 2, 6]
    out = make_heap(data)
    assert out is data
    assert data[0] == 9
    assert is_heap(data)
    assert sorted(data) == [1, 1, 2, 3, 4, 5, 6, 9]


@pytest.mark.parametrize("size", SIZES)
def test_make_heap_establishes_heap_property(size):
    rng = random.Random(size)
    data = generate_random_list(size, rng)
    before = Counter(data)
    make_heap(data)
    for i in range(1, len(data)):
        assert not (data[(i - 1) // 2] < data[i])
    assert Counter(data) == before


@pytest.mark.parametrize("size", SIZES)
def test_make_heap_with_predicate_builds_min_heap(size):
    rng = random.Random(1000 + size)
    data = generate_random_list(size, rng)
    make_heap(data, greater)
    assert is_heap(data, greater)
    if data:
        assert data[0] == min(data)


def test_make_heap_is_idempotent():
    rng = random.Random(7)
    for size in SIZES:
        data = generate_random_list(size, rng)
        once = make_heap(list(data))
        twice = make_heap(make_heap(list(data)))
        assert once == twice


# ----------------------------
# push_heap
# ----------------------------

def test_push_heap_restores_heap_after_append():
    rng = random.Random(11)
    for size in SIZES:
        heap = make_heap(generate_random_list(size, rng))
        heap.append(rng.randint(-10, 60))
        before = Counter(heap)
        out = push_heap(heap)
        assert out is heap
        assert is_heap(heap)
        assert Counter(heap) == before


def test_push_heap_new_maximum_reaches_root():
    heap = make_heap([5, 3, 4, 1, 2])
    heap.append(100)
    push_heap(heap)
    assert heap[0] == 100


def test_push_heap_one_at_a_time_matches_bulk_build_property():
    data = [3, 1, 4, 1, 5, 9, 2, 6]
    heap = []
    for v in data:
        heap.append(v)
        push_heap(heap, greater)
        assert is_heap(heap, greater)
    assert heap[0] == 1


# ----------------------------
# pop_heap
# ----------------------------

@pytest.mark.parametrize("size", [n for n in SIZES if n > 0])
def test_pop_heap_moves_max_to_end(size):
    rng = random.Random(size * 3)
    heap = make_heap(generate_random_list(size, rng))
    top = heap[0]
    before = Counter(heap)
    out = pop_heap(heap)
    assert out is heap
    assert len(heap) == size
    assert heap[-1] == top
    assert is_heap(heap[:-1])
    assert Counter(heap) == before


def test_pop_heap_with_predicate_moves_min_to_end():
    heap = make_heap([8, 3, 5, 1, 9], greater)
    pop_heap(heap, greater)
    assert heap[-1] == 1
    assert is_heap(heap[:-1], greater)


def test_repeated_pop_on_shrinking_list_drains_in_order():
    heap = make_heap([3, 1, 4, 1, 5, 9, 2, 6])
    drained = []
    while heap:
        pop_heap(heap)
        drained.append(heap.pop())
    assert drained == [9, 6, 5, 4, 3, 2, 1, 1]


# ----------------------------
# sort_heap
# ----------------------------

def test_sort_heap_concrete_scenario():
    heap = make_heap([3, 1, 4, 1, 5, 9, 2, 6])
    out = sort_heap(heap)
    assert out is heap
    assert heap == [1, 1, 2, 3, 4, 5, 6, 9]


@pytest.mark.parametrize("size", SIZES)
def test_sort_after_make_matches_sorted(size):
    rng = random.Random(500 + size)
    data = generate_random_list(size, rng)
    assert sort_heap(make_heap(list(data))) == sorted(data)
    assert sort_heap(make_heap(list(data), greater), greater) == sorted(data, reverse=True)


def test_sort_with_key_predicate_orders_by_key():
    records = [("b", 3), ("a", 1), ("d", 4), ("c", 1), ("e", 5)]
    less = by_key(lambda r: r[1])
    sort_heap(make_heap(records, less), less)
    assert [r[1] for r in records] == [1, 1, 3, 4, 5]


def test_sort_with_reversed_ordering_is_descending():
    less = reverse()
    data = [3, 1, 4, 1, 5]
    assert sort_heap(make_heap(data, less), less) == [5, 4, 3, 1, 1]


def test_sort_heap_on_non_heap_input_keeps_elements():
    # Precondition violation is not detected; elements are only permuted.
    data = [1, 2, 3, 4, 5]
    sort_heap(data)
    assert sorted(data) == [1, 2, 3, 4, 5]


# ----------------------------
# Trivial inputs
# ----------------------------

@pytest.mark.parametrize("op", [push_heap, pop_heap, make_heap, sort_heap])
def test_empty_and_single_are_no_ops(op):
    empty = []
    assert op(empty) is empty
    assert empty == []
    single = [42]
    assert op(single, greater) is single
    assert single == [42]


# ----------------------------
# Queries
# ----------------------------

def test_is_heap_until_reports_first_violation():
    assert is_heap_until([9, 5, 4, 7, 1]) == 3
    assert is_heap_until([9, 5, 4, 1, 1]) == 5
    assert is_heap_until([]) == 0


def test_is_heap_accepts_read_only_sequences():
    assert is_heap((9, 5, 4, 1))
    assert not is_heap((1, 2))
    assert is_heap((1, 2), greater)


def test_is_heap_rejects_mapping():
    with pytest.raises(TypeError):
        is_heap({0: 1, 1: 2})
