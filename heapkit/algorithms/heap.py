from __future__ import annotations

import operator
from collections.abc import Mapping
from typing import Any, Callable, Optional, Sequence, TypeVar

from .bindable import Bindable, S
from .sift import heapify, sift_down, sift_up

T = TypeVar("T")


def _ordering(less: Optional[Callable[[Any, Any], bool]]) -> Callable[[Any, Any], bool]:
    return operator.lt if less is None else less


class HeapPusher(Bindable):
    """Promote the last element into a heap held by the first n-1 elements.

    The caller places the new element at the end of the sequence first;
    nothing is appended here. O(log n).
    """

    __slots__ = ()
    name = "push_heap"

    def invoke(self, rng: S, less: Optional[Callable[[Any, Any], bool]] = None) -> S:
        n = len(rng)
        if n > 1:
            sift_up(rng, n - 1, _ordering(less))
        return rng


class HeapPopper(Bindable):
    """Swap the maximum to the last position and re-heap the first n-1.

    The sequence keeps its length; the popped element is read with
    ``rng[-1]`` afterwards. O(log n).
    """

    __slots__ = ()
    name = "pop_heap"

    def invoke(self, rng: S, less: Optional[Callable[[Any, Any], bool]] = None) -> S:
        n = len(rng)
        if n > 1:
            rng[0], rng[n - 1] = rng[n - 1], rng[0]
            sift_down(rng, 0, n - 1, _ordering(less))
        return rng


class HeapMaker(Bindable):
    """Arrange an arbitrary sequence into a heap in linear time."""

    __slots__ = ()
    name = "make_heap"

    def invoke(self, rng: S, less: Optional[Callable[[Any, Any], bool]] = None) -> S:
        heapify(rng, len(rng), _ordering(less))
        return rng


class HeapSorter(Bindable):
    """Turn a heap into a sequence sorted in non-descending order under `less`.

    The input must already be a heap (see ``make_heap``); otherwise the
    result is some permutation that is not sorted. O(n log n).
    """

    __slots__ = ()
    name = "sort_heap"

    def invoke(self, rng: S, less: Optional[Callable[[Any, Any], bool]] = None) -> S:
        cmp = _ordering(less)
        for end in range(len(rng) - 1, 0, -1):
            rng[0], rng[end] = rng[end], rng[0]
            sift_down(rng, 0, end, cmp)
        return rng


push_heap = HeapPusher()
pop_heap = HeapPopper()
make_heap = HeapMaker()
sort_heap = HeapSorter()


# -----------------------------
# Read-only queries
# -----------------------------

def is_heap_until(rng: Sequence[T], less: Optional[Callable[[T, T], bool]] = None) -> int:
    """Return the length of the longest prefix of `rng` that is a heap.

    Equals ``len(rng)`` when the whole sequence is a heap. Works on
    read-only sequences too (tuples, ranges).
    """
    if isinstance(rng, Mapping) or not hasattr(rng, "__getitem__") or not hasattr(rng, "__len__"):
        raise TypeError(f"is_heap_until() requires a random-access sequence, got {type(rng).__name__!r}")
    cmp = _ordering(less)
    n = len(rng)
    for child in range(1, n):
        if cmp(rng[(child - 1) // 2], rng[child]):
            return child
    return n


def is_heap(rng: Sequence[T], less: Optional[Callable[[T, T], bool]] = None) -> bool:
    """True if every parent in `rng` is not less than its children."""
    return is_heap_until(rng, less) == len(rng)
