from __future__ import annotations
from typing import Callable, MutableSequence, TypeVar

T = TypeVar("T")

Less = Callable[[T, T], bool]


# Heap layout: children of position i live at 2i+1 and 2i+2. Every routine
# keeps a max-heap under `less`, i.e. less(parent, child) is False.


def sift_up(data: MutableSequence[T], idx: int, less: Less) -> None:
    """Move data[idx] toward the root until its parent is not less than it."""
    while idx > 0:
        parent = (idx - 1) // 2
        if not less(data[parent], data[idx]):
            break
        data[parent], data[idx] = data[idx], data[parent]
        idx = parent


def sift_down(data: MutableSequence[T], idx: int, end: int, less: Less) -> None:
    """Move data[idx] toward the leaves of the heap occupying data[0:end].

    At each level the greater child (under `less`) is the one compared
    against; on a tie the left child is kept.
    """
    while True:
        child = 2 * idx + 1
        if child >= end:
            break
        right = child + 1
        if right < end and less(data[child], data[right]):
            child = right
        if not less(data[idx], data[child]):
            break
        data[idx], data[child] = data[child], data[idx]
        idx = child


def heapify(data: MutableSequence[T], end: int, less: Less) -> None:
    """Bottom-up build of a heap over data[0:end] in O(end) time."""
    for i in reversed(range(end // 2)):
        sift_down(data, i, end, less)
