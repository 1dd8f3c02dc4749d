"""In-place binary-heap algorithms with call and pipe forms.

    >>> from heapkit import make_heap, sort_heap
    >>> data = [3, 1, 4, 1, 5, 9, 2, 6]
    >>> data | make_heap | sort_heap
    [1, 1, 2, 3, 4, 5, 6, 9]
"""

from .algorithms import (
    Bindable,
    RandomAccessSequence,
    Span,
    Stage,
    by_key,
    is_heap,
    is_heap_until,
    make_heap,
    natural,
    pop_heap,
    push_heap,
    reverse,
    sort_heap,
)

# Short names for the same algorithm objects.
push = push_heap
pop = pop_heap
make = make_heap
sort = sort_heap

__version__ = "0.1.0"

__all__ = [
    "Bindable",
    "RandomAccessSequence",
    "Span",
    "Stage",
    "by_key",
    "is_heap",
    "is_heap_until",
    "make_heap",
    "natural",
    "pop_heap",
    "push_heap",
    "reverse",
    "sort_heap",
    "push",
    "pop",
    "make",
    "sort",
]
