from .bindable import Bindable, RandomAccessSequence, Stage, is_random_access, require_random_access
from .heap import is_heap, is_heap_until, make_heap, pop_heap, push_heap, sort_heap
from .span import Span
from .predicates import by_key, natural, reverse

__all__ = [
    "Bindable",
    "RandomAccessSequence",
    "Stage",
    "is_random_access",
    "require_random_access",
    "push_heap",
    "pop_heap",
    "make_heap",
    "sort_heap",
    "is_heap",
    "is_heap_until",
    "Span",
    "natural",
    "reverse",
    "by_key",
]
