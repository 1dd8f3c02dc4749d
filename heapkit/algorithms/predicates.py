"""Ordering predicates for the heap algorithms.

A predicate ``less(a, b)`` returns True when `a` must come before `b` in
sorted order. It has to be a strict weak ordering; nothing here or in the
algorithms checks that.
"""

from __future__ import annotations

import operator
from typing import Any, Callable, TypeVar

T = TypeVar("T")

Less = Callable[[T, T], bool]

natural: Callable[[Any, Any], bool] = operator.lt


def reverse(less: Less = natural) -> Less:
    """Flip an ordering: max-heaps become min-heaps, ascending becomes descending."""
    def reversed_less(a, b):
        return less(b, a)

    return reversed_less


def by_key(key: Callable[[T], Any], reverse: bool = False) -> Less:
    """Order elements by ``key(element)``, optionally descending."""
    if reverse:
        def less(a, b):
            return key(b) < key(a)
    else:
        def less(a, b):
            return key(a) < key(b)
    return less
