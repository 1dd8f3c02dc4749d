"""Uniform call / pipe protocol for in-place sequence algorithms.

Every algorithm object built on :class:`Bindable` can be used three ways,
and all of them hand back the very sequence they were given:

    make_heap(data)                 # direct, natural ordering
    make_heap(data, less)           # direct, caller ordering
    data | make_heap                # pipe, natural ordering
    data | make_heap(less)          # pipe through a bound stage

Binding (``make_heap(less)`` or ``make_heap.bind(less)``) never changes the
algorithm object; it returns a new :class:`Stage` holding the predicate.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable, Optional, Protocol, TypeVar, runtime_checkable

logger = logging.getLogger(__name__)

S = TypeVar("S", bound="RandomAccessSequence")


@runtime_checkable
class RandomAccessSequence(Protocol):
    """Capability required by every heap operation: index, assign, measure."""

    def __getitem__(self, idx: int) -> Any: ...

    def __setitem__(self, idx: int, value: Any) -> None: ...

    def __len__(self) -> int: ...


def is_random_access(rng: object) -> bool:
    """Return True if `rng` can be indexed, assigned by index and measured."""
    return isinstance(rng, RandomAccessSequence) and not isinstance(rng, Mapping)


def require_random_access(rng: S, op_name: str) -> S:
    """Return `rng` unchanged, or raise TypeError before anything is touched."""
    if not is_random_access(rng):
        logger.debug(f"{op_name}: rejected {type(rng).__name__}")
        raise TypeError(
            f"{op_name}() requires a mutable random-access sequence, "
            f"got {type(rng).__name__!r}"
        )
    return rng


class Bindable:
    """Base for stateless algorithm objects with call, bind and pipe forms.

    Subclasses set ``name`` and implement :meth:`invoke`, which receives a
    sequence that already passed the capability check and a predicate that
    may be None (natural ordering).
    """

    __slots__ = ()

    name = "bindable"

    # Lets array types that implement ``|`` element-wise defer to __ror__.
    __array_ufunc__ = None

    def invoke(self, rng: S, less: Optional[Callable[[Any, Any], bool]] = None) -> S:
        raise NotImplementedError

    def apply(self, rng: S, less: Optional[Callable[[Any, Any], bool]] = None) -> S:
        """Check the capability of `rng`, run the algorithm, return `rng`."""
        require_random_access(rng, self.name)
        if less is not None and not callable(less):
            raise TypeError(f"{self.name}() predicate must be callable, got {type(less).__name__!r}")
        logger.debug(
            f"{self.name}: len={len(rng)} predicate={'custom' if less is not None else 'natural'}"
        )
        return self.invoke(rng, less)

    def bind(self, less: Callable[[Any, Any], bool]) -> "Stage":
        """Return a one-argument stage that applies this algorithm with `less`."""
        if not callable(less):
            raise TypeError(f"{self.name}() predicate must be callable, got {type(less).__name__!r}")
        return Stage(self, less)

    def __call__(self, *args: Any) -> Any:
        if len(args) == 2:
            return self.apply(args[0], args[1])
        if len(args) != 1:
            raise TypeError(f"{self.name}() takes 1 or 2 positional arguments but {len(args)} were given")

        (arg,) = args
        if is_random_access(arg):
            return self.apply(arg)
        if callable(arg):
            return self.bind(arg)
        # Not a sequence and not a predicate: report it as a bad sequence.
        return self.apply(arg)

    def __ror__(self, rng: S) -> S:
        return self.apply(rng)

    def __repr__(self) -> str:
        return f"<heap algorithm {self.name}>"


class Stage:
    """An algorithm with its predicate bound; call it or pipe into it."""

    __slots__ = ("_op", "_less")

    __array_ufunc__ = None

    def __init__(self, op: Bindable, less: Callable[[Any, Any], bool]) -> None:
        self._op = op
        self._less = less

    @property
    def op(self) -> Bindable:
        return self._op

    @property
    def less(self) -> Callable[[Any, Any], bool]:
        return self._less

    def __call__(self, rng: S) -> S:
        return self._op.apply(rng, self._less)

    def __ror__(self, rng: S) -> S:
        return self._op.apply(rng, self._less)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Stage({self._op.name}, {self._less!r})"
