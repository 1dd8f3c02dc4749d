from __future__ import annotations
from typing import Generic, Iterator, List, MutableSequence, Optional, TypeVar

T = TypeVar("T")


class Span(Generic[T]):
    """A writable window ``[start, stop)`` over another random-access sequence.

    Implementation notes
    --------------------
    • No elements are copied: reads and writes go straight to the base sequence.
    • Bounds are normalized like slice bounds (negatives count from the end,
      out-of-range values are clamped) and fixed at construction.
    • Negative indices into the span are normalized like built-in list indices.
    • Lets heap operations work on a prefix or any sub-range in place,
      e.g. ``push_heap(Span(data, 0, k))``.
    """

    __slots__ = ("_base", "_start", "_size")

    def __init__(self, base: MutableSequence[T], start: int = 0, stop: Optional[int] = None) -> None:
        # slice.indices applies the same clamping rules as ``base[start:stop]``.
        lo, hi, _ = slice(start, stop).indices(len(base))
        self._base = base
        self._start = lo
        self._size = max(0, hi - lo)

    # ------------------------------- internals -------------------------------

    @staticmethod
    def _normalize_index(idx: int, size: int) -> int:
        """Map negative indices and validate bounds.

        Returns the non-negative index in [0, size).
        Raises IndexError if out of range.
        """
        if idx < 0:
            idx += size
        if idx < 0 or idx >= size:
            raise IndexError("span index out of range")
        return idx

    # --------------------------------- API -----------------------------------

    @property
    def base(self) -> MutableSequence[T]:
        return self._base

    @property
    def start(self) -> int:
        return self._start

    @property
    def stop(self) -> int:
        return self._start + self._size

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, idx: int) -> T:
        return self._base[self._start + self._normalize_index(idx, self._size)]

    def __setitem__(self, idx: int, value: T) -> None:
        self._base[self._start + self._normalize_index(idx, self._size)] = value

    def __iter__(self) -> Iterator[T]:
        """Yield items from left to right."""
        for i in range(self._start, self._start + self._size):
            yield self._base[i]

    def to_list(self) -> List[T]:
        """Copy the current window contents into a plain ``list``."""
        return list(self)

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        return self._size != 0

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Span({self.to_list()!r}, start={self._start}, stop={self.stop})"
