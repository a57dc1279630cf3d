"""Random-access iterators over a mutable sequence."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

from .iterator_traits import RandomAccessIteratorTag

__all__ = ["VectorIterator", "ConstVectorIterator"]


class VectorIterator:
    """A position inside a sequence that can be read, written and moved."""

    iterator_category = RandomAccessIteratorTag
    __slots__ = ("_sequence", "_index")

    def __init__(self, sequence: Sequence, index: int = 0) -> None:
        self._sequence = sequence
        self._index = index

    def base(self) -> int:
        """Return the position this iterator refers to."""
        return self._index

    def _checked(self, position: int) -> int:
        if not 0 <= position < len(self._sequence):
            raise IndexError(f"iterator at position {position} is not dereferenceable")
        return position

    def get(self):
        """Return the element the iterator refers to."""
        return self._sequence[self._checked(self._index)]

    def set(self, value) -> None:
        """Replace the element the iterator refers to."""
        if not isinstance(self._sequence, MutableSequence):
            raise TypeError("underlying sequence is read-only")
        self._sequence[self._checked(self._index)] = value

    def increment(self) -> VectorIterator:
        """Advance by one in place and return self."""
        self._index += 1
        return self

    def decrement(self) -> VectorIterator:
        """Step back by one in place and return self."""
        self._index -= 1
        return self

    def copy(self) -> VectorIterator:
        """Return an independent iterator at the same position."""
        return type(self)(self._sequence, self._index)

    def _offset_of(self, other: VectorIterator) -> int:
        if other._sequence is not self._sequence:
            raise ValueError("iterators refer to different sequences")
        return other._index

    def __add__(self, n):
        if not isinstance(n, int):
            return NotImplemented
        return type(self)(self._sequence, self._index + n)

    def __radd__(self, n):
        return self.__add__(n)

    def __sub__(self, other):
        if isinstance(other, VectorIterator):
            return self._index - self._offset_of(other)
        if isinstance(other, int):
            return type(self)(self._sequence, self._index - other)
        return NotImplemented

    def __iadd__(self, n):
        if not isinstance(n, int):
            return NotImplemented
        self._index += n
        return self

    def __isub__(self, n):
        if not isinstance(n, int):
            return NotImplemented
        self._index -= n
        return self

    def __getitem__(self, n: int):
        return self._sequence[self._checked(self._index + n)]

    def __eq__(self, other):
        if not isinstance(other, VectorIterator):
            return NotImplemented
        return self._sequence is other._sequence and self._index == other._index

    def __lt__(self, other):
        if not isinstance(other, VectorIterator):
            return NotImplemented
        return self._index < self._offset_of(other)

    def __le__(self, other):
        if not isinstance(other, VectorIterator):
            return NotImplemented
        return self._index <= self._offset_of(other)

    def __gt__(self, other):
        if not isinstance(other, VectorIterator):
            return NotImplemented
        return self._index > self._offset_of(other)

    def __ge__(self, other):
        if not isinstance(other, VectorIterator):
            return NotImplemented
        return self._index >= self._offset_of(other)

    def __hash__(self) -> int:
        return hash((id(self._sequence), self._index))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(index={self._index})"


class ConstVectorIterator(VectorIterator):
    """A vector iterator through which elements cannot be modified."""

    __slots__ = ()

    def set(self, value) -> None:
        """Always fails: a constant iterator is read-only."""
        raise TypeError("cannot assign through a constant iterator")