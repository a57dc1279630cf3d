"""An adaptor that walks an iterator's range backwards."""

from __future__ import annotations

from .iterator_traits import category_of

__all__ = ["ReverseIterator"]


class ReverseIterator:
    """Iterator adaptor referring to the element just before its base."""

    __slots__ = ("_current",)

    def __init__(self, base) -> None:
        self._current = base.copy()

    @property
    def iterator_category(self) -> type:
        return category_of(self._current)

    def base(self):
        """Return a copy of the underlying iterator."""
        return self._current.copy()

    def get(self):
        """Return the element just before the underlying position."""
        return self._current.copy().decrement().get()

    def increment(self) -> ReverseIterator:
        """Move one step towards the front, in place."""
        self._current.decrement()
        return self

    def decrement(self) -> ReverseIterator:
        """Move one step towards the back, in place."""
        self._current.increment()
        return self

    def copy(self) -> ReverseIterator:
        """Return an independent reverse iterator at the same position."""
        return ReverseIterator(self._current)

    def __add__(self, n):
        if not isinstance(n, int):
            return NotImplemented
        return ReverseIterator(self._current - n)

    def __radd__(self, n):
        return self.__add__(n)

    def __sub__(self, other):
        if isinstance(other, ReverseIterator):
            return other._current - self._current
        if isinstance(other, int):
            return ReverseIterator(self._current + other)
        return NotImplemented

    def __iadd__(self, n):
        if not isinstance(n, int):
            return NotImplemented
        self._current -= n
        return self

    def __isub__(self, n):
        if not isinstance(n, int):
            return NotImplemented
        self._current += n
        return self

    def __getitem__(self, n: int):
        return self._current[-n - 1]

    def __eq__(self, other):
        if not isinstance(other, ReverseIterator):
            return NotImplemented
        return self._current == other._current

    def __lt__(self, other):
        if not isinstance(other, ReverseIterator):
            return NotImplemented
        return self._current > other._current

    def __le__(self, other):
        if not isinstance(other, ReverseIterator):
            return NotImplemented
        return self._current >= other._current

    def __gt__(self, other):
        if not isinstance(other, ReverseIterator):
            return NotImplemented
        return self._current < other._current

    def __ge__(self, other):
        if not isinstance(other, ReverseIterator):
            return NotImplemented
        return self._current <= other._current

    def __hash__(self) -> int:
        return hash(("reverse", self._current))

    def __repr__(self) -> str:
        return f"ReverseIterator({self._current!r})"