"""Iterator category tags and helpers for querying an iterator's category."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "InputIteratorTag",
    "OutputIteratorTag",
    "ForwardIteratorTag",
    "BidirectionalIteratorTag",
    "RandomAccessIteratorTag",
    "category_of",
    "is_random_access",
]


class InputIteratorTag:
    """Marks an iterator that can be read from and advanced."""


class OutputIteratorTag:
    """Marks an iterator that can be written through and advanced."""


class ForwardIteratorTag(InputIteratorTag):
    """Marks a multi-pass input iterator."""


class BidirectionalIteratorTag(ForwardIteratorTag):
    """Marks a forward iterator that can also step backwards."""


class RandomAccessIteratorTag(BidirectionalIteratorTag):
    """Marks a bidirectional iterator supporting constant-time jumps."""


def category_of(iterator: object) -> type:
    """Return the category tag class of ``iterator``.

    Objects declaring an ``iterator_category`` attribute report that tag.
    A plain sequence behaves like a raw pointer and is random access.
    """
    category = getattr(iterator, "iterator_category", None)
    if category is not None:
        return category
    if isinstance(iterator, Sequence):
        return RandomAccessIteratorTag
    raise TypeError(f"{type(iterator).__name__!r} is not an iterator")


def is_random_access(iterator: object) -> bool:
    """Tell whether ``iterator`` supports random access."""
    return issubclass(category_of(iterator), RandomAccessIteratorTag)