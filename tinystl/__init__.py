"""Sequence, reverse and tree iterators with container-style semantics, and a small unit test runner."""

__version__ = "0.1.0"
__all__ = ["iterator_traits", "vector_iterator", "reverse_iterator", "map_iterator", "libunit"]