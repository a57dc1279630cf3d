import pytest

from tinystl.iterator_traits import (
    BidirectionalIteratorTag,
    RandomAccessIteratorTag,
    category_of,
)
from tinystl.reverse_iterator import ReverseIterator
from tinystl.vector_iterator import VectorIterator


class _Walker:
    """A minimal bidirectional iterator over a list."""

    iterator_category = BidirectionalIteratorTag

    def __init__(self, items, pos):
        self.items = items
        self.pos = pos

    def copy(self):
        return _Walker(self.items, self.pos)

    def increment(self):
        self.pos += 1
        return self

    def decrement(self):
        self.pos -= 1
        return self

    def get(self):
        return self.items[self.pos]

    def __eq__(self, other):
        return self.items is other.items and self.pos == other.pos

    def __hash__(self):
        return hash(self.pos)


@pytest.fixture
def data():
    return [1, 2, 3, 4]


def rbegin(seq):
    return ReverseIterator(VectorIterator(seq, len(seq)))


def rend(seq):
    return ReverseIterator(VectorIterator(seq, 0))


def test_walks_in_reverse(data):
    it, end = rbegin(data), rend(data)
    seen = []
    while it != end:
        seen.append(it.get())
        it.increment()
    assert seen == list(reversed(data))


def test_decrement_walks_forward(data):
    it, begin = rend(data), rbegin(data)
    seen = []
    while it != begin:
        seen.append(it.decrement().get())
    assert seen == data


def test_dereference_is_element_before_base(data):
    it = rbegin(data)
    assert it.get() == data[-1]
    assert it.base() == VectorIterator(data, len(data))


def test_base_is_a_copy(data):
    it = rbegin(data)
    b = it.base()
    b.decrement()
    assert it.base() == VectorIterator(data, len(data))


def test_arithmetic(data):
    first = rbegin(data)
    second = first + 1
    assert second.get() == data[-2]
    assert (1 + first) == second
    assert (second - 1) == first
    assert rend(data) - first == len(data)
    assert first - rend(data) == -len(data)


def test_in_place_arithmetic(data):
    it = rbegin(data)
    same = it
    it += 2
    assert it is same
    assert it.get() == data[-3]
    it -= 1
    assert it.get() == data[-2]


def test_subscript(data):
    it = rbegin(data)
    assert it[0] == data[-1]
    assert it[1] == data[-2]
    assert it[len(data) - 1] == data[0]


def test_ordering_is_reversed(data):
    first, last = rbegin(data), rend(data)
    assert first < last and first <= last
    assert last > first and last >= first
    assert not (first > last)
    assert first >= first.copy() and first <= first.copy()


def test_rend_not_dereferenceable(data):
    with pytest.raises(IndexError):
        rend(data).get()


def test_copy_independent(data):
    it = rbegin(data)
    dup = it.copy()
    dup.increment()
    assert it.get() == data[-1]
    assert dup.get() == data[-2]


def test_hash_and_equality(data):
    a = rbegin(data) + 1
    b = rbegin(data)
    b.increment()
    assert a == b
    assert hash(a) == hash(b)
    assert (a == VectorIterator(data, 3)) is False


def test_category_follows_base(data):
    assert category_of(rbegin(data)) is RandomAccessIteratorTag
    walker = ReverseIterator(_Walker(data, len(data)))
    assert category_of(walker) is BidirectionalIteratorTag


def test_bidirectional_base(data):
    it = ReverseIterator(_Walker(data, len(data)))
    end = ReverseIterator(_Walker(data, 0))
    seen = []
    while it != end:
        seen.append(it.get())
        it.increment()
    assert seen == list(reversed(data))
    with pytest.raises(TypeError):
        ReverseIterator(_Walker(data, 2)) + 1