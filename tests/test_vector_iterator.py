import pytest

from tinystl.vector_iterator import ConstVectorIterator, VectorIterator


@pytest.fixture
def data():
    return [10, 20, 30, 40, 50]


def test_dereference_and_walk(data):
    it = VectorIterator(data, 0)
    end = VectorIterator(data, len(data))
    seen = []
    while it != end:
        seen.append(it.get())
        it.increment()
    assert seen == data


def test_decrement_walks_backwards(data):
    it = VectorIterator(data, len(data))
    begin = VectorIterator(data, 0)
    seen = []
    while it != begin:
        seen.append(it.decrement().get())
    assert seen == list(reversed(data))


def test_set_writes_through(data):
    it = VectorIterator(data, 2)
    it.set(99)
    assert data[2] == 99
    assert it.get() == 99


def test_const_iterator_is_read_only(data):
    it = ConstVectorIterator(data, 1)
    assert it.get() == data[1]
    with pytest.raises(TypeError):
        it.set(7)
    assert data[1] == 20


def test_set_on_tuple_raises():
    it = VectorIterator((1, 2), 0)
    with pytest.raises(TypeError):
        it.set(5)


def test_arithmetic(data):
    begin = VectorIterator(data, 0)
    third = begin + 2
    assert third.get() == data[2]
    assert (2 + begin) == third
    assert (third - 1).get() == data[1]
    assert third - begin == 2
    assert begin - third == -2
    assert begin.base() == 0


def test_in_place_arithmetic(data):
    it = VectorIterator(data, 0)
    same = it
    it += 3
    assert it is same
    assert it.get() == data[3]
    it -= 2
    assert it.get() == data[1]


def test_subscript(data):
    it = VectorIterator(data, 1)
    assert it[0] == data[1]
    assert it[2] == data[3]
    assert it[-1] == data[0]


def test_out_of_range_dereference(data):
    with pytest.raises(IndexError):
        VectorIterator(data, len(data)).get()
    with pytest.raises(IndexError):
        VectorIterator(data, -1).get()
    with pytest.raises(IndexError):
        VectorIterator(data, 0)[len(data)]


def test_comparisons(data):
    a = VectorIterator(data, 1)
    b = VectorIterator(data, 3)
    assert a < b and a <= b
    assert b > a and b >= a
    assert not (a > b)
    assert a <= a.copy() and a >= a.copy()


def test_const_and_mutable_compare(data):
    mutable = VectorIterator(data, 2)
    const = ConstVectorIterator(data, 2)
    assert mutable == const
    assert const == mutable
    assert const - VectorIterator(data, 0) == 2
    assert const < VectorIterator(data, 4)


def test_different_sequences(data):
    other = list(data)
    a = VectorIterator(data, 0)
    b = VectorIterator(other, 0)
    assert a != b
    with pytest.raises(ValueError):
        a < b
    with pytest.raises(ValueError):
        a - b


def test_copy_is_independent(data):
    it = VectorIterator(data, 0)
    dup = it.copy()
    dup.increment()
    assert it.base() == 0
    assert dup.base() == 1
    assert type(ConstVectorIterator(data, 0).copy()) is ConstVectorIterator


def test_addition_keeps_type(data):
    it = ConstVectorIterator(data, 0) + 1
    assert isinstance(it, ConstVectorIterator)
    with pytest.raises(TypeError):
        it.set(0)


def test_hash_consistent_with_equality(data):
    a = VectorIterator(data, 2)
    b = VectorIterator(data, 0) + 2
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_equality_with_other_types(data):
    assert (VectorIterator(data, 0) == 0) is False