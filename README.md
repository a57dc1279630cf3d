# tinystl

Position-based iterators modelled on the classic container iterator
categories (sequence, reverse and binary-search-tree iterators), plus a
small unit test runner with per-test timeouts, output capture and log files.

The package has no dependencies outside the standard library.

## Install

    pip install .

To run the test suite:

    pip install ".[test]"
    pytest

## Iterator categories

`tinystl.iterator_traits` defines the category tags `InputIteratorTag`,
`OutputIteratorTag`, `ForwardIteratorTag`, `BidirectionalIteratorTag` and
`RandomAccessIteratorTag`. They are classes forming an inheritance chain,
so `issubclass(RandomAccessIteratorTag, ForwardIteratorTag)` holds.

- `category_of(iterator)` returns the object's `iterator_category`
  attribute; a plain sequence (such as a list) counts as random access.
  Anything else raises `TypeError`.
- `is_random_access(iterator)` tells whether that category is
  `RandomAccessIteratorTag` or derived from it.

## Sequence iterators

`tinystl.vector_iterator.VectorIterator(sequence, index=0)` is a position
in a sequence.

- `get()` reads the element at the position, `set(value)` replaces it;
  both raise `IndexError` when the position is outside the sequence, and
  `set` raises `TypeError` if the sequence is not mutable.
- `increment()` and `decrement()` move the iterator in place and return it.
- `it + n`, `n + it` and `it - n` give new iterators; `+=` and `-=` move in
  place; `it[n]` reads the element `n` places away.
- `a - b` gives the distance between two iterators on the same sequence.
- `==` is true for the same sequence object and the same position;
  `<`, `<=`, `>`, `>=` compare positions and raise `ValueError` for
  iterators on different sequences.
- `base()` returns the index, `copy()` an independent iterator.

```python
from tinystl.vector_iterator import VectorIterator

data = [10, 20, 30]
begin = VectorIterator(data, 0)
end = VectorIterator(data, len(data))
assert end - begin == 3
assert (begin + 1).get() == 20
begin[2]            # 30
```

`ConstVectorIterator` behaves the same, except that `set` always raises
`TypeError`.

## Reverse iterators

`tinystl.reverse_iterator.ReverseIterator(base)` walks an iterator's range
backwards. It keeps a copy of `base` and dereferences the element just
before it, so `ReverseIterator(end).get()` is the last element.
`increment()` steps the underlying iterator back, `decrement()` steps it
forward. Arithmetic (`+`, `-`, `+=`, `-=`, `[n]`) needs a random-access
base such as `VectorIterator`; comparisons and distances are mirrored
(`rbegin < rend`, `rend - rbegin == len`). `base()` returns a copy of the
underlying iterator.

```python
from tinystl.reverse_iterator import ReverseIterator
from tinystl.vector_iterator import VectorIterator

data = [1, 2, 3]
rbegin = ReverseIterator(VectorIterator(data, 3))
rend = ReverseIterator(VectorIterator(data, 0))
assert rbegin.get() == 3
assert rend - rbegin == 3
```

## Tree iterators

`tinystl.map_iterator` works on binary search trees built from `TreeNode`
objects (`data`, `parent`, `left`, `right`, `nil`). A missing child may be
`None` or a nil node from `TreeNode.sentinel()`. The past-the-end position
is a sentinel that is the root's parent and whose own `parent` is the
largest node.

- `minimum(node)` and `maximum(node)` find the leftmost and rightmost
  nodes of a subtree.
- `successor(node)` returns the next node in order; from the largest node
  it reaches the end sentinel, and a nil node stays where it is.
- `predecessor(node)` returns the previous node; from a nil node it
  returns the node's `parent`. It does not wrap around from the smallest
  node.
- `MapIterator(node)` is a bidirectional iterator over these nodes:
  `get()` returns the node's `data` (and raises `IndexError` on a nil or
  missing node), `increment()` / `decrement()` move in place, `base()`
  returns the node, `copy()` an independent iterator. Two iterators are
  equal when they refer to the same node.
- `ConstMapIterator.from_iterator(it)` gives a read-only-intent iterator at
  the same node.

```python
from tinystl.map_iterator import MapIterator, TreeNode, minimum

end = TreeNode.sentinel()
root = TreeNode((2, "b"), parent=end)
root.left = TreeNode((1, "a"), parent=root)
root.right = TreeNode((3, "c"), parent=root)
end.parent = root.right

it, stop = MapIterator(minimum(root)), MapIterator(end)
items = []
while it != stop:
    items.append(it.get())
    it.increment()
assert items == [(1, "a"), (2, "b"), (3, "c")]
assert stop.copy().decrement().get() == (3, "c")
```

## Unit test runner

`tinystl.libunit.TestSuite(function, log_dir=".", timeout=10)` collects
zero-argument test functions for one subject. A test returns an integer
status (`0` or `None` means success); the value is reduced to a byte like
a process exit code.

- `add(test_name, func, expected_output="")` appends a test and returns its
  `UnitTest`; a non-empty expected output is compared with what the test
  prints, and a mismatch marks it `KO`.
- `run(out=None)` runs every test (each in a thread, with its standard
  output captured), writes a coloured report to `out` (standard output by
  default) and to `<function>.log` in `log_dir`, empties the suite and
  returns `(succeeded, total)`.
- `clear()`, `len(suite)` and iteration over the loaded `UnitTest` objects
  are available too.

A test still running after `timeout` seconds is reported `[TIMEOUT]`; an
exception escaping from it is reported as `[SIGABRT]`. Other labels are
`[OK]`, `[KO]`, `[LEAKS]` (status 66), the signal names of `Status`, and
`[EXIT : n]` for any other status. A summary line
`succeeded / total = [OK]` (or `[KO]`) follows.

```python
import sys
from tinystl.libunit import TestSuite

suite = TestSuite("STACK", log_dir=".", timeout=10)
suite.add("Push", lambda: 0)
suite.add("Greeting", lambda: print("hi", end="") or 0, "hi")
succeeded, total = suite.run(sys.stdout)
```

The building blocks are public as well: `execute_test(test, timeout)`,
`format_status(status)`, `check_output(test, output)`,
`format_test_output(test, number, output)`, `format_results(succeeded,
total)`, `create_log_file(function, directory)`, `get_time()` (milliseconds
since the epoch) and `check_timeout(init_time, delay)`.

## What is not included

The package provides iterators only: there are no vector, stack or map
container classes. The iterators run over ordinary Python sequences and
over trees you build from `TreeNode`. Tests are run in threads within the
current process, so a test that never returns is abandoned rather than
killed. There is no command-line program.