import collections
import random

import pytest

from drillbox.deque import Deque


def test_constructors():
    assert len(Deque()) == 0
    assert list(Deque([1, 2, 3, 4])) == [1, 2, 3, 4]


def test_basic():
    a = Deque([1, 3, 5])
    assert list(a) == [1, 3, 5]
    a.pop()
    assert list(a) == [1, 3]
    a.popleft()
    assert list(a) == [3]
    a.appendleft(5)
    assert list(a) == [5, 3]
    a.append(1)
    assert list(a) == [5, 3, 1]
    a.clear()
    assert list(a) == []
    a.append(3)
    b = Deque([2, 4])
    a.swap(b)
    assert list(a) == [2, 4]
    assert list(b) == [3]


def test_index_assignment():
    a = Deque([9, 1, 1])
    a[0] = 1
    a[1] = 2
    a[2] = 3
    assert list(a) == [1, 2, 3]
    assert a[-1] == a[2]


def test_index_out_of_range():
    a = Deque([1, 2])
    with pytest.raises(IndexError):
        a[2]
    with pytest.raises(IndexError):
        a[-3] = 0
    assert list(a) == [1, 2]
    assert len(a) == 2


@pytest.mark.parametrize("method", ["pop", "popleft"])
def test_pop_empty_raises(method):
    with pytest.raises(IndexError):
        getattr(Deque(), method)()


def test_pops_return_items():
    a = Deque([1, 2, 3])
    assert a.popleft() == 1
    assert a.pop() == 3
    assert list(a) == [2]


def test_many_items_keep_their_values():
    a = Deque()
    for i in range(1000):
        a.append(i)
    assert list(a) == list(range(1000))
    assert all(a[i] == i for i in range(1000))


def test_copy_is_independent():
    a = Deque()
    b = a.copy()
    b.append(1)
    assert list(a) == []
    assert list(b) == [1]
    d = Deque([3, 4, 5])
    e = d.copy()
    c = Deque([1])
    d.swap(c)
    assert list(e) == [3, 4, 5]
    assert list(d) == [1]
    assert c == e


def test_matches_reference_deque():
    gen = random.Random(735675)
    a = Deque()
    b = collections.deque()
    for i in range(2000):
        a.appendleft(i)
        b.appendleft(i)
    for _ in range(20000):
        code = gen.randint(1, 5)
        value = gen.getrandbits(31)
        if code == 1:
            a.appendleft(value)
            b.appendleft(value)
        elif code == 2:
            a.append(value)
            b.append(value)
        elif code == 3 and b:
            assert a.popleft() == b.popleft()
        elif code == 4 and b:
            assert a.pop() == b.pop()
        elif b:
            index = value % len(b)
            assert a[index] == b[index]
    assert list(a) == list(b)


@pytest.mark.parametrize(
    "push, pop",
    [("append", "pop"), ("append", "popleft"), ("appendleft", "pop"), ("appendleft", "popleft")],
)
def test_empties_fully(push, pop):
    a = Deque()
    for i in range(1000):
        getattr(a, push)(i)
    for _ in range(1000):
        getattr(a, pop)()
    assert len(a) == 0
    assert list(a) == []
    a.append(7)
    assert list(a) == [7]