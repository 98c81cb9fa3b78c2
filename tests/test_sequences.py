from itertools import islice

import pytest

from drillbox.sequences import group, numeric_range, zip_shortest


def test_range_stop_only():
    assert list(numeric_range(5)) == [0, 1, 2, 3, 4]


def test_range_with_step():
    assert list(numeric_range(2, 7, 2)) == [2, 4, 6]


def test_range_huge_is_lazy():
    values = list(islice(numeric_range(1, 1 << 61), 99))
    assert values == list(range(1, 100))


def test_range_negative_step_is_empty():
    assert list(numeric_range(5, 0, -1)) == []


def test_range_floats():
    assert list(numeric_range(0, 1, 0.25)) == [0, 0.25, 0.5, 0.75]


def test_range_bad_arguments():
    with pytest.raises(ValueError):
        numeric_range(0, 5, 0)
    with pytest.raises(TypeError):
        numeric_range()


def test_zip_equal():
    first = [1, 3, 5]
    second = [6, 4, 2]
    pairs = list(zip_shortest(first, second))
    assert [a for a, _ in pairs] == first
    assert [b for _, b in pairs] == second


def test_zip_short():
    s = "abacaba"
    pairs = list(zip_shortest(s, numeric_range(1 << 62)))
    assert len(pairs) == len(s)
    for index, (char, number) in enumerate(pairs):
        assert char == s[index]
        assert number == index


class Int:
    def __init__(self, x):
        self.x = x

    def __eq__(self, other):
        return self.x == other.x


def test_zip_range_first():
    first = [Int(5), Int(4), Int(3)]
    pairs = list(zip_shortest(numeric_range(3), first))
    assert [a for a, _ in pairs] == [0, 1, 2]
    assert [b for _, b in pairs] == first


def test_group_small():
    data = [1, 1, 2, 2, 2, 3]
    assert list(group(data)) == [[1, 1], [2, 2, 2], [3]]


def test_group_empty():
    assert list(group([])) == []


def test_group_objects():
    data = [Int(1), Int(2), Int(2)]
    runs = list(group(data))
    assert len(runs) == 2
    for run in runs:
        key = run[0].x
        assert all(elem.x == key for elem in run)
        assert len(run) == key


def test_temporary_iterator():
    val = next(zip_shortest([0, 1, 2], numeric_range(5)))
    assert val[0] == val[1]