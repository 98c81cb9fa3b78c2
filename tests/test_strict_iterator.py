import pytest

from drillbox.strict_iterator import make_strict


def test_walk_forward_and_back():
    data = [10, 20, 30]
    it = make_strict(data)
    assert it.value() == 10
    it.advance()
    assert it.value() == 20
    it.retreat()
    assert it.value() == 10
    assert it.position == 0


def test_left_bound():
    it = make_strict([1, 2])
    with pytest.raises(IndexError, match="left"):
        it.retreat()


def test_right_bound_and_end_value():
    data = [1, 2]
    it = make_strict(data, 2)
    with pytest.raises(IndexError, match="right"):
        it.advance()
    with pytest.raises(IndexError, match="end of sequence"):
        it.value()


def test_equality_by_position_and_sequence():
    data = [1, 2, 3]
    other = [1, 2, 3]
    it = make_strict(data, 1)
    assert it == make_strict(data, 1)
    assert not it == make_strict(data, 2)
    assert not it == make_strict(other, 1)


def test_advance_to_end_equals_end():
    data = [1, 2, 3]
    it = make_strict(data)
    for _ in data:
        it.advance()
    assert it == make_strict(data, len(data))


def test_invalid_start():
    with pytest.raises(IndexError):
        make_strict([1], 2)