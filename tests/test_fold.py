import operator

from drillbox.fold import Length, concat, fold


def test_just_sum():
    assert fold([1, 2, 3, 6], 0, operator.add) == 12


def test_just_prod():
    assert fold([-1, 1, 2, 3], 1, operator.mul) == -6


def test_vectors():
    assert fold([[1, 2], [3], [4, 5, 6], []], [], concat) == [1, 2, 3, 4, 5, 6]


def test_concat_leaves_inputs_alone():
    first = [1]
    assert concat(first, [2]) == [1, 2]
    assert first == [1]


def test_sequence_length():
    counter = Length()
    assert fold([1, 3, -5, 4], 0, counter) == 0
    assert counter.count == 4

    counter = Length()
    assert fold(["aba", "caba"], "", counter) == ""
    assert counter.count == 2


def test_empty_returns_init():
    assert fold([], "start", operator.add) == "start"