import copy
import gc

import pytest

from drillbox.cow_vector import CowVector


def test_simple_operations():
    v = CowVector()
    assert len(v) == 0
    v.resize(3)
    assert v[0] == ""
    v[2] = "foo"
    v[1] = "bar"
    assert v[2] == "foo"
    assert v[1] == "bar"
    assert v.back() == "foo"
    v.append("zog")
    assert len(v) == 4
    assert v.back() == "zog"


def test_resize_truncates():
    v = CowVector(["a", "b", "c"])
    v.resize(1)
    assert list(v) == ["a"]
    with pytest.raises(ValueError):
        v.resize(-1)


def test_back_of_empty_raises():
    with pytest.raises(IndexError):
        CowVector().back()


def test_append_unshares_state():
    v1 = CowVector(["foo"])
    v2 = v1.copy()
    assert v2[0] is v1[0]
    assert v1.ref_count() == 2
    v2.append("bar")
    assert v2[0] == "foo"
    assert list(v1) == ["foo"]
    assert v1.ref_count() == 1
    assert v2.ref_count() == 1


def test_set_unshares_state():
    v1 = CowVector(["foo"])
    v3 = v1.copy()
    v3[0] = "bar"
    assert v1[0] == "foo"
    assert v3[0] == "bar"
    v3[0] = "zog"
    assert v3.ref_count() == 1
    assert v1[0] == "foo"


def test_reads_do_not_copy():
    v1 = CowVector(["foo"])
    v5 = copy.copy(v1)
    assert v5[0] is v1[0]
    assert len(v5) == 1
    assert v5.back() == "foo"
    assert v1.ref_count() == 2


def test_resize_on_copy_leaves_original():
    v4 = CowVector(["bar", "zog"])
    v5 = v4.copy()
    v4.resize(0)
    assert list(v5) == ["bar", "zog"]
    assert len(v4) == 0


def test_ref_count_follows_owners():
    v1 = CowVector(["hello"])
    v2 = v1.copy()
    v3 = v2
    del v2
    assert v1.ref_count() == 2
    v1 = CowVector(["world"])
    gc.collect()
    assert v1.ref_count() == 1
    assert v3.ref_count() == 1
    assert v3[0] == "hello"


def test_failed_set_keeps_sharing():
    v1 = CowVector(["foo"])
    v2 = v1.copy()
    with pytest.raises(IndexError):
        v2[5] = "bar"
    assert v1.ref_count() == 2