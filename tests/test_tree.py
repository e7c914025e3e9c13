import pytest

from proptree.errors import PtreeBadPath
from proptree.path import StringPath
from proptree.tree import PropertyTree


def sample_tree():
    pt = PropertyTree()
    pt.put_value("data0")
    pt.put("key1", "data1")
    pt.put("key1.key", "data2")
    pt.put("key2", "data3")
    pt.put("key2.key", "data4")
    return pt


def test_sample_tree_structure():
    pt = sample_tree()
    assert pt.get_value() == "data0"
    assert [k for k, _ in pt] == ["key1", "key2"]
    assert pt.get("key1") == "data1"
    assert pt.get("key1.key") == "data2"
    assert pt.get("key2.key") == "data4"


def test_equal_trees_compare_equal():
    assert sample_tree() == sample_tree()
    other = sample_tree()
    other.put("key2.key", "changed")
    assert not (other == sample_tree())


def test_order_matters_for_equality():
    a = PropertyTree()
    a.put("x", "1")
    a.put("y", "2")
    b = PropertyTree()
    b.put("y", "2")
    b.put("x", "1")
    assert not (a == b)


def test_put_creates_intermediate_nodes():
    pt = PropertyTree()
    pt.put("debug.filename", "log.txt")
    assert pt.get_child("debug").get("filename") == "log.txt"
    assert len(pt) == 1


def test_put_replaces_existing_value():
    pt = PropertyTree()
    pt.put("a.b", "first")
    pt.put("a.b", "second")
    assert pt.get("a.b") == "second"
    assert len(pt.get_child("a")) == 1


def test_add_appends_duplicates():
    pt = PropertyTree()
    for name in ["m1", "m2", "m3"]:
        pt.add("debug.modules.module", name)
    modules = pt.get_child("debug.modules")
    assert [(k, c.data) for k, c in modules] == [
        ("module", "m1"),
        ("module", "m2"),
        ("module", "m3"),
    ]


def test_add_with_empty_path_raises():
    with pytest.raises(PtreeBadPath):
        PropertyTree().add("", "x")


def test_get_missing_raises_bad_path():
    pt = sample_tree()
    with pytest.raises(PtreeBadPath) as info:
        pt.get("key1.missing")
    assert info.value.path == "key1.missing"


def test_get_child_missing_raises():
    with pytest.raises(PtreeBadPath):
        sample_tree().get_child("nope")


def test_find_child_missing_is_none():
    assert sample_tree().find_child("key3.key") is None


def test_get_child_empty_path_is_self():
    pt = sample_tree()
    assert pt.get_child("") is pt


def test_get_with_default_converts():
    pt = PropertyTree()
    pt.put("debug.level", 2)
    assert pt.get("debug.level", 0) == 2
    assert pt.get("debug.missing", 0) == 0


def test_get_default_on_failed_conversion():
    pt = PropertyTree()
    pt.put("a", "not a number")
    assert pt.get("a", 7) == 7
    assert pt.get("a", "x") == "not a number"


def test_bool_round_trip():
    pt = PropertyTree()
    pt.put("flag", True)
    assert pt.get("flag") == "true"
    assert pt.get("flag", False) is True


def test_float_round_trip():
    pt = PropertyTree()
    pt.put("ratio", 1.5)
    assert pt.get("ratio", 0.0) == 1.5


def test_get_value_default():
    node = PropertyTree("42")
    assert node.get_value(0) == 42
    assert PropertyTree("x").get_value(3) == 3


def test_string_path_with_custom_separator():
    pt = PropertyTree()
    pt.put(StringPath("a/b.c", "/"), "v")
    assert pt.get_child("a").find_child(StringPath("b.c", "/")).data == "v"


def test_push_back_returns_child():
    pt = PropertyTree()
    child = pt.push_back("k", PropertyTree("v"))
    assert child.data == "v"
    assert pt.get("k") == "v"
    assert len(pt) == 1