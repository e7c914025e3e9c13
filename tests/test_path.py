import pytest

from proptree.errors import PtreeBadPath
from proptree.path import StringPath


def test_reduce_yields_keys_in_order():
    p = StringPath("one.two.three")
    keys = []
    while not p.is_empty():
        keys.append(p.reduce())
    assert keys == ["one", "two", "three"]


def test_single_and_empty():
    p = StringPath("one.two")
    assert not p.is_single()
    p.reduce()
    assert p.is_single()
    assert not p.is_empty()
    p.reduce()
    assert p.is_empty()


def test_empty_path_reduce_raises():
    p = StringPath("")
    assert p.is_empty()
    with pytest.raises(PtreeBadPath):
        p.reduce()


def test_dump_keeps_whole_text():
    p = StringPath("a.b.c")
    p.reduce()
    assert p.dump() == "a.b.c"


def test_custom_separator():
    p = StringPath("a/b.c", "/")
    assert p.separator == "/"
    assert p.reduce() == "a"
    assert p.reduce() == "b.c"
    assert p.is_empty()


def test_join_paths():
    joined = StringPath("a") / StringPath("b")
    assert joined.dump() == "a.b"
    assert [joined.reduce(), joined.reduce()] == ["a", "b"]


def test_join_with_string_both_sides():
    assert (StringPath("a") / "b").dump() == "a.b"
    assert ("a" / StringPath("b")).dump() == "a.b"


def test_join_onto_empty_path_adds_no_separator():
    assert (StringPath("") / "x").dump() == "x"


def test_join_empty_leaves_path_unchanged():
    assert (StringPath("a.b") / "").dump() == "a.b"


def test_join_does_not_modify_operands():
    left = StringPath("a")
    right = StringPath("b")
    left / right
    assert left.dump() == "a"
    assert right.dump() == "b"


def test_join_after_reduce_preserves_position():
    p = StringPath("one.two")
    p.reduce()
    q = p / "c"
    assert q.reduce() == "two"
    assert q.reduce() == "c"
    assert q.is_empty()


def test_single_key_with_other_separator_joins():
    p = StringPath("a", "/") / StringPath("b")
    assert p.dump() == "a/b"


def test_incompatible_separators_raise():
    with pytest.raises(ValueError):
        StringPath("a", "/") / StringPath("b.c")


def test_join_with_wrong_type_raises():
    with pytest.raises(TypeError):
        StringPath("a") / 3