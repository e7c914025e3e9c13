import io

import pytest

from proptree.errors import InfoParserError
from proptree.info_writer import (
    InfoWriterSettings,
    create_escapes,
    format_info,
    is_simple_data,
    is_simple_key,
    write_info,
)
from proptree.tree import PropertyTree


def test_create_escapes_leaves_plain_text():
    assert create_escapes("plain_text-123") == "plain_text-123"


def test_create_escapes_doubles_special_characters():
    specials = "\0\a\b\f\n\r\v\"\\"
    result = create_escapes(specials)
    assert len(result) == 2 * len(specials)
    assert result[::2] == "\\" * len(specials)
    assert "\n" not in result and "\0" not in result


@pytest.mark.parametrize(
    "text, expected",
    [("abc", True), ("", False), ("a b", False), ("a{", False),
     ("a;b", False), ('a"', False), ("a\tb", False), ("x.y", True)],
)
def test_simple_key_and_data(text, expected):
    assert is_simple_key(text) is expected
    assert is_simple_data(text) is expected


def test_root_data_is_not_written():
    tree = PropertyTree("root data")
    assert format_info(tree) == ""


def test_single_value():
    tree = PropertyTree()
    tree.put("a", "1")
    assert format_info(tree) == "a 1\n"


def test_nested_value_uses_braces_and_default_indent():
    tree = PropertyTree()
    tree.put("a.b", "x")
    assert format_info(tree) == "a\n{\n    b x\n}\n"


def test_empty_leaf_written_as_empty_string():
    tree = PropertyTree()
    tree.push_back("k", PropertyTree())
    assert format_info(tree) == 'k ""\n'


def test_data_with_space_is_quoted():
    tree = PropertyTree()
    tree.put("key", "hello world")
    assert '"hello world"' in format_info(tree)


def test_key_with_space_is_quoted():
    tree = PropertyTree()
    tree.push_back("my key", PropertyTree("v"))
    assert format_info(tree).startswith('"my key"')


def test_escaped_data_is_quoted():
    tree = PropertyTree()
    tree.put("key", 'say "hi"')
    assert create_escapes('say "hi"') in format_info(tree)


def test_custom_indent_settings():
    tree = PropertyTree()
    tree.put("a.b", "x")
    text = format_info(tree, InfoWriterSettings("\t", 1))
    lines = text.splitlines()
    assert lines[2].startswith("\tb")
    assert lines[3] == "}"


def test_write_info_to_stream_matches_format():
    tree = PropertyTree()
    tree.put("a.b", "x")
    tree.add("a.c", "y")
    stream = io.StringIO()
    write_info(stream, tree)
    assert stream.getvalue() == format_info(tree)


def test_write_info_to_file(tmp_path):
    tree = PropertyTree()
    tree.put("debug.level", 2)
    target = tmp_path / "out.info"
    write_info(target, tree)
    assert target.read_text(encoding="utf-8") == format_info(tree)


def test_write_info_unopenable_file(tmp_path):
    target = tmp_path / "missing" / "out.info"
    with pytest.raises(InfoParserError) as info:
        write_info(target, PropertyTree())
    assert info.value.message == "cannot open file for writing"
    assert info.value.line == 0