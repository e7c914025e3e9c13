"""Writing property trees in the INFO format."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import IO, Iterator, Optional, Union

from .errors import InfoParserError
from .tree import PropertyTree

__all__ = [
    "InfoWriterSettings",
    "create_escapes",
    "is_simple_key",
    "is_simple_data",
    "format_info",
    "write_info",
]

_ESCAPES = {
    "\0": "\\0",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\v": "\\v",
    '"': '\\"',
    "\\": "\\\\",
}

_SPECIAL_CHARS = frozenset(" \t{};\n\"")


@dataclass
class InfoWriterSettings:
    """Indentation used when writing INFO data."""

    indent_char: str = " "
    indent_count: int = 4


def create_escapes(text: str) -> str:
    """Replace characters that cannot appear literally with escape sequences."""
    return "".join(_ESCAPES.get(ch, ch) for ch in text)


def _is_simple(text: str) -> bool:
    return bool(text) and not any(ch in _SPECIAL_CHARS for ch in text)


def is_simple_key(key: str) -> bool:
    """True if ``key`` can be written without quotes."""
    return _is_simple(key)


def is_simple_data(data: str) -> bool:
    """True if ``data`` can be written without quotes."""
    return _is_simple(data)


def _lines(
    tree: PropertyTree, indent: int, settings: InfoWriterSettings
) -> Iterator[str]:
    def pad(level: int) -> str:
        return settings.indent_char * (level * settings.indent_count)

    if indent >= 0:
        if tree.data:
            data = create_escapes(tree.data)
            yield f" {data}\n" if is_simple_data(data) else f' "{data}"\n'
        elif len(tree) == 0:
            yield ' ""\n'
        else:
            yield "\n"

    if len(tree) == 0:
        return

    if indent >= 0:
        yield pad(indent) + "{\n"
    for key, child in tree:
        escaped = create_escapes(key)
        yield pad(indent + 1)
        yield escaped if is_simple_key(escaped) else f'"{escaped}"'
        yield from _lines(child, indent + 1, settings)
    if indent >= 0:
        yield pad(indent) + "}\n"


def format_info(
    tree: PropertyTree, settings: Optional[InfoWriterSettings] = None
) -> str:
    """Render ``tree`` as INFO text. The root's own data is not written."""
    return "".join(_lines(tree, -1, settings or InfoWriterSettings()))


def write_info(
    target: Union[str, "os.PathLike[str]", IO[str]],
    tree: PropertyTree,
    settings: Optional[InfoWriterSettings] = None,
) -> None:
    """Write ``tree`` in INFO format to a file path or an open text stream."""
    text = format_info(tree, settings)
    if hasattr(target, "write"):
        try:
            target.write(text)
            target.flush()
        except (OSError, ValueError) as exc:
            raise InfoParserError("write error", "", 0) from exc
        return
    filename = os.fspath(target)
    try:
        handle = open(filename, "w", encoding="utf-8")
    except OSError as exc:
        raise InfoParserError("cannot open file for writing", filename, 0) from exc
    with handle:
        try:
            handle.write(text)
        except OSError as exc:
            raise InfoParserError("write error", filename, 0) from exc