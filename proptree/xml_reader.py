"""Reading XML documents into a property tree.

Elements become child nodes keyed by their name. Attributes are collected
under a ``<xmlattr>`` child, comments become ``<xmlcomment>`` children, and
text is either appended to the element's data or, with
``XmlFlags.NO_CONCAT_TEXT``, stored in ``<xmltext>`` children. XML
declarations, processing instructions and DOCTYPE declarations are skipped.
"""

from __future__ import annotations

import os
from typing import IO, List, Optional, Tuple, Union

from .errors import XmlParserError
from .tree import PropertyTree
from .xml_utils import XMLATTR, XMLCOMMENT, XMLTEXT, XmlFlags, validate_flags

__all__ = ["parse_xml", "read_xml"]

_WS = frozenset(" \t\n\r")
_NODE_NAME_STOP = frozenset(" \t\n\r/>?")
_ATTR_NAME_STOP = frozenset(" \t\n\r!\"'/<=>?")
_NAMED_ENTITIES = (
    ("&amp;", "&"),
    ("&apos;", "'"),
    ("&quot;", '"'),
    ("&gt;", ">"),
    ("&lt;", "<"),
)
_DEC_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class _Reader:
    """Single-pass XML reader that builds the property tree directly."""

    def __init__(self, text: str, flags: int, filename: str) -> None:
        # A NUL character ends the document, as in a zero-terminated buffer.
        self.text = text.split("\0", 1)[0]
        self.filename = filename
        self.no_concat_text = bool(flags & XmlFlags.NO_CONCAT_TEXT)
        self.no_comments = bool(flags & XmlFlags.NO_COMMENTS)
        self.trim = bool(flags & XmlFlags.TRIM_WHITESPACE)
        self.pos = 0

    # -- helpers ----------------------------------------------------------

    def _error(self, message: str, pos: Optional[int] = None) -> None:
        where = self.pos if pos is None else pos
        line = self.text.count("\n", 0, where) + 1
        raise XmlParserError(message, self.filename, line)

    def _cur(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def _skip_ws(self) -> None:
        text = self.text
        while self.pos < len(text) and text[self.pos] in _WS:
            self.pos += 1

    def _skip_chars_not_in(self, stop: frozenset) -> str:
        text = self.text
        start = self.pos
        while self.pos < len(text) and text[self.pos] not in stop:
            self.pos += 1
        return text[start:self.pos]

    def _find(self, token: str, start: int) -> int:
        index = self.text.find(token, start)
        if index < 0:
            self._error("unexpected end of data", len(self.text))
        return index

    def _add_data(self, node: PropertyTree, value: str) -> None:
        if self.no_concat_text:
            node.push_back(XMLTEXT, PropertyTree(value))
        else:
            node.data += value

    # -- document ---------------------------------------------------------

    def parse(self) -> PropertyTree:
        self.pos = 1 if self.text.startswith("\ufeff") else 0
        root = PropertyTree()
        while True:
            self._skip_ws()
            if self.pos >= len(self.text):
                break
            if self.text[self.pos] != "<":
                self._error("expected <")
            self.pos += 1
            self._parse_node(root)
        return root

    def _parse_node(self, parent: PropertyTree) -> None:
        text, pos = self.text, self.pos
        if text.startswith("?", pos):
            # XML declarations and processing instructions are both skipped.
            self.pos = self._find("?>", pos + 1) + 2
        elif text.startswith("!", pos):
            if text.startswith("!--", pos):
                self._parse_comment(parent)
            elif text.startswith("![CDATA[", pos):
                self._parse_cdata(parent)
            elif text.startswith("!DOCTYPE", pos) and text[pos + 8:pos + 9] in _WS \
                    and pos + 8 < len(text):
                self.pos = pos + 8
                self._skip_doctype()
            else:
                self.pos = self._find(">", pos + 1) + 1
        else:
            self._parse_element(parent)

    def _parse_comment(self, parent: PropertyTree) -> None:
        start = self.pos + 3
        end = self._find("-->", start)
        self.pos = end + 3
        if not self.no_comments:
            parent.push_back(XMLCOMMENT, PropertyTree(self.text[start:end]))

    def _parse_cdata(self, parent: PropertyTree) -> None:
        start = self.pos + 8
        end = self._find("]]>", start)
        self.pos = end + 3
        self._add_data(parent, self.text[start:end])

    def _skip_doctype(self) -> None:
        while True:
            ch = self._cur()
            if ch == ">":
                self.pos += 1
                return
            if ch == "":
                self._error("unexpected end of data")
            if ch == "[":
                self.pos += 1
                depth = 1
                while depth > 0:
                    inner = self._cur()
                    if inner == "[":
                        depth += 1
                    elif inner == "]":
                        depth -= 1
                    elif inner == "":
                        self._error("unexpected end of data")
                    self.pos += 1
            else:
                self.pos += 1

    # -- elements ---------------------------------------------------------

    def _parse_element(self, parent: PropertyTree) -> None:
        name = self._skip_chars_not_in(_NODE_NAME_STOP)
        if not name:
            self._error("expected element name")
        node = parent.push_back(name, PropertyTree())
        self._skip_ws()
        attributes = self._parse_attributes()
        if attributes:
            attr_root = node.push_back(XMLATTR, PropertyTree())
            for attr_name, attr_value in attributes:
                attr_root.push_back(attr_name, PropertyTree(attr_value))
        ch = self._cur()
        if ch == ">":
            self.pos += 1
            self._parse_contents(node)
        elif ch == "/":
            self.pos += 1
            if self._cur() != ">":
                self._error("expected >")
            self.pos += 1
        else:
            self._error("expected >")

    def _parse_attributes(self) -> List[Tuple[str, str]]:
        attributes = []
        while self._cur() and self._cur() not in _ATTR_NAME_STOP:
            name = self._skip_chars_not_in(_ATTR_NAME_STOP)
            self._skip_ws()
            if self._cur() != "=":
                self._error("expected =")
            self.pos += 1
            self._skip_ws()
            quote = self._cur()
            if quote not in ('"', "'"):
                self._error("expected ' or \"")
            self.pos += 1
            value = self._expand(quote, normalize=False)
            if self._cur() != quote:
                self._error("expected ' or \"")
            self.pos += 1
            self._skip_ws()
            attributes.append((name, value))
        return attributes

    def _parse_contents(self, node: PropertyTree) -> None:
        while True:
            contents_start = self.pos
            if self.trim:
                self._skip_ws()
            ch = self._cur()
            if ch == "<":
                if self.text.startswith("</", self.pos):
                    # Closing tag names are not checked against the opening one.
                    self.pos += 2
                    self._skip_chars_not_in(_NODE_NAME_STOP)
                    self._skip_ws()
                    if self._cur() != ">":
                        self._error("expected >")
                    self.pos += 1
                    return
                self.pos += 1
                self._parse_node(node)
            elif ch == "":
                self._error("unexpected end of data")
            else:
                if not self.trim:
                    self.pos = contents_start
                value = self._expand("<", normalize=self.trim)
                if self.trim and value.endswith(" "):
                    value = value[:-1]
                self._add_data(node, value)

    # -- text -------------------------------------------------------------

    def _expand(self, stop: str, normalize: bool) -> str:
        text = self.text
        out = []
        while self.pos < len(text) and text[self.pos] != stop:
            ch = text[self.pos]
            if ch == "&":
                replacement = self._parse_entity()
                if replacement is not None:
                    out.append(replacement)
                    continue
            if normalize and ch in _WS:
                out.append(" ")
                self.pos += 1
                self._skip_ws()
                continue
            out.append(ch)
            self.pos += 1
        return "".join(out)

    def _parse_entity(self) -> Optional[str]:
        text, pos = self.text, self.pos
        for pattern, replacement in _NAMED_ENTITIES:
            if text.startswith(pattern, pos):
                self.pos = pos + len(pattern)
                return replacement
        if not text.startswith("&#", pos):
            return None
        p = pos + 2
        if text.startswith("x", p):
            p += 1
            base, digits = 16, _HEX_DIGITS
        else:
            base, digits = 10, _DEC_DIGITS
        code = 0
        while p < len(text) and text[p] in digits:
            code = code * base + int(text[p], base)
            p += 1
        if code > 0x10FFFF:
            self._error("invalid numeric character entity", p)
        if not text.startswith(";", p):
            self._error("expected ;", p)
        self.pos = p + 1
        return chr(code)


def parse_xml(
    text: Union[str, bytes], flags: int = XmlFlags.NONE, filename: str = ""
) -> PropertyTree:
    """Parse XML text (or UTF-8 bytes) into a new PropertyTree."""
    if not validate_flags(flags):
        raise ValueError(f"invalid XML reader flags: {int(flags):#x}")
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as exc:
            line = text.count(b"\n", 0, exc.start) + 1
            raise XmlParserError("invalid UTF-8 sequence", filename, line) from exc
    return _Reader(text, flags, filename).parse()


def read_xml(
    source: Union[str, "os.PathLike[str]", IO], flags: int = XmlFlags.NONE
) -> PropertyTree:
    """Read XML from a file path or from an open text or binary stream."""
    if hasattr(source, "read"):
        return parse_xml(source.read(), flags, "")
    filename = os.fspath(source)
    try:
        with open(filename, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise XmlParserError("cannot open file", filename, 0) from exc
    return parse_xml(data, flags, filename)