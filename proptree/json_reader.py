"""Reading JSON text into a property tree.

Objects become nodes with named children, arrays become nodes whose
children have empty keys, and every scalar (string, number, ``true``,
``false`` and ``null``) is stored verbatim as the node's data string.
"""

from __future__ import annotations

import os
from typing import IO, Optional, Union

from .errors import JsonParserError
from .tree import PropertyTree

__all__ = ["JsonParser", "parse_json", "read_json"]

_WHITESPACE = " \t\n\r"
_DIGITS = "0123456789"
_NONZERO_DIGITS = "123456789"
_HEX_DIGITS = "0123456789abcdefABCDEF"
_SIMPLE_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


class JsonParser:
    """A recursive-descent JSON parser that builds a PropertyTree."""

    def __init__(self, text: str, filename: str = "") -> None:
        self.text = text
        self.filename = filename
        self._pos = 0
        self._line = 1

    def parse(self) -> PropertyTree:
        """Parse the whole text and return the resulting tree."""
        self._pos = 1 if self.text.startswith("\ufeff") else 0
        self._line = 1
        root = PropertyTree()
        self._parse_value(root)
        self._skip_ws()
        if not self._done():
            self._error("garbage after data")
        return root

    # -- low-level source handling -------------------------------------

    def _error(self, message: str) -> None:
        raise JsonParserError(message, self.filename, self._line)

    def _done(self) -> bool:
        return self._pos >= len(self.text)

    def _peek(self) -> Optional[str]:
        return None if self._done() else self.text[self._pos]

    def _next(self) -> None:
        if self.text[self._pos] == "\n":
            self._line += 1
        self._pos += 1

    def _have(self, chars: str) -> bool:
        ch = self._peek()
        if ch is not None and ch in chars:
            self._next()
            return True
        return False

    def _expect(self, chars: str, message: str) -> None:
        if not self._have(chars):
            self._error(message)

    def _need_cur(self, message: str) -> str:
        if self._done():
            self._error(message)
        return self.text[self._pos]

    def _skip_ws(self) -> None:
        while self._have(_WHITESPACE):
            pass

    # -- values ---------------------------------------------------------

    def _parse_value(self, node: PropertyTree) -> None:
        if self._parse_object(node) or self._parse_array(node):
            return
        for scalar in (
            self._parse_string,
            self._parse_boolean,
            self._parse_null,
            self._parse_number,
        ):
            text = scalar()
            if text is not None:
                node.data = text
                return
        self._error("expected value")

    def _parse_null(self) -> Optional[str]:
        self._skip_ws()
        if not self._have("n"):
            return None
        for ch in "ull":
            self._expect(ch, "expected 'null'")
        return "null"

    def _parse_boolean(self) -> Optional[str]:
        self._skip_ws()
        if self._have("t"):
            for ch in "rue":
                self._expect(ch, "expected 'true'")
            return "true"
        if self._have("f"):
            for ch in "alse":
                self._expect(ch, "expected 'false'")
            return "false"
        return None

    def _parse_number(self) -> Optional[str]:
        self._skip_ws()
        start = self._pos
        started = self._have("-")
        if not self._have("0") and not self._parse_int_part():
            if started:
                self._error("expected digits after -")
            return None
        self._parse_frac_part()
        self._parse_exp_part()
        return self.text[start:self._pos]

    def _parse_int_part(self) -> bool:
        if not self._have(_NONZERO_DIGITS):
            return False
        self._parse_digits()
        return True

    def _parse_frac_part(self) -> None:
        if not self._have("."):
            return
        self._expect(_DIGITS, "need at least one digit after '.'")
        self._parse_digits()

    def _parse_exp_part(self) -> None:
        if not self._have("eE"):
            return
        self._have("+-")
        self._expect(_DIGITS, "need at least one digit in exponent")
        self._parse_digits()

    def _parse_digits(self) -> None:
        while self._have(_DIGITS):
            pass

    def _parse_string(self) -> Optional[str]:
        self._skip_ws()
        if not self._have('"'):
            return None
        parts = []
        run_start = self._pos
        while self._need_cur("unterminated string") != '"':
            if self.text[self._pos] == "\\":
                parts.append(self.text[run_start:self._pos])
                self._next()
                parts.append(self._parse_escape())
                run_start = self._pos
            else:
                self._next()
        parts.append(self.text[run_start:self._pos])
        self._next()
        return "".join(parts)

    def _parse_escape(self) -> str:
        ch = self._peek()
        if ch is not None and ch in _SIMPLE_ESCAPES:
            self._next()
            return _SIMPLE_ESCAPES[ch]
        if ch == "u":
            self._next()
            return self._parse_codepoint_ref()
        self._error("invalid escape sequence")
        return ""

    def _parse_hex_quad(self) -> int:
        codepoint = 0
        for _ in range(4):
            ch = self._need_cur("invalid escape sequence")
            if ch not in _HEX_DIGITS:
                self._error("invalid escape sequence")
            codepoint = codepoint * 16 + int(ch, 16)
            self._next()
        return codepoint

    def _parse_codepoint_ref(self) -> str:
        codepoint = self._parse_hex_quad()
        if codepoint & 0xFC00 == 0xDC00:
            self._error("invalid codepoint, stray low surrogate")
        if codepoint & 0xFC00 == 0xD800:
            self._expect("\\", "invalid codepoint, stray high surrogate")
            self._expect("u", "expected codepoint reference after high surrogate")
            low = self._parse_hex_quad()
            if low & 0xFC00 != 0xDC00:
                self._error("expected low surrogate after high surrogate")
            codepoint = 0x10000 + (((codepoint & 0x3FF) << 10) | (low & 0x3FF))
        return chr(codepoint)

    # -- containers -----------------------------------------------------

    def _parse_array(self, node: PropertyTree) -> bool:
        self._skip_ws()
        if not self._have("["):
            return False
        self._skip_ws()
        if self._have("]"):
            return True
        while True:
            child = node.push_back("", PropertyTree())
            self._parse_value(child)
            self._skip_ws()
            if not self._have(","):
                break
        self._expect("]", "expected ']' or ','")
        return True

    def _parse_object(self, node: PropertyTree) -> bool:
        self._skip_ws()
        if not self._have("{"):
            return False
        self._skip_ws()
        if self._have("}"):
            return True
        while True:
            key = self._parse_string()
            if key is None:
                self._error("expected key string")
            self._skip_ws()
            self._expect(":", "expected ':'")
            child = node.push_back(key, PropertyTree())
            self._parse_value(child)
            self._skip_ws()
            if not self._have(","):
                break
        self._expect("}", "expected '}' or ','")
        return True


def _decode(data: bytes, filename: str) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        line = data.count(b"\n", 0, exc.start) + 1
        raise JsonParserError("invalid code sequence", filename, line) from exc


def parse_json(text: Union[str, bytes], filename: str = "") -> PropertyTree:
    """Parse JSON text (or UTF-8 bytes) into a new PropertyTree."""
    if isinstance(text, bytes):
        text = _decode(text, filename)
    return JsonParser(text, filename).parse()


def read_json(source: Union[str, "os.PathLike[str]", IO]) -> PropertyTree:
    """Read JSON from a file path or from an open text or binary stream."""
    if hasattr(source, "read"):
        return parse_json(source.read(), "")
    filename = os.fspath(source)
    try:
        with open(filename, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise JsonParserError("cannot open file", filename, 0) from exc
    return parse_json(data, filename)