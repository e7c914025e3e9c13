"""Flags, settings and text helpers shared by the XML reader and writer."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .errors import XmlParserError

__all__ = [
    "XmlFlags",
    "XmlWriterSettings",
    "validate_flags",
    "condense",
    "encode_char_entities",
    "decode_char_entities",
    "xml_writer_make_settings",
    "XMLDECL",
    "XMLATTR",
    "XMLCOMMENT",
    "XMLTEXT",
]

XMLDECL = "<?xml>"
XMLATTR = "<xmlattr>"
XMLCOMMENT = "<xmlcomment>"
XMLTEXT = "<xmltext>"

_SPACE_CHARS = frozenset(" \t\n\v\f\r")

_ENCODE = {
    "<": "&lt;",
    ">": "&gt;",
    "&": "&amp;",
    '"': "&quot;",
    "'": "&apos;",
}

_DECODE = {"lt": "<", "gt": ">", "amp": "&", "quot": '"', "apos": "'"}


class XmlFlags(enum.IntFlag):
    """Options controlling how XML is read into a tree."""

    NONE = 0
    NO_CONCAT_TEXT = 0x1
    NO_COMMENTS = 0x2
    TRIM_WHITESPACE = 0x4


_ALL_FLAGS = int(XmlFlags.NO_CONCAT_TEXT | XmlFlags.NO_COMMENTS | XmlFlags.TRIM_WHITESPACE)


def validate_flags(flags: int) -> bool:
    """True if ``flags`` contains only known flag bits."""
    return (int(flags) & ~_ALL_FLAGS) == 0


def condense(text: str) -> str:
    """Collapse each run of whitespace into a single space."""
    out = []
    in_space = False
    for ch in text:
        if ch in _SPACE_CHARS:
            if not in_space:
                out.append(" ")
                in_space = True
        else:
            out.append(ch)
            in_space = False
    return "".join(out)


def encode_char_entities(text: str) -> str:
    """Escape markup characters; a text of only spaces keeps its first as ``&#32;``."""
    if not text:
        return text
    if text.strip(" ") == "":
        return "&#32;" + " " * (len(text) - 1)
    return "".join(_ENCODE.get(ch, ch) for ch in text)


def decode_char_entities(text: str) -> str:
    """Replace the five predefined entities; anything else is an error."""
    out = []
    pos = 0
    while True:
        amp = text.find("&", pos)
        if amp < 0:
            out.append(text[pos:])
            break
        out.append(text[pos:amp])
        semicolon = text.find(";", amp + 1)
        if semicolon < 0:
            raise XmlParserError("invalid character entity", "", 0)
        replacement = _DECODE.get(text[amp + 1:semicolon])
        if replacement is None:
            raise XmlParserError("invalid character entity", "", 0)
        out.append(replacement)
        pos = semicolon + 1
    return "".join(out)


@dataclass
class XmlWriterSettings:
    """XML writer settings; the defaults produce no pretty printing."""

    indent_char: str = " "
    indent_count: int = 0
    encoding: str = "utf-8"


def xml_writer_make_settings(
    indent_char: str = " ", indent_count: int = 0, encoding: str = "utf-8"
) -> XmlWriterSettings:
    """Build an XmlWriterSettings instance."""
    return XmlWriterSettings(indent_char, indent_count, encoding)