"""Exception hierarchy for property trees and their file parsers."""

from __future__ import annotations

from typing import Any

__all__ = [
    "PtreeError",
    "PtreeBadData",
    "PtreeBadPath",
    "FileParserError",
    "XmlParserError",
    "JsonParserError",
    "InfoParserError",
]


class PtreeError(RuntimeError):
    """Base class for all property tree errors."""


class PtreeBadData(PtreeError):
    """Translation between a value and the tree's data string failed."""

    def __init__(self, what: str, data: Any) -> None:
        super().__init__(what)
        self.data = data


class PtreeBadPath(PtreeError):
    """A requested path does not exist in the tree."""

    def __init__(self, what: str, path: Any) -> None:
        super().__init__(what)
        self.path = path


class FileParserError(PtreeError):
    """An error met while reading or writing a file, with its location."""

    def __init__(self, message: str, filename: str = "", line: int = 0) -> None:
        super().__init__(self._format_what(message, filename, line))
        self.message = message
        self.filename = filename
        self.line = line

    @staticmethod
    def _format_what(message: str, filename: str, line: int) -> str:
        where = filename if filename else "<unspecified file>"
        if line > 0:
            where += f"({line})"
        return f"{where}: {message}"


class XmlParserError(FileParserError):
    """Error raised by the XML reader and writer."""


class JsonParserError(FileParserError):
    """Error raised by the JSON reader and writer."""


class InfoParserError(FileParserError):
    """Error raised by the INFO reader and writer."""