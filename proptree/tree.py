"""An ordered tree of string data addressed by separator-delimited paths."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Tuple, Union

from .errors import PtreeBadData, PtreeBadPath
from .path import StringPath

__all__ = ["PropertyTree"]

PathLike = Union[str, StringPath]

_MISSING = object()


def _to_path(path: PathLike) -> StringPath:
    if isinstance(path, StringPath):
        return path._clone()
    return StringPath(path)


def _to_data(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _from_data(text: str, kind: type) -> Any:
    try:
        if kind is str:
            return text
        if kind is bool:
            word = text.strip()
            if word in ("true", "1"):
                return True
            if word in ("false", "0"):
                return False
            raise ValueError(word)
        return kind(text)
    except (ValueError, TypeError) as exc:
        raise PtreeBadData(
            f"conversion of data to type \"{kind.__name__}\" failed", text
        ) from exc


class PropertyTree:
    """A node holding a data string and an ordered list of keyed children."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, data: str = "") -> None:
        self.data = data
        self._children: list[Tuple[str, PropertyTree]] = []

    def _first(self, key: str) -> Optional[PropertyTree]:
        return next((child for k, child in self._children if k == key), None)

    def _first_or_create(self, key: str) -> PropertyTree:
        child = self._first(key)
        if child is None:
            child = self.push_back(key, PropertyTree())
        return child

    def push_back(self, key: str, child: PropertyTree) -> PropertyTree:
        """Append a child under ``key`` and return it."""
        self._children.append((key, child))
        return child

    def find_child(self, path: PathLike) -> Optional[PropertyTree]:
        """The node at ``path``, or None if there is none."""
        p = _to_path(path)
        node: Optional[PropertyTree] = self
        while node is not None and not p.is_empty():
            node = node._first(p.reduce())
        return node

    def get_child(self, path: PathLike) -> PropertyTree:
        """The node at ``path``; raises PtreeBadPath if there is none."""
        child = self.find_child(path)
        if child is None:
            raise PtreeBadPath(f"No such node ({_to_path(path).dump()})", path)
        return child

    def get(self, path: PathLike, default: Any = _MISSING) -> Any:
        """Data at ``path``; with a default, converted to the default's type."""
        child = self.find_child(path)
        if default is _MISSING:
            if child is None:
                raise PtreeBadPath(f"No such node ({_to_path(path).dump()})", path)
            return child.data
        if child is None:
            return default
        return child.get_value(default)

    def get_value(self, default: Any = _MISSING) -> Any:
        """This node's data; with a default, converted to its type or the default."""
        if default is _MISSING:
            return self.data
        try:
            return _from_data(self.data, type(default))
        except PtreeBadData:
            return default

    def put_value(self, value: Any) -> None:
        """Set this node's data from ``value``."""
        self.data = _to_data(value)

    def put(self, path: PathLike, value: Any) -> PropertyTree:
        """Set the value at ``path``, creating nodes as needed."""
        p = _to_path(path)
        node = self
        while not p.is_empty():
            node = node._first_or_create(p.reduce())
        node.put_value(value)
        return node

    def add(self, path: PathLike, value: Any) -> PropertyTree:
        """Append a new node at ``path`` even if one with that key exists."""
        p = _to_path(path)
        node = self
        while not p.is_single():
            node = node._first_or_create(p.reduce())
        return node.push_back(p.reduce(), PropertyTree(_to_data(value)))

    def __iter__(self) -> Iterator[Tuple[str, PropertyTree]]:
        return iter(list(self._children))

    def __len__(self) -> int:
        return len(self._children)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PropertyTree):
            return NotImplemented
        return self.data == other.data and self._children == other._children

    def __repr__(self) -> str:
        return f"PropertyTree(data={self.data!r}, children={len(self._children)})"