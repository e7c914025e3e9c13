"""Separator-delimited paths used to address nodes of a property tree."""

from __future__ import annotations

from .errors import PtreeBadPath

__all__ = ["StringPath"]


class StringPath:
    """A path such as ``"one.two.three"`` that is consumed one key at a time."""

    def __init__(self, value: str = "", separator: str = ".") -> None:
        self._value = value
        self.separator = separator
        self._start = 0

    def _clone(self) -> StringPath:
        copy = StringPath(self._value, self.separator)
        copy._start = self._start
        return copy

    def reduce(self) -> str:
        """Remove the first key from the path and return it."""
        if self.is_empty():
            raise PtreeBadPath("Reducing empty path", self)
        end = self._value.find(self.separator, self._start)
        if end < 0:
            end = len(self._value)
        part = self._value[self._start:end]
        self._start = end
        if not self.is_empty():
            self._start += 1
        return part

    def is_empty(self) -> bool:
        """True when no keys remain."""
        return self._start == len(self._value)

    def is_single(self) -> bool:
        """True when the remainder holds no separator."""
        return self._value.find(self.separator, self._start) < 0

    def dump(self) -> str:
        """The whole path text, including keys already reduced."""
        return self._value

    def _coerce(self, other: object) -> StringPath:
        if isinstance(other, StringPath):
            return other
        if isinstance(other, str):
            return StringPath(other, self.separator)
        raise TypeError(f"cannot join a path with {type(other).__name__}")

    def __truediv__(self, other: object) -> StringPath:
        other_path = self._coerce(other)
        if not (
            other_path.separator == self.separator
            or other_path.is_empty()
            or other_path.is_single()
        ):
            raise ValueError("Incompatible paths.")
        result = self._clone()
        if not other_path.is_empty():
            sub = "" if result.is_empty() else result.separator
            sub += other_path._value[other_path._start:]
            result._value += sub
        return result

    def __rtruediv__(self, other: object) -> StringPath:
        if not isinstance(other, str):
            return NotImplemented
        return StringPath(other, self.separator) / self

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"StringPath({self._value!r}, separator={self.separator!r})"