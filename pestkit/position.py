"""Cursor positions over text, measured in UTF-8 byte offsets."""

from __future__ import annotations

from functools import lru_cache, total_ordering
from typing import TYPE_CHECKING, Callable, Iterable

if TYPE_CHECKING:
    from pestkit.span import Span


@lru_cache(maxsize=128)
def _encode(text: str) -> bytes:
    return text.encode("utf-8")


def _is_boundary(data: bytes, pos: int) -> bool:
    if pos < 0 or pos > len(data):
        return False
    return pos == len(data) or (data[pos] & 0xC0) != 0x80


def _char_width(lead: int) -> int:
    if lead < 0x80:
        return 1
    if lead < 0xE0:
        return 2
    if lead < 0xF0:
        return 3
    return 4


@total_ordering
class Position:
    """A cursor into a string, used to match and skip parts of it by hand.

    The offset is a byte offset into the UTF-8 encoding of the input and
    always sits on a character boundary.
    """

    __slots__ = ("_input", "_data", "_pos")

    def __init__(self, input: str, pos: int) -> None:
        data = _encode(input)
        if not _is_boundary(data, pos):
            raise ValueError(f"{pos} is not a character boundary of the input")
        self._input = input
        self._data = data
        self._pos = pos

    @classmethod
    def from_start(cls, input: str) -> Position:
        """Return a position at the start of `input`."""
        return cls(input, 0)

    @property
    def pos(self) -> int:
        """The byte offset of this position."""
        return self._pos

    @property
    def input(self) -> str:
        """The text this position points into."""
        return self._input

    def copy(self) -> Position:
        """Return an independent position at the same place."""
        clone = Position.__new__(Position)
        clone._input = self._input
        clone._data = self._data
        clone._pos = self._pos
        return clone

    def _same_input(self, other: Position) -> bool:
        return self._input is other._input or self._input == other._input

    def span(self, other: Position) -> Span:
        """Return the span from this position to `other`."""
        if not self._same_input(other):
            raise ValueError("span created from positions from different inputs")
        from pestkit.span import Span

        return Span(self._input, self._pos, other._pos)

    def line_col(self) -> tuple[int, int]:
        """Return the 1-based line and column of this position."""
        text = self._data[: self._pos].decode("utf-8").replace("\r\n", "\n")
        line = text.count("\n") + 1
        column = len(text) - (text.rfind("\n") + 1) + 1
        return line, column

    def line_of(self) -> str:
        """Return the whole line holding this position, line break included."""
        return self._data[self.find_line_start() : self.find_line_end()].decode("utf-8")

    def find_line_start(self) -> int:
        """Return the byte offset where the current line starts."""
        if not self._data:
            return 0
        return self._data.rfind(b"\n", 0, self._pos) + 1

    def find_line_end(self) -> int:
        """Return the byte offset just past the current line's end."""
        data = self._data
        if not data:
            return 0
        if self._pos == len(data) - 1:
            return len(data)
        index = data.find(b"\n", self._pos)
        return len(data) if index < 0 else index + 1

    def at_start(self) -> bool:
        """Whether this position is at the start of the input."""
        return self._pos == 0

    def at_end(self) -> bool:
        """Whether this position is at the end of the input."""
        return self._pos == len(self._data)

    def skip(self, n: int) -> bool:
        """Move forward `n` characters; on failure the position is unchanged."""
        data = self._data
        new = self._pos
        for _ in range(n):
            if new >= len(data):
                return False
            new += _char_width(data[new])
        self._pos = new
        return True

    def skip_back(self, n: int) -> bool:
        """Move back `n` characters; on failure the position is unchanged."""
        data = self._data
        new = self._pos
        for _ in range(n):
            if new == 0:
                return False
            new -= 1
            while (data[new] & 0xC0) == 0x80:
                new -= 1
        self._pos = new
        return True

    def skip_until(self, strings: Iterable[str]) -> bool:
        """Move to the first place where one of `strings` starts.

        If none is found the position moves to the end and False is returned.
        """
        needles = [s.encode("utf-8") for s in strings]
        data = self._data
        for start in range(self._pos, len(data)):
            if not _is_boundary(data, start):
                continue
            if any(data.startswith(needle, start) for needle in needles):
                self._pos = start
                return True
        self._pos = len(data)
        return False

    def _current_char(self) -> str | None:
        data = self._data
        if self._pos >= len(data):
            return None
        width = _char_width(data[self._pos])
        return data[self._pos : self._pos + width].decode("utf-8")

    def match_char(self, c: str) -> bool:
        """Whether the character here is `c`; the position does not move."""
        return self._current_char() == c

    def match_char_by(self, predicate: Callable[[str], bool]) -> bool:
        """Consume the character here if `predicate` accepts it."""
        c = self._current_char()
        if c is None or not predicate(c):
            return False
        self._pos += len(c.encode("utf-8"))
        return True

    def match_string(self, string: str) -> bool:
        """Consume `string` if the input continues with it."""
        needle = string.encode("utf-8")
        if self._data.startswith(needle, self._pos):
            self._pos += len(needle)
            return True
        return False

    def match_insensitive(self, string: str) -> bool:
        """Consume `string` compared ignoring ASCII case."""
        needle = string.encode("utf-8")
        end = self._pos + len(needle)
        if end > len(self._data):
            return False
        if self._data[self._pos : end].lower() != needle.lower():
            return False
        self._pos = end
        return True

    def match_range(self, start: str, end: str) -> bool:
        """Consume the character here if it lies in `start`..=`end`."""
        c = self._current_char()
        if c is None or not start <= c <= end:
            return False
        self._pos += len(c.encode("utf-8"))
        return True

    def __repr__(self) -> str:
        return f"Position(pos={self._pos})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self._same_input(other) and self._pos == other._pos

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        if not self._same_input(other):
            raise ValueError("cannot compare positions from different strs")
        return self._pos < other._pos

    def __hash__(self) -> int:
        return hash((self._input, self._pos))