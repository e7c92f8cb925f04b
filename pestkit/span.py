"""Spans over text, measured in UTF-8 byte offsets."""

from __future__ import annotations

from typing import Iterator

from pestkit.position import Position, _encode, _is_boundary


class Span:
    """A slice of an input string between two character boundaries."""

    __slots__ = ("_input", "_data", "_start", "_end")

    def __init__(self, input: str, start: int, end: int) -> None:
        data = _encode(input)
        if start > end or not _is_boundary(data, start) or not _is_boundary(data, end):
            raise ValueError(f"{start}..{end} is not a valid slice of the input")
        self._input = input
        self._data = data
        self._start = start
        self._end = end

    def get(self, start: int | None = None, end: int | None = None) -> Span | None:
        """Return the sub-span `start..end`, relative to this span, or None.

        Either bound may be left out; `end` is exclusive.
        """
        length = self._end - self._start
        lo = 0 if start is None else start
        hi = length if end is None else end
        if lo < 0 or lo > hi or hi > length:
            return None
        absolute_lo = self._start + lo
        absolute_hi = self._start + hi
        if not _is_boundary(self._data, absolute_lo) or not _is_boundary(
            self._data, absolute_hi
        ):
            return None
        return Span(self._input, absolute_lo, absolute_hi)

    @property
    def start(self) -> int:
        """The byte offset where the span starts."""
        return self._start

    @property
    def end(self) -> int:
        """The byte offset where the span ends."""
        return self._end

    @property
    def input(self) -> str:
        """The text this span covers part of."""
        return self._input

    def start_pos(self) -> Position:
        """Return the position at the start of the span."""
        return Position(self._input, self._start)

    def end_pos(self) -> Position:
        """Return the position at the end of the span."""
        return Position(self._input, self._end)

    def split(self) -> tuple[Position, Position]:
        """Return the start and end positions of the span."""
        return self.start_pos(), self.end_pos()

    def as_str(self) -> str:
        """Return the text the span covers."""
        return self._data[self._start : self._end].decode("utf-8")

    def lines(self) -> Iterator[str]:
        """Yield every line at least partly covered by the span."""
        for line in self.lines_span():
            yield line.as_str()

    def lines_span(self) -> Iterator[Span]:
        """Yield a span for every line at least partly covered by the span."""
        pos = self._start
        while pos <= self._end:
            cursor = Position(self._input, pos)
            if cursor.at_end():
                return
            line_start = cursor.find_line_start()
            pos = cursor.find_line_end()
            yield Span(self._input, line_start, pos)

    def __repr__(self) -> str:
        return f"Span(str={self.as_str()!r}, start={self._start}, end={self._end})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Span):
            return NotImplemented
        return (
            (self._input is other._input or self._input == other._input)
            and self._start == other._start
            and self._end == other._end
        )

    def __hash__(self) -> int:
        return hash((self._input, self._start, self._end))