"""Tokens marking where matched rules start and end."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

from pestkit.position import Position


class TokenKind(enum.Enum):
    """Whether a token opens or closes a matched rule."""

    START = "Start"
    END = "End"


@dataclass(frozen=True)
class Token:
    """The start or end position of a matched rule."""

    kind: TokenKind
    rule: Any
    pos: Position

    @classmethod
    def start(cls, rule: Any, pos: Position) -> Token:
        """Return a token marking where `rule` starts."""
        return cls(TokenKind.START, rule, pos)

    @classmethod
    def end(cls, rule: Any, pos: Position) -> Token:
        """Return a token marking where `rule` ends."""
        return cls(TokenKind.END, rule, pos)

    @property
    def is_start(self) -> bool:
        return self.kind is TokenKind.START

    @property
    def is_end(self) -> bool:
        return self.kind is TokenKind.END