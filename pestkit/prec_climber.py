"""Infix operator parsing with the precedence climbing method."""

from __future__ import annotations

import enum
from typing import Any, Callable, Iterable, Iterator, TypeVar

from pestkit.pratt_parser import _Peekable, _rule_of

T = TypeVar("T")


class ClimbError(ValueError):
    """Raised when the pairs do not alternate between primaries and operators."""


class Assoc(enum.Enum):
    """Associativity of an operator."""

    LEFT = "left"
    RIGHT = "right"


class Operator:
    """An infix operator bound to a rule; chain several with `|` for equal precedence."""

    __slots__ = ("rule", "assoc", "next")

    def __init__(self, rule: Any, assoc: Assoc) -> None:
        self.rule = rule
        self.assoc = assoc
        self.next: Operator | None = None

    def __or__(self, other: Operator) -> Operator:
        if not isinstance(other, Operator):
            return NotImplemented
        last = self
        while last.next is not None:
            last = last.next
        last.next = other
        return self

    def __iter__(self) -> Iterator[Operator]:
        op: Operator | None = self
        while op is not None:
            yield op
            op = op.next

    def __repr__(self) -> str:
        chained = " | ".join(f"{op.rule!r}:{op.assoc.name}" for op in self)
        return f"Operator({chained})"


class PrecClimber:
    """Operators with precedences, used to reduce alternating primaries and operators.

    Every entry of `ops` gets precedence index + 1; operators chained with `|`
    share their entry's precedence. A pair's rule is taken from its
    `as_rule()` method, else its `rule` attribute, else the pair itself.
    """

    def __init__(self, ops: Iterable[Operator]) -> None:
        self._ops: tuple[tuple[Any, int, Assoc], ...] = tuple(
            (each.rule, prec, each.assoc)
            for prec, op in enumerate(ops, start=1)
            for each in op
        )

    @classmethod
    def from_table(cls, table: Iterable[tuple[Any, int, Assoc]]) -> PrecClimber:
        """Build a climber straight from `(rule, precedence, assoc)` entries."""
        climber = cls([])
        climber._ops = tuple((rule, prec, assoc) for rule, prec, assoc in table)
        return climber

    @property
    def ops(self) -> tuple[tuple[Any, int, Assoc], ...]:
        """The `(rule, precedence, assoc)` entries, in lookup order."""
        return self._ops

    def get(self, rule: Any) -> tuple[int, Assoc] | None:
        """Return the precedence and associativity of `rule`, or None."""
        for candidate, prec, assoc in self._ops:
            if candidate == rule:
                return prec, assoc
        return None

    def climb(
        self,
        pairs: Iterable[Any],
        primary: Callable[[Any], T],
        infix: Callable[[T, Any, T], T],
    ) -> T:
        """Map primaries with `primary` and reduce them with `infix(lhs, op, rhs)`."""
        stream = _Peekable(pairs)
        found, first = stream.next()
        if not found:
            raise ClimbError("precedence climbing requires a non-empty Pairs")
        return self._climb_rec(primary(first), 0, stream, primary, infix)

    def _lookup(self, stream: _Peekable) -> tuple[int, Assoc] | None:
        found, pair = stream.peek()
        if not found:
            return None
        return self.get(_rule_of(pair))

    def _climb_rec(
        self,
        lhs: T,
        min_prec: int,
        stream: _Peekable,
        primary: Callable[[Any], T],
        infix: Callable[[T, Any, T], T],
    ) -> T:
        while True:
            entry = self._lookup(stream)
            if entry is None or entry[0] < min_prec:
                break
            prec = entry[0]
            _, op = stream.next()
            found, operand = stream.next()
            if not found:
                raise ClimbError(
                    "infix operator must be followed by a primary expression"
                )
            rhs = primary(operand)
            while True:
                ahead = self._lookup(stream)
                if ahead is None:
                    break
                new_prec, assoc = ahead
                if new_prec > prec or (assoc is Assoc.RIGHT and new_prec == prec):
                    rhs = self._climb_rec(rhs, new_prec, stream, primary, infix)
                else:
                    break
            lhs = infix(lhs, op, rhs)
        return lhs

    def __repr__(self) -> str:
        return f"PrecClimber({list(self._ops)!r})"