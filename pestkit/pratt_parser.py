"""Prefix, postfix and infix operator parsing with the Pratt method."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, Generic, Hashable, Iterable, Iterator, TypeVar

T = TypeVar("T")

_PREC_STEP = 10


class PrattError(ValueError):
    """Raised when the pairs do not form an expression the parser can map."""


class Assoc(enum.Enum):
    """Associativity of an infix binary operator."""

    LEFT = "left"
    RIGHT = "right"


class Affix(enum.Enum):
    """Where an operator stands relative to its operands."""

    PREFIX = "prefix"
    POSTFIX = "postfix"
    INFIX = "infix"


@dataclass
class Op:
    """An operator bound to a rule; chain several with `|` for equal precedence."""

    rule: Hashable
    affix: Affix
    assoc: Assoc | None = None
    next: Op | None = None

    @classmethod
    def prefix(cls, rule: Hashable) -> Op:
        """Define `rule` as a prefix unary operator."""
        return cls(rule, Affix.PREFIX)

    @classmethod
    def postfix(cls, rule: Hashable) -> Op:
        """Define `rule` as a postfix unary operator."""
        return cls(rule, Affix.POSTFIX)

    @classmethod
    def infix(cls, rule: Hashable, assoc: Assoc) -> Op:
        """Define `rule` as an infix binary operator with associativity `assoc`."""
        return cls(rule, Affix.INFIX, assoc)

    def __or__(self, other: Op) -> Op:
        if not isinstance(other, Op):
            return NotImplemented
        last = self
        while last.next is not None:
            last = last.next
        last.next = other
        return self

    def __iter__(self) -> Iterator[Op]:
        op: Op | None = self
        while op is not None:
            yield op
            op = op.next


def _rule_of(pair: Any) -> Any:
    as_rule = getattr(pair, "as_rule", None)
    if callable(as_rule):
        return as_rule()
    if hasattr(pair, "rule"):
        return pair.rule
    return pair


class _Peekable:
    __slots__ = ("_it", "_head", "_has_head")

    def __init__(self, items: Iterable[Any]) -> None:
        self._it = iter(items)
        self._head: Any = None
        self._has_head = False

    def peek(self) -> tuple[bool, Any]:
        if not self._has_head:
            try:
                self._head = next(self._it)
                self._has_head = True
            except StopIteration:
                return False, None
        return True, self._head

    def next(self) -> tuple[bool, Any]:
        found, value = self.peek()
        if found:
            self._has_head = False
            self._head = None
        return found, value


class PrattParser:
    """Operators with precedences; each `op` call binds tighter than the last.

    Pairs are expected in the order
    `prefix* primary postfix* (infix prefix* primary postfix*)*`. A pair's
    rule is taken from its `as_rule()` method, else its `rule` attribute,
    else the pair itself.
    """

    def __init__(self) -> None:
        self._prec = _PREC_STEP
        self._ops: dict[Hashable, tuple[Op, int]] = {}
        self._has_prefix = False
        self._has_postfix = False
        self._has_infix = False

    def op(self, op: Op) -> PrattParser:
        """Add `op` (and everything chained to it) at the next precedence level."""
        self._prec += _PREC_STEP
        for each in op:
            if each.affix is Affix.PREFIX:
                self._has_prefix = True
            elif each.affix is Affix.POSTFIX:
                self._has_postfix = True
            else:
                self._has_infix = True
            self._ops[each.rule] = (each, self._prec)
        return self

    def map_primary(self, primary: Callable[[Any], T]) -> PrattParserMap[T]:
        """Start a mapping whose primary expressions go through `primary`."""
        return PrattParserMap(self, primary)


class PrattParserMap(Generic[T]):
    """Defines how primaries and operators are mapped, then parses pairs."""

    def __init__(self, pratt: PrattParser, primary: Callable[[Any], T]) -> None:
        self._pratt = pratt
        self._primary = primary
        self._prefix: Callable[[Any, T], T] | None = None
        self._postfix: Callable[[T, Any], T] | None = None
        self._infix: Callable[[T, Any, T], T] | None = None

    def map_prefix(self, prefix: Callable[[Any, T], T]) -> PrattParserMap[T]:
        """Map prefix operators with `prefix(op, rhs)`."""
        self._prefix = prefix
        return self

    def map_postfix(self, postfix: Callable[[T, Any], T]) -> PrattParserMap[T]:
        """Map postfix operators with `postfix(lhs, op)`."""
        self._postfix = postfix
        return self

    def map_infix(self, infix: Callable[[T, Any, T], T]) -> PrattParserMap[T]:
        """Map infix operators with `infix(lhs, op, rhs)`."""
        self._infix = infix
        return self

    def parse(self, pairs: Iterable[Any]) -> T:
        """Run the parser over `pairs` and return the mapped result."""
        return self._expr(_Peekable(pairs), 0)

    def _lookup(self, pair: Any) -> tuple[Op, int] | None:
        return self._pratt._ops.get(_rule_of(pair))

    def _expr(self, pairs: _Peekable, rbp: int) -> T:
        lhs = self._nud(pairs)
        while rbp < self._lbp(pairs):
            lhs = self._led(pairs, lhs)
        return lhs

    def _nud(self, pairs: _Peekable) -> T:
        found, pair = pairs.next()
        if not found:
            raise PrattError("Pratt parsing expects non-empty Pairs")
        entry = self._lookup(pair)
        if entry is None:
            return self._primary(pair)
        op, prec = entry
        if op.affix is not Affix.PREFIX:
            raise PrattError(f"Expected prefix or primary expression, found {pair}")
        rhs = self._expr(pairs, prec - 1)
        if self._prefix is None:
            raise PrattError(f"Could not map {pair}, no `.map_prefix(...)` specified")
        return self._prefix(pair, rhs)

    def _led(self, pairs: _Peekable, lhs: T) -> T:
        _, pair = pairs.next()
        entry = self._lookup(pair)
        if entry is not None:
            op, prec = entry
            if op.affix is Affix.INFIX:
                rbp = prec if op.assoc is Assoc.LEFT else prec - 1
                rhs = self._expr(pairs, rbp)
                if self._infix is None:
                    raise PrattError(
                        f"Could not map {pair}, no `.map_infix(...)` specified"
                    )
                return self._infix(lhs, pair, rhs)
            if op.affix is Affix.POSTFIX:
                if self._postfix is None:
                    raise PrattError(
                        f"Could not map {pair}, no `.map_postfix(...)` specified"
                    )
                return self._postfix(lhs, pair)
        raise PrattError(f"Expected postfix or infix expression, found {pair}")

    def _lbp(self, pairs: _Peekable) -> int:
        found, pair = pairs.peek()
        if not found:
            return 0
        entry = self._lookup(pair)
        if entry is None:
            raise PrattError(f"Expected operator, found {pair}")
        return entry[1]