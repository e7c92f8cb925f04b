# pestkit

Small, dependency-free building blocks for hand-written parsers:

- `pestkit.position.Position` is a cursor into a string. It can match strings,
  ASCII case-insensitive strings, character ranges and predicates. It can skip
  characters and compute line and column information.
- `pestkit.span.Span` is a slice of an input, with helpers to iterate over the
  lines it covers.
- `pestkit.stack.Stack` is a stack that takes snapshots and restores them,
  which makes backtracking cheap.
- `pestkit.token.Token` marks where a rule starts (`TokenKind.START`) or
  ends (`TokenKind.END`).
- `pestkit.pratt_parser` parses prefix, postfix and infix expressions with the
  Pratt method.
- `pestkit.prec_climber` reduces infix expressions with precedence climbing.

## Installation

```
pip install pestkit
```

## Positions and spans

Offsets are byte offsets into the UTF-8 encoding of the input. Creating a
`Position` or a `Span` that does not fall on a character boundary raises
`ValueError`.

```python
from pestkit.position import Position

pos = Position("a\nb", 0)
pos.match_string("a\n")   # True, the cursor advances
pos.pos                   # 2
pos.line_col()            # (2, 1)
pos.line_of()             # "b"

start = Position.from_start("hello world")
end = start.copy()
end.skip(5)
span = start.span(end)
span.as_str()             # "hello"
span.start, span.end      # (0, 5)
```

Matching methods (`match_string`, `match_insensitive`, `match_range`,
`match_char_by`, `skip`, `skip_back`) return `True` and advance on success,
and leave the position unchanged on failure. `skip_until(strings)` moves to
the first place where one of the strings starts, or to the end of the input
(returning `False`) if none is found. `match_char` only looks.

Positions and spans compare equal when they point into equal inputs at the
same offsets. Ordering positions from different inputs raises `ValueError`,
as does building a span from two of them.

`Span.get(start, end)` returns a sub-span relative to the span, or `None` if
the bounds are out of range or not on character boundaries. `Span.lines()`
and `Span.lines_span()` yield every line the span covers at least partly,
line breaks included.

## Backtracking stack

```python
from pestkit.stack import Stack

stack = Stack()
stack.push(1)
stack.snapshot()
stack.push(2)
stack.restore()
stack[0:len(stack)]   # [1]
```

`pop` and `peek` return `None` on an empty stack. `clear_snapshot` drops the
latest snapshot and keeps the current contents. `restore` with no snapshot
empties the stack.

## Pratt parsing

Operators registered later bind tighter. Operators joined with `|` share a
precedence level. A pair's rule is read from its `as_rule()` method, else
its `rule` attribute, else the pair itself, so plain strings work as pairs:

```python
from pestkit.pratt_parser import Assoc, Op, PrattParser

pratt = (
    PrattParser()
    .op(Op.infix("add", Assoc.LEFT) | Op.infix("sub", Assoc.LEFT))
    .op(Op.infix("mul", Assoc.LEFT))
    .op(Op.prefix("neg"))
)

ops = {"add": lambda a, b: a + b, "sub": lambda a, b: a - b, "mul": lambda a, b: a * b}
result = (
    pratt.map_primary(int)
    .map_prefix(lambda op, rhs: -rhs)
    .map_infix(lambda lhs, op, rhs: ops[op](lhs, rhs))
    .parse(["neg", "2", "mul", "3", "add", "1"])
)
# result == -5
```

Pairs must follow `prefix* primary postfix* (infix prefix* primary postfix*)*`.
Empty or malformed input, or an operator with no matching `map_*` function,
raises `PrattError`.

## Precedence climbing

Each entry of the list gets precedence index + 1; operators joined with `|`
share it. `PrecClimber.from_table` takes `(rule, precedence, assoc)` entries
directly.

```python
from pestkit.prec_climber import Assoc, Operator, PrecClimber

climber = PrecClimber([
    Operator("plus", Assoc.LEFT) | Operator("minus", Assoc.LEFT),
    Operator("times", Assoc.LEFT),
    Operator("power", Assoc.RIGHT),
])

climber.climb(["2", "power", "3", "power", "2"], int, lambda a, op, b: a ** b)
# 512
```

`climb(pairs, primary, infix)` maps every primary with `primary` and combines
them with `infix(lhs, op, rhs)`. Empty input, or an operator with no primary
after it, raises `ClimbError`.

## What this package does not do

pestkit has no grammar language, no grammar compiler and no parser runtime
that produces tokens or pairs from a grammar. It supplies the pieces such a
parser is built from; producing the pairs handed to `PrattParserMap.parse`
or `PrecClimber.climb` is up to the caller.