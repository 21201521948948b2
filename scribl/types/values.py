"""Runtime values for Scribl.

A closed set of variants, one class per kind. Scalars carry a single payload;
Block, Function and Iterator carry a reference to an Environment, never a copy,
so a closure observes later mutation of the scope it captured.

No implicit coercion is ever performed. Equality compares the kind first:
values of different kinds are simply unequal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Union

if TYPE_CHECKING:
    from scribl.syntax import SyntaxNode
    from scribl.types.environment import Environment


class ValueKind(str, Enum):
    VOID = "void"
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    BLOCK = "block"
    FUNCTION = "function"
    ITERATOR = "iterator"

    def __str__(self) -> str:
        return self.value


class Value:
    """Common base: kind tag plus structural equality."""

    __slots__ = ()
    kind: ClassVar[ValueKind]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return values_equal(self, other)

    def __hash__(self) -> int:
        return id(self)


@dataclass(frozen=True, slots=True, eq=False)
class Void(Value):
    kind: ClassVar[ValueKind] = ValueKind.VOID

    def __hash__(self) -> int:
        return hash(self.kind)

    def __repr__(self) -> str:
        return "Void"


@dataclass(frozen=True, slots=True, eq=False)
class Number(Value):
    value: float
    kind: ClassVar[ValueKind] = ValueKind.NUMBER

    def __post_init__(self):
        # bool and int are normalised so the payload is always a float
        object.__setattr__(self, "value", float(self.value))

    def __hash__(self) -> int:
        return hash((self.kind, self.value))


@dataclass(frozen=True, slots=True, eq=False)
class String(Value):
    value: str
    kind: ClassVar[ValueKind] = ValueKind.STRING

    def __hash__(self) -> int:
        return hash((self.kind, self.value))


@dataclass(frozen=True, slots=True, eq=False)
class Boolean(Value):
    value: bool
    kind: ClassVar[ValueKind] = ValueKind.BOOLEAN

    def __hash__(self) -> int:
        return hash((self.kind, self.value))


@dataclass(frozen=True, slots=True, eq=False)
class Block(Value):
    """A lexical scope as a first-class value."""

    environment: Environment
    kind: ClassVar[ValueKind] = ValueKind.BLOCK

    def __hash__(self) -> int:
        return hash((self.kind, id(self.environment)))

    def __repr__(self) -> str:
        # names only: a block may (indirectly) contain itself
        return "Block{" + ", ".join(self.environment.vars) + "}"


@dataclass(frozen=True, slots=True, eq=False)
class Function(Value):
    """A closure: parameter patterns and body from the tree, plus the defining scope."""

    params: tuple[SyntaxNode, ...]
    body: SyntaxNode
    closure: Environment
    kind: ClassVar[ValueKind] = ValueKind.FUNCTION

    def __repr__(self) -> str:
        params = ", ".join(p.text.strip() for p in self.params)
        return f"Function(({params}) -> {self.body.text!r})"


@dataclass(slots=True, eq=False)
class Iterator(Value):
    """A lazy, partially realised sequence.

    `produced` buffers the values realised so far and `cursor` indexes the next
    one to consume. Restarting means building a new Iterator; the cursor is
    never rewound.
    """

    params: tuple[SyntaxNode, ...]
    environment: Environment
    produced: list[Value] = field(default_factory=list)
    cursor: int = 0
    kind: ClassVar[ValueKind] = ValueKind.ITERATOR

    def __repr__(self) -> str:
        return f"Iterator(cursor={self.cursor}, produced={len(self.produced)})"


RuntimeValue = Union[Void, Number, String, Boolean, Block, Function, Iterator]

VOID = Void()
TRUE = Boolean(True)
FALSE = Boolean(False)


def make_void() -> Void:
    return VOID


def make_number(value: float) -> Number:
    return Number(value)


def make_string(value: str) -> String:
    return String(value)


def make_boolean(value: bool) -> Boolean:
    return TRUE if value else FALSE


def make_block(environment: Environment) -> Block:
    return Block(environment)


def make_function(params, body, closure: Environment) -> Function:
    return Function(tuple(params), body, closure)


def make_iterator(params, environment: Environment) -> Iterator:
    return Iterator(tuple(params), environment)


def values_equal(a: Value, b: Value) -> bool:
    """Total structural equality. Never raises.

    Scalars compare their payloads (exact float equality, so NaN is unequal to
    itself). Block compares the identity of its scope, Function and Iterator
    compare by identity.
    """
    if a.kind is not b.kind:
        return False
    match a:
        case Void():
            return True
        case Number() | String() | Boolean():
            return a.value == b.value
        case Block():
            return a.environment is b.environment
        case Function() | Iterator():
            return a is b
    return False
