"""Syntax-tree interface between the external parser and the evaluator.

The evaluator never depends on a concrete parser. It reads trees through the
`SyntaxNode` protocol: a kind label, an ordered list of children, the raw text
span, and an error flag. `Node` is the plain implementation used for trees
built in Python (tests, embedding hosts) and for trees converted from
tree-sitter by `from_tree_sitter`.

Operator and punctuation tokens are anonymous nodes whose kind equals their
text, the same convention tree-sitter uses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from io import StringIO
from typing import Any, Protocol, Sequence


class SyntaxNode(Protocol):
    """What the evaluator requires from every node of the tree."""

    @property
    def kind(self) -> str: ...

    @property
    def children(self) -> Sequence[SyntaxNode]: ...

    @property
    def text(self) -> str: ...

    @property
    def has_error(self) -> bool: ...


@dataclass(eq=False)
class Node:
    """A concrete syntax node. Identity equality: nodes are positions in a tree."""

    kind: str
    text: str = ""
    children: list[Node] = field(default_factory=list)
    named: bool = True
    missing: bool = False

    @property
    def has_error(self) -> bool:
        if self.kind == "ERROR" or self.missing:
            return True
        return any(child.has_error for child in self.children)

    @property
    def named_children(self) -> list[Node]:
        return [child for child in self.children if child.named]

    def _write_sexp(self, buffer: StringIO) -> None:
        buffer.write("(")
        buffer.write("MISSING " if self.missing else "")
        buffer.write(self.kind)
        for child in self.named_children:
            buffer.write(" ")
            child._write_sexp(buffer)
        buffer.write(")")

    def __str__(self) -> str:
        """S-expression view of the named nodes, as tree-sitter prints it."""
        with StringIO() as buffer:
            self._write_sexp(buffer)
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Node({self.kind!r}, {self.text!r})"


def named_children(node: SyntaxNode) -> list[SyntaxNode]:
    """Children of `node` that carry a grammar name (skips punctuation tokens)."""
    return [child for child in node.children if getattr(child, "named", True)]


def collapse_whitespace(text: str) -> str:
    return " ".join(text.split())


def from_tree_sitter(ts_node: Any) -> Node:
    """Convert a tree-sitter node (and its subtree) into a `Node`."""
    raw = ts_node.text
    return Node(
        kind=ts_node.type,
        text=raw.decode("utf-8") if raw is not None else "",
        children=[from_tree_sitter(child) for child in ts_node.children],
        named=ts_node.is_named,
        missing=ts_node.is_missing,
    )


# --- Builders ---------------------------------------------------------------
# Small constructors for assembling trees in Python. Text spans are rebuilt from
# the children so that text-driven rules (operator tokens, member paths) behave
# as they do on parsed source.

def token(text: str) -> Node:
    return Node(kind=text, text=text, named=False)


def number(text: str | int | float) -> Node:
    return Node("number", str(text))


def string(text: str) -> Node:
    return Node("string", text)


def boolean(value: bool | str) -> Node:
    if isinstance(value, bool):
        value = "true" if value else "false"
    return Node("boolean", value)


def identifier(name: str) -> Node:
    return Node("identifier", name)


def comment(text: str = "// comment") -> Node:
    return Node("comment", text)


def unary(op: str, operand: Node) -> Node:
    return Node("unary_expression", f"{op}{operand.text}", [token(op), operand])


def binary(lhs: Node, op: str, rhs: Node) -> Node:
    return Node("binary_expression", f"{lhs.text} {op} {rhs.text}", [lhs, token(op), rhs])


def member(obj: Node, prop: Node | str) -> Node:
    if isinstance(prop, str):
        prop = identifier(prop)
    return Node("member_expression", f"{obj.text}.{prop.text}", [obj, token("."), prop])


def member_path(dotted: str) -> Node:
    """Build a left-nested member expression from `a.b.c`."""
    head, *rest = dotted.split(".")
    node = identifier(head)
    for name in rest:
        node = member(node, name)
    return node


def assign(target: Node | str, op: str, value: Node) -> Node:
    if isinstance(target, str):
        target = member_path(target) if "." in target else identifier(target)
    return Node(
        "assignment_expression",
        f"{target.text} {op} {value.text}",
        [target, token(op), value],
    )


def statement(expr: Node | None = None) -> Node:
    if expr is None:
        return Node("statement", ";", [token(";")])
    return Node("statement", f"{expr.text};", [expr, token(";")])


def _as_statement(item: Node) -> Node:
    return item if item.kind in ("statement", "comment") else statement(item)


def block(*items: Node) -> Node:
    """A braced block; bare expressions are wrapped in statements."""
    body = [_as_statement(item) for item in items]
    text = " ".join(["{", *(item.text for item in body), "}"])
    return Node("block", text, [token("{"), *body, token("}")])


def program(*items: Node) -> Node:
    """A root block as the parser produces it for a whole file (no braces)."""
    body = [_as_statement(item) for item in items]
    return Node("block", " ".join(item.text for item in body), body)
