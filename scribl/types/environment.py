"""Runtime environment for Scribl.

An Environment maps names to bindings (a value plus a constant flag) and links
to at most one parent through `outer`. Name resolution walks from the starting
scope outwards and stops at the first table that holds the name; declaring a
name in a nearer scope makes it resolve there for that scope's whole lifetime.

Declaration and assignment are one operation, `declare_or_assign`: a name bound
constant anywhere along the resolution chain can never be set again.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from scribl.errors import ScriblRedeclarationError, ScriblUnresolvedMember
from scribl.syntax import collapse_whitespace
from scribl.types.values import (
    VOID,
    Block,
    Function,
    Iterator,
    RuntimeValue,
    ValueKind,
    Void,
    make_block,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Binding:
    value: RuntimeValue
    constant: bool


class Environment:
    """Chained lexical binding table with constancy-gated assignment."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, Binding] = {}
        self.outer: Environment | None = outer

    def declare_or_assign(self, name: str, value: RuntimeValue, constant: bool = True) -> RuntimeValue:
        """Bind `name` to `value`.

        If resolution finds the name in this scope or an ancestor, the binding
        there is replaced, unless it is constant, which raises
        ScriblRedeclarationError. Otherwise a new binding is created in this
        scope's own table.
        """
        env = self.resolve(name)
        if env is not None:
            if env.vars[name].constant:
                raise ScriblRedeclarationError(name)
            env.vars[name] = Binding(value, constant)
            return value
        self.vars[name] = Binding(value, constant)
        return value

    def assign_member(self, name: str, value: RuntimeValue, constant: bool = True) -> RuntimeValue:
        """Bind `name` in this scope's own table only, as a member of a Block."""
        existing = self.vars.get(name)
        if existing is not None and existing.constant:
            raise ScriblRedeclarationError(name)
        self.vars[name] = Binding(value, constant)
        return value

    def resolve(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup_binding(self, name: str) -> Optional[Binding]:
        env = self.resolve(name)
        return env.vars[name] if env is not None else None

    def lookup(self, name: str) -> RuntimeValue:
        """Value bound to `name`, or Void when no scope in the chain binds it."""
        binding = self.lookup_binding(name)
        return binding.value if binding is not None else VOID

    def lookup_local(self, name: str) -> RuntimeValue:
        """Value bound to `name` in this table only; parents are not consulted."""
        binding = self.vars.get(name)
        return binding.value if binding is not None else VOID

    def resolve_member_path(self, path: Iterable[str], constant: bool = True) -> Environment:
        """Walk a dotted member path and return the scope that will hold its last segment.

        The first segment resolves through the parent chain, later segments in
        the enclosing Block's own table. An absent (Void) intermediate segment is
        autovivified as a mutable Block when the traversal context is mutable.
        Descending into an existing Block adopts that binding's constancy as the
        new context. Raises ScriblUnresolvedMember when the path cannot be used.
        """
        segments = [segment.strip() for segment in path]
        if not segments or not all(segments):
            raise ScriblUnresolvedMember(f"Invalid member path: {'.'.join(segments)!r}")

        env = self
        for index, name in enumerate(segments[:-1]):
            binding = env.lookup_binding(name) if index == 0 else env.vars.get(name)
            if binding is None or binding.value.kind is ValueKind.VOID:
                if constant:
                    raise ScriblUnresolvedMember(
                        f"Cannot assign to nonexistent member '{name}' of a constant block"
                    )
                block = make_block(env.extend())
                if index == 0:
                    env.declare_or_assign(name, block, constant=False)
                else:
                    env.assign_member(name, block, constant=False)
                logger.debug("Autovivified block '%s' in %s", name, ".".join(segments))
                env = block.environment
                continue
            if not isinstance(binding.value, Block):
                raise ScriblUnresolvedMember(
                    f"Cannot assign through '{name}': it is a {binding.value.kind}, not a block"
                )
            constant = binding.constant
            env = binding.value.environment

        final = segments[-1]
        binding = env.lookup_binding(final) if len(segments) == 1 else env.vars.get(final)
        if (binding is None or binding.value.kind is ValueKind.VOID) and constant:
            raise ScriblUnresolvedMember(
                f"Cannot assign to nonexistent member '{final}' of a constant block"
            )
        return env

    def extend(self) -> Environment:
        """Create a child scope of this one."""
        return Environment(self)

    def snapshot_bindings(self) -> dict[str, Any]:
        """Nested plain-data view of this table's bindings, for reporting.

        Scalars become {value, constant}, functions and iterators descriptive
        records, blocks a nested snapshot of their own table.
        """
        return self._snapshot(set())

    def _snapshot(self, active: set[int]) -> dict[str, Any]:
        active.add(id(self))
        res: dict[str, Any] = {}
        for name, binding in self.vars.items():
            value = binding.value
            match value:
                case Block():
                    if id(value.environment) in active:
                        res[name] = {"cycle": True, "constant": binding.constant}
                    else:
                        res[name] = value.environment._snapshot(active)
                case Function():
                    res[name] = {
                        "params": [p.text.strip() for p in value.params],
                        "body": collapse_whitespace(value.body.text),
                        "constant": binding.constant,
                    }
                case Iterator():
                    res[name] = {
                        "params": [p.text.strip() for p in value.params],
                        "produced": [_describe(v) for v in value.produced],
                        "cursor": value.cursor,
                        "constant": binding.constant,
                    }
                case _:
                    res[name] = {"value": _describe(value), "constant": binding.constant}
        active.discard(id(self))
        return res

    def __contains__(self, name: str) -> bool:
        return self.resolve(name) is not None

    def _frame(self) -> str:
        """This table alone; mutable bindings are tagged `(mut)`."""
        entries = (
            f"{name}{'' if binding.constant else ' (mut)'}: {binding.value!r}"
            for name, binding in self.vars.items()
        )
        return "{" + ", ".join(entries) + "}"

    def _chain(self) -> list[Environment]:
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            chain.append(env)
            env = env.outer
        return chain

    def __str__(self) -> str:
        return self._frame() if self.outer is None else f"{self._frame()} -> ..."

    def __repr__(self) -> str:
        frames = " -> ".join(env._frame() for env in self._chain())
        return f"<Environment chain: {frames}>"


def _describe(value: RuntimeValue) -> Any:
    if isinstance(value, Void):
        return None
    if value.kind in (ValueKind.NUMBER, ValueKind.STRING, ValueKind.BOOLEAN):
        return value.value
    return str(value.kind)
