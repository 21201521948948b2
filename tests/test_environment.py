import pytest

from scribl.errors import ScriblRedeclarationError
from scribl.syntax import binary, identifier
from scribl.types.environment import Environment
from scribl.types.values import (
    VOID,
    Boolean,
    Number,
    String,
    make_block,
    make_function,
    make_iterator,
)


def test_lookup_of_unbound_name_is_void(env):
    assert env.lookup("missing") is VOID
    assert env.resolve("missing") is None
    assert "missing" not in env


def test_declare_then_lookup(env):
    assert env.declare_or_assign("x", Number(1)) == Number(1)
    assert env.lookup("x") == Number(1)
    assert env.resolve("x") is env


def test_constant_cannot_be_set_again(env):
    env.declare_or_assign("x", Number(1), constant=True)
    with pytest.raises(ScriblRedeclarationError):
        env.declare_or_assign("x", Number(2), constant=True)
    with pytest.raises(ScriblRedeclarationError):
        env.declare_or_assign("x", Number(2), constant=False)
    assert env.lookup("x") == Number(1)


def test_constant_in_ancestor_blocks_assignment_in_child(env):
    env.declare_or_assign("x", Number(1), constant=True)
    child = env.extend().extend()
    with pytest.raises(ScriblRedeclarationError) as err:
        child.declare_or_assign("x", Number(2))
    assert err.value.name == "x"
    assert "x" not in child.vars


def test_mutable_reassignment_writes_into_declaring_scope(env):
    env.declare_or_assign("count", Number(1), constant=False)
    child = env.extend()
    child.declare_or_assign("count", Number(2), constant=False)
    assert "count" not in child.vars
    assert env.lookup("count") == Number(2)
    assert child.lookup("count") == Number(2)


def test_mutable_binding_can_be_frozen(env):
    env.declare_or_assign("x", Number(1), constant=False)
    env.declare_or_assign("x", Number(2), constant=True)
    with pytest.raises(ScriblRedeclarationError):
        env.declare_or_assign("x", Number(3), constant=False)


def test_new_name_binds_in_calling_scope(env):
    child = env.extend()
    child.declare_or_assign("local", String("hi"))
    assert "local" in child.vars
    assert env.lookup("local") is VOID


def test_nearer_declaration_resolves_first(env):
    env.declare_or_assign("x", Number(1), constant=False)
    child = env.extend()
    child.assign_member("x", Number(9))
    assert child.lookup("x") == Number(9)
    assert env.lookup("x") == Number(1)


def test_lookup_local_ignores_parents(env):
    env.declare_or_assign("x", Number(1))
    child = env.extend()
    assert child.lookup("x") == Number(1)
    assert child.lookup_local("x") is VOID


def test_extend_links_parent(env):
    child = env.extend()
    assert child.outer is env
    assert env.outer is None


def test_assign_member_respects_local_constants(env):
    env.assign_member("x", Number(1), constant=True)
    with pytest.raises(ScriblRedeclarationError):
        env.assign_member("x", Number(2))


def test_snapshot_scalars_and_blocks(env):
    env.declare_or_assign("n", Number(3))
    env.declare_or_assign("s", String("hi"), constant=False)
    env.declare_or_assign("b", Boolean(True))
    env.declare_or_assign("v", VOID, constant=False)
    inner = env.extend()
    inner.declare_or_assign("x", Number(1))
    env.declare_or_assign("blk", make_block(inner))

    assert env.snapshot_bindings() == {
        "n": {"value": 3, "constant": True},
        "s": {"value": "hi", "constant": False},
        "b": {"value": True, "constant": True},
        "v": {"value": None, "constant": False},
        "blk": {"x": {"value": 1, "constant": True}},
    }


def test_snapshot_functions_and_iterators(env):
    body = binary(identifier("a"), "+", identifier("b"))
    body.text = "a  +\n   b"
    env.declare_or_assign("f", make_function([identifier("a"), identifier(" b ")], body, env))
    it = make_iterator([identifier("i")], env)
    it.produced.extend([Number(1), String("two")])
    it.cursor = 1
    env.declare_or_assign("it", it, constant=False)

    snap = env.snapshot_bindings()
    assert snap["f"] == {"params": ["a", "b"], "body": "a + b", "constant": True}
    assert snap["it"] == {"params": ["i"], "produced": [1, "two"], "cursor": 1, "constant": False}


def test_snapshot_of_self_containing_block_terminates(env):
    inner = env.extend()
    block = make_block(inner)
    env.declare_or_assign("outer", block, constant=False)
    inner.assign_member("me", block, constant=False)
    assert env.snapshot_bindings() == {"outer": {"me": {"cycle": True, "constant": False}}}
    assert "Block{me}" in repr(env)


def test_string_views(env):
    env.declare_or_assign("x", Number(1), constant=False)
    child = env.extend()
    child.declare_or_assign("y", Number(2))
    assert str(env) == "{x (mut): Number(value=1.0)}"
    assert str(child).endswith(" -> ...")
    assert repr(child).startswith("<Environment chain: {y: ")
    assert repr(child) == "<Environment chain: {y: Number(value=2.0)} -> {x (mut): Number(value=1.0)}>"
    assert str(child) == "{y: Number(value=2.0)} -> ..."
    assert str(Environment()) == "{}"
