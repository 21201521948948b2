import logging

import pytest

from scribl.evaluation.evaluator import evaluate
from scribl.evaluation.node_forms import NODE_FORMS
from scribl.syntax import (
    Node,
    assign,
    binary,
    block,
    boolean,
    comment,
    identifier,
    member,
    member_path,
    number,
    program,
    statement,
    string,
    token,
    unary,
)
from scribl.types.values import FALSE, TRUE, VOID, Block, Boolean, Number, String


# -----------------------------------------------------
# Literals and names
# -----------------------------------------------------

@pytest.mark.parametrize(
    "text,expected",
    [
        ("42", 42),
        ("3.25", 3.25),
        ("-7", -7),
        (".5", 0.5),
        ("1e3", 1000),
        ("2.5E-1", 0.25),
        ("0x1F", 31),
        ("0o17", 15),
        ("0b101", 5),
        (" 12 ", 12),
    ],
)
def test_number_literals(env, text, expected):
    assert evaluate(number(text), env) == Number(expected)


@pytest.mark.parametrize("text", ["abc", "1_000", "0x", "1.2.3", "", "inf"])
def test_bad_number_literal_is_void_with_diagnostic(env, ctx, text):
    assert evaluate(number(text), env, ctx) is VOID
    assert [d.error for d in ctx.diagnostics] == ["ScriblLiteralParseError"]


@pytest.mark.parametrize(
    "text,expected",
    [('"hello"', "hello"), ("'hi'", "hi"), ('""', ""), ('"a\\nb"', "a\\nb"), ("bare", "bare")],
)
def test_string_literals(env, text, expected):
    assert evaluate(string(text), env) == String(expected)


def test_boolean_literals(env):
    assert evaluate(boolean(True), env) is TRUE
    assert evaluate(boolean(False), env) is FALSE
    assert evaluate(boolean("yes"), env) is FALSE


def test_identifier_lookup(env):
    env.declare_or_assign("x", Number(42))
    assert evaluate(identifier("x"), env) == Number(42)
    assert evaluate(identifier("nope"), env) is VOID


def test_comment_is_void(env, ctx):
    assert evaluate(comment("// note"), env, ctx) is VOID
    assert ctx.diagnostics == []


def test_statement(env):
    assert evaluate(statement(number(1)), env) == Number(1)
    assert evaluate(statement(), env) is VOID


# -----------------------------------------------------
# Unary and binary operators
# -----------------------------------------------------

@pytest.mark.parametrize(
    "node,expected",
    [
        (unary("!", boolean(True)), FALSE),
        (unary("!", boolean(False)), TRUE),
        (unary("-", number(5)), Number(-5)),
        (unary("-", unary("-", number(5))), Number(5)),
    ],
)
def test_unary_operators(env, node, expected):
    assert evaluate(node, env) == expected


@pytest.mark.parametrize(
    "node",
    [unary("!", number(1)), unary("-", string('"x"')), unary("~", boolean(True))],
)
def test_unary_type_mismatch(env, ctx, node):
    assert evaluate(node, env, ctx) is VOID
    assert [d.error for d in ctx.diagnostics] == ["ScriblTypeMismatch"]


def test_unknown_unary_operator(env, ctx):
    assert evaluate(unary("+", number(1)), env, ctx) is VOID
    assert [d.error for d in ctx.diagnostics] == ["ScriblUnhandledOperator"]


@pytest.mark.parametrize(
    "lhs,op,rhs,expected",
    [
        (number(1), "+", number(2), Number(3)),
        (string('"ab"'), "+", string('"cd"'), String("abcd")),
        (number(7), "-", number(10), Number(-3)),
        (number(6), "*", number(7), Number(42)),
        (number(1), "/", number(4), Number(0.25)),
        (number(2), "**", number(3), Number(8)),
        (boolean(True), "&&", boolean(False), FALSE),
        (boolean(True), "&&", boolean(True), TRUE),
        (boolean(False), "||", boolean(True), TRUE),
        (boolean(False), "||", boolean(False), FALSE),
        (number(1), "<", number(2), TRUE),
        (number(2), "<", number(2), FALSE),
        (number(2), ">", number(1), TRUE),
        (string('"a"'), "<", string('"b"'), TRUE),
        (boolean(False), "<", boolean(True), TRUE),
        (number(2), "<=", number(2), TRUE),
        (number(3), "<=", number(2), FALSE),
        (number(2), ">=", number(2), TRUE),
        (number(1), ">=", number(2), FALSE),
        (number(5), "==", number(5), TRUE),
        (number(5), "==", string('"5"'), FALSE),
        (string('"5"'), "==", string('"5"'), TRUE),
        (number(5), "!=", string('"5"'), TRUE),
        (number(5), "!=", number(5), FALSE),
        (identifier("nothing"), "==", identifier("nothing"), TRUE),
        (identifier("nothing"), "<", identifier("nothing"), FALSE),
    ],
)
def test_binary_operators(env, ctx, lhs, op, rhs, expected):
    assert evaluate(binary(lhs, op, rhs), env, ctx) == expected
    assert ctx.diagnostics == []


@pytest.mark.parametrize(
    "lhs,op,rhs",
    [
        (number(1), "+", string('"x"')),
        (boolean(True), "+", boolean(True)),
        (identifier("nothing"), "+", identifier("nothing")),
        (number(1), "&&", boolean(True)),
        (boolean(True), "||", number(0)),
        (string('"a"'), "-", string('"b"')),
        (number(1), "&", boolean(True)),
        (number(1), "<", string('"2"')),
        (boolean(True), ">", number(0)),
        (number(1), "<=", string('"1"')),
    ],
)
def test_binary_type_mismatch_is_soft(env, ctx, lhs, op, rhs):
    assert evaluate(binary(lhs, op, rhs), env, ctx) is VOID
    assert [d.error for d in ctx.diagnostics] == ["ScriblTypeMismatch"]


def test_type_mismatch_is_logged(env, ctx, caplog):
    with caplog.at_level(logging.WARNING, logger="scribl"):
        evaluate(binary(number(1), "+", string('"x"')), env, ctx)
    assert "ScriblTypeMismatch" in caplog.text
    assert "1 + \"x\"" in caplog.text


def test_unknown_binary_operator(env, ctx):
    assert evaluate(binary(number(1), "<>", number(2)), env, ctx) is VOID
    assert [d.error for d in ctx.diagnostics] == ["ScriblUnhandledOperator"]


@pytest.mark.parametrize(
    "lhs,expected",
    [
        (identifier("unbound"), Number(7)),
        (boolean(False), Number(7)),
        (number(0), Number(0)),
        (string('""'), String("")),
        (boolean(True), TRUE),
    ],
)
def test_nullish_coalescing(env, lhs, expected):
    assert evaluate(binary(lhs, "??", number(7)), env) == expected


def test_logical_operators_evaluate_both_sides(env):
    node = binary(boolean(False), "&&", assign("touched", ":=", boolean(True)))
    assert evaluate(node, env) is FALSE
    assert env.lookup("touched") is TRUE

    node = binary(boolean(True), "||", assign("also", ":=", boolean(False)))
    assert evaluate(node, env) is TRUE
    assert env.lookup("also") is FALSE


def test_left_operand_is_evaluated_first(env):
    node = binary(assign("x", ":=", number(1)), "+", assign("x", ":=", number(2)))
    assert evaluate(node, env) == Number(3)
    assert env.lookup("x") == Number(2)


def test_soft_errors_cascade_through_enclosing_operators(env, ctx):
    node = binary(binary(number(1), "+", string('"x"')), "+", number(2))
    assert evaluate(node, env, ctx) is VOID
    assert len(ctx.diagnostics) == 2


# -----------------------------------------------------
# Blocks and members
# -----------------------------------------------------

def test_block_returns_its_scope(env):
    result = evaluate(block(assign("a", "=", number(1))), env)
    assert isinstance(result, Block)
    assert result.environment.outer is env
    assert result.environment.lookup("a") == Number(1)
    assert env.lookup("a") is VOID


def test_block_ignores_non_statement_children(env, ctx):
    node = block(assign("a", "=", number(1)))
    node.children.insert(1, comment())
    result = evaluate(node, env, ctx)
    assert result.environment.snapshot_bindings() == {"a": {"value": 1, "constant": True}}
    assert ctx.diagnostics == []


def test_block_sees_enclosing_names(env):
    env.declare_or_assign("x", Number(2))
    result = evaluate(block(assign("y", "=", binary(identifier("x"), "*", number(3)))), env)
    assert result.environment.lookup_local("y") == Number(6)


def test_failing_statement_does_not_stop_the_block(env, ctx):
    result = evaluate(
        block(
            assign("a", "=", binary(number(1), "+", boolean(True))),
            assign("b", "=", number(2)),
        ),
        env,
        ctx,
    )
    assert result.environment.snapshot_bindings() == {
        "a": {"value": None, "constant": True},
        "b": {"value": 2, "constant": True},
    }
    assert len(ctx.diagnostics) == 1


def test_member_read(env):
    root = evaluate(
        program(
            assign("y", "=", number(5)),
            assign("s", "=", block(assign("x", "=", number(1)), assign("t", "=", block(assign("z", "=", string('"deep"')))))),
        ),
        env,
    )
    scope = root.environment
    assert evaluate(member_path("s.x"), scope) == Number(1)
    assert evaluate(member_path("s.t.z"), scope) == String("deep")
    assert evaluate(member_path("s.missing"), scope) is VOID
    # members never fall back to the block's parent scopes
    assert evaluate(member_path("s.y"), scope) is VOID


def test_member_read_of_block_expression(env):
    node = member(block(assign("x", "=", number(3))), "x")
    assert evaluate(node, env) == Number(3)


def test_member_read_on_non_block(env, ctx):
    env.declare_or_assign("n", Number(1))
    assert evaluate(member_path("n.x"), env, ctx) is VOID
    assert [d.error for d in ctx.diagnostics] == ["ScriblTypeMismatch"]


# -----------------------------------------------------
# Unhandled and malformed nodes
# -----------------------------------------------------

def test_node_forms_cover_the_node_vocabulary():
    assert set(NODE_FORMS) == {
        "block", "statement", "unary_expression", "binary_expression",
        "assignment_expression", "member_expression", "number", "string",
        "boolean", "identifier", "comment",
    }
    assert all(callable(handler) for handler in NODE_FORMS.values())


def test_unhandled_node_kind(env, ctx, caplog):
    with caplog.at_level(logging.WARNING, logger="scribl"):
        assert evaluate(Node("call_expression", "f(1)"), env, ctx) is VOID
    assert [d.error for d in ctx.diagnostics] == ["ScriblUnhandledNodeKind"]
    assert ctx.diagnostics[0].node_text == "f(1)"
    assert "call_expression" in caplog.text


@pytest.mark.parametrize(
    "node",
    [
        Node("unary_expression", "-", [token("-")]),
        Node("binary_expression", "1 +", [number(1), token("+")]),
        Node("assignment_expression", "x =", [identifier("x"), token("=")]),
        Node("member_expression", "a", [identifier("a")]),
    ],
)
def test_missing_children_are_soft(env, ctx, node):
    assert evaluate(node, env, ctx) is VOID
    assert [d.error for d in ctx.diagnostics] == ["ScriblArityError"]


def test_depth_is_restored_after_soft_errors(env, ctx):
    evaluate(binary(number(1), "+", string('"x"')), env, ctx)
    assert ctx.depth == 0
