from __future__ import annotations
import logging
import os
import sys


# Defaults
_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_GRAMMAR = "tree_sitter_scribl"

# Frames kept free for the caller (test runners, CLI, logging) below the evaluator.
_STACK_MARGIN = 200
# Python frames used per tree level: evaluate0 plus the node handler.
_FRAMES_PER_LEVEL = 2


def default_max_depth() -> int:
    """Deepest tree the host stack can walk under the current recursion limit."""
    return max(1, (sys.getrecursionlimit() - _STACK_MARGIN) // _FRAMES_PER_LEVEL)


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{var} must be positive, got {value}")
    return value


def get_log_level() -> int:
    name = os.environ.get("SCRIBL_LOG_LEVEL", _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else logging.WARNING


def get_max_depth() -> int:
    return int_from_env("SCRIBL_MAX_DEPTH", default_max_depth())


def get_grammar_module() -> str:
    return os.environ.get("SCRIBL_GRAMMAR", "").strip() or _DEFAULT_GRAMMAR
