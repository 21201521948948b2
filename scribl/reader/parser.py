"""
  Scribl source reader.

The grammar lives outside this package: it is a tree-sitter grammar whose
Python binding (by default the `tree_sitter_scribl` module, see SCRIBL_GRAMMAR)
exposes `language()`. This module loads that binding, parses source text with
py-tree-sitter, and converts the result into `scribl.syntax.Node` trees, which
is all the evaluator ever sees.
"""

from __future__ import annotations

import importlib
import logging
from os import PathLike
from pathlib import Path
from typing import Optional

from tree_sitter import Language, Parser

from scribl.config import get_grammar_module
from scribl.errors import ScriblParserUnavailable
from scribl.syntax import Node, from_tree_sitter

logger = logging.getLogger(__name__)

_languages: dict[str, Language] = {}


def load_language(module_name: Optional[str] = None) -> Language:
    """Load (once) the tree-sitter language from the grammar's Python binding."""
    name = module_name or get_grammar_module()
    cached = _languages.get(name)
    if cached is not None:
        return cached
    try:
        binding = importlib.import_module(name)
    except ImportError as e:
        raise ScriblParserUnavailable(
            f"Failed to load the Scribl grammar from module '{name}'. "
            "Build and install the tree-sitter-scribl Python binding, "
            "or point SCRIBL_GRAMMAR at it."
        ) from e
    language = Language(binding.language())
    _languages[name] = language
    logger.debug("Loaded Scribl grammar from %s", name)
    return language


def parse_source(source: str, module_name: Optional[str] = None) -> Node:
    """Parse Scribl source text into a syntax tree rooted at a block."""
    parser = Parser(load_language(module_name))
    tree = parser.parse(source.encode("utf-8"))
    return from_tree_sitter(tree.root_node)


def parse_file(path: str | PathLike[str], module_name: Optional[str] = None) -> Node:
    """Parse a Scribl file and return the syntax tree."""
    return parse_source(Path(path).read_text(encoding="utf-8"), module_name)
