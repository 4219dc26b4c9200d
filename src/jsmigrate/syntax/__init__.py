# jsmigrate/syntax/__init__.py
# AI-Mind (c) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Syntax query facade over tree-sitter.

Parses JavaScript/TypeScript/JSX into SgRoot/SgNode handles, matches nodes
with typed Rule predicates, and commits Edit batches into new source text.
"""

from .languages import (
    AVAILABLE,
    TSX,
    TYPESCRIPT,
    GrammarRegistry,
    default_registry,
    language_for_path,
)
from .node import Edit, SgNode, SgRoot
from .rules import Rule, kind, module_source

__all__ = [
    # Languages
    "AVAILABLE",
    "TSX",
    "TYPESCRIPT",
    "GrammarRegistry",
    "default_registry",
    "language_for_path",
    # Tree
    "Edit",
    "SgNode",
    "SgRoot",
    # Rules
    "Rule",
    "kind",
    "module_source",
]
