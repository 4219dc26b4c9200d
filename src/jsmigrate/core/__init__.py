# jsmigrate/core/__init__.py
# AI-Mind (c) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Shared rewrite engine: alias resolution, reachability, imports and edits.
"""

from .aliases import AliasBinding, collect_alias_bindings, resolve_aliases
from .edits import RewriteSession, commit, outermost, reindent_body, removal_edit
from .imports import ImportedNames, ImportInfo, find_imports, imported_names
from .reachability import ReachabilityClassifier, is_reachable

__all__ = [
    # Aliases
    "AliasBinding",
    "collect_alias_bindings",
    "resolve_aliases",
    # Reachability
    "ReachabilityClassifier",
    "is_reachable",
    # Imports
    "ImportInfo",
    "ImportedNames",
    "find_imports",
    "imported_names",
    # Edits
    "RewriteSession",
    "commit",
    "outermost",
    "reindent_body",
    "removal_edit",
]
