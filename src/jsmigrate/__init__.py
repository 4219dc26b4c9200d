# jsmigrate/__init__.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Source-to-source codemods for JavaScript/TypeScript/JSX.

Usage:
    python -m jsmigrate run pos-api-smartgrid-to-action src/

Components:
    - syntax: tree-sitter query facade (SgRoot, SgNode, Rule, Edit)
    - core: alias resolution, reachability, import inspection, edit rounds
    - recipes: RenameCallProperty, UnwrapComponent, InjectHeadTags and the
      RecipeRegistry binding them to recipe names
    - runner: file discovery, dry-run diffs and fixture cases
"""

from .config import RunConfig, load_config
from .exceptions import (
    ConfigError,
    JsMigrateError,
    OverlappingEditsError,
    ParseError,
    UnknownRecipeError,
)
from .recipes import (
    Codemod,
    InjectHeadTags,
    RecipeRegistry,
    RenameCallProperty,
    UnwrapComponent,
)
from .runner import run_fixtures, run_recipe
from .syntax import Edit, Rule, SgNode, SgRoot

__all__ = [
    # Config
    "RunConfig",
    "load_config",
    # Errors
    "JsMigrateError",
    "ParseError",
    "OverlappingEditsError",
    "UnknownRecipeError",
    "ConfigError",
    # Syntax
    "Edit",
    "Rule",
    "SgNode",
    "SgRoot",
    # Recipes
    "Codemod",
    "RenameCallProperty",
    "UnwrapComponent",
    "InjectHeadTags",
    "RecipeRegistry",
    # Runner
    "run_recipe",
    "run_fixtures",
]
