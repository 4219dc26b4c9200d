# jsmigrate/recipes/__init__.py
# AI-Mind (c) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Codemod recipes.

Each family is implemented once and parameterized by a config model; the
registry binds the built-in configurations to recipe names.
"""

from .base import Codemod
from .inject_head_tags import InjectHeadTags
from .registry import BUILTIN_RECIPES, RecipeRegistry
from .rename_call_property import RenameCallProperty
from .unwrap_component import UnwrapComponent

__all__ = [
    # Base
    "Codemod",
    # Families
    "RenameCallProperty",
    "UnwrapComponent",
    "InjectHeadTags",
    # Registry
    "BUILTIN_RECIPES",
    "RecipeRegistry",
]
