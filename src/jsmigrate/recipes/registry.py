# jsmigrate/recipes/registry.py
# AI-Mind (c) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""Recipe registry mapping recipe names to configured codemods."""

from typing import Any, Callable, Optional

from ..config import (
    InjectHeadTagsConfig,
    RenameCallPropertyConfig,
    UnwrapComponentConfig,
)
from ..exceptions import ConfigError, UnknownRecipeError
from .base import Codemod
from .inject_head_tags import InjectHeadTags
from .rename_call_property import RenameCallProperty
from .unwrap_component import UnwrapComponent

# Recipe name -> (factory, description)
BUILTIN_RECIPES: dict[str, tuple[Callable[[str], Codemod], str]] = {
    "pos-api-smartgrid-to-action": (
        lambda name: RenameCallProperty(RenameCallPropertyConfig(), name=name),
        "Rename api.smartGrid.presentModal() to api.action.presentModal()",
    ),
    "app-bridge-react/remove-provider": (
        lambda name: UnwrapComponent(UnwrapComponentConfig(), name=name),
        "Remove the App Bridge React Provider wrapper and its import",
    ),
    "app-bridge-react/inject-next-head": (
        lambda name: InjectHeadTags(InjectHeadTagsConfig(), name=name),
        "Add the App Bridge meta and script tags to Next.js <Head>",
    ),
}


class RecipeRegistry:
    """Registry of named codemod recipes.

    Instantiates every built-in recipe, applying per-recipe config overrides
    (as found under `recipes:` in a run config).
    """

    def __init__(self, overrides: Optional[dict[str, dict[str, Any]]] = None):
        self._recipes: dict[str, Codemod] = {}
        self._descriptions: dict[str, str] = {}
        self._load_recipes(overrides or {})

    def _load_recipes(self, overrides: dict[str, dict[str, Any]]) -> None:
        unknown = set(overrides) - set(BUILTIN_RECIPES)
        if unknown:
            raise ConfigError(f"Overrides for unknown recipes: {', '.join(sorted(unknown))}")

        for name, (factory, description) in BUILTIN_RECIPES.items():
            codemod = factory(name)
            if name in overrides:
                try:
                    codemod = codemod.with_overrides(overrides[name])
                except ValueError as e:
                    raise ConfigError(f"Invalid overrides for {name}: {e}") from e
            self.register(name, codemod, description)

    def register(self, name: str, codemod: Codemod, description: str = "") -> None:
        self._recipes[name] = codemod
        self._descriptions[name] = description

    def get(self, name: str) -> Codemod:
        """Get a recipe by name.

        Raises:
            UnknownRecipeError: If no recipe has that name.
        """
        try:
            return self._recipes[name]
        except KeyError:
            raise UnknownRecipeError(
                f"Unknown recipe {name!r}; available: {', '.join(self.list_recipes())}"
            ) from None

    def has_recipe(self, name: str) -> bool:
        return name in self._recipes

    def describe(self, name: str) -> str:
        return self._descriptions.get(name, "")

    def list_recipes(self) -> list[str]:
        return sorted(self._recipes.keys())

    def __repr__(self) -> str:
        names = ", ".join(self.list_recipes())
        return f"RecipeRegistry({len(self._recipes)} recipes: {names})"
