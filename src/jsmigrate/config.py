# jsmigrate/config.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Configuration models for jsmigrate recipes and runs.

Defines the structure of YAML configuration files that tune the built-in
recipes and the file discovery of a run.
"""

from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError
import yaml

from .exceptions import ConfigError

APP_BRIDGE_META_TAG = '<meta name="shopify-api-key" content="%SHOPIFY_API_KEY%" />'
APP_BRIDGE_SCRIPT_TAG = (
    '<script src="https://cdn.shopify.com/shopifycloud/app-bridge.js"></script>'
)


class RenameCallPropertyConfig(BaseModel):
    """Rename `<root>.<property>.<method>(...)` to `<root>.<replacement>.<method>(...)`.

    Attributes:
        root_name: Root variable the calls go through.
        property: Property to rename.
        method: Method that must be called on the property.
        replacement: New property name.
        pass_through: Properties whose destructured locals count as aliases;
                      defaults to just `property`.
        indirection_functions: Function names known to return the root value.
        strict_indirection: Only trust `indirection_functions` for call
                            indirection, disabling the name heuristic.
    """

    root_name: str = "api"
    property: str = "smartGrid"
    method: str = "presentModal"
    replacement: str = "action"
    pass_through: Optional[list[str]] = None
    indirection_functions: list[str] = Field(default_factory=list)
    strict_indirection: bool = False

    def pass_through_names(self) -> list[str]:
        return self.pass_through if self.pass_through is not None else [self.property]


class UnwrapComponentConfig(BaseModel):
    """Remove a wrapper component imported from a package.

    Attributes:
        package: Module the component is imported from.
        component: Exported name of the wrapper.
        factories: Element factory callees whose calls are unwrapped too.
    """

    package: str = "@shopify/app-bridge-react"
    component: str = "Provider"
    factories: list[str] = Field(default_factory=lambda: ["React.createElement"])


class InjectHeadTagsConfig(BaseModel):
    """Ensure `<Head>` elements carry the given tags.

    Attributes:
        head_module: Module the Head component comes from.
        head_component: Tag name used when no default import names one.
        meta_tag: Meta tag to insert.
        script_tag: Script tag to insert.
        indent_unit: Extra indentation for inserted children.
    """

    head_module: str = "next/head"
    head_component: str = "Head"
    meta_tag: str = APP_BRIDGE_META_TAG
    script_tag: str = APP_BRIDGE_SCRIPT_TAG
    indent_unit: str = "  "


class RunConfig(BaseModel):
    """Configuration for a `jsmigrate run`.

    Example YAML:
        extensions: [".js", ".jsx", ".ts", ".tsx"]
        exclude_dirs: [node_modules, dist]
        recipes:
          pos-api-smartgrid-to-action:
            strict_indirection: true
            indirection_functions: [getPosApi]
    """

    extensions: list[str] = Field(
        default_factory=lambda: [".js", ".jsx", ".ts", ".tsx", ".mjs", ".cjs"]
    )
    exclude_dirs: list[str] = Field(
        default_factory=lambda: ["node_modules", ".git", "dist", "build"]
    )
    recipes: dict[str, dict[str, Any]] = Field(default_factory=dict)


def load_config(path: Optional[Path]) -> RunConfig:
    """Load a RunConfig from YAML, or the defaults when `path` is None.

    Raises:
        ConfigError: If the file is missing, not YAML, or fails validation.
    """
    if path is None:
        return RunConfig()

    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path) as f:
            config_dict = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file: {e}") from e

    try:
        return RunConfig(**config_dict)
    except (ValidationError, TypeError) as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
