# jsmigrate/core/reachability.py
# AI-Mind (c) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Reachability classification for object expressions.

Decides from the source text of an object expression whether it denotes one
of the resolved aliases of a root value. Handles:
- api, myApi            - direct alias
- api?                  - trailing optional-chaining mark
- api(), api()?         - zero-argument call of an alias
- getApi(), fetchApi()? - zero-argument call whose name mentions the root
- this.api, this?.api   - instance-qualified alias
"""

import re
from typing import Iterable, Optional

DEFAULT_ROOT_TOKEN = "api"

_OPTIONAL_SUFFIX = re.compile(r"\?$")
_CALL_SUFFIX = re.compile(r"\(\)\??$")


def strip_optional(text: str) -> str:
    return _OPTIONAL_SUFFIX.sub("", text)


def strip_call(text: str) -> str:
    return _CALL_SUFFIX.sub("", text)


def is_reachable(
    object_text: str,
    aliases: Iterable[str],
    root_name: Optional[str] = None,
    *,
    indirection_functions: Iterable[str] = (),
    strict_indirection: bool = False,
) -> bool:
    """Check whether `object_text` provably denotes one of `aliases`.

    Args:
        object_text: Source text of the object of a member expression.
        aliases: Local names bound to the root value.
        root_name: Root variable name; its lower-cased form is the token the
                   call-indirection heuristic looks for. Defaults to "api".
        indirection_functions: Function names known to return the root value.
        strict_indirection: Disable the substring heuristic and only trust
                            `indirection_functions`.

    Returns:
        True if the reference is reachable. Never raises.
    """
    alias_set = aliases if isinstance(aliases, (set, frozenset)) else set(aliases)

    if object_text in alias_set:
        return True

    if strip_optional(object_text) in alias_set:
        return True

    is_call = _CALL_SUFFIX.search(object_text) is not None
    if is_call:
        func_name = strip_call(object_text)
        if func_name in alias_set:
            return True
        if func_name in set(indirection_functions):
            return True
        if not strict_indirection:
            token = (root_name if root_name is not None else DEFAULT_ROOT_TOKEN).lower()
            # Convention match: getApi(), fetchApi(). Accepts false positives.
            if token and token in func_name.lower():
                return True

    for alias in alias_set:
        if object_text == f"this.{alias}" or object_text.startswith(f"this.{alias}."):
            return True
        if object_text in (f"this?.{alias}", f"this?.{alias}?"):
            return True

    return False


class ReachabilityClassifier:
    """Reachability check bound to one alias set and its settings."""

    def __init__(
        self,
        aliases: Iterable[str],
        root_name: Optional[str] = None,
        indirection_functions: Iterable[str] = (),
        strict_indirection: bool = False,
    ):
        self.aliases = frozenset(aliases)
        self.root_name = root_name
        self.indirection_functions = frozenset(indirection_functions)
        self.strict_indirection = strict_indirection

    def __call__(self, object_text: str) -> bool:
        return is_reachable(
            object_text,
            self.aliases,
            self.root_name,
            indirection_functions=self.indirection_functions,
            strict_indirection=self.strict_indirection,
        )

    def __repr__(self) -> str:
        return f"ReachabilityClassifier({sorted(self.aliases)})"
