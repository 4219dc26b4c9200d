# jsmigrate/core/aliases.py
# AI-Mind (c) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Alias resolution for a root variable within one file.

Finds every local name that may denote the same runtime value as a root
identifier such as `api`:

    const myApi = api;                 // direct alias
    let a = api, b = a;                // multi-declarator, chained
    const { smartGrid } = api;         // pass-through destructuring
    const { smartGrid: grid } = myApi; // renamed pass-through
    var { smartGrid = fallback } = api;

Resolution is purely syntactic and file-local: no function parameters, no
re-exports, no scopes. A fresh result is computed on every call.
"""

from dataclasses import dataclass
import logging
from typing import Iterable, Optional

from ..syntax import Rule, SgNode

logger = logging.getLogger(__name__)

# const/let are lexical_declaration, var is variable_declaration
DECLARATION_KINDS = ("lexical_declaration", "variable_declaration")


@dataclass
class AliasBinding:
    """One binding that introduces an alias.

    Attributes:
        local: Local name introduced by the binding.
        source: Name of the alias it was bound from.
        prop: Pass-through property destructured off the source, or None for
              a direct `name = source` binding.
        node: Node of the bound name (identifier, or shorthand pattern).
        entry: For destructuring, the pattern entry node holding the property
               (shorthand, pair or default-value entry).
    """

    local: str
    source: str
    prop: Optional[str] = None
    node: Optional[SgNode] = None
    entry: Optional[SgNode] = None

    @property
    def is_pass_through(self) -> bool:
        return self.prop is not None

    @property
    def is_shorthand(self) -> bool:
        return self.entry is not None and self.entry.kind() in (
            "shorthand_property_identifier_pattern",
            "object_assignment_pattern",
        )


def _declarators(root: SgNode) -> list[tuple[SgNode, SgNode, SgNode]]:
    """(declarator, name, value) for every declarator with a bare identifier value."""
    found = []
    for declarator in root.find_all(Rule(kind="variable_declarator")):
        parent = declarator.parent()
        if parent is None or parent.kind() not in DECLARATION_KINDS:
            continue
        name = declarator.field("name")
        value = declarator.field("value")
        if name is None or value is None or value.kind() != "identifier":
            continue
        found.append((declarator, name, value))
    return found


def _destructured_bindings(
    pattern: SgNode, source: str, pass_through: frozenset[str]
) -> list[AliasBinding]:
    """Bindings for the pass-through entries of an object_pattern."""
    bindings = []
    for entry in pattern.named_children():
        entry_kind = entry.kind()

        if entry_kind == "shorthand_property_identifier_pattern":
            # { prop }
            if entry.text() in pass_through:
                bindings.append(
                    AliasBinding(entry.text(), source, entry.text(), entry, entry)
                )

        elif entry_kind == "object_assignment_pattern":
            # { prop = fallback }
            left = entry.field("left")
            if left is not None and left.text() in pass_through:
                bindings.append(AliasBinding(left.text(), source, left.text(), left, entry))

        elif entry_kind == "pair_pattern":
            # { prop: alias } or { prop: alias = fallback }
            key = entry.field("key")
            value = entry.field("value")
            if key is None or value is None or key.kind() != "property_identifier":
                continue
            if key.text() not in pass_through:
                continue
            if value.kind() == "assignment_pattern":
                value = value.field("left")
            if value is not None and value.kind() == "identifier":
                bindings.append(AliasBinding(value.text(), source, key.text(), value, entry))

    return bindings


def collect_alias_bindings(
    root: SgNode, source_var: str, pass_through: Iterable[str] = ()
) -> list[AliasBinding]:
    """Find every binding that aliases `source_var` in the file.

    Direct aliases are followed to a fixpoint, so `const b = a` counts once
    `const a = api` has been seen, in either order. Pass-through destructuring
    is accepted off the root or any direct alias.

    Args:
        root: Root node of the parsed file.
        source_var: Root identifier, assumed to be in scope (e.g. "api").
        pass_through: Property names whose destructured locals carry the same
                      capability as `<root>.<prop>`.

    Returns:
        Bindings in discovery order.
    """
    props = frozenset(pass_through)
    declarators = _declarators(root)
    direct = {source_var}
    bindings: list[AliasBinding] = []
    seen: set[tuple] = set()

    changed = True
    while changed:
        changed = False
        for declarator, name, value in declarators:
            source = value.text()
            if source not in direct:
                continue

            if name.kind() == "identifier":
                found = [AliasBinding(name.text(), source, None, name, None)]
            elif name.kind() == "object_pattern" and props:
                found = _destructured_bindings(name, source, props)
            else:
                found = []

            for binding in found:
                key = (binding.local, binding.prop, binding.node.range())
                if key in seen:
                    continue
                seen.add(key)
                bindings.append(binding)
                if not binding.is_pass_through and binding.local not in direct:
                    direct.add(binding.local)
                    changed = True

    logger.debug(
        "Resolved %d alias bindings for %s: %s",
        len(bindings), source_var, [b.local for b in bindings],
    )
    return bindings


def resolve_aliases(
    root: SgNode, source_var: str, pass_through: Iterable[str] = ()
) -> set[str]:
    """Set of local names that may denote `source_var` (always includes it)."""
    aliases = {source_var}
    aliases.update(b.local for b in collect_alias_bindings(root, source_var, pass_through))
    return aliases
