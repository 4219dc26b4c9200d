# jsmigrate/recipes/rename_call_property.py
# AI-Mind (c) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Qualified-call property rename.

Rewrites `<root>.<property>.<method>(...)` to `<root>.<replacement>.<method>(...)`
when the receiver is provably reachable from the root value, e.g.

    api.smartGrid.presentModal()          -> api.action.presentModal()
    const x = api; x.smartGrid.presentModal()
    api?.smartGrid.presentModal()         -> api?.action.presentModal()
    this.api.smartGrid.presentModal()
    getApi()?.smartGrid.presentModal(cfg)

Only the property-name token is replaced, so comments, spacing and arguments
survive. Bare references (`const fn = api.smartGrid.presentModal`) and other
methods are left untouched.
"""

import logging
from typing import Optional

from ..config import RenameCallPropertyConfig
from ..core.aliases import AliasBinding, collect_alias_bindings
from ..core.edits import commit
from ..core.reachability import ReachabilityClassifier
from ..syntax import Edit, Rule, SgNode, SgRoot
from .base import Codemod

logger = logging.getLogger(__name__)


class RenameCallProperty(Codemod):
    """Rename a property in calls of one method reached through a root value."""

    config_model = RenameCallPropertyConfig

    def transform(self, root: SgRoot) -> Optional[str]:
        cfg: RenameCallPropertyConfig = self.config
        node = root.root()

        bindings = collect_alias_bindings(node, cfg.root_name, cfg.pass_through_names())
        aliases = {cfg.root_name} | {b.local for b in bindings}
        reachable = ReachabilityClassifier(
            aliases,
            cfg.root_name,
            cfg.indirection_functions,
            cfg.strict_indirection,
        )

        edits: list[Edit] = []
        for prop in node.find_all(Rule(kind="property_identifier", text=cfg.property)):
            if self.should_transform_property(prop, reachable):
                edits.append(prop.replace(cfg.replacement))

        destructured: dict[str, list[AliasBinding]] = {}
        for binding in bindings:
            if binding.prop == cfg.property:
                destructured.setdefault(binding.local, []).append(binding)
        for local, group in destructured.items():
            edits.extend(self._destructured_edits(node, local, group))

        return commit(root, edits)

    def should_transform_property(
        self, prop: SgNode, reachable: ReachabilityClassifier
    ) -> bool:
        """Check the full `<reachable>.<property>.<method>(...)` chain for `prop`."""
        member = prop.parent()
        if member is None or member.kind() != "member_expression":
            return False
        if member.field("property") != prop:
            return False

        obj = member.field("object")
        if obj is None or not reachable(obj.text()):
            logger.debug("Skipping %s at line %d: receiver not reachable", prop.text(), prop.line())
            return False

        return self.is_method_call(member)

    def is_method_call(self, receiver: SgNode) -> bool:
        """True if `receiver.<method>` is immediately invoked."""
        outer = receiver.parent()
        if outer is None or outer.kind() != "member_expression":
            return False
        if outer.field("object") != receiver:
            return False

        method = outer.field("property")
        if method is None or method.text() != self.config.method:
            return False

        call = outer.parent()
        return (
            call is not None
            and call.kind() == "call_expression"
            and call.field("function") == outer
        )


    def _destructured_edits(
        self, node: SgNode, local: str, group: list[AliasBinding]
    ) -> list[Edit]:
        """Edits for calls through a local destructured off the root.

        `const { smartGrid } = api; smartGrid.presentModal()` becomes
        `const { action } = api; action.presentModal()`. The old name is kept
        in the pattern when the file still uses it elsewhere. For a renamed
        entry `{ smartGrid: grid }` only the key changes, and only when every
        use of `grid` is a rewritten call.

        `group` holds every binding of `local` in the file (one per scope that
        destructures it); call sites are rewritten once for all of them.
        """
        cfg: RenameCallPropertyConfig = self.config

        references = node.find_all(
            Rule(kind=("identifier", "shorthand_property_identifier"), text=local)
        )
        calls = [r for r in references if r.kind() == "identifier" and self.is_method_call(r)]
        if not calls:
            return []
        binding_nodes = [b.node for b in group]
        others = [r for r in references if r not in binding_nodes and r not in calls]

        shorthand = [b for b in group if b.is_shorthand]
        if shorthand and len(shorthand) != len(group):
            logger.debug("Skipping %s: bound both as shorthand and renamed", local)
            return []

        if shorthand:
            if others and any(b.entry.kind() == "object_assignment_pattern" for b in group):
                logger.debug("Skipping defaulted destructuring of %s", local)
                return []
            pattern_text = f"{cfg.replacement}, {local}" if others else cfg.replacement
            edits = [r.replace(cfg.replacement) for r in calls]
            edits.extend(b.node.replace(pattern_text) for b in group)
            return edits

        if others:
            logger.debug("Skipping %s: %s has uses other than %s calls", cfg.property, local, cfg.method)
            return []
        keys = [b.entry.field("key") for b in group]
        return [key.replace(cfg.replacement) for key in keys if key is not None]
