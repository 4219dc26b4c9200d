# jsmigrate/recipes/unwrap_component.py
# AI-Mind (c) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Wrapper component removal.

Removes a wrapper component imported from a package and keeps its children:

    import {Provider, TitleBar} from '@shopify/app-bridge-react';
    <Provider config={config}><App /></Provider>

becomes

    import {TitleBar} from '@shopify/app-bridge-react';
    <App />

Runs in sequential rounds, each committed and re-parsed before the next:
1. JSX       - unwrap paired elements, remove self-closing ones
2. factories - React.createElement(Provider, props, child) -> child,
               React.createElement(Provider, props) -> null
3. imports   - drop the specifier, or the whole statement if it was the last,
               unless the file still references the local name
"""

import logging
from typing import Optional

from ..config import UnwrapComponentConfig
from ..core.edits import RewriteSession, outermost, reindent_body, removal_edit
from ..core.imports import (
    ImportedNames,
    imported_names,
    named_specifiers,
    specifier_names,
)
from ..syntax import Edit, Rule, SgNode, SgRoot, kind
from .base import Codemod

logger = logging.getLogger(__name__)

JSX_ELEMENT = "jsx_element"
JSX_SELF_CLOSING = "jsx_self_closing_element"
JSX_CHILD_KINDS = ("jsx_element", "jsx_self_closing_element")


def jsx_tag_name(element: SgNode) -> Optional[str]:
    """Tag name text of a JSX element, or None for fragments."""
    if element.kind() == JSX_ELEMENT:
        opening = element.child_of_kind("jsx_opening_element")
        if opening is None:
            return None
        name = opening.field("name")
    elif element.kind() == JSX_SELF_CLOSING:
        name = element.field("name")
    else:
        return None
    return name.text() if name is not None else None


def in_jsx_children(element: SgNode) -> bool:
    """True if the element is a child of another JSX element or fragment."""
    parent = element.parent()
    return parent is not None and parent.kind() == JSX_ELEMENT


def rebuild_named_imports(named: SgNode, keep: list[SgNode]) -> str:
    """Named-import block text holding only `keep`, in the original layout."""
    text = named.text()
    inner = text[1:-1]
    specs = [s.text() for s in keep]

    if inner.lstrip(" \t").startswith(("\n", "\r\n")):
        indent = keep[0].line_indent()
        closing_indent = text[text.rfind("\n") + 1 : -1]
        if closing_indent.strip():
            closing_indent = ""
        trailing = "," if inner.rstrip().endswith(",") else ""
        body = ",\n".join(indent + s for s in specs)
        return "{\n" + body + trailing + "\n" + closing_indent + "}"

    pad = " " if inner.startswith(" ") else ""
    return "{" + pad + ", ".join(specs) + pad + "}"


def referenced_locals(node: SgNode, local_names: set[str]) -> frozenset[str]:
    """Names from `local_names` still referenced outside import statements."""
    if not local_names:
        return frozenset()
    rule = Rule(
        kind=("identifier", "shorthand_property_identifier"),
        not_=Rule(inside=kind("import_statement")),
    )
    return frozenset(n.text() for n in node.find_all(rule) if n.text() in local_names)


class UnwrapComponent(Codemod):
    """Remove a wrapper component and its import, keeping its children."""

    config_model = UnwrapComponentConfig

    def transform(self, root: SgRoot) -> Optional[str]:
        cfg: UnwrapComponentConfig = self.config
        names = imported_names(root.root(), cfg.package, cfg.component)
        if not names:
            return None

        tags = names.qualified()
        logger.debug("Unwrapping %s via local names %s", cfg.component, sorted(tags))

        session = RewriteSession(root)
        session.apply_until_stable(lambda node: self.jsx_edits(node, tags))
        session.apply_until_stable(lambda node: self.factory_edits(node, tags))

        node = session.root.root()
        names = imported_names(node, cfg.package, cfg.component)
        session.apply(self.import_edits(names, referenced_locals(node, names.locals)))
        return session.result()

    # Round 1: JSX

    def jsx_edits(self, node: SgNode, tags: set[str]) -> list[Edit]:
        candidates = [
            e
            for e in node.find_all(kind(*JSX_CHILD_KINDS))
            if jsx_tag_name(e) in tags
        ]
        edits = []
        for element in outermost(candidates):
            if element.kind() == JSX_SELF_CLOSING:
                edits.append(self._remove_element(element))
            else:
                edits.extend(self._unwrap_element(element))
        return edits

    def _remove_element(self, element: SgNode) -> Edit:
        if in_jsx_children(element):
            return removal_edit(element)
        return element.replace("null")

    def _unwrap_element(self, element: SgNode) -> list[Edit]:
        opening = element.child_of_kind("jsx_opening_element")
        closing = element.child_of_kind("jsx_closing_element")
        if opening is None or closing is None:
            return []

        body = element.root().slice(opening.end, closing.start)
        if not body.strip():
            return [self._remove_element(element)]

        children = [
            c
            for c in element.named_children()
            if c not in (opening, closing)
            and c.kind() != "comment"
            and not (c.kind() == "jsx_text" and not c.text().strip())
        ]
        single_element = len(children) == 1 and children[0].kind() in JSX_CHILD_KINDS

        if not in_jsx_children(element) and not single_element:
            # Expression position needs exactly one root: keep a fragment.
            return [opening.replace("<>"), closing.replace("</>")]

        if in_jsx_children(element):
            return [element.replace(reindent_body(body, element.line_indent()))]
        return [element.replace(reindent_body(body, element.line_indent()).strip())]

    # Round 2: factory calls

    def factory_edits(self, node: SgNode, tags: set[str]) -> list[Edit]:
        cfg: UnwrapComponentConfig = self.config
        candidates = []
        for call in node.find_all(Rule(kind="call_expression")):
            function = call.field("function")
            if function is None or function.text() not in cfg.factories:
                continue
            args = call.field("arguments")
            if args is None:
                continue
            values = [a for a in args.named_children() if a.kind() != "comment"]
            if not values or values[0].text() not in tags:
                continue
            if len(values) > 3:
                logger.debug(
                    "Leaving %s call at line %d with %d children",
                    function.text(), call.line(), len(values) - 2,
                )
                continue
            # No children renders nothing, like a self-closing wrapper.
            candidates.append((call, values[2].text() if len(values) == 3 else "null"))

        outer = outermost([c for c, _ in candidates])
        return [call.replace(text) for call, text in candidates if call in outer]

    # Round 3: imports

    def import_edits(self, names: ImportedNames, in_use: frozenset[str] = frozenset()) -> list[Edit]:
        """Edits dropping the component's specifiers whose local is not in `in_use`."""
        cfg: UnwrapComponentConfig = self.config
        edits = []
        for statement in names.statements:
            clause = statement.child_of_kind("import_clause")
            named = clause.child_of_kind("named_imports") if clause is not None else None
            if named is None:
                logger.debug("Import at line %d has no named imports", statement.line())
                continue

            specs = named_specifiers(named)
            keep = [
                s for s in specs
                if specifier_names(s)[0] != cfg.component or specifier_names(s)[1] in in_use
            ]
            if len(keep) == len(specs):
                continue

            if keep:
                edits.append(named.replace(rebuild_named_imports(named, keep)))
                continue

            leading = [c for c in clause.named_children() if c.kind() != "named_imports"]
            if not leading:
                edits.append(removal_edit(statement))
            else:
                # import React, { Provider } from '...' -> import React from '...'
                edits.append(Edit(leading[-1].end, named.end, ""))
        return edits
