# jsmigrate/recipes/inject_head_tags.py
# AI-Mind (c) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Head tag injection for Next.js pages.

Makes every `<Head>` element carry the App Bridge API-key meta tag and CDN
script tag. Adds `import Head from "next/head"` when tags were inserted and
the file lacks it. A file that imports next/head without rendering `<Head>`
gets a `<Head>` block as the first child of its first returned JSX element.
"""

import logging
import re
from typing import Optional

from ..config import InjectHeadTagsConfig
from ..core.edits import commit
from ..core.imports import default_import_names, import_statements
from ..syntax import Edit, Rule, SgNode, SgRoot
from .base import Codemod
from .unwrap_component import jsx_tag_name

logger = logging.getLogger(__name__)

_ATTRIBUTE = re.compile(r"\b(name|src)=[\"']([^\"']+)[\"']")


def tag_marker(tag: str) -> re.Pattern:
    """Pattern recognizing `tag` by its name= or src= attribute, quote-agnostic."""
    match = _ATTRIBUTE.search(tag)
    if match is None:
        return re.compile(re.escape(tag))
    attr, value = match.groups()
    return re.compile(rf"\b{attr}=[\"']{re.escape(value)}[\"']")


class InjectHeadTags(Codemod):
    """Insert missing tags into Next.js `<Head>` elements."""

    config_model = InjectHeadTagsConfig

    def transform(self, root: SgRoot) -> Optional[str]:
        cfg: InjectHeadTagsConfig = self.config
        node = root.root()
        head_names = {cfg.head_component} | default_import_names(node, cfg.head_module)
        has_import = bool(import_statements(node, cfg.head_module))

        heads = [
            e for e in node.find_all(Rule(kind="jsx_element"))
            if jsx_tag_name(e) in head_names
        ]

        if heads:
            edits = []
            for head in heads:
                edits.extend(self.head_edits(head))
            if edits and not has_import:
                edits.append(self.import_edit(node))
            return commit(root, edits)

        if has_import:
            imported = sorted(head_names - {cfg.head_component})
            edit = self.head_block_edit(node, imported or [cfg.head_component])
            return commit(root, [edit] if edit else [])

        return None

    def _tags(self) -> list[str]:
        return [self.config.meta_tag, self.config.script_tag]

    def head_edits(self, head: SgNode) -> list[Edit]:
        """Insertion of the missing tags right after the opening tag."""
        text = head.text()
        missing = [t for t in self._tags() if not tag_marker(t).search(text)]
        opening = head.child_of_kind("jsx_opening_element")
        if not missing or opening is None:
            return []

        indent = head.line_indent() + self.config.indent_unit
        logger.debug("Adding %d tags to Head at line %d", len(missing), head.line())
        return [opening.insert_after("".join(f"\n{indent}{t}" for t in missing))]

    def import_edit(self, node: SgNode) -> Edit:
        """Insertion of the Head import after any directive prologue."""
        cfg: InjectHeadTagsConfig = self.config
        statement = f'import {cfg.head_component} from "{cfg.head_module}";\n'

        position = 0
        source = node.root().source_bytes
        for child in node.named_children():
            if child.kind() == "comment":
                continue
            inner = child.named_children()
            if child.kind() == "expression_statement" and len(inner) == 1 and inner[0].kind() == "string":
                # "use client"; and friends must stay first
                line_end = source.find(b"\n", child.end)
                position = len(source) if line_end == -1 else line_end + 1
                continue
            break

        if position == len(source) and not source.endswith(b"\n"):
            statement = "\n" + statement
        return Edit(position, position, statement)

    def head_block_edit(self, node: SgNode, head_names: list[str]) -> Optional[Edit]:
        """Insertion of a full Head block into the first returned JSX element."""
        cfg: InjectHeadTagsConfig = self.config
        head = head_names[0]
        present = re.compile(rf"<{re.escape(head)}[\s>/]")

        for statement in node.find_all(Rule(kind="return_statement")):
            values = statement.named_children()
            if not values:
                continue
            jsx = values[0]
            while jsx.kind() == "parenthesized_expression" and jsx.named_children():
                jsx = jsx.named_children()[0]
            if jsx.kind() != "jsx_element" or present.search(jsx.text()):
                continue

            opening = jsx.child_of_kind("jsx_opening_element")
            if opening is None:
                continue

            indent = jsx.line_indent() + cfg.indent_unit
            lines = [f"<{head}>"]
            lines.extend(cfg.indent_unit + t for t in self._tags())
            lines.append(f"</{head}>")
            block = f"\n{indent}".join(lines)
            logger.debug("Injecting Head block at line %d", jsx.line())
            return opening.insert_after(f"\n{indent}{block}")

        return None
