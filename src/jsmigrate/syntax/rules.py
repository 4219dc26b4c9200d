# jsmigrate/syntax/rules.py
# AI-Mind (c) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Typed structural query rules.

Rules are plain predicate objects rather than pattern strings, so names taken
from user configuration are compared as values and never spliced into a query
language. A rule matches a node when every constraint it sets holds:

    Rule(kind="property_identifier", text="smartGrid")
    Rule(kind="import_statement", has=Rule(kind="string", text="'next/head'"))
    Rule(kind="jsx_element", inside=Rule(kind="return_statement"))
"""

from dataclasses import dataclass
import re
from typing import Optional, TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .node import SgNode


KindSpec = Union[str, tuple[str, ...], frozenset]


@dataclass(frozen=True)
class Rule:
    """A structural predicate over syntax nodes.

    Attributes:
        kind: Node type name, or a tuple of alternatives.
        text: Exact source text of the node.
        regex: Regular expression searched within the node text.
        field: Name of the field the node occupies in its parent.
        has: Rule some descendant must match.
        inside: Rule some ancestor must match.
        not_: Rule the node must NOT match.
    """

    kind: Optional[KindSpec] = None
    text: Optional[str] = None
    regex: Optional[str] = None
    field: Optional[str] = None
    has: Optional["Rule"] = None
    inside: Optional["Rule"] = None
    not_: Optional["Rule"] = None

    def matches(self, node: "SgNode") -> bool:
        if self.kind is not None:
            if isinstance(self.kind, str):
                if node.kind() != self.kind:
                    return False
            elif node.kind() not in self.kind:
                return False

        if self.field is not None and node.field_name() != self.field:
            return False

        if self.text is not None and node.text() != self.text:
            return False

        if self.regex is not None and re.search(self.regex, node.text()) is None:
            return False

        if self.has is not None:
            if not any(self.has.matches(d) for d in node.descendants()):
                return False

        if self.inside is not None:
            if not any(self.inside.matches(a) for a in node.ancestors()):
                return False

        if self.not_ is not None and self.not_.matches(node):
            return False

        return True

    def __call__(self, node: "SgNode") -> bool:
        return self.matches(node)


def kind(*kinds: str) -> Rule:
    """Rule matching any of the given node kinds."""
    if len(kinds) == 1:
        return Rule(kind=kinds[0])
    return Rule(kind=tuple(kinds))


def module_source(module: str) -> Rule:
    """Rule matching the source string of an import naming `module`, in either quote style."""
    return Rule(kind="string", field="source", regex=rf"^[\"']{re.escape(module)}[\"']$")
