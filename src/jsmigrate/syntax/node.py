# jsmigrate/syntax/node.py
# AI-Mind (c) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Parsed source files and node handles.

SgRoot owns one immutable source text and its tree-sitter tree. SgNode wraps a
tree-sitter node with navigation, text access and edit construction. Edits are
collected into a batch and committed by the root into a new source string; the
tree is never mutated, callers re-parse with `SgRoot.from_source`.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from ..exceptions import OverlappingEditsError, ParseError
from .languages import TSX, GrammarRegistry, default_registry
from .rules import Rule


@dataclass(frozen=True)
class Edit:
    """Replacement of the byte span [start_pos, end_pos) with inserted_text."""

    start_pos: int
    end_pos: int
    inserted_text: str


class SgNode:
    """Handle to one node of a parsed file."""

    __slots__ = ("_root", "_node")

    def __init__(self, root: "SgRoot", node):
        self._root = root
        self._node = node

    # Identity

    def _key(self) -> tuple:
        return (id(self._root), self._node.start_byte, self._node.end_byte, self._node.type)

    def __eq__(self, other) -> bool:
        return isinstance(other, SgNode) and self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        text = self.text()
        if len(text) > 40:
            text = text[:37] + "..."
        return f"SgNode({self.kind()} {self.range()} {text!r})"

    # Content

    def kind(self) -> str:
        return self._node.type

    def text(self) -> str:
        return self._root.slice(self._node.start_byte, self._node.end_byte)

    def range(self) -> tuple[int, int]:
        """Byte span of this node in the root source."""
        return (self._node.start_byte, self._node.end_byte)

    @property
    def start(self) -> int:
        return self._node.start_byte

    @property
    def end(self) -> int:
        return self._node.end_byte

    def line(self) -> int:
        """Get the 1-indexed line number of the node."""
        return self._node.start_point[0] + 1

    def line_indent(self) -> str:
        """Leading whitespace of the line this node starts on."""
        source = self._root.source_bytes
        line_start = source.rfind(b"\n", 0, self.start) + 1
        line = source[line_start:self.start]
        stripped = line.lstrip(b" \t")
        return line[: len(line) - len(stripped)].decode("utf-8")

    def starts_line(self) -> bool:
        """True if only whitespace precedes this node on its line."""
        source = self._root.source_bytes
        line_start = source.rfind(b"\n", 0, self.start) + 1
        return source[line_start:self.start].strip() == b""

    # Navigation

    def root(self) -> "SgRoot":
        return self._root

    def _wrap(self, node) -> Optional["SgNode"]:
        return SgNode(self._root, node) if node is not None else None

    def parent(self) -> Optional["SgNode"]:
        return self._wrap(self._node.parent)

    def field(self, name: str) -> Optional["SgNode"]:
        return self._wrap(self._node.child_by_field_name(name))

    def field_name(self) -> Optional[str]:
        """Name of the field this node occupies in its parent, if any."""
        parent = self._node.parent
        if parent is None:
            return None
        for i, child in enumerate(parent.children):
            if child.start_byte == self.start and child.end_byte == self.end and child.type == self.kind():
                return parent.field_name_for_child(i)
        return None

    def children(self) -> list["SgNode"]:
        return [SgNode(self._root, c) for c in self._node.children]

    def named_children(self) -> list["SgNode"]:
        return [SgNode(self._root, c) for c in self._node.named_children]

    def child_of_kind(self, *kinds: str) -> Optional["SgNode"]:
        """First direct child whose kind is one of `kinds`."""
        for child in self._node.children:
            if child.type in kinds:
                return SgNode(self._root, child)
        return None

    def ancestors(self) -> Iterator["SgNode"]:
        node = self._node.parent
        while node is not None:
            yield SgNode(self._root, node)
            node = node.parent

    def descendants(self) -> Iterator["SgNode"]:
        """Walk all nodes below this one in document order."""
        stack = list(reversed(self._node.children))
        while stack:
            node = stack.pop()
            yield SgNode(self._root, node)
            stack.extend(reversed(node.children))

    def find_all(self, rule: Rule) -> list["SgNode"]:
        """All nodes (this one included) matching `rule`, in document order."""
        matches = [self] if rule.matches(self) else []
        matches.extend(d for d in self.descendants() if rule.matches(d))
        return matches

    def find(self, rule: Rule) -> Optional["SgNode"]:
        """First node (this one included) matching `rule`."""
        if rule.matches(self):
            return self
        for d in self.descendants():
            if rule.matches(d):
                return d
        return None

    def is_inside(self, other: "SgNode") -> bool:
        """True if this node lies strictly within `other`."""
        return (
            other.start <= self.start
            and self.end <= other.end
            and (other.start, other.end) != (self.start, self.end)
        )

    # Edits

    def replace(self, text: str) -> Edit:
        return Edit(self.start, self.end, text)

    def insert_after(self, text: str) -> Edit:
        return Edit(self.end, self.end, text)


class SgRoot:
    """A parsed source file.

    Args:
        source: Source text.
        language: Grammar name ("tsx" or "typescript").
        registry: Grammar registry; defaults to the process-wide one.
        filename: Optional path, used in error messages.
        allow_errors: Accept trees containing syntax errors instead of raising.

    Raises:
        ParseError: If the grammar is unavailable or the source has syntax errors.
    """

    def __init__(
        self,
        source: str,
        language: str = TSX,
        *,
        registry: Optional[GrammarRegistry] = None,
        filename: Optional[str] = None,
        allow_errors: bool = False,
    ):
        self.language = language
        self.filename = filename
        self.allow_errors = allow_errors
        self._registry = registry or default_registry()
        self._source = source.encode("utf-8")

        parser = self._registry.get_parser(language)
        if parser is None:
            raise ParseError(f"No tree-sitter grammar available for {language}")
        self._tree = parser.parse(self._source)

        if not allow_errors and self._tree.root_node.has_error:
            line = self._first_error_line()
            where = f"{filename}:{line}" if filename else f"line {line}"
            raise ParseError(f"Syntax error at {where}", line=line)

    def _first_error_line(self) -> int:
        stack = [self._tree.root_node]
        while stack:
            node = stack.pop()
            if node.type == "ERROR" or node.is_missing:
                return node.start_point[0] + 1
            if node.has_error:
                stack.extend(reversed(node.children))
        return 1

    @property
    def source_bytes(self) -> bytes:
        return self._source

    def text(self) -> str:
        return self._source.decode("utf-8")

    def slice(self, start: int, end: int) -> str:
        return self._source[start:end].decode("utf-8")

    def root(self) -> SgNode:
        return SgNode(self, self._tree.root_node)

    def from_source(self, source: str) -> "SgRoot":
        """Parse new text with the same grammar and settings."""
        return SgRoot(
            source,
            self.language,
            registry=self._registry,
            filename=self.filename,
            allow_errors=self.allow_errors,
        )

    def commit_edits(self, edits: Iterable[Edit]) -> str:
        """Apply a batch of non-overlapping edits and return the new text.

        Raises:
            OverlappingEditsError: If two edits touch the same span.
        """
        ordered = sorted(edits, key=lambda e: (e.start_pos, e.end_pos))
        out = []
        pos = 0
        for edit in ordered:
            if edit.start_pos < pos:
                raise OverlappingEditsError(
                    f"Edit at {edit.start_pos}-{edit.end_pos} overlaps a previous edit ending at {pos}"
                )
            if edit.end_pos < edit.start_pos or edit.end_pos > len(self._source):
                raise ValueError(f"Invalid edit span {edit.start_pos}-{edit.end_pos}")
            out.append(self._source[pos:edit.start_pos])
            out.append(edit.inserted_text.encode("utf-8"))
            pos = edit.end_pos
        out.append(self._source[pos:])
        return b"".join(out).decode("utf-8")
