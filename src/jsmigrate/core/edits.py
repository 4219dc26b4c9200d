# jsmigrate/core/edits.py
# AI-Mind (c) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Edit batches, multi-round rewriting and layout-aware edit helpers.

A batch of edits is committed atomically against one parsed root. Rounds that
need fresh node positions go through RewriteSession, which re-parses the new
text after every commit.
"""

import logging
import textwrap
from typing import Iterable, Optional

from ..syntax import Edit, SgNode, SgRoot

logger = logging.getLogger(__name__)

MAX_ROUNDS = 100


def commit(root: SgRoot, edits: Iterable[Edit]) -> Optional[str]:
    """Commit a batch and return the new text, or None if the batch is empty.

    None means no candidate was found; it is distinct from a batch whose
    result happens to equal the input.
    """
    batch = list(edits)
    if not batch:
        return None
    return root.commit_edits(batch)


class RewriteSession:
    """Runs sequential edit rounds on one file, re-parsing between them."""

    def __init__(self, root: SgRoot):
        self.root = root
        self.changed = False
        self.rounds = 0

    def apply(self, edits: Iterable[Edit]) -> bool:
        """Commit one round. Returns False if the round had no edits."""
        batch = list(edits)
        if not batch:
            return False
        self.rounds += 1
        new_source = self.root.commit_edits(batch)
        self.root = self.root.from_source(new_source)
        self.changed = True
        logger.debug("Round %d committed %d edits", self.rounds, len(batch))
        return True

    def apply_until_stable(self, collect) -> int:
        """Repeat `collect(root_node) -> list[Edit]` rounds until one is empty.

        Returns:
            Number of rounds that committed edits.
        """
        committed = 0
        while committed < MAX_ROUNDS:
            if not self.apply(collect(self.root.root())):
                return committed
            committed += 1
        logger.warning("Stopped after %d rounds without reaching a fixpoint", MAX_ROUNDS)
        return committed

    def result(self) -> Optional[str]:
        return self.root.text() if self.changed else None


def outermost(nodes: list[SgNode]) -> list[SgNode]:
    """Drop nodes nested inside another node of the list."""
    return [n for n in nodes if not any(n.is_inside(other) for other in nodes)]


def removal_edit(node: SgNode) -> Edit:
    """Edit deleting `node`, together with its line when nothing else is on it."""
    source = node.root().source_bytes
    start, end = node.range()
    line_start = source.rfind(b"\n", 0, start) + 1
    line_end = source.find(b"\n", end)
    tail_end = len(source) if line_end == -1 else line_end

    if not node.starts_line() or source[end:tail_end].strip():
        return Edit(start, end, "")

    if line_end == -1:
        # Last line: take the preceding line break instead.
        return Edit(max(line_start - 1, 0), len(source), "")
    return Edit(line_start, line_end + 1, "")


def split_first_line_break(text: str) -> tuple[str, bool]:
    """Remove one leading line break (and nothing else)."""
    if text.startswith("\r\n"):
        return text[2:], True
    if text.startswith("\n"):
        return text[1:], True
    return text, False


def drop_trailing_blank_line(text: str) -> str:
    """Remove a final line break followed only by indentation."""
    cut = text.rfind("\n")
    if cut != -1 and text[cut + 1:].strip(" \t") == "":
        text = text[:cut]
        if text.endswith("\r"):
            text = text[:-1]
    return text


def reindent_body(body: str, indent: str) -> str:
    """Turn the inside of a wrapper into text that can stand in its place.

    One leading and one trailing line break are trimmed, the remaining lines
    are dedented to their common margin and then re-indented so the first line
    takes the wrapper's position and the rest sit at `indent`.
    """
    body, had_break = split_first_line_break(body)
    if not had_break:
        return body

    body = drop_trailing_blank_line(body)
    lines = textwrap.dedent(body).split("\n")
    out = [lines[0]]
    for line in lines[1:]:
        out.append(indent + line if line.strip() else line.strip(" \t"))
    return "\n".join(out)
