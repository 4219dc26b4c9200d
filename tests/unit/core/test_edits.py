# tests/unit/core/test_edits.py
# AI-Mind (c) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""Tests for edit batches, rewrite rounds and layout helpers."""

import pytest

from jsmigrate.core.edits import (
    RewriteSession,
    commit,
    outermost,
    reindent_body,
    removal_edit,
)
from jsmigrate.syntax import AVAILABLE, kind


class TestReindentBody:
    """Tests for re-indenting an unwrapped body."""

    def test_inline_body_verbatim(self):
        """A body on the wrapper's line is kept as is."""
        assert reindent_body("<App />", "    ") == "<App />"

    def test_multiline_body(self):
        """Lines are dedented one level and the first takes the wrapper's spot."""
        body = "\n      <div>\n        <A />\n      </div>\n    "
        assert reindent_body(body, "    ") == "<div>\n      <A />\n    </div>"

    def test_blank_lines_carry_no_indent(self):
        """Blank lines stay empty."""
        body = "\n  <A />\n\n  <B />\n"
        assert reindent_body(body, "  ") == "<A />\n\n  <B />"


@pytest.mark.skipif(not AVAILABLE, reason="tree-sitter-typescript not available")
class TestRemovalEdit:
    """Tests for line-aware removals."""

    def test_whole_line_removed(self, parse):
        """A statement alone on its line takes the line with it."""
        root = parse("a();\nb();\nc();\n")
        stmt = root.root().find_all(kind("expression_statement"))[1]
        assert root.commit_edits([removal_edit(stmt)]) == "a();\nc();\n"

    def test_shared_line_keeps_neighbours(self, parse):
        """Only the node goes when the line holds other code."""
        root = parse("a(); b();\n")
        stmt = root.root().find_all(kind("expression_statement"))[1]
        assert root.commit_edits([removal_edit(stmt)]) == "a(); \n"

    def test_last_line_without_newline(self, parse):
        """The preceding line break goes when the file has no final newline."""
        root = parse("a();\nb();")
        stmt = root.root().find_all(kind("expression_statement"))[1]
        assert root.commit_edits([removal_edit(stmt)]) == "a();"


@pytest.mark.skipif(not AVAILABLE, reason="tree-sitter-typescript not available")
class TestRounds:
    """Tests for commit and RewriteSession."""

    def test_empty_batch_is_none(self, parse):
        """No candidates means no result, not unchanged text."""
        assert commit(parse("a;\n"), []) is None

    def test_outermost(self, parse):
        """Nested candidates are dropped in favour of their ancestors."""
        node = parse("f(g(h()));\n").root()
        calls = node.find_all(kind("call_expression"))
        assert [c.text() for c in outermost(calls)] == ["f(g(h()))"]

    def test_session_rounds_until_stable(self, parse):
        """Each round sees the re-parsed output of the previous one."""
        session = RewriteSession(parse("f(f(f(x)));\n"))

        def unwrap_outer(node):
            calls = outermost(node.find_all(kind("call_expression")))
            return [c.replace(c.field("arguments").named_children()[0].text()) for c in calls]

        assert session.apply_until_stable(unwrap_outer) == 3
        assert session.result() == "x;\n"

    def test_session_without_edits(self, parse):
        """A session that committed nothing yields None."""
        session = RewriteSession(parse("x;\n"))
        assert not session.apply([])
        assert session.result() is None
