# tests/unit/recipes/test_inject_head_tags.py
# AI-Mind (c) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""Tests for Next.js Head tag injection."""

import pytest

from jsmigrate.config import APP_BRIDGE_META_TAG, APP_BRIDGE_SCRIPT_TAG
from jsmigrate.recipes import InjectHeadTags
from jsmigrate.recipes.inject_head_tags import tag_marker
from jsmigrate.syntax import AVAILABLE

HEAD_IMPORT = 'import Head from "next/head";\n'


@pytest.fixture
def codemod() -> InjectHeadTags:
    return InjectHeadTags()


class TestTagMarker:
    """Tests for recognizing tags already present."""

    def test_quote_agnostic(self):
        marker = tag_marker(APP_BRIDGE_META_TAG)
        assert marker.search("<meta name='shopify-api-key' content='abc' />")
        assert not marker.search('<meta name="viewport" content="x" />')

    def test_script_by_src(self):
        marker = tag_marker(APP_BRIDGE_SCRIPT_TAG)
        assert marker.search(
            "<script src='https://cdn.shopify.com/shopifycloud/app-bridge.js' async />"
        )


@pytest.mark.skipif(not AVAILABLE, reason="tree-sitter-typescript not available")
class TestExistingHead:
    """Tests for files that already render <Head>."""

    def test_tags_inserted(self, codemod):
        source = HEAD_IMPORT + (
            "\n"
            "export default function Page() {\n"
            "  return (\n"
            "    <>\n"
            "      <Head>\n"
            "        <title>App</title>\n"
            "      </Head>\n"
            "    </>\n"
            "  );\n"
            "}\n"
        )
        assert codemod.transform_source(source) == HEAD_IMPORT + (
            "\n"
            "export default function Page() {\n"
            "  return (\n"
            "    <>\n"
            "      <Head>\n"
            f"        {APP_BRIDGE_META_TAG}\n"
            f"        {APP_BRIDGE_SCRIPT_TAG}\n"
            "        <title>App</title>\n"
            "      </Head>\n"
            "    </>\n"
            "  );\n"
            "}\n"
        )

    def test_only_missing_tags(self, codemod):
        source = HEAD_IMPORT + (
            "const el = (\n"
            "  <Head>\n"
            "    <meta name='shopify-api-key' content='abc' />\n"
            "  </Head>\n"
            ");\n"
        )
        assert codemod.transform_source(source) == HEAD_IMPORT + (
            "const el = (\n"
            "  <Head>\n"
            f"    {APP_BRIDGE_SCRIPT_TAG}\n"
            "    <meta name='shopify-api-key' content='abc' />\n"
            "  </Head>\n"
            ");\n"
        )

    def test_idempotent(self, codemod):
        source = HEAD_IMPORT + "const el = (\n  <Head>\n    <title>x</title>\n  </Head>\n);\n"
        assert codemod.transform_source(codemod.transform_source(source)) is None

    def test_import_added(self, codemod):
        source = "const el = <Head><title>x</title></Head>;\n"
        result = codemod.transform_source(source)
        assert result.startswith(HEAD_IMPORT)
        assert f"<Head>\n  {APP_BRIDGE_META_TAG}\n  {APP_BRIDGE_SCRIPT_TAG}<title>" in result

    def test_import_after_directive(self, codemod):
        source = '"use client";\nconst el = <Head></Head>;\n'
        result = codemod.transform_source(source)
        assert result.startswith('"use client";\n' + HEAD_IMPORT)

    def test_renamed_default_import(self, codemod):
        """The default import's local name identifies the Head element."""
        source = 'import NextHead from "next/head";\nconst el = <NextHead></NextHead>;\n'
        result = codemod.transform_source(source)
        assert APP_BRIDGE_META_TAG in result
        assert result.count("import") == 1


@pytest.mark.skipif(not AVAILABLE, reason="tree-sitter-typescript not available")
class TestHeadBlock:
    """Tests for files that import next/head without rendering it."""

    def test_block_injected(self, codemod):
        source = HEAD_IMPORT + (
            "\n"
            "export default function Page() {\n"
            "  return (\n"
            "    <div>\n"
            "      <p>Hi</p>\n"
            "    </div>\n"
            "  );\n"
            "}\n"
        )
        assert codemod.transform_source(source) == HEAD_IMPORT + (
            "\n"
            "export default function Page() {\n"
            "  return (\n"
            "    <div>\n"
            "      <Head>\n"
            f"        {APP_BRIDGE_META_TAG}\n"
            f"        {APP_BRIDGE_SCRIPT_TAG}\n"
            "      </Head>\n"
            "      <p>Hi</p>\n"
            "    </div>\n"
            "  );\n"
            "}\n"
        )

    def test_nothing_to_do(self, codemod):
        """Files without Head or its import are left alone."""
        assert codemod.transform_source("const el = <div />;\n") is None
