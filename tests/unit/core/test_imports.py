# tests/unit/core/test_imports.py
# AI-Mind (c) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""Tests for import statement inspection."""

import pytest

from jsmigrate.core.imports import (
    DEFAULT,
    NAMED,
    NAMESPACE,
    SIDE_EFFECT,
    default_import_names,
    find_imports,
    import_statements,
    imported_names,
)
from jsmigrate.syntax import AVAILABLE

PACKAGE = "@shopify/app-bridge-react"

SOURCE = """import React from 'react';
import Bridge, { Provider, TitleBar as Bar } from '@shopify/app-bridge-react';
import * as AB from "@shopify/app-bridge-react";
import '@shopify/app-bridge-react';
import { Provider as Other } from 'somewhere-else';
"""


@pytest.mark.skipif(not AVAILABLE, reason="tree-sitter-typescript not available")
class TestFindImports:
    """Tests for listing the import forms of one package."""

    def test_forms(self, parse):
        """Default, named, namespace and side-effect forms are reported."""
        imports = find_imports(parse(SOURCE).root(), PACKAGE)
        assert [(i.form, i.specifier) for i in imports] == [
            (DEFAULT, "Bridge"),
            (NAMED, "{ Provider, TitleBar as Bar }"),
            (NAMESPACE, "* as AB"),
            (SIDE_EFFECT, ""),
        ]
        assert all(i.source == PACKAGE for i in imports)

    def test_statements_filtered_by_package(self, parse):
        """Only statements importing the package are returned."""
        root = parse(SOURCE).root()
        assert len(import_statements(root)) == 5
        assert len(import_statements(root, PACKAGE)) == 3
        assert import_statements(root, "missing") == []

    def test_default_import_names(self, parse):
        """Default imports are keyed by local name."""
        assert default_import_names(parse(SOURCE).root(), "react") == {"React"}


@pytest.mark.skipif(not AVAILABLE, reason="tree-sitter-typescript not available")
class TestImportedNames:
    """Tests for the local names bound to one export."""

    def test_named_and_namespace(self, parse):
        """Named imports and namespace aliases are both collected."""
        names = imported_names(parse(SOURCE).root(), PACKAGE, "Provider")
        assert names.locals == {"Provider"}
        assert names.namespaces == {"AB"}
        assert names.qualified() == {"Provider", "AB.Provider"}
        assert len(names.statements) == 1

    def test_aliased_import(self, parse):
        """`X as Y` binds Y."""
        names = imported_names(parse(SOURCE).root(), PACKAGE, "TitleBar")
        assert names.locals == {"Bar"}

    def test_other_package_ignored(self, parse):
        """Same export name from another package is not collected."""
        root = parse("import { Provider } from 'redux-provider';\n").root()
        names = imported_names(root, PACKAGE, "Provider")
        assert not names
        assert names.qualified() == set()

    def test_type_only_ignored(self, parse):
        """`import type` brings no runtime binding."""
        root = parse(
            "import type { Provider } from '@shopify/app-bridge-react';\n", "typescript"
        ).root()
        assert not imported_names(root, PACKAGE, "Provider")
