# tests/unit/recipes/test_unwrap_component.py
# AI-Mind (c) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""Tests for wrapper component removal."""

import pytest

from jsmigrate.config import UnwrapComponentConfig
from jsmigrate.recipes import UnwrapComponent
from jsmigrate.syntax import AVAILABLE

IMPORT = "import { Provider } from '@shopify/app-bridge-react';\n"


@pytest.fixture
def codemod() -> UnwrapComponent:
    return UnwrapComponent()


@pytest.mark.skipif(not AVAILABLE, reason="tree-sitter-typescript not available")
class TestImports:
    """Tests for the import round."""

    def test_last_specifier_removes_statement(self, codemod):
        source = IMPORT + "const x = 1;\n"
        assert codemod.transform_source(source) == "const x = 1;\n"

    def test_other_specifiers_kept(self, codemod):
        source = "import {Provider, TitleBar} from '@shopify/app-bridge-react';\n"
        assert codemod.transform_source(source) == (
            "import {TitleBar} from '@shopify/app-bridge-react';\n"
        )

    def test_padded_specifiers(self, codemod):
        source = "import { TitleBar, Provider, useAppBridge } from '@shopify/app-bridge-react';\n"
        assert codemod.transform_source(source) == (
            "import { TitleBar, useAppBridge } from '@shopify/app-bridge-react';\n"
        )

    def test_multiline_block(self, codemod):
        source = (
            "import {\n"
            "  Provider,\n"
            "  TitleBar,\n"
            "  useAppBridge,\n"
            "} from '@shopify/app-bridge-react';\n"
        )
        assert codemod.transform_source(source) == (
            "import {\n"
            "  TitleBar,\n"
            "  useAppBridge,\n"
            "} from '@shopify/app-bridge-react';\n"
        )

    def test_default_import_kept(self, codemod):
        source = "import Bridge, { Provider } from '@shopify/app-bridge-react';\n"
        assert codemod.transform_source(source) == (
            "import Bridge from '@shopify/app-bridge-react';\n"
        )

    def test_other_package_untouched(self, codemod):
        source = "import { Provider } from 'react-redux';\nconst el = <Provider store={s}><App /></Provider>;\n"
        assert codemod.transform_source(source) is None


@pytest.mark.skipif(not AVAILABLE, reason="tree-sitter-typescript not available")
class TestJsx:
    """Tests for the JSX round."""

    def test_unwrap_reindents_children(self, codemod):
        source = (
            "import {Provider, TitleBar} from '@shopify/app-bridge-react';\n"
            "\n"
            "export default function App() {\n"
            "  return (\n"
            "    <Provider config={config}>\n"
            "      <div>\n"
            '        <TitleBar title="Hello" />\n'
            "      </div>\n"
            "    </Provider>\n"
            "  );\n"
            "}\n"
        )
        assert codemod.transform_source(source) == (
            "import {TitleBar} from '@shopify/app-bridge-react';\n"
            "\n"
            "export default function App() {\n"
            "  return (\n"
            "    <div>\n"
            '      <TitleBar title="Hello" />\n'
            "    </div>\n"
            "  );\n"
            "}\n"
        )

    def test_inline_child(self, codemod):
        source = IMPORT + "const el = <Provider config={c}><App /></Provider>;\n"
        assert codemod.transform_source(source) == "const el = <App />;\n"

    def test_aliased_tag(self, codemod):
        source = (
            "import { Provider as BridgeProvider } from '@shopify/app-bridge-react';\n"
            "const el = <BridgeProvider config={c}><App /></BridgeProvider>;\n"
        )
        assert codemod.transform_source(source) == "const el = <App />;\n"

    def test_namespace_tag(self, codemod):
        """`ns.Provider` is unwrapped and the namespace import kept."""
        source = (
            "import * as AB from '@shopify/app-bridge-react';\n"
            "const el = <AB.Provider config={c}><App /></AB.Provider>;\n"
        )
        assert codemod.transform_source(source) == (
            "import * as AB from '@shopify/app-bridge-react';\n"
            "const el = <App />;\n"
        )

    def test_self_closing_child_removed_with_line(self, codemod):
        source = IMPORT + (
            "const el = (\n"
            "  <div>\n"
            "    <Provider config={config} />\n"
            "    <App />\n"
            "  </div>\n"
            ");\n"
        )
        assert codemod.transform_source(source) == (
            "const el = (\n"
            "  <div>\n"
            "    <App />\n"
            "  </div>\n"
            ");\n"
        )

    def test_self_closing_expression_becomes_null(self, codemod):
        source = IMPORT + "const el = <Provider config={config} />;\n"
        assert codemod.transform_source(source) == "const el = null;\n"

    def test_several_children_keep_fragment(self, codemod):
        """An expression still needs a single root."""
        source = IMPORT + "const el = <Provider config={c}><Nav />{children}</Provider>;\n"
        assert codemod.transform_source(source) == "const el = <><Nav />{children}</>;\n"

    def test_nested_wrappers(self, codemod):
        """Each round unwraps the outermost wrapper until none is left."""
        source = IMPORT + "const el = <Provider><Provider><App /></Provider></Provider>;\n"
        assert codemod.transform_source(source) == "const el = <App />;\n"

    def test_idempotent(self, codemod):
        source = IMPORT + "const el = <Provider config={c}><App /></Provider>;\n"
        assert codemod.transform_source(codemod.transform_source(source)) is None


@pytest.mark.skipif(not AVAILABLE, reason="tree-sitter-typescript not available")
class TestFactoryCalls:
    """Tests for the element factory round."""

    def test_create_element(self, codemod):
        source = (
            "import React from 'react';\n"
            "import { Provider, TitleBar } from '@shopify/app-bridge-react';\n"
            "const el = React.createElement(Provider, { config }, "
            "React.createElement(TitleBar, { title: 'Hello' }));\n"
        )
        assert codemod.transform_source(source) == (
            "import React from 'react';\n"
            "import { TitleBar } from '@shopify/app-bridge-react';\n"
            "const el = React.createElement(TitleBar, { title: 'Hello' });\n"
        )

    def test_several_children_left(self, codemod):
        """Calls with several children stay, and so does the import they use."""
        source = IMPORT + "const el = React.createElement(Provider, null, a, b);\n"
        assert codemod.transform_source(source) is None

    def test_no_children_becomes_null(self, codemod):
        source = IMPORT + "const el = React.createElement(Provider, { config });\n"
        assert codemod.transform_source(source) == "const el = null;\n"

    def test_nested_childless_call(self, codemod):
        """A childless call inside another element's children renders nothing."""
        source = (
            "import React from 'react';\n"
            + IMPORT
            + "const el = React.createElement('div', null, React.createElement(Provider, { config }));\n"
        )
        assert codemod.transform_source(source) == (
            "import React from 'react';\n"
            "const el = React.createElement('div', null, null);\n"
        )

    def test_custom_factory(self):
        codemod = UnwrapComponent(UnwrapComponentConfig(factories=["h"]))
        source = IMPORT + "const el = h(Provider, {}, h(App));\n"
        assert codemod.transform_source(source) == "const el = h(App);\n"
