# jsmigrate/syntax/languages.py
# AI-Mind (c) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""Grammar registry for the tree-sitter languages jsmigrate can rewrite.

TypeScript ships two grammars: plain TypeScript (which allows `<T>value`
casts) and TSX (which allows JSX). JavaScript and JSX files are parsed with
the TSX grammar, which is a superset of what they need.
"""

from pathlib import Path
from typing import Optional
import warnings

try:
    import tree_sitter_typescript
    from tree_sitter import Language, Parser

    AVAILABLE = True
except ImportError:
    AVAILABLE = False


TYPESCRIPT = "typescript"
TSX = "tsx"

# File suffix -> grammar name
SUFFIX_LANGUAGES: dict[str, str] = {
    ".ts": TYPESCRIPT,
    ".mts": TYPESCRIPT,
    ".cts": TYPESCRIPT,
    ".tsx": TSX,
    ".js": TSX,
    ".jsx": TSX,
    ".mjs": TSX,
    ".cjs": TSX,
}


def language_for_path(path: Path | str) -> Optional[str]:
    """Return the grammar name for a source file, or None if unsupported."""
    return SUFFIX_LANGUAGES.get(Path(path).suffix.lower())


class GrammarRegistry:
    """Loads and caches tree-sitter parsers by grammar name.

    Parsers hold no per-file state between `parse` calls, so one instance
    per grammar is shared by every file a run touches.
    """

    def __init__(self):
        """Initialize registry and load all available grammars."""
        self._parsers: dict[str, "Parser"] = {}
        self._load_grammars()

    def _load_grammars(self) -> None:
        """Load the TypeScript and TSX grammars."""
        if not AVAILABLE:
            warnings.warn("tree-sitter-typescript not available")
            return

        loaders = {
            TYPESCRIPT: tree_sitter_typescript.language_typescript,
            TSX: tree_sitter_typescript.language_tsx,
        }
        for name, loader in loaders.items():
            try:
                self._parsers[name] = Parser(Language(loader()))
            except Exception as e:
                warnings.warn(f"Failed to load {name} grammar: {e}")

    def get_parser(self, language: str) -> Optional["Parser"]:
        """Get parser for a grammar name (case-insensitive)."""
        return self._parsers.get(language.lower())

    def has_language(self, language: str) -> bool:
        return language.lower() in self._parsers

    def list_available_languages(self) -> list[str]:
        return sorted(self._parsers.keys())

    def __repr__(self) -> str:
        langs = ", ".join(self.list_available_languages())
        return f"GrammarRegistry({len(self._parsers)} grammars: {langs})"


_default_registry: Optional[GrammarRegistry] = None


def default_registry() -> GrammarRegistry:
    """Return the process-wide grammar registry, loading it on first use."""
    global _default_registry
    if _default_registry is None:
        _default_registry = GrammarRegistry()
    return _default_registry
