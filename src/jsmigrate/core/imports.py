# jsmigrate/core/imports.py
# AI-Mind (c) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Import statement inspection.

Lists the imports a file takes from one package, and works out the local
names under which a single named export is reachable.
"""

from dataclasses import dataclass, field
from typing import Optional

from ..syntax import Rule, SgNode, module_source

DEFAULT = "default"
NAMED = "named"
NAMESPACE = "namespace"
SIDE_EFFECT = "side_effect"


@dataclass
class ImportInfo:
    """One import form found in an import statement.

    Attributes:
        source: Module specifier without quotes.
        specifier: Import clause text for this form ("React", "{ a, b }",
                   "* as ns", or "" for side-effect imports).
        form: "default" | "named" | "namespace" | "side_effect"
        node: The import_statement node.
    """

    source: str
    specifier: str
    form: str
    node: SgNode


@dataclass
class ImportedNames:
    """Local names bound to one export of a package.

    Attributes:
        locals: Names from `import { X }` / `import { X as Alias }`.
        namespaces: Namespace aliases from `import * as ns`; the export is
                    reachable as `ns.X`.
        statements: Import statements that import the export by name.
    """

    export: str
    locals: set[str] = field(default_factory=set)
    namespaces: set[str] = field(default_factory=set)
    statements: list[SgNode] = field(default_factory=list)

    def qualified(self) -> set[str]:
        """Every reference text that denotes the export."""
        return self.locals | {f"{ns}.{self.export}" for ns in self.namespaces}

    def __bool__(self) -> bool:
        return bool(self.locals or self.namespaces)


def import_statements(root: SgNode, package: Optional[str] = None) -> list[SgNode]:
    """All import statements, optionally only those importing `package`."""
    if package is None:
        return root.find_all(Rule(kind="import_statement"))
    return root.find_all(Rule(kind="import_statement", has=module_source(package)))


def is_type_only(statement: SgNode) -> bool:
    """True for `import type { ... }` statements."""
    return any(c.kind() == "type" for c in statement.children())


def find_imports(root: SgNode, package: str) -> list[ImportInfo]:
    """List every import form taken from `package`.

    Handles:
    - import React from 'package'
    - import { a, b as c } from 'package'
    - import * as ns from 'package'
    - import 'package'
    """
    imports = []
    for statement in import_statements(root, package):
        clause = statement.child_of_kind("import_clause")
        if clause is None:
            imports.append(ImportInfo(package, "", SIDE_EFFECT, statement))
            continue

        for child in clause.named_children():
            if child.kind() == "identifier":
                imports.append(ImportInfo(package, child.text(), DEFAULT, statement))
            elif child.kind() == "named_imports":
                specs = ", ".join(s.text() for s in named_specifiers(child))
                imports.append(ImportInfo(package, f"{{ {specs} }}", NAMED, statement))
            elif child.kind() == "namespace_import":
                alias = child.child_of_kind("identifier")
                if alias is not None:
                    imports.append(
                        ImportInfo(package, f"* as {alias.text()}", NAMESPACE, statement)
                    )

    return imports


def named_specifiers(named_imports: SgNode) -> list[SgNode]:
    return [c for c in named_imports.named_children() if c.kind() == "import_specifier"]


def specifier_names(specifier: SgNode) -> tuple[str, str]:
    """(imported name, local name) for an import_specifier."""
    name_node = specifier.field("name")
    alias_node = specifier.field("alias")
    imported = name_node.text() if name_node is not None else specifier.text()
    local = alias_node.text() if alias_node is not None else imported
    return imported, local


def default_import_names(root: SgNode, package: str) -> set[str]:
    """Local names of default imports from `package`."""
    return {i.specifier for i in find_imports(root, package) if i.form == DEFAULT}


def imported_names(root: SgNode, package: str, export: str) -> ImportedNames:
    """Local names under which `export` of `package` is reachable."""
    names = ImportedNames(export)
    for statement in import_statements(root, package):
        if is_type_only(statement):
            continue
        clause = statement.child_of_kind("import_clause")
        if clause is None:
            continue

        named = clause.child_of_kind("named_imports")
        if named is not None:
            for spec in named_specifiers(named):
                imported, local = specifier_names(spec)
                if imported == export:
                    names.locals.add(local)
                    if statement not in names.statements:
                        names.statements.append(statement)

        namespace = clause.child_of_kind("namespace_import")
        if namespace is not None:
            alias = namespace.child_of_kind("identifier")
            if alias is not None:
                names.namespaces.add(alias.text())

    return names
