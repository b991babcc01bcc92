"""
Component detection.

This module decides, per top-level declaration, whether it defines a React
function component. Detection is purely structural:
- Function declarations: function MyComponent() { return <div /> }
- Bound function expressions: const MyComponent = () => <div />
- Both forms behind export / export default

A component needs a Pascal-case name and at least one JSX node somewhere in
its body. No type or import information is consulted.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from tree_sitter import Node

from component_archaeologist.extraction.models import ComponentRole
from component_archaeologist.extraction.typescript import (
    NodeKind,
    SourceFile,
    children_of,
    is_function_expression,
    is_markup,
    kind_of,
    walk,
)

_PASCAL_CASE = re.compile(r"^[A-Z]")

_TEST_SUFFIXES = (".test.js", ".test.jsx", ".test.ts", ".test.tsx")
_DECLARATION_SUFFIXES = (".d.ts", ".d.mts", ".d.cts")

# First match wins
_ROLE_MARKERS: list[tuple[tuple[str, ...], ComponentRole]] = [
    (("/pages/",), ComponentRole.PAGE),
    (("/features/",), ComponentRole.FEATURE),
    (("/components/", "/shared/", "/ui/"), ComponentRole.SHARED),
]


@dataclass
class DetectedComponent:
    """A declaration recognized as a component, before extraction."""

    name: str
    node: Node  # function_declaration, arrow_function or function_expression
    source: SourceFile

    @property
    def kind(self) -> NodeKind:
        return kind_of(self.node)


def is_pascal_case(name: str) -> bool:
    return bool(_PASCAL_CASE.match(name))


def is_test_file(file_path: str) -> bool:
    """Check whether a path points at a test or mock file."""
    lower = file_path.lower()
    return "/tests/" in lower or "__mocks__" in lower or lower.endswith(_TEST_SUFFIXES)


def is_declaration_file(file_path: str) -> bool:
    """Check whether a path points at a type-only declaration file."""
    return file_path.lower().endswith(_DECLARATION_SUFFIXES)


def infer_role(file_path: str) -> ComponentRole:
    """
    Infer a component's role from path segments.

    Args:
        file_path: POSIX path of the component's file

    Returns:
        The first matching role, or UNKNOWN
    """
    lower = file_path.lower()
    for markers, role in _ROLE_MARKERS:
        if any(marker in lower for marker in markers):
            return role
    return ComponentRole.UNKNOWN


def function_body(func: Node) -> Node | None:
    return func.child_by_field_name("body")


def contains_jsx(func: Node) -> bool:
    """Check whether a function's body contains a JSX node at any depth."""
    body = function_body(func)
    if body is None:
        return False
    return any(is_markup(n) for n in walk(body))


def unwrap_export(node: Node) -> Node:
    """Return the declaration carried by an export statement, or the node itself."""
    if kind_of(node) is NodeKind.EXPORT_STATEMENT:
        declaration = node.child_by_field_name("declaration")
        if declaration is not None:
            return declaration
    return node


def _identifier_name(node: Node | None, source: SourceFile) -> str | None:
    if node is None or kind_of(node) is not NodeKind.IDENTIFIER:
        return None
    return source.text(node)


def detect_component(node: Node, source: SourceFile) -> DetectedComponent | None:
    """
    Decide whether a top-level node defines a component.

    Args:
        node: Declaration-level node of a parsed file
        source: The file the node belongs to

    Returns:
        DetectedComponent, or None when the node is not a component
    """
    node = unwrap_export(node)
    kind = kind_of(node)

    if kind is NodeKind.FUNCTION_DECLARATION:
        name = _identifier_name(node.child_by_field_name("name"), source)
        if name and is_pascal_case(name) and contains_jsx(node):
            return DetectedComponent(name=name, node=node, source=source)
        return None

    if kind is NodeKind.VARIABLE_STATEMENT:
        for declarator in children_of(node):
            if kind_of(declarator) is not NodeKind.VARIABLE_DECLARATOR:
                continue
            name = _identifier_name(declarator.child_by_field_name("name"), source)
            if not name or not is_pascal_case(name):
                continue

            initializer = declarator.child_by_field_name("value")
            if (
                initializer is not None
                and is_function_expression(initializer)
                and contains_jsx(initializer)
            ):
                return DetectedComponent(name=name, node=initializer, source=source)

    return None


def detect_components(source: SourceFile) -> list[DetectedComponent]:
    """Detect every component declared at the top level of a file, in order."""
    detected: list[DetectedComponent] = []
    for node in source.top_level_nodes():
        component = detect_component(node, source)
        if component is not None:
            detected.append(component)
    return detected
