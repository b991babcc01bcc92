"""
Tree-sitter backed TypeScript/JavaScript parser.

This module turns source files into traversable syntax trees and gives the
rest of the analyzer a small capability set over them: node kinds,
shallow and deep child iteration, and offset-to-line mapping.
"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser, Tree

from component_archaeologist.exceptions import SourceReadError
from component_archaeologist.extraction.models import LineRange

TSX_LANGUAGE = Language(tree_sitter_typescript.language_tsx())
TYPESCRIPT_LANGUAGE = Language(tree_sitter_typescript.language_typescript())

# Plain .ts files cannot contain JSX and may use <T>expr casts, which the
# tsx grammar would read as elements.
_TYPESCRIPT_SUFFIXES = {".ts", ".mts", ".cts"}


class NodeKind(Enum):
    """Syntax node kinds the detector and extractor distinguish."""

    PROGRAM = "program"
    EXPORT_STATEMENT = "export_statement"
    FUNCTION_DECLARATION = "function_declaration"
    VARIABLE_STATEMENT = "variable_statement"  # const / let / var
    VARIABLE_DECLARATOR = "variable_declarator"
    ARROW_FUNCTION = "arrow_function"
    FUNCTION_EXPRESSION = "function_expression"
    IDENTIFIER = "identifier"
    CALL_EXPRESSION = "call_expression"
    JSX_ELEMENT = "jsx_element"
    JSX_SELF_CLOSING_ELEMENT = "jsx_self_closing_element"
    JSX_FRAGMENT = "jsx_fragment"
    JSX_OPENING_ELEMENT = "jsx_opening_element"
    OBJECT_PATTERN = "object_pattern"
    RETURN_STATEMENT = "return_statement"
    PARENTHESIZED_EXPRESSION = "parenthesized_expression"
    STATEMENT_BLOCK = "statement_block"
    OTHER = "other"


_KIND_BY_TYPE: dict[str, NodeKind] = {
    "program": NodeKind.PROGRAM,
    "export_statement": NodeKind.EXPORT_STATEMENT,
    "function_declaration": NodeKind.FUNCTION_DECLARATION,
    "generator_function_declaration": NodeKind.FUNCTION_DECLARATION,
    "lexical_declaration": NodeKind.VARIABLE_STATEMENT,
    "variable_declaration": NodeKind.VARIABLE_STATEMENT,
    "variable_declarator": NodeKind.VARIABLE_DECLARATOR,
    "arrow_function": NodeKind.ARROW_FUNCTION,
    "function_expression": NodeKind.FUNCTION_EXPRESSION,
    "function": NodeKind.FUNCTION_EXPRESSION,  # older grammar releases
    "generator_function": NodeKind.FUNCTION_EXPRESSION,
    "identifier": NodeKind.IDENTIFIER,
    "call_expression": NodeKind.CALL_EXPRESSION,
    "jsx_element": NodeKind.JSX_ELEMENT,
    "jsx_self_closing_element": NodeKind.JSX_SELF_CLOSING_ELEMENT,
    "jsx_fragment": NodeKind.JSX_FRAGMENT,
    "jsx_opening_element": NodeKind.JSX_OPENING_ELEMENT,
    "object_pattern": NodeKind.OBJECT_PATTERN,
    "return_statement": NodeKind.RETURN_STATEMENT,
    "parenthesized_expression": NodeKind.PARENTHESIZED_EXPRESSION,
    "statement_block": NodeKind.STATEMENT_BLOCK,
}

MARKUP_KINDS = frozenset(
    {NodeKind.JSX_ELEMENT, NodeKind.JSX_SELF_CLOSING_ELEMENT, NodeKind.JSX_FRAGMENT}
)
FUNCTION_LIKE_KINDS = frozenset(
    {NodeKind.FUNCTION_DECLARATION, NodeKind.ARROW_FUNCTION, NodeKind.FUNCTION_EXPRESSION}
)


def kind_of(node: Node) -> NodeKind:
    """Classify a tree-sitter node."""
    return _KIND_BY_TYPE.get(node.type, NodeKind.OTHER)


def is_markup(node: Node) -> bool:
    """Check whether a node is a JSX element, self-closing element or fragment."""
    return kind_of(node) in MARKUP_KINDS


def is_function_expression(node: Node) -> bool:
    """Check whether a node is an arrow function or anonymous function expression."""
    return kind_of(node) in (NodeKind.ARROW_FUNCTION, NodeKind.FUNCTION_EXPRESSION)


def children_of(node: Node) -> list[Node]:
    """Shallow iteration over a node's named children (comments excluded)."""
    return [child for child in node.named_children if child.type != "comment"]


def walk(node: Node) -> Iterator[Node]:
    """Pre-order depth-first iteration over a node and all its descendants."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.named_children))


@dataclass
class SourceFile:
    """A parsed source file plus position-to-line mapping."""

    path: Path
    relative_path: str  # POSIX, relative to the analysis root
    source: bytes
    tree: Tree
    _line_starts: list[int] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        starts = [0]
        offset = self.source.find(b"\n")
        while offset != -1:
            starts.append(offset + 1)
            offset = self.source.find(b"\n", offset + 1)
        self._line_starts = starts

    @property
    def root_node(self) -> Node:
        return self.tree.root_node

    @property
    def has_syntax_errors(self) -> bool:
        return self.tree.root_node.has_error

    def line_of(self, offset: int) -> int:
        """Map a byte offset to a 1-based line number."""
        return bisect_right(self._line_starts, offset)

    def start_line(self, node: Node) -> int:
        return self.line_of(node.start_byte)

    def end_line(self, node: Node) -> int:
        # end_byte is exclusive; a node never ends on the newline itself
        return self.line_of(max(node.end_byte - 1, node.start_byte))

    def line_range(self, node: Node) -> LineRange:
        return LineRange(start=self.start_line(node), end=self.end_line(node))

    def text(self, node: Node) -> str:
        return self.source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")

    def top_level_nodes(self) -> list[Node]:
        """Declaration-level nodes of the file, in source order."""
        return children_of(self.tree.root_node)


class TypeScriptParser:
    """
    Parser for TypeScript and JavaScript sources.

    ``.ts`` files use the TypeScript grammar; ``.tsx``, ``.jsx`` and ``.js``
    files use the TSX grammar so that JSX is recognized everywhere it can
    legally appear.
    """

    def __init__(self) -> None:
        self._tsx_parser = Parser(TSX_LANGUAGE)
        self._typescript_parser = Parser(TYPESCRIPT_LANGUAGE)

    def parser_for(self, path: Path) -> Parser:
        if path.suffix.lower() in _TYPESCRIPT_SUFFIXES:
            return self._typescript_parser
        return self._tsx_parser

    def parse_source(
        self, source: str | bytes, path: Path, relative_path: str | None = None
    ) -> SourceFile:
        """
        Parse in-memory source text.

        Args:
            source: File contents
            path: Path used to select the grammar and for provenance
            relative_path: Display path; defaults to ``path`` in POSIX form

        Returns:
            SourceFile wrapping the syntax tree
        """
        data = source.encode("utf-8") if isinstance(source, str) else source
        tree = self.parser_for(path).parse(data)
        return SourceFile(
            path=path,
            relative_path=relative_path or path.as_posix(),
            source=data,
            tree=tree,
        )

    def parse_file(self, path: Path, root: Path) -> SourceFile:
        """
        Read and parse a file from disk.

        Args:
            path: Absolute path of the file
            root: Analysis root used to compute the display path

        Returns:
            SourceFile wrapping the syntax tree

        Raises:
            SourceReadError: If the file cannot be read
        """
        try:
            data = path.read_bytes()
        except OSError as e:
            raise SourceReadError(path, str(e)) from e

        try:
            relative = path.relative_to(root).as_posix()
        except ValueError:
            relative = path.as_posix()

        return self.parse_source(data, path, relative)
