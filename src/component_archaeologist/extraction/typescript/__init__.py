"""
TypeScript/JavaScript syntax tree provider.

This module parses TypeScript and JavaScript sources (JSX included) with
tree-sitter and collects a project's source files from its tsconfig.
"""

from .parser import (
    FUNCTION_LIKE_KINDS,
    MARKUP_KINDS,
    NodeKind,
    SourceFile,
    TypeScriptParser,
    children_of,
    is_function_expression,
    is_markup,
    kind_of,
    walk,
)
from .project import (
    LoadedProject,
    ProjectConfig,
    collect_source_files,
    load_project,
    read_project_config,
    strip_jsonc,
)

__all__ = [
    "TypeScriptParser",
    "SourceFile",
    "NodeKind",
    "MARKUP_KINDS",
    "FUNCTION_LIKE_KINDS",
    "kind_of",
    "is_markup",
    "is_function_expression",
    "children_of",
    "walk",
    "LoadedProject",
    "ProjectConfig",
    "load_project",
    "read_project_config",
    "collect_source_files",
    "strip_jsonc",
]
