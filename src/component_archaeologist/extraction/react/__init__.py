"""
React component analysis.

This module detects React function components in parsed sources, extracts
their props, hooks, children and structure, and runs whole-project analysis.
"""

from .analyzer import ReactComponentAnalyzer, analyze_project
from .components import (
    DetectedComponent,
    contains_jsx,
    detect_component,
    detect_components,
    infer_role,
    is_declaration_file,
    is_pascal_case,
    is_test_file,
)
from .extractor import (
    build_component_info,
    collect_child_usages,
    collect_hooks,
    collect_line_ranges,
    extract_prop_names,
)

__all__ = [
    "ReactComponentAnalyzer",
    "analyze_project",
    "DetectedComponent",
    "detect_component",
    "detect_components",
    "contains_jsx",
    "infer_role",
    "is_pascal_case",
    "is_test_file",
    "is_declaration_file",
    "build_component_info",
    "extract_prop_names",
    "collect_hooks",
    "collect_child_usages",
    "collect_line_ranges",
]
