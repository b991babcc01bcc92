"""Text and JSON formatters for CLI output.

Every formatter returns a string; printing is left to the commands.
"""

import json
from typing import Any

from component_archaeologist.analysis import RefactorScore
from component_archaeologist.extraction.models import (
    AnalysisResult,
    ComponentInfo,
    GraphNode,
    LineRange,
)
from component_archaeologist.graph import (
    LookupResult,
    format_tree_lines,
    walk_children_tree,
)


def format_json(data: Any) -> str:
    """Format data as indented JSON."""
    return json.dumps(data, indent=2, ensure_ascii=False)


def format_map(result: AnalysisResult) -> str:
    """List detected components grouped by role, in order of first appearance."""
    if not result.components:
        return "No React components detected."

    by_role: dict[str, list[ComponentInfo]] = {}
    for comp in result.components:
        by_role.setdefault(comp.role.value, []).append(comp)

    lines = [f"Detected {len(result.components)} components:", ""]
    for role, components in by_role.items():
        lines.append(role.upper())
        lines.append("-----------------------")
        for comp in components:
            lines.append(
                f"- {comp.name}  ({comp.file_path}, LOC: {comp.loc}, "
                f"hooks: [{', '.join(comp.hooks)}])"
            )
        lines.append("")
    return "\n".join(lines).rstrip()


def _format_ranges(ranges: list[LineRange]) -> str:
    return ", ".join(str(r) for r in ranges) if ranges else "(none detected)"


def _format_range(line_range: LineRange | None) -> str:
    return str(line_range) if line_range else "(none detected)"


def _format_names(names: list[str]) -> list[str]:
    return [f"  - {name}" for name in names] if names else ["  (none)"]


def format_component_details(comp: ComponentInfo) -> str:
    """Detailed, multi-section description of one component."""
    complexity = comp.complexity if comp.complexity is not None else "n/a"
    ranges = comp.line_ranges

    lines = [
        f"Component: {comp.name}",
        f"File:      {comp.file_path}",
        f"Role:      {comp.role.value}",
        f"LOC:       {comp.loc}",
        f"Complexity:{complexity}",
        "",
        "Structure (1-based Line Ranges):",
        f"  State:    {_format_range(ranges.state)}",
        f"  Effects:  {_format_ranges(ranges.effects)}",
        f"  Handlers: {_format_ranges(ranges.handlers)}",
        f"  JSX:      {_format_range(ranges.jsx)}",
        "",
        "Props:",
        *_format_names(comp.props),
        "",
        "Hooks:",
        *_format_names(comp.hooks),
        "",
        "Children:",
        *_format_names(comp.children),
    ]
    return "\n".join(lines)


def format_not_found(lookup: LookupResult, where: str = "") -> str:
    lines = [f'No component named "{lookup.name}" found{where}.']
    if lookup.suggestions:
        lines.append("")
        lines.append("Did you mean:")
        lines.extend(f"  - {name}" for name in lookup.suggestions)
    return "\n".join(lines)


def format_tree(result: AnalysisResult, name: str, node: GraphNode, max_depth: int) -> str:
    """Parents and bounded-depth children tree of a found component."""
    lines = [
        f"Component tree for: {name}",
        f"File:  {node.info.file_path}",
        f"Role:  {node.info.role.value}",
        "",
        "Direct parents (who renders this):",
    ]

    if not node.parents:
        lines.append("  (no parents found - likely a top-level or entry component)")
    for parent in node.parents:
        parent_node = result.graph.get(parent)
        loc = parent_node.info.loc if parent_node else "?"
        lines.append(f"  - {parent} (LOC: {loc})")

    lines.append("")
    lines.append(f"Children tree (who this component renders, depth <= {max_depth}):")
    entries = walk_children_tree(result.graph, name, max_depth)
    if entries:
        lines.extend(format_tree_lines(entries))
    else:
        lines.append("  (no children components detected)")

    return "\n".join(lines)


def format_radar(scored: list[tuple[ComponentInfo, RefactorScore]]) -> str:
    """Refactor radar listing, most urgent first."""
    if not scored:
        return "No refactor candidates found."

    lines: list[str] = []
    for comp, score in scored:
        lines.append(
            f"[{score.severity.value.upper()}] {comp.name}  ({comp.file_path}, LOC: {comp.loc})"
        )
        for signal in score.signals:
            lines.append(f"    - {signal.reason}: {signal.details}")
    return "\n".join(lines)


def radar_to_dict(scored: list[tuple[ComponentInfo, RefactorScore]]) -> list[dict[str, Any]]:
    return [
        {
            "name": comp.name,
            "filePath": comp.file_path,
            "loc": comp.loc,
            "severity": score.severity.value,
            "signals": [{"reason": s.reason, "details": s.details} for s in score.signals],
        }
        for comp, score in scored
    ]
