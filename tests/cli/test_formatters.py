"""Tests for CLI output formatters."""

import json

import pytest

from component_archaeologist.analysis import rank_components
from component_archaeologist.cli.formatters import (
    format_component_details,
    format_json,
    format_map,
    format_not_found,
    format_radar,
    format_tree,
    radar_to_dict,
)
from component_archaeologist.extraction.models import (
    AnalysisResult,
    ComponentInfo,
    ComponentRole,
    LineRange,
    LineRanges,
)
from component_archaeologist.graph import LookupResult, build_graph


@pytest.fixture
def sample_component():
    """Create a fully populated component."""
    return ComponentInfo(
        name="Checkout",
        file_path="src/features/checkout/Checkout.tsx",
        role=ComponentRole.FEATURE,
        props=["cart", "onPay"],
        hooks=["useState", "useEffect"],
        children=["Summary"],
        loc=42,
        line_ranges=LineRanges(
            state=LineRange(2, 4),
            effects=[LineRange(5, 9), LineRange(10, 12)],
            handlers=[],
            jsx=LineRange(20, 40),
        ),
    )


def test_format_component_details(sample_component):
    """Test every section of the detailed view."""
    output = format_component_details(sample_component)
    lines = output.splitlines()

    assert lines[0] == "Component: Checkout"
    assert "File:      src/features/checkout/Checkout.tsx" in lines
    assert "Role:      feature" in lines
    assert "LOC:       42" in lines
    assert "Complexity:n/a" in lines
    assert "  State:    2-4" in lines
    assert "  Effects:  5-9, 10-12" in lines
    assert "  Handlers: (none detected)" in lines
    assert "  JSX:      20-40" in lines
    assert "  - onPay" in lines
    assert "  - Summary" in lines


def test_format_component_details_empty_lists():
    """Test placeholders for absent props, hooks and children."""
    output = format_component_details(ComponentInfo(name="Empty", file_path="src/Empty.tsx"))

    assert output.count("  (none)") == 3
    assert "  State:    (none detected)" in output


def test_format_component_details_known_complexity(sample_component):
    """Test a computed complexity is printed as is."""
    sample_component.complexity = 7

    assert "Complexity:7" in format_component_details(sample_component)


def test_format_map_groups_by_role(sample_component):
    """Test role headings appear in first-seen order."""
    shared = ComponentInfo(
        name="Button", file_path="src/ui/Button.tsx", role=ComponentRole.SHARED, loc=5
    )
    result = AnalysisResult(root="/app", components=[sample_component, shared])

    lines = format_map(result).splitlines()

    assert lines[0] == "Detected 2 components:"
    assert lines.index("FEATURE") < lines.index("SHARED")
    assert "- Button  (src/ui/Button.tsx, LOC: 5, hooks: [])" in lines


def test_format_map_empty():
    """Test the empty-project message."""
    assert format_map(AnalysisResult(root="/app")) == "No React components detected."


def test_format_not_found_without_suggestions():
    """Test the miss message without a suggestions block."""
    output = format_not_found(LookupResult(name="Ghost"))

    assert output == 'No component named "Ghost" found.'


def test_format_not_found_with_suggestions():
    """Test suggestions are listed one per line."""
    output = format_not_found(LookupResult(name="card", suggestions=["Card", "CardList"]), " in graph")

    assert output.splitlines() == [
        'No component named "card" found in graph.',
        "",
        "Did you mean:",
        "  - Card",
        "  - CardList",
    ]


def test_format_radar_empty():
    """Test the message when nothing is flagged."""
    assert format_radar([]) == "No refactor candidates found."


def test_radar_to_dict(sample_component):
    """Test the JSON shape of radar entries."""
    sample_component.loc = 250
    data = radar_to_dict(rank_components([sample_component]))

    assert data == [
        {
            "name": "Checkout",
            "filePath": "src/features/checkout/Checkout.tsx",
            "loc": 250,
            "severity": "warning",
            "signals": [{"reason": "medium-loc", "details": "Big component (250 LOC)"}],
        }
    ]


def test_format_json_round_trips(sample_component):
    """Test JSON output is valid and keeps non-ASCII text."""
    sample_component.name = "Überblick"

    output = format_json(sample_component.to_dict())

    assert "Überblick" in output
    assert json.loads(output)["lineRanges"]["state"] == {"start": 2, "end": 4}


def test_format_tree():
    """Test the parents section and children tree of a found component."""
    graph, _ = build_graph(
        [
            ComponentInfo(name="App", file_path="src/App.tsx", loc=12, child_usages=["Nav"]),
            ComponentInfo(
                name="Nav",
                file_path="src/ui/Nav.tsx",
                role=ComponentRole.SHARED,
                loc=6,
                child_usages=["Link"],
            ),
            ComponentInfo(name="Link", file_path="src/ui/Link.tsx", role=ComponentRole.SHARED),
        ]
    )
    result = AnalysisResult(root="/app", components=[n.info for n in graph.values()], graph=graph)

    lines = format_tree(result, "Nav", graph["Nav"], max_depth=2).splitlines()

    assert lines[0] == "Component tree for: Nav"
    assert "File:  src/ui/Nav.tsx" in lines
    assert "  - App (LOC: 12)" in lines
    assert "Children tree (who this component renders, depth <= 2):" in lines
    assert "  - Link (LOC: 1, role: shared)" in lines
