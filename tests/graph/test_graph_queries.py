"""
Tests for graph queries: lookups, suggestions and the children tree.
"""

from component_archaeologist.extraction.models import ComponentInfo
from component_archaeologist.graph import (
    TreeEntryStatus,
    build_graph,
    format_tree_lines,
    get_parents,
    lookup_component,
    suggest_names,
    walk_children_tree,
)


def _graph(*specs: tuple[str, ...]):
    components = [
        ComponentInfo(name=name, file_path=f"src/{name}.tsx", loc=10, child_usages=list(usages))
        for name, *usages in specs
    ]
    graph, _ = build_graph(components)
    return graph


def _shape(entries) -> list[tuple[str, int, TreeEntryStatus]]:
    return [(e.name, e.depth, e.status) for e in entries]


class TestLookup:
    """Tests for name lookup and suggestions."""

    def test_found(self) -> None:
        """Test an exact match returns the node."""
        graph = _graph(("App",))

        result = lookup_component(graph, "App")

        assert result.found
        assert result.node is graph["App"]
        assert result.suggestions == []

    def test_not_found_with_suggestions(self) -> None:
        """Test case-insensitive substring suggestions."""
        graph = _graph(("UserCard",), ("Header",), ("UserList",), ("user",))

        result = lookup_component(graph, "USER")

        assert not result.found
        assert result.suggestions == ["UserCard", "UserList", "user"]

    def test_suggestions_limited_in_insertion_order(self) -> None:
        """Test at most ten suggestions, in graph order."""
        graph = _graph(*[(f"Item{i}",) for i in range(15)])

        assert suggest_names(graph, "item") == [f"Item{i}" for i in range(10)]
        assert suggest_names(graph, "item", limit=3) == ["Item0", "Item1", "Item2"]

    def test_no_suggestions(self) -> None:
        """Test an unrelated query."""
        graph = _graph(("App",))

        assert lookup_component(graph, "Zebra").suggestions == []

    def test_get_parents(self) -> None:
        """Test parents of known and unknown names."""
        graph = _graph(("App", "Nav"), ("Nav",))

        assert get_parents(graph, "Nav") == ["App"]
        assert get_parents(graph, "App") == []
        assert get_parents(graph, "Nope") is None


class TestWalkChildrenTree:
    """Tests for the bounded children walk."""

    def test_depth_cap(self) -> None:
        """Test nodes at the cap are listed but not expanded."""
        graph = _graph(("A", "B"), ("B", "C"), ("C", "D"), ("D",))

        entries = walk_children_tree(graph, "A", max_depth=2)

        assert _shape(entries) == [
            ("B", 1, TreeEntryStatus.EXPANDED),
            ("C", 2, TreeEntryStatus.TRUNCATED),
        ]

    def test_leaf_at_cap(self) -> None:
        """Test a childless node at the cap is a leaf."""
        graph = _graph(("A", "B"), ("B",))

        assert _shape(walk_children_tree(graph, "A", max_depth=1)) == [
            ("B", 1, TreeEntryStatus.LEAF)
        ]

    def test_deeper_walk(self) -> None:
        """Test a larger depth reaches further."""
        graph = _graph(("A", "B"), ("B", "C"), ("C", "D"), ("D",))

        entries = walk_children_tree(graph, "A", max_depth=5)

        assert [e.name for e in entries] == ["B", "C", "D"]
        assert entries[-1].status is TreeEntryStatus.LEAF

    def test_mutual_cycle_terminates(self) -> None:
        """Test A -> B -> A stops at the queried name."""
        graph = _graph(("A", "B"), ("B", "A"))

        entries = walk_children_tree(graph, "A", max_depth=10)

        assert _shape(entries) == [
            ("B", 1, TreeEntryStatus.EXPANDED),
            ("A", 2, TreeEntryStatus.CYCLE),
        ]

    def test_self_loop(self) -> None:
        """Test a component rendering itself."""
        graph = _graph(("Tree", "Tree"))

        assert _shape(walk_children_tree(graph, "Tree")) == [
            ("Tree", 1, TreeEntryStatus.CYCLE)
        ]

    def test_visited_shared_across_siblings(self) -> None:
        """Test a component expanded once is reported as a cycle afterwards."""
        graph = _graph(("Page", "Card", "Card"), ("Card", "Icon"), ("Icon",))

        entries = walk_children_tree(graph, "Page", max_depth=3)

        assert _shape(entries) == [
            ("Card", 1, TreeEntryStatus.EXPANDED),
            ("Icon", 2, TreeEntryStatus.LEAF),
            ("Card", 1, TreeEntryStatus.CYCLE),
        ]

    def test_unknown_or_childless(self) -> None:
        """Test empty walks."""
        graph = _graph(("A",))

        assert walk_children_tree(graph, "A") == []
        assert walk_children_tree(graph, "Missing") == []


class TestFormatTreeLines:
    """Tests for text rendering of tree entries."""

    def test_indentation_and_cycle_marker(self) -> None:
        """Test each level indents by two spaces."""
        graph = _graph(("A", "B"), ("B", "A"))

        lines = format_tree_lines(walk_children_tree(graph, "A", max_depth=3))

        assert lines == [
            "  - B (LOC: 10, role: unknown)",
            "    - A (LOC: 10, role: unknown)",
            "      (cycle detected, stopping here)",
        ]
