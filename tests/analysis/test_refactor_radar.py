"""
Tests for the refactor radar heuristics.
"""

from component_archaeologist.analysis import (
    RefactorSeverity,
    rank_components,
    score_component_for_refactor,
)
from component_archaeologist.extraction.models import ComponentInfo, LineRange, LineRanges


def _comp(
    name: str = "Widget", loc: int = 10, hooks: int = 0, children: int = 0, effects: int = 0
) -> ComponentInfo:
    return ComponentInfo(
        name=name,
        file_path=f"src/{name}.tsx",
        loc=loc,
        hooks=[f"useHook{i}" for i in range(hooks)],
        children=[f"Child{i}" for i in range(children)],
        line_ranges=LineRanges(effects=[LineRange(i + 1, i + 1) for i in range(effects)]),
    )


def _reasons(score) -> list[str]:
    return [s.reason for s in score.signals]


class TestScoreComponent:
    """Tests for per-component scoring."""

    def test_clean_component(self) -> None:
        """Test a small component has no signals."""
        score = score_component_for_refactor(_comp())

        assert score.severity is RefactorSeverity.NONE
        assert score.signals == []

    def test_loc_thresholds(self) -> None:
        """Test medium and large size signals."""
        assert _reasons(score_component_for_refactor(_comp(loc=199))) == []
        assert _reasons(score_component_for_refactor(_comp(loc=200))) == ["medium-loc"]
        assert _reasons(score_component_for_refactor(_comp(loc=350))) == ["large-loc"]

    def test_large_alone_is_warning(self) -> None:
        """Test one serious signal below the critical size is a warning."""
        score = score_component_for_refactor(_comp(loc=360))

        assert score.severity is RefactorSeverity.WARNING
        assert score.signals[0].details == "Very large component (360 LOC)"

    def test_critical_size(self) -> None:
        """Test size alone can make a component critical."""
        score = score_component_for_refactor(_comp(loc=400))

        assert score.severity is RefactorSeverity.CRITICAL

    def test_two_serious_signals_are_critical(self) -> None:
        """Test many hooks plus many children."""
        score = score_component_for_refactor(_comp(hooks=15, children=8))

        assert _reasons(score) == ["many-hooks", "many-children"]
        assert score.severity is RefactorSeverity.CRITICAL

    def test_several_signals_are_warnings(self) -> None:
        """Test the lower tiers never escalate to critical."""
        score = score_component_for_refactor(_comp(loc=210, hooks=8, children=4, effects=4))

        assert _reasons(score) == ["medium-loc", "several-hooks", "several-children", "many-effects"]
        assert score.severity is RefactorSeverity.WARNING

    def test_effects_threshold(self) -> None:
        """Test three effects are fine, four are flagged."""
        assert _reasons(score_component_for_refactor(_comp(effects=3))) == []
        assert _reasons(score_component_for_refactor(_comp(effects=4))) == ["many-effects"]


class TestRankComponents:
    """Tests for ordering radar results."""

    def test_sorted_by_severity_then_size(self) -> None:
        """Test critical first, then larger components first."""
        components = [
            _comp("SmallWarn", loc=210),
            _comp("Clean"),
            _comp("Huge", loc=500),
            _comp("BigWarn", loc=300),
        ]

        ranked = rank_components(components)

        assert [c.name for c, _ in ranked] == ["Huge", "BigWarn", "SmallWarn"]

    def test_include_clean(self) -> None:
        """Test clean components are listed last when requested."""
        ranked = rank_components([_comp("Clean"), _comp("Warn", loc=220)], include_clean=True)

        assert [(c.name, s.severity) for c, s in ranked] == [
            ("Warn", RefactorSeverity.WARNING),
            ("Clean", RefactorSeverity.NONE),
        ]
