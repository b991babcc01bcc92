"""
Refactor radar.

Threshold heuristics layered on top of the extracted metrics, answering
"should this component be split up?". The scores are advisory only.
"""

from dataclasses import dataclass, field
from enum import Enum

from component_archaeologist.extraction.models import ComponentInfo

LARGE_LOC = 350
MEDIUM_LOC = 200
CRITICAL_LOC = 400
MANY_HOOKS = 15
SEVERAL_HOOKS = 8
MANY_CHILDREN = 8
SEVERAL_CHILDREN = 4
MANY_EFFECTS = 4

# Two of these together make a component critical
SERIOUS_REASONS = frozenset({"large-loc", "many-hooks", "many-children"})


class RefactorSeverity(Enum):
    """Overall verdict for a component."""

    NONE = "none"
    WARNING = "warning"
    CRITICAL = "critical"


_SEVERITY_RANK = {
    RefactorSeverity.CRITICAL: 0,
    RefactorSeverity.WARNING: 1,
    RefactorSeverity.NONE: 2,
}


@dataclass
class RefactorSignal:
    """A single reason to refactor."""

    reason: str  # short tag, e.g. "large-loc"
    details: str  # human-readable, e.g. "Very large component (359 LOC)"


@dataclass
class RefactorScore:
    """Radar verdict for one component."""

    severity: RefactorSeverity = RefactorSeverity.NONE
    signals: list[RefactorSignal] = field(default_factory=list)


def score_component_for_refactor(info: ComponentInfo) -> RefactorScore:
    """
    Score a component using LOC, hook count, child count and effect count.

    Args:
        info: Extracted component

    Returns:
        RefactorScore with severity and the signals that triggered it
    """
    signals: list[RefactorSignal] = []

    if info.loc >= LARGE_LOC:
        signals.append(RefactorSignal("large-loc", f"Very large component ({info.loc} LOC)"))
    elif info.loc >= MEDIUM_LOC:
        signals.append(RefactorSignal("medium-loc", f"Big component ({info.loc} LOC)"))

    hooks_count = len(info.hooks)
    if hooks_count >= MANY_HOOKS:
        signals.append(RefactorSignal("many-hooks", f"Uses many hooks ({hooks_count})"))
    elif hooks_count >= SEVERAL_HOOKS:
        signals.append(RefactorSignal("several-hooks", f"Uses several hooks ({hooks_count})"))

    children_count = len(info.children)
    if children_count >= MANY_CHILDREN:
        signals.append(
            RefactorSignal("many-children", f"Renders many child components ({children_count})")
        )
    elif children_count >= SEVERAL_CHILDREN:
        signals.append(
            RefactorSignal(
                "several-children", f"Renders several child components ({children_count})"
            )
        )

    effects_count = len(info.line_ranges.effects)
    if effects_count >= MANY_EFFECTS:
        signals.append(RefactorSignal("many-effects", f"Has many effects ({effects_count})"))

    serious = [s for s in signals if s.reason in SERIOUS_REASONS]

    if info.loc >= CRITICAL_LOC or len(serious) >= 2:
        severity = RefactorSeverity.CRITICAL
    elif signals:
        severity = RefactorSeverity.WARNING
    else:
        severity = RefactorSeverity.NONE

    return RefactorScore(severity=severity, signals=signals)


def rank_components(
    components: list[ComponentInfo], include_clean: bool = False
) -> list[tuple[ComponentInfo, RefactorScore]]:
    """
    Score and order components, most urgent first.

    Args:
        components: Extracted components
        include_clean: Keep components with no signals

    Returns:
        (component, score) pairs sorted by severity, then LOC descending
    """
    scored = [(c, score_component_for_refactor(c)) for c in components]
    if not include_clean:
        scored = [(c, s) for c, s in scored if s.severity is not RefactorSeverity.NONE]
    return sorted(scored, key=lambda pair: (_SEVERITY_RANK[pair[1].severity], -pair[0].loc))
