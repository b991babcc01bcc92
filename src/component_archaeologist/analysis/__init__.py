"""Advisory analyses built on extracted component metrics."""

from .refactor_radar import (
    RefactorScore,
    RefactorSeverity,
    RefactorSignal,
    rank_components,
    score_component_for_refactor,
)

__all__ = [
    "RefactorScore",
    "RefactorSeverity",
    "RefactorSignal",
    "rank_components",
    "score_component_for_refactor",
]
