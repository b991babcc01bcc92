"""Configuration package.

Usage:
    from component_archaeologist.config import get_settings

    settings = get_settings()
    settings.tree_max_depth
"""

from .settings import AnalyzerSettings, get_settings, reset_settings

__all__ = [
    "AnalyzerSettings",
    "get_settings",
    "reset_settings",
]
