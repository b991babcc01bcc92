"""Component Archaeologist Command Line Interface.

Usage:
    compo map --project <path>
    compo analyze <ComponentName> --project <path>
    compo tree <ComponentName> --project <path>
    compo radar --project <path>

Or via python -m:
    python -m component_archaeologist.cli --help
"""

from .main import main

__all__ = ["main"]
