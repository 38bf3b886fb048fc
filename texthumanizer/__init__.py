"""Top-level package for Text Humanizer.

This package normalizes typographic artifacts common in AI-generated or
rich-text-origin content into plain keyboard-typed text. The main entry point
is `humanize`.
"""

from .errors import InvalidInputError
from .models.datatypes import HumanizeOptions, HumanizeResult
from .text.engine import HumanizeEngine, humanize
from .text.rules import DEFAULT_RULES, SubstitutionRule

__all__ = [
    "DEFAULT_RULES",
    "HumanizeEngine",
    "HumanizeOptions",
    "HumanizeResult",
    "InvalidInputError",
    "SubstitutionRule",
    "humanize",
    "__version__",
]

__version__ = "0.1.0"
