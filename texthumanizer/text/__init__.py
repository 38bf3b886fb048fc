"""Text transformation components.

This package provides the ordered substitution rule catalog and the engine
that applies it to complete in-memory strings.
"""

from .engine import HumanizeEngine, humanize, resolve_options
from .rules import DEFAULT_RULES, IGNORABLE_SYMBOLS, SubstitutionRule
from .samples import SAMPLE_TEXTS, get_sample

__all__ = [
    "DEFAULT_RULES",
    "HumanizeEngine",
    "IGNORABLE_SYMBOLS",
    "SAMPLE_TEXTS",
    "SubstitutionRule",
    "get_sample",
    "humanize",
    "resolve_options",
]
