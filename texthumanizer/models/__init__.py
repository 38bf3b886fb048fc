"""Shared typed data models for Text Humanizer.

This package contains the option and result records exchanged between the
engine and its callers.
"""

from .datatypes import OPTION_FIELDS, HumanizeOptions, HumanizeResult

__all__ = [
    "OPTION_FIELDS",
    "HumanizeOptions",
    "HumanizeResult",
]
