"""Rule-based transformation engine.

Responsibilities:
- Apply the enabled substitution rules in catalog order.
- Report the total number of matched occurrences replaced.

Cost is O(enabled rules x text length): each enabled rule rewrites the whole
string. The engine holds no mutable state and performs no I/O, so one instance
may be shared freely across concurrent callers.
"""

from __future__ import annotations

from typing import Mapping

from ..errors import InvalidInputError
from ..models.datatypes import HumanizeOptions, HumanizeResult
from .rules import DEFAULT_RULES, SubstitutionRule


def resolve_options(
    options: HumanizeOptions | Mapping[str, object] | None,
) -> HumanizeOptions:
    """Merge caller options over defaults, caller values winning."""

    if options is None:
        return HumanizeOptions()
    if isinstance(options, HumanizeOptions):
        return options
    return HumanizeOptions.from_mapping(options)


class HumanizeEngine:
    """Apply an ordered rule catalog to complete in-memory strings."""

    def __init__(self, rules: tuple[SubstitutionRule, ...] | None = None) -> None:
        """Initialize with custom rules or the default catalog."""

        self.rules = tuple(rules) if rules is not None else DEFAULT_RULES

    def humanize(
        self,
        text: str,
        options: HumanizeOptions | Mapping[str, object] | None = None,
    ) -> HumanizeResult:
        """Rewrite `text` with every enabled rule and count replaced matches.

        Raises:
            InvalidInputError: If `text` is not a `str`.
        """

        if not isinstance(text, str):
            raise InvalidInputError(text)

        resolved = resolve_options(options)
        current = text
        count = 0
        for rule in self.rules:
            if not resolved.is_enabled(rule.flag):
                continue
            current, matches = rule.apply(current)
            count += matches
        return HumanizeResult(text=current, count=count)


_DEFAULT_ENGINE = HumanizeEngine()


def humanize(
    text: str,
    options: HumanizeOptions | Mapping[str, object] | None = None,
) -> HumanizeResult:
    """Normalize typographic artifacts in `text` using the default rule catalog."""

    return _DEFAULT_ENGINE.humanize(text, options)
