"""Core datatypes shared across Text Humanizer modules.

Responsibilities:
- Represent the option record that toggles each rule category.
- Represent the immutable result returned by the transformation engine.

Key types:
- `HumanizeOptions` and `HumanizeResult`.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Mapping

# Wire (camelCase) option names mapped to dataclass field names, in rule order.
OPTION_FIELDS: dict[str, str] = {
    "transformHidden": "transform_hidden",
    "transformTrailingWhitespace": "transform_trailing_whitespace",
    "transformNbs": "transform_nbs",
    "transformDashes": "transform_dashes",
    "transformQuotes": "transform_quotes",
    "transformOther": "transform_other",
    "keyboardOnly": "keyboard_only",
}


def resolve_option_field(key: str) -> str | None:
    """Return the dataclass field name for a wire or field spelling, else `None`."""

    if key in OPTION_FIELDS:
        return OPTION_FIELDS[key]
    if key in OPTION_FIELDS.values():
        return key
    return None


@dataclass(frozen=True, slots=True)
class HumanizeOptions:
    """Boolean toggles for each substitution rule category.

    Attributes:
        transform_hidden: Remove invisible formatting and bidi control characters.
        transform_trailing_whitespace: Remove whitespace runs at line ends.
        transform_nbs: Replace non-breaking spaces with regular spaces.
        transform_dashes: Replace em/en dashes and horizontal bars with `-`.
        transform_quotes: Replace curly quotes and guillemets with ASCII quotes.
        transform_other: Replace the ellipsis glyph with three periods.
        keyboard_only: Strip every code point outside the keyboard whitelist.
    """

    transform_hidden: bool = True
    transform_trailing_whitespace: bool = True
    transform_nbs: bool = True
    transform_dashes: bool = True
    transform_quotes: bool = True
    transform_other: bool = True
    keyboard_only: bool = False

    @classmethod
    def from_mapping(
        cls,
        overrides: Mapping[str, object] | None = None,
        base: HumanizeOptions | None = None,
    ) -> HumanizeOptions:
        """Merge a partial option mapping over `base` (or defaults).

        Keys may use either the wire spelling (`transformHidden`) or the field
        spelling (`transform_hidden`). Unknown keys are ignored and values are
        interpreted by truthiness.
        """

        resolved_base = base if base is not None else cls()
        if not overrides:
            return resolved_base

        changes: dict[str, bool] = {}
        for key, value in overrides.items():
            field_name = resolve_option_field(str(key))
            if field_name is None:
                continue
            changes[field_name] = bool(value)
        return replace(resolved_base, **changes)

    def is_enabled(self, flag: str) -> bool:
        """Return whether the rule category named by `flag` is enabled."""

        field_name = resolve_option_field(flag)
        if field_name is None:
            raise KeyError(f"Unknown option flag `{flag}`.")
        return bool(getattr(self, field_name))

    def as_mapping(self) -> dict[str, bool]:
        """Return options keyed by wire names."""

        return {
            wire_name: bool(getattr(self, field_name))
            for wire_name, field_name in OPTION_FIELDS.items()
        }

    @classmethod
    def all_disabled(cls) -> HumanizeOptions:
        """Return options with every rule category turned off."""

        return cls(**{field.name: False for field in fields(cls)})


@dataclass(frozen=True, slots=True)
class HumanizeResult:
    """Output of one engine invocation.

    Attributes:
        text: Fully transformed text.
        count: Total matched occurrences replaced across all applied rules.
    """

    text: str
    count: int

    @property
    def changed(self) -> bool:
        """Return whether any rule replaced at least one match."""

        return self.count > 0

    def as_dict(self) -> dict[str, object]:
        """Return the result as a plain `{text, count}` mapping."""

        return {"text": self.text, "count": self.count}
