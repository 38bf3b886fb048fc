"""Deterministic substitution rules for typographic artifacts.

Responsibilities:
- Define the ordered rule catalog applied by the transformation engine.
- Keep each rule's matcher, replacement, and gating flag in one auditable table.

Rule order is significant: later rules operate on the output of earlier ones.
"""

from __future__ import annotations

from dataclasses import dataclass

import regex

# Soft hyphen, Mongolian vowel separator, zero-width space/non-joiner/joiner,
# LRM/RLM, bidi embeddings/overrides, word joiner, bidi isolates, BOM.
IGNORABLE_SYMBOLS: tuple[str, ...] = (
    "\u00ad",
    "\u180e",
    "\u200b",
    "\u200c",
    "\u200d",
    "\u200e",
    "\u200f",
    "\u202a",
    "\u202b",
    "\u202c",
    "\u202d",
    "\u202e",
    "\u2060",
    "\u2066",
    "\u2067",
    "\u2068",
    "\u2069",
    "\ufeff",
)

NON_BREAKING_SPACE = "\u00a0"
DASH_SYMBOLS: tuple[str, ...] = ("\u2014", "\u2015", "\u2013")
DOUBLE_QUOTE_SYMBOLS: tuple[str, ...] = ("\u201c", "\u201d", "\u00ab", "\u00bb", "\u201e")
SINGLE_QUOTE_SYMBOLS: tuple[str, ...] = ("\u2018", "\u2019", "\u02bc")
ELLIPSIS = "\u2026"

# Line terminators honored by the trailing-whitespace anchor.
_LINE_END = r"(?=[\n\r\u2028\u2029]|\Z)"

_KEYBOARD_ONLY_PATTERN = r"[^\x20-\x7E\n\r\t\p{L}\p{N}\p{Emoji}\u00a0-\u00ff]"


def _char_class(*symbols: str) -> regex.Pattern[str]:
    """Compile a character class matching any of the given code points."""

    return regex.compile("[" + "".join(regex.escape(symbol) for symbol in symbols) + "]")


@dataclass(frozen=True, slots=True)
class SubstitutionRule:
    """One catalog entry: replace every match of `pattern` when `flag` is enabled.

    Attributes:
        flag: Wire name of the option gating this rule.
        pattern: Compiled matcher over Unicode code points.
        replacement: Literal replacement text, possibly empty.
        description: Short human-readable summary for listings.
    """

    flag: str
    pattern: regex.Pattern[str]
    replacement: str
    description: str

    def apply(self, text: str) -> tuple[str, int]:
        """Replace all non-overlapping matches and return text with match count."""

        replacement = self.replacement
        # Callable replacement keeps the text literal (no template expansion).
        return self.pattern.subn(lambda _match: replacement, text)


DEFAULT_RULES: tuple[SubstitutionRule, ...] = (
    SubstitutionRule(
        flag="transformHidden",
        pattern=_char_class(*IGNORABLE_SYMBOLS),
        replacement="",
        description="Remove invisible formatting, bidi control, and BOM characters.",
    ),
    SubstitutionRule(
        flag="transformTrailingWhitespace",
        pattern=regex.compile(r"[ \t\x0B\f]+" + _LINE_END),
        replacement="",
        description="Remove space, tab, vertical-tab, and form-feed runs at line ends.",
    ),
    SubstitutionRule(
        flag="transformNbs",
        pattern=_char_class(NON_BREAKING_SPACE),
        replacement=" ",
        description="Replace non-breaking spaces with regular spaces.",
    ),
    SubstitutionRule(
        flag="transformDashes",
        pattern=_char_class(*DASH_SYMBOLS),
        replacement="-",
        description="Replace em dashes, en dashes, and horizontal bars with `-`.",
    ),
    SubstitutionRule(
        flag="transformQuotes",
        pattern=_char_class(*DOUBLE_QUOTE_SYMBOLS),
        replacement='"',
        description='Replace curly double quotes and guillemets with `"`.',
    ),
    SubstitutionRule(
        flag="transformQuotes",
        pattern=_char_class(*SINGLE_QUOTE_SYMBOLS),
        replacement="'",
        description="Replace curly single quotes and modifier apostrophes with `'`.",
    ),
    SubstitutionRule(
        flag="transformOther",
        pattern=_char_class(ELLIPSIS),
        replacement="...",
        description="Replace the ellipsis glyph with three periods.",
    ),
    SubstitutionRule(
        flag="keyboardOnly",
        pattern=regex.compile(_KEYBOARD_ONLY_PATTERN),
        replacement="",
        description=(
            "Strip anything outside ASCII, letters, numbers, emoji, and Latin-1 supplement."
        ),
    ),
)
