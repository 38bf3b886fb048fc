"""Unit tests for built-in demo texts."""

from __future__ import annotations

import pytest

from texthumanizer.text.engine import humanize
from texthumanizer.text.samples import SAMPLE_TEXTS, get_sample


@pytest.mark.parametrize("name", sorted(SAMPLE_TEXTS))
def test_samples_contain_artifacts_the_engine_normalizes(name: str) -> None:
    """Every demo text should trigger at least one default rule."""

    result = humanize(get_sample(name))

    assert result.count > 0
    assert "\u201c" not in result.text
    assert "\u2026" not in result.text


def test_get_sample_rejects_unknown_names() -> None:
    """Unknown sample names should list the available ones."""

    with pytest.raises(KeyError, match="available: ai-generated, with-markers"):
        get_sample("missing")
