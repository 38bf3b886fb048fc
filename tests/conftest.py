"""Shared pytest fixtures for the full Text Humanizer test suite."""

from __future__ import annotations

import os

import pytest

from texthumanizer.models.datatypes import OPTION_FIELDS


@pytest.fixture(autouse=True)
def _clear_humanizer_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ambient `HUMANIZER_*` variables from leaking into option resolution."""

    for key in list(os.environ):
        if key.startswith("HUMANIZER_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def only_flag() -> object:
    """Return a factory for option mappings with exactly one flag enabled."""

    def _only(flag: str) -> dict[str, bool]:
        options = {name: False for name in OPTION_FIELDS}
        options[flag] = True
        return options

    return _only
