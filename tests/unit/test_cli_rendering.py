"""Unit tests for CLI output and error rendering helpers."""

from __future__ import annotations

import pytest
import typer

from texthumanizer.cli_rendering import (
    describe_changes,
    echo_result_summary,
    echo_rule_catalog,
    exit_with_command_error,
)
from texthumanizer.errors import CommandStageError
from texthumanizer.models.datatypes import HumanizeResult
from texthumanizer.text.rules import DEFAULT_RULES


def test_exit_with_command_error_renders_stage_error_with_hint(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print stage diagnostics and hint before exiting with code 1."""

    error = CommandStageError(
        stage="input",
        detail="Input file not found: `missing.txt`.",
        hint="Pass an existing text file or `-` to read stdin.",
    )

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("humanize", error)

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "humanize failed at stage `input`" in captured.err
    assert "Hint: Pass an existing text file or `-` to read stdin." in captured.err


def test_exit_with_command_error_renders_non_stage_fallback(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print fallback exception text for non-stage failures."""

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("humanize", RuntimeError("unexpected failure"))

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "humanize failed: unexpected failure" in captured.err


def test_describe_changes_labels() -> None:
    """Change indicator should distinguish changed and unchanged results."""

    assert describe_changes(3) == "3 changes made"
    assert describe_changes(0) == "No changes needed"


def test_echo_result_summary_writes_counts_to_stderr(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Summary should report character counts and changes on stderr only."""

    echo_result_summary("a\u2026", HumanizeResult(text="a...", count=1))

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Input characters: 2" in captured.err
    assert "Output characters: 4" in captured.err
    assert "Changes: 1 changes made" in captured.err


def test_echo_rule_catalog_lists_rules_in_order(capsys: pytest.CaptureFixture[str]) -> None:
    """Catalog listing should number rules and show their gating flags."""

    echo_rule_catalog(DEFAULT_RULES)

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == len(DEFAULT_RULES)
    assert lines[0].startswith("1. [transformHidden]")
    assert lines[-1].startswith("8. [keyboardOnly]")
