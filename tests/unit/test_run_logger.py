"""Unit tests for deterministic phase logging."""

from __future__ import annotations

import io

from texthumanizer.telemetry.logger import RunLogger


def test_run_logger_emits_sorted_sanitized_context() -> None:
    """Log lines should carry stage, event, and sorted shell-safe context."""

    sink = io.StringIO()
    run_logger = RunLogger(sink=sink)

    run_logger.log_stage_start("input")
    run_logger.log_stage_complete("humanize", count=4, chars="12 chars")
    run_logger.log_stage_failure("output", "PermissionError")

    lines = sink.getvalue().splitlines()
    assert lines == [
        "[phase] level=INFO stage=input event=start",
        "[phase] level=INFO stage=humanize event=complete chars=12_chars count=4",
        "[phase] level=ERROR stage=output event=failure error_type=PermissionError",
    ]


def test_disabled_run_logger_writes_nothing() -> None:
    """A disabled logger should not touch its sink."""

    sink = io.StringIO()
    run_logger = RunLogger(sink=sink, enabled=False)

    run_logger.log_stage_start("input")

    assert sink.getvalue() == ""
