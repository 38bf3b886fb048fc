"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
run summaries, and rule catalog listings.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import CommandStageError
from .models.datatypes import HumanizeResult
from .text.rules import SubstitutionRule


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, CommandStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def describe_changes(count: int) -> str:
    """Return the change indicator label for a match count."""

    if count > 0:
        return f"{count} changes made"
    return "No changes needed"


def echo_result_summary(input_text: str, result: HumanizeResult) -> None:
    """Print character counts and the change indicator to stderr."""

    typer.echo(f"Input characters: {len(input_text)}", err=True)
    typer.echo(f"Output characters: {len(result.text)}", err=True)
    typer.echo(f"Changes: {describe_changes(result.count)}", err=True)


def echo_rule_catalog(rules: tuple[SubstitutionRule, ...]) -> None:
    """Print rules in evaluation order with their gating flag."""

    for index, rule in enumerate(rules, start=1):
        typer.echo(f"{index}. [{rule.flag}] {rule.description}")
