"""Command-line interface for Text Humanizer.

Responsibilities:
- Expose user-facing commands around the transformation engine.
- Convert CLI arguments into `HumanizerConfig` overrides and render results.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from datetime import date
import os
from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import (
    echo_result_summary,
    echo_rule_catalog,
    exit_with_command_error,
)
from .config import ConfigLoader, HumanizerConfig, RuntimeConfigSources
from .errors import CommandStageError
from .models.datatypes import HumanizeResult
from .telemetry.logger import RunLogger
from .text.engine import HumanizeEngine
from .text.rules import DEFAULT_RULES
from .text.samples import SAMPLE_TEXTS, get_sample

app = typer.Typer(
    name="texthumanizer",
    no_args_is_help=True,
    help="Normalize typographic artifacts into plain keyboard-typed text.",
)

_STDIN_MARKER = "-"


def default_save_path(today: date | None = None) -> Path:
    """Return the dated output filename used by `--save`."""

    resolved_today = today if today is not None else date.today()
    return Path(f"humanized-text-{resolved_today.isoformat()}.txt")


def _load_yaml_config(config_path: Path | None) -> HumanizerConfig:
    """Load a YAML config file when requested and map failures to stage errors."""

    if config_path is None:
        return HumanizerConfig()

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config keys/values and rerun.",
        ) from exc
    except OSError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify file permissions.",
        ) from exc


def _read_input_text(input_path: Path | None) -> str:
    """Read input text from a file or from stdin."""

    if input_path is None or str(input_path) == _STDIN_MARKER:
        return typer.get_text_stream("stdin").read()

    try:
        return input_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage="input",
            detail=f"Input file not found: `{input_path}`.",
            hint="Pass an existing text file or `-` to read stdin.",
        ) from exc
    except UnicodeDecodeError as exc:
        raise CommandStageError(
            stage="input",
            detail=f"Input file `{input_path}` is not valid UTF-8 text.",
            hint="Re-encode the file as UTF-8 and rerun.",
        ) from exc
    except OSError as exc:
        raise CommandStageError(
            stage="input",
            detail=f"Failed to read input file `{input_path}`: {exc}",
        ) from exc


def _write_output_text(output_path: Path, text: str) -> None:
    """Write transformed text to a file, mapping failures to stage errors."""

    try:
        output_path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise CommandStageError(
            stage="output",
            detail=f"Failed to write output file `{output_path}`: {exc}",
            hint="Verify the destination directory exists and is writable.",
        ) from exc


@app.command("humanize")
def humanize_command(
    input_path: Annotated[
        Path | None,
        typer.Argument(help="Path to a UTF-8 text file. Reads stdin when omitted or `-`."),
    ] = None,
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Write transformed text to this file instead of stdout."),
    ] = None,
    save: Annotated[
        bool,
        typer.Option(
            "--save",
            help="Write transformed text to `humanized-text-YYYY-MM-DD.txt` in the current directory.",
        ),
    ] = False,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file with option defaults."),
    ] = None,
    hidden: Annotated[
        bool | None,
        typer.Option("--hidden/--no-hidden", help="Remove invisible Unicode characters."),
    ] = None,
    trailing_whitespace: Annotated[
        bool | None,
        typer.Option(
            "--trailing-whitespace/--no-trailing-whitespace",
            help="Remove whitespace at line ends.",
        ),
    ] = None,
    nbs: Annotated[
        bool | None,
        typer.Option("--nbs/--no-nbs", help="Replace non-breaking spaces."),
    ] = None,
    dashes: Annotated[
        bool | None,
        typer.Option("--dashes/--no-dashes", help="Replace em/en dashes with `-`."),
    ] = None,
    quotes: Annotated[
        bool | None,
        typer.Option("--quotes/--no-quotes", help="Replace curly quotes with ASCII quotes."),
    ] = None,
    other: Annotated[
        bool | None,
        typer.Option("--other/--no-other", help="Replace the ellipsis glyph with `...`."),
    ] = None,
    keyboard_only: Annotated[
        bool | None,
        typer.Option(
            "--keyboard-only/--no-keyboard-only",
            help="Strip every character that cannot be typed on a keyboard.",
        ),
    ] = None,
    strip: Annotated[
        bool | None,
        typer.Option(
            "--strip/--no-strip",
            help="Trim leading and trailing whitespace before processing.",
        ),
    ] = None,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress summary and log lines on stderr."),
    ] = False,
) -> None:
    """Normalize typographic artifacts in a text file or stdin."""

    run_logger = RunLogger(enabled=not quiet)
    stage = "config"
    try:
        if out is not None and save:
            raise CommandStageError(
                stage="output",
                detail="`--out` and `--save` cannot be used together.",
                hint="Choose one output destination per command invocation.",
            )
        cli_values = {
            "transform_hidden": hidden,
            "transform_trailing_whitespace": trailing_whitespace,
            "transform_nbs": nbs,
            "transform_dashes": dashes,
            "transform_quotes": quotes,
            "transform_other": other,
            "keyboard_only": keyboard_only,
            "strip_input": strip,
        }
        sources = RuntimeConfigSources(
            cli={key: value for key, value in cli_values.items() if value is not None},
            env=os.environ,
        )
        config = _load_yaml_config(config_file)
        options = config.resolved_options(sources)
        strip_input = config.resolved_strip_input(sources)

        stage = "input"
        run_logger.log_stage_start(stage)
        raw_text = _read_input_text(input_path)
        input_text = raw_text.strip() if strip_input else raw_text
        if not input_text:
            raise CommandStageError(
                stage="input",
                detail="Please enter some text to humanize.",
                hint="Pass a non-empty text file or pipe text on stdin.",
            )
        run_logger.log_stage_complete(stage, chars=len(input_text))

        stage = "humanize"
        run_logger.log_stage_start(stage)
        result: HumanizeResult = HumanizeEngine().humanize(input_text, options)
        run_logger.log_stage_complete(stage, count=result.count)

        stage = "output"
        destination = default_save_path() if save else out
        if destination is not None:
            _write_output_text(destination, result.text)
    except Exception as exc:
        failed_stage = exc.stage if isinstance(exc, CommandStageError) else stage
        run_logger.log_stage_failure(failed_stage, type(exc).__name__)
        exit_with_command_error("humanize", exc)

    if destination is None:
        typer.echo(result.text, nl=False)
    if not quiet:
        if destination is not None:
            typer.echo(f"Output: {destination}", err=True)
        echo_result_summary(input_text, result)


@app.command("rules")
def rules_command() -> None:
    """List substitution rules in evaluation order."""

    echo_rule_catalog(DEFAULT_RULES)


@app.command("sample")
def sample_command(
    name: Annotated[
        str,
        typer.Argument(help=f"Sample name: {', '.join(sorted(SAMPLE_TEXTS))}."),
    ],
) -> None:
    """Print a built-in demo text containing typical artifacts."""

    try:
        text = get_sample(name)
    except KeyError as exc:
        exit_with_command_error(
            "sample",
            CommandStageError(
                stage="sample",
                detail=str(exc.args[0]),
                hint="Use `texthumanizer sample --help` to list sample names.",
            ),
        )

    typer.echo(text)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
