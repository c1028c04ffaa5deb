"""Parse and validate commands - read a GST action configuration.

CLI Examples:
    gstconf parse gst_single.conf                 # Print actions as text
    gstconf parse gst_single.conf -f json         # Print actions as JSON
    gstconf parse gst_single.conf -o actions.json # Save to JSON
    gstconf parse gst_single.conf --strict        # Reject malformed numbers
    gstconf parse gst_single.conf --trace         # Log every transition
    gstconf validate gst_single.conf              # Check the file only
"""

import sys
from pathlib import Path

import click

from gstconf.models.action_models import ActionRecord
from gstconf.parser import ConfigParseError, ParserOptions, load_actions
from gstconf.report import ActionReport, OutputFormat
from gstconf.utils.logger import Logger


def get_output_format(output: str | None, fmt: str | None) -> OutputFormat:
    """Determine output format from an explicit format or the filename."""
    if fmt:
        return OutputFormat(fmt.lower())

    if output and Path(output).suffix.lower() == ".json":
        return OutputFormat.JSON

    return OutputFormat.TEXT


def _build_options(strict: bool, trace: bool) -> ParserOptions:
    """Environment options, with CLI flags switching features on."""
    options = ParserOptions.from_env()
    updates: dict[str, bool] = {}
    if strict:
        updates["strict"] = True
    if trace:
        updates["trace"] = True
    return options.model_copy(update=updates) if updates else options


def _load(config: str, options: ParserOptions) -> list[ActionRecord]:
    """Load actions, turning parse failures into CLI errors.

    Raises:
        click.ClickException: If the file is missing or invalid.
    """
    try:
        return load_actions(config, options)
    except FileNotFoundError as e:
        raise click.ClickException(str(e)) from e
    except ConfigParseError as e:
        raise click.ClickException(f"Failed to parse {config}: {e}") from e


def run_parse(
    config: str,
    output: str | None = None,
    fmt: str | None = None,
    strict: bool = False,
    trace: bool = False,
) -> None:
    """Parse ``config`` and emit the actions to stdout or a file."""
    options = _build_options(strict, trace)
    if options.trace:
        Logger.set_level("DEBUG")

    log = Logger.get("commands.parse")
    log.info(f"Parsing {config} (strict={options.strict})")

    actions = _load(config, options)
    report = ActionReport(actions, source=config)
    output_format = get_output_format(output, fmt)

    if output:
        report.emit(output, output_format)
        click.echo(f"Wrote {len(report)} action(s) to {output}")
    else:
        report.emit(sys.stdout, output_format)


def run_validate(config: str, strict: bool = False) -> None:
    """Parse ``config`` and report only whether it is valid."""
    options = _build_options(strict, trace=False)
    if options.trace:
        Logger.set_level("DEBUG")

    actions = _load(config, options)
    click.echo(f"OK: {config} defines {len(actions)} action(s)")
