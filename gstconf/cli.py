#!/usr/bin/env python3
"""gstconf CLI - Command-line interface for gstconf."""

import click

from gstconf.utils.env import get_env
from gstconf.utils.logger import Logger


@click.group()
def gstconf():
    """Read and check GPU stress test action configurations."""
    if not Logger.is_configured():
        Logger.configure(
            level=get_env("GSTCONF_LOG_LEVEL", default="WARNING"), timestamps=True
        )


@gstconf.command()
@click.argument("config", type=click.Path(dir_okay=False))
@click.option(
    "--output",
    "-o",
    default=None,
    help="Output file - format auto-detected from the suffix (.json or text)",
)
@click.option(
    "--format",
    "-f",
    "fmt",
    type=click.Choice(["json", "text"], case_sensitive=False),
    default=None,
    help="Output format (default: text, or json for .json output files)",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Fail on malformed numbers and booleans instead of defaulting them",
)
@click.option(
    "--trace",
    is_flag=True,
    help="Log every (state, event) transition (same as GSTCONF_DEBUG=1)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Verbose output",
)
def parse(config, output, fmt, strict, trace, verbose):
    r"""Parse an action configuration and print the actions.

    \b
    Examples:
      gstconf parse gst_single.conf
      gstconf parse gst_single.conf -f json
      gstconf parse gst_single.conf -o actions.json
      gstconf parse gst_single.conf --strict
    """
    from gstconf.commands.parse_cmd import run_parse

    if verbose:
        Logger.set_level("DEBUG")

    run_parse(config, output=output, fmt=fmt, strict=strict, trace=trace)


@gstconf.command()
@click.argument("config", type=click.Path(dir_okay=False))
@click.option(
    "--strict",
    is_flag=True,
    help="Fail on malformed numbers and booleans instead of defaulting them",
)
def validate(config, strict):
    """Check that an action configuration parses."""
    from gstconf.commands.parse_cmd import run_validate

    run_validate(config, strict=strict)


@gstconf.command()
@click.option("--verbose", "-v", is_flag=True, help="Show detailed version information")
def version(verbose):
    """Display gstconf version information."""
    from gstconf.commands.version_cmd import run_version

    run_version(verbose=verbose)


if __name__ == "__main__":
    gstconf()
