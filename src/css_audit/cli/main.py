"""css-audit CLI entry point."""

from __future__ import annotations

import logging
import sys

import click

from css_audit import __version__
from css_audit.audit import audit_paths
from css_audit.cli.log import configure_logging
from css_audit.config import AuditConfig
from css_audit.errors import ParseError, StylesheetReadError
from css_audit.model.diagnostic import Diagnostic
from css_audit.render import OutputFormat, render

logger = logging.getLogger(__name__)

EPILOG = """\b
Formats:
  terminal  Output to the terminal (default)
  html      Output an HTML document
  json      Output a JSON document
  none      Do not output anything (useful for testing)

\b
Examples:
  css-audit --format=html styles.css
  css-audit --format=json styles.css
  css-audit styles.css
"""


def _echo_warning(diagnostic: Diagnostic) -> None:
    click.echo(str(diagnostic), err=True)


@click.command(epilog=EPILOG, context_settings={"ignore_unknown_options": True})
@click.version_option(version=__version__, prog_name="css-audit")
@click.argument("stylesheets", nargs=-1, type=click.Path(dir_okay=False))
@click.option(
    "--format",
    "output_format",
    default="terminal",
    metavar="FORMAT",
    help="Output format: terminal, html, json, or none.",
)
@click.option(
    "--recursive/--shallow",
    default=False,
    help="Descend into grouping rules nested inside other grouping rules.",
)
@click.option(
    "-o",
    "--output",
    type=click.File("w", encoding="utf-8"),
    default="-",
    help="Write the report to a file instead of stdout.",
)
@click.option(
    "--include-custom-properties",
    is_flag=True,
    help="Also count var() references inside custom property definitions.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log progress to stderr.")
def cli(
    stylesheets: tuple[str, ...],
    output_format: str,
    recursive: bool,
    include_custom_properties: bool,
    output,
    verbose: bool,
) -> None:
    """Parses one or more CSS stylesheets and outputs a list of custom
    properties and the selectors that use them.
    """
    configure_logging(verbose)

    paths = []
    for arg in stylesheets:
        if arg.startswith("-") and arg != "-":
            logger.debug("Ignoring unknown option %s", arg)
            continue
        paths.append(arg)

    if not paths:
        click.echo("No stylesheets provided", err=True)
        click.echo("Try 'css-audit --help' for help.", err=True)
        sys.exit(1)

    fmt = OutputFormat.parse(output_format)
    config = AuditConfig(
        output_format=fmt.value,
        recursive=recursive,
        custom_properties=include_custom_properties,
    )

    try:
        index = audit_paths(paths, config, on_warning=_echo_warning)
    except StylesheetReadError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    text = render(
        index,
        OutputFormat(config.output_format),
        color=True,
        anchor_prefix=config.anchor_prefix,
    )
    if text:
        click.echo(text, file=output, nl=False)
