"""
Command-line interface for validating, pretty-printing and minifying XML.
"""

import json
import sys
from pathlib import Path
from typing import Optional

import click

from xml_formatter.core.config import ConfigurationError, Settings, load_settings
from xml_formatter.core.logging import configure_logging
from xml_formatter.files import DownloadArtifact, XMLFileError, input_artifact, output_artifact, read_xml_file
from xml_formatter.formatting.service import XMLFormattingService
from xml_formatter.formatting.types import FormatResult
from xml_formatter.samples import load_sample

source_argument = click.argument(
    "source",
    required=False,
    default="-",
    type=click.Path(dir_okay=False, allow_dash=True, path_type=str),
)
output_option = click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    help="Write the result to this file, or into this directory under the configured name",
)
json_option = click.option("--json", "as_json", is_flag=True, help="Print the full result as JSON")


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML settings file",
)
@click.pass_context
def cli(ctx, verbose, config_path):
    """Validate, pretty-print and minify XML documents."""
    try:
        settings = load_settings(config_path)
    except ConfigurationError as e:
        raise click.ClickException(str(e))

    if verbose:
        settings = settings.model_copy(update={"log_level": "INFO"})

    configure_logging(settings)
    ctx.obj = settings


@cli.command("format")
@source_argument
@click.option("--indent", "-i", type=click.IntRange(min=0), default=None,
              help="Spaces per nesting level (default from settings)")
@output_option
@json_option
@click.pass_obj
def format_command(settings: Settings, source, indent, output, as_json):
    """Validate and pretty-print SOURCE (a file, or - for stdin)."""
    service = XMLFormattingService(settings.formatting_options())
    result = service.format(_read_source(source), indent)
    _emit(result, output, as_json, settings)


@cli.command("minify")
@source_argument
@output_option
@json_option
@click.pass_obj
def minify_command(settings: Settings, source, output, as_json):
    """Validate and minify SOURCE (a file, or - for stdin)."""
    service = XMLFormattingService(settings.formatting_options())
    result = service.minify(_read_source(source))
    _emit(result, output, as_json, settings)


@cli.command("sample")
@output_option
@click.pass_obj
def sample_command(settings: Settings, output):
    """Print the sample bookstore document, or save it with --output."""
    if output is None:
        click.echo(load_sample())
        return

    artifact = input_artifact(load_sample(), settings)
    _save(artifact, output)


def _read_source(source: str) -> str:
    if source == "-":
        return click.get_text_stream("stdin").read()

    try:
        return read_xml_file(source)
    except XMLFileError as e:
        raise click.ClickException(str(e))


def _save(artifact: DownloadArtifact, output: Path) -> Path:
    if not output.is_dir():
        artifact = DownloadArtifact(output.name, artifact.content, artifact.media_type)
        output = output.parent

    try:
        path = artifact.save(output)
    except XMLFileError as e:
        raise click.ClickException(str(e))

    click.echo(f"✅ Saved {path}", err=True)
    return path


def _emit(result: FormatResult, output: Optional[Path], as_json: bool, settings: Settings) -> None:
    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
    elif not result.is_valid:
        click.echo(f"❌ Invalid XML: {result.error}", err=True)
    elif output is not None:
        _save(output_artifact(result.formatted, settings), output)
    else:
        click.echo(result.formatted)

    if not result.is_valid:
        sys.exit(1)


if __name__ == "__main__":
    cli()
