"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from apidoc_sync.api_navigation import project_schema_properties
from apidoc_sync.configuration import (
    DEFAULT_SETTINGS_FILENAME,
    ConfigurationError,
    EditorSettings,
    load_settings,
    write_placeholder_settings,
)
from apidoc_sync.document_codec import (
    DocumentFormat,
    DocumentSerializationError,
    serialize_document,
)
from apidoc_sync.reference_resolution import (
    is_internal_reference,
    resolve_reference,
    to_edit_path,
)
from apidoc_sync.synchronization import SyncController

_FORMAT_CHOICE = click.Choice([item.value for item in DocumentFormat], case_sensitive=False)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="apidoc-sync")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to the YAML editor settings file",
)
@click.option(
    "--verbose",
    is_flag=True,
    default=False,
    help="Log synchronization details to stderr.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """Keep API description text and its parsed tree in sync."""
    if verbose:
        _enable_verbose_logging()
    ctx.obj = config_path


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_SETTINGS_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML settings template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a settings file with default values and guidance comments."""
    try:
        resolved_output = write_placeholder_settings(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="sample")
@click.option(
    "--format",
    "format_name",
    required=False,
    type=_FORMAT_CHOICE,
    help="Syntax to write; defaults to editor.default_format",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional file to write instead of stdout",
)
@click.pass_obj
def sample(config_path: str | None, format_name: str | None, output_path: str | None) -> None:
    """Print the built-in sample API description."""
    settings = _load_settings(config_path)
    controller = SyncController(settings=settings)
    target = DocumentFormat(format_name.lower()) if format_name else settings.default_format
    if target is not controller.document_format and not controller.convert_to(target):
        raise CliError(f"Failed to write the sample as {target.value}.")
    _emit(controller.text, output_path)


@cli.command(name="convert")
@click.argument("input_path", type=click.Path(path_type=str))
@click.option(
    "--to",
    "format_name",
    required=True,
    type=_FORMAT_CHOICE,
    help="Target syntax",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional file to write instead of stdout",
)
@click.pass_obj
def convert(
    config_path: str | None, input_path: str, format_name: str, output_path: str | None
) -> None:
    """Re-serialize an API description as JSON or YAML."""
    controller = _load_controller(input_path, _load_settings(config_path))
    target = DocumentFormat(format_name.lower())
    if not controller.convert_to(target):
        raise CliError(f"{input_path}: document cannot be written as {target.value}.")
    _emit(controller.text, output_path)


@cli.command(name="resolve")
@click.argument("input_path", type=click.Path(path_type=str))
@click.argument("reference")
@click.pass_obj
def resolve(config_path: str | None, input_path: str, reference: str) -> None:
    """Print the node an internal reference such as '#/components/schemas/Pet' points at."""
    settings = _load_settings(config_path)
    controller = _load_controller(input_path, settings)
    resolution = resolve_reference(controller.document, reference)
    if not resolution.is_resolved:
        raise CliError(f"Reference {reference} is {resolution.status.value}.")
    try:
        text = serialize_document(
            resolution.node, controller.document_format, indent=settings.indent
        )
    except DocumentSerializationError as exc:
        raise CliError(str(exc)) from exc
    _emit(text, None)


@cli.command(name="properties")
@click.argument("input_path", type=click.Path(path_type=str))
@click.argument("schema_reference")
@click.pass_obj
def properties(config_path: str | None, input_path: str, schema_reference: str) -> None:
    """List the flattened properties of a schema with required and reference status."""
    if not is_internal_reference(schema_reference):
        raise CliError(f"Schema reference must start with '#/': {schema_reference}")
    controller = _load_controller(input_path, _load_settings(config_path))
    views = project_schema_properties(controller.document, to_edit_path(schema_reference))
    for view in views:
        marker = "required" if view.required else "optional"
        click.echo(f"{view.name}\t{marker}\t{view.status.value}")


def _load_settings(config_path: str | None) -> EditorSettings:
    if config_path is None:
        return EditorSettings()
    try:
        return load_settings(config_path)
    except (ConfigurationError, OSError) as exc:
        raise CliError(str(exc)) from exc


def _load_controller(input_path: str, settings: EditorSettings) -> SyncController:
    try:
        text = Path(input_path).read_text(encoding="utf-8")
    except OSError as exc:
        raise CliError(f"Failed to read {input_path}: {exc}") from exc
    controller = SyncController(text, settings=settings)
    if controller.parse_error is not None:
        raise CliError(f"{input_path}: {controller.parse_error}")
    return controller


def _emit(text: str, output_path: str | None) -> None:
    if output_path is None:
        click.echo(text, nl=not text.endswith("\n"))
        return
    destination = Path(output_path)
    try:
        destination.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(destination.resolve()))


def _enable_verbose_logging() -> None:
    package_logger = logging.getLogger("apidoc_sync")
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
