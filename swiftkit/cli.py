"""CLI entrypoints.

The host application spawns this process with a command name and positional
arguments, reads the result from stdout and treats a non-zero exit status as
failure. Diagnostics and errors go to stderr.
"""

from pathlib import Path

import click
from pydantic import TypeAdapter, ValidationError
from rich.console import Console
from rich.markup import escape

from swiftkit.config import DEFAULT_LOG_LEVEL, ENV_PREFIX, LOG_LEVELS, EngineSettings
from swiftkit.errors import SidecarError
from swiftkit.logs import configure_logging
from swiftkit.models.files import FileMetadata
from swiftkit.models.rename import RenameMapping
from swiftkit.processors.conversion_resolver import resolve_conversion_target
from swiftkit.processors.directory import fetch_files as list_folder
from swiftkit.processors.rename_processor import RenameProcessor


console = Console(stderr=True)

_METADATA_LIST = TypeAdapter(list[FileMetadata])
_MAPPING_LIST = TypeAdapter(list[RenameMapping])


class RenameMappingParamType(click.ParamType):
    """JSON array of ``{"old": ..., "new": ...}`` records."""

    name = "mapping"

    def convert(self, value, param, ctx) -> list[RenameMapping]:
        if isinstance(value, list):
            return value
        try:
            return _MAPPING_LIST.validate_json(value)
        except ValidationError as e:
            self.fail(f"invalid rename mapping: {e.errors(include_url=False)}", param, ctx)


RENAME_MAPPING = RenameMappingParamType()


def _fail(error: Exception) -> None:
    """Report an engine or filesystem error on stderr and exit with status 1."""
    console.print(f"[bold red]Error:[/bold red] {escape(str(error))}", soft_wrap=True)
    raise SystemExit(1) from error


def _write_result(payload: str) -> None:
    click.echo(payload, nl=False)


@click.group(context_settings=dict(show_default=True))
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=DEFAULT_LOG_LEVEL,
    help="Minimum level for stderr logging.",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Append debug logs to this file.",
)
@click.option(
    "--max-workers",
    type=click.IntRange(min=1),
    default=None,
    help="Cap concurrent renames (default: one per operation).",
)
@click.option(
    "--recheck/--no-recheck",
    default=True,
    help="Re-check each rename target for existence right before renaming.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str, log_file: Path | None, max_workers: int | None, recheck: bool) -> None:
    """swiftkit sidecar - validated batch file operations for a host application."""
    settings = EngineSettings(
        max_workers=max_workers,
        recheck_before_rename=recheck,
        log_level=log_level,
        log_file=log_file,
    )
    configure_logging(settings)
    ctx.obj = settings


@cli.command("ping")
@click.argument("message", required=False, default="")
def ping(message: str) -> None:
    """Health check: answer with 'pong, MESSAGE'."""
    _write_result(f"pong, {message}")


@cli.command("fetch_files")
@click.argument("folder_path", type=str)
@click.argument("extension_filter", type=str, required=False, default="")
def fetch_files(folder_path: str, extension_filter: str) -> None:
    """List FOLDER_PATH's direct children with metadata as a JSON array."""
    try:
        files = list_folder(folder_path, extension_filter)
    except (SidecarError, OSError) as e:
        _fail(e)

    _write_result(_METADATA_LIST.dump_json(files, by_alias=True).decode())


@cli.command("bulk_rename")
@click.argument("folder_path", type=str)
@click.argument("search", type=str)
@click.argument("replace", type=str)
@click.argument("extension_filter", type=str, required=False, default="")
@click.pass_obj
def bulk_rename(settings: EngineSettings, folder_path: str, search: str, replace: str, extension_filter: str) -> None:
    """Replace the first SEARCH occurrence with REPLACE in every matching name.

    Examples:

        swiftkit-sidecar bulk_rename ./photos IMG_ holiday_ .jpg
    """
    processor = RenameProcessor(settings=settings)
    try:
        processor.bulk_rename(folder_path, search, replace, extension_filter)
    except (SidecarError, OSError) as e:
        _fail(e)

    _write_result("true")


@cli.command("rename_files")
@click.argument("folder_path", type=str)
@click.argument("mapping", type=RENAME_MAPPING)
@click.argument("extension_filter", type=str, required=False, default="")
@click.pass_obj
def rename_files(
    settings: EngineSettings,
    folder_path: str,
    mapping: list[RenameMapping],
    extension_filter: str,
) -> None:
    """Rename entries of FOLDER_PATH from a JSON MAPPING of old/new records.

    Examples:

        swiftkit-sidecar rename_files ./docs '[{"old": "a.txt", "new": "b.txt"}]'
    """
    processor = RenameProcessor(settings=settings)
    try:
        processor.rename_files(folder_path, mapping, extension_filter)
    except (SidecarError, OSError) as e:
        _fail(e)

    _write_result("true")


@cli.command("image_convert_resolve")
@click.argument("img_path", type=str)
@click.argument("target_format", type=str)
@click.argument("output_folder", type=str, required=False, default="")
def image_convert_resolve(img_path: str, target_format: str, output_folder: str) -> None:
    """Validate an image conversion and print its input and output paths as JSON."""
    try:
        target = resolve_conversion_target(img_path, target_format, output_folder)
    except (SidecarError, OSError) as e:
        _fail(e)

    _write_result(target.model_dump_json())


cli.add_command(image_convert_resolve, name="img_convert")


def main() -> None:
    cli(auto_envvar_prefix=ENV_PREFIX)
