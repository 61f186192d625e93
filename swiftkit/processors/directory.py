"""Directory resolution, listing and metadata."""

import os
import stat
from pathlib import Path

from loguru import logger

from swiftkit.errors import InvalidDirectoryError, PathEscapeError
from swiftkit.models.files import FileEntry, FileMetadata
from swiftkit.processors.path_safety import is_contained, resolve_lexically


def resolve_directory(path: Path | str) -> Path:
    """Resolve a caller-supplied path to an absolute, existing directory.

    Args:
        path: Absolute or relative directory path.

    Returns:
        The absolute directory path.

    Raises:
        InvalidDirectoryError: If the path cannot be accessed or is not a directory.
    """
    absolute = Path(os.path.abspath(path))
    try:
        mode = absolute.stat().st_mode
    except OSError as e:
        raise InvalidDirectoryError(absolute, e.strerror or str(e)) from e

    if not stat.S_ISDIR(mode):
        raise InvalidDirectoryError(absolute, f"{absolute} is not a valid directory.")

    return absolute


def normalize_extension_filter(extension_filter: str | None) -> str | None:
    """Return the filter with a leading dot, or None when no filtering applies."""
    if not extension_filter:
        return None
    if extension_filter.startswith("."):
        return extension_filter
    return f".{extension_filter}"


def list_entries(directory: Path, extension_filter: str | None = None) -> list[FileEntry]:
    """List direct children of ``directory``, sorted by name.

    The extension filter is a case-sensitive literal suffix match.
    """
    suffix = normalize_extension_filter(extension_filter)
    entries = []
    for name in sorted(os.listdir(directory)):
        if suffix is not None and not name.endswith(suffix):
            continue
        entries.append(FileEntry(name=name, directory=directory))

    logger.debug("Listed {} entries in {} (filter={!r})", len(entries), directory, suffix)
    return entries


def describe(directory: Path, entry: FileEntry) -> FileMetadata:
    """Stat ``entry`` and return its metadata.

    Raises:
        PathEscapeError: If the entry path resolves outside ``directory``.
    """
    path = resolve_lexically(directory, entry.name)
    if not is_contained(directory, path):
        raise PathEscapeError(directory, path)

    return FileMetadata.from_stat(entry.name, path.stat())


def fetch_files(folder_path: Path | str, extension_filter: str | None = None) -> list[FileMetadata]:
    """List a folder's direct children with metadata."""
    directory = resolve_directory(folder_path)
    return [describe(directory, entry) for entry in list_entries(directory, extension_filter)]
