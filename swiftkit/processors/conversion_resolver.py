"""Output path resolution for single-image format conversion.

The encoder itself lives in the host application; this module only decides
whether a conversion is allowed and where its output goes.
"""

import mimetypes
import os
from pathlib import Path

from loguru import logger

from swiftkit.config import SUPPORTED_TARGET_FORMATS, SVG_TARGET_FORMATS
from swiftkit.errors import (
    InvalidImageError,
    PathEscapeError,
    PathNotFoundError,
    TargetExistsError,
    UnsupportedConversionError,
)
from swiftkit.models.conversion import ConversionTarget
from swiftkit.processors.directory import resolve_directory
from swiftkit.processors.path_safety import exists_on_disk, is_contained, resolve_lexically


# Not registered by every platform's mime.types.
mimetypes.add_type("image/webp", ".webp")
mimetypes.add_type("image/avif", ".avif")


def is_image(path: Path) -> bool:
    """Check the MIME type guessed from the file name."""
    mime_type, _ = mimetypes.guess_type(path.name)
    return mime_type is not None and mime_type.startswith("image/")


def check_target_format(source: Path, to: str) -> None:
    """Raise UnsupportedConversionError unless ``source`` may be converted to ``to``."""
    if to not in SUPPORTED_TARGET_FORMATS:
        raise UnsupportedConversionError(to)

    extension = source.suffix.lower().lstrip(".")
    if extension == "svg" and to not in SVG_TARGET_FORMATS:
        raise UnsupportedConversionError(to, extension)


def resolve_conversion_target(
    img_path: Path | str,
    to: str,
    output_folder: Path | str | None = None,
) -> ConversionTarget:
    """Validate a conversion request and compute its output path.

    Args:
        img_path: Image to convert, absolute or relative.
        to: Target format, one of ``jpeg``, ``png``, ``webp``.
        output_folder: Destination directory. Blank means the image's own folder.

    Returns:
        The absolute input path and the output path to create.

    Raises:
        PathNotFoundError: If the image does not exist.
        InvalidImageError: If the file name does not map to an image type.
        UnsupportedConversionError: If ``to`` is unsupported for this input.
        InvalidDirectoryError: If ``output_folder`` is not a directory.
        TargetExistsError: If the output file already exists.
    """
    source = Path(os.path.abspath(img_path))
    if not exists_on_disk(source, follow_symlinks=True):
        raise PathNotFoundError(source, what="image file")

    if not is_image(source):
        raise InvalidImageError(source)

    check_target_format(source, to)

    if output_folder is None or not str(output_folder).strip():
        output_dir = resolve_directory(source.parent)
    else:
        output_dir = resolve_directory(output_folder)

    output_path = resolve_lexically(output_dir, f"{source.stem}.{to}")
    if not is_contained(output_dir, output_path):
        raise PathEscapeError(output_dir, output_path)

    if exists_on_disk(output_path):
        raise TargetExistsError(output_path)

    logger.debug("Resolved conversion {} -> {}", source, output_path)
    return ConversionTarget(img_path=source, output_path=output_path)
