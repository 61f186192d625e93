"""Path safety primitives shared by every mutating command.

All functions here are lexical except :func:`exists_on_disk`, which is the only
one that touches the filesystem.
"""

import os
import re
from pathlib import Path

from swiftkit.config import MAX_FILENAME_BYTES


_ILLEGAL_RE = re.compile(r'[/?<>\\:*|"]')
_CONTROL_RE = re.compile(r"[\x00-\x1f\x80-\x9f]")
_RESERVED_RE = re.compile(r"^\.+$")
_WINDOWS_RESERVED_RE = re.compile(r"^(con|prn|aux|nul|com[0-9]|lpt[0-9])(\..*)?$", re.IGNORECASE)
_WINDOWS_TRAILING_RE = re.compile(r"[. ]+$")


def _truncate_utf8(name: str, max_bytes: int) -> str:
    # Names read from disk may carry undecodable bytes as lone surrogates.
    encoded = name.encode("utf-8", errors="surrogateescape")
    if len(encoded) <= max_bytes:
        return name

    cut = max_bytes
    while cut > 0 and encoded[cut] & 0xC0 == 0x80:
        cut -= 1
    return encoded[:cut].decode("utf-8", errors="surrogateescape")


def sanitize_name(name: str, replacement: str = "") -> str:
    """Strip characters that are illegal or dangerous in a single path segment.

    Removes path separators and reserved punctuation, control characters,
    dot-only names (``.``/``..``), Windows device names and trailing dots or
    spaces. The result may be empty when nothing safe is left.

    Args:
        name: Candidate filename.
        replacement: String substituted for each removed piece.

    Returns:
        A name safe to join onto a directory as one segment.
    """
    sanitized = _ILLEGAL_RE.sub(replacement, name)
    sanitized = _CONTROL_RE.sub(replacement, sanitized)
    sanitized = _RESERVED_RE.sub(replacement, sanitized)
    sanitized = _WINDOWS_RESERVED_RE.sub(replacement, sanitized)
    sanitized = _WINDOWS_TRAILING_RE.sub(replacement, sanitized)
    return _truncate_utf8(sanitized, MAX_FILENAME_BYTES)


def resolve_lexically(base: Path | str, candidate: Path | str) -> Path:
    """Join ``candidate`` onto ``base`` and normalize ``.``/``..`` without following symlinks."""
    return Path(os.path.abspath(os.path.join(base, candidate)))


def is_contained(base: Path | str, candidate: Path | str) -> bool:
    """Check that ``candidate`` resolves to ``base`` or somewhere below it.

    Comparison is per path component, so ``/data2`` is not inside ``/data``.
    """
    base_path = Path(os.path.abspath(base))
    return resolve_lexically(base_path, candidate).is_relative_to(base_path)


def exists_on_disk(path: Path | str, follow_symlinks: bool = False) -> bool:
    """Probe whether ``path`` names an existing entry.

    By default dangling symlinks count as existing. With ``follow_symlinks``
    a link only exists if its target does. Errors other than "not found"
    (permission denied, I/O errors) are raised instead of being read as absence.
    """
    try:
        os.stat(path, follow_symlinks=follow_symlinks)
    except FileNotFoundError:
        return False
    return True
