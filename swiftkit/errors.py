"""Exception hierarchy for sidecar operations.

Every error carries a stable ``code`` string the host application can branch on.
Errors that describe a filesystem condition also subclass the matching built-in,
so ``except FileExistsError`` and friends keep working for generic callers.
"""

from pathlib import Path
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from swiftkit.models.rename import BatchResult


class SidecarError(Exception):
    """Base class for all sidecar errors."""

    code = "SidecarError"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InvalidDirectoryError(SidecarError, NotADirectoryError):
    """The path does not exist or is not a directory."""

    code = "NotADirectory"

    def __init__(self, path: Path | str, reason: str = "") -> None:
        self.path = Path(path)
        message = f"Failed to access folder: {self.path}."
        if reason:
            message = f"{message} {reason}"
        super().__init__(message)


class PathNotFoundError(SidecarError, FileNotFoundError):
    code = "NotFound"

    def __init__(self, path: Path | str, what: str = "file") -> None:
        self.path = Path(path)
        super().__init__(f"The {what} does not exist: {self.path}")


class PathEscapeError(SidecarError, ValueError):
    """A computed path falls outside its base directory."""

    code = "PathEscape"

    def __init__(self, base: Path | str, candidate: Path | str) -> None:
        self.base = Path(base)
        self.candidate = Path(candidate)
        super().__init__(f"Security Error: Attempt to escape target directory blocked: {self.candidate}")


class DuplicateTargetError(SidecarError, ValueError):
    code = "DuplicateTarget"

    def __init__(self, duplicates: list[Path]) -> None:
        self.duplicates = duplicates
        names = ", ".join(str(p) for p in duplicates)
        super().__init__(f"Renaming would result in duplicates therefore process has been stopped: {names}")


class TargetExistsError(SidecarError, FileExistsError):
    code = "TargetExists"

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"Target file already exists. Rename aborted. {self.path}")


class InvalidImageError(SidecarError, ValueError):
    code = "InvalidImage"

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"Provided file is not a valid image: {self.path}")


class UnsupportedConversionError(SidecarError, ValueError):
    code = "UnsupportedConversion"

    def __init__(self, target_format: str, source_extension: str = "") -> None:
        self.target_format = target_format
        self.source_extension = source_extension
        message = f"Intended format {target_format} is not supported"
        if source_extension:
            message = f"{message} for .{source_extension} input"
        super().__init__(f"{message}.")


class RenameIOError(SidecarError, OSError):
    """A single rename failed at the filesystem level during execution."""

    code = "RenameIOError"

    def __init__(self, source: Path, target: Path, cause: BaseException) -> None:
        self.source = source
        self.target = target
        self.cause = cause
        super().__init__(f"Error renaming {source} to {target}: {cause}")


class BatchRenameError(SidecarError):
    """One or more operations of an executed plan failed; the rest were not rolled back."""

    code = "BatchRenameError"

    def __init__(self, result: "BatchResult") -> None:
        self.result = result
        super().__init__(result.summary())

    @property
    def errors(self) -> list[RenameIOError]:
        return [outcome.error for outcome in self.result.failed if outcome.error is not None]
