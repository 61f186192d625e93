"""Directory listing data models."""

import os
import stat
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


@dataclass(frozen=True)
class FileEntry:
    """A direct child of a listed directory."""

    name: str
    directory: Path

    @property
    def path(self) -> Path:
        return self.directory / self.name


def _timestamp(value: float) -> datetime:
    return datetime.fromtimestamp(value, tz=timezone.utc)


def to_utf8_text(value: str) -> str:
    """Replace undecodable filesystem bytes with U+FFFD so the text can be emitted as JSON."""
    return value.encode("utf-8", errors="surrogateescape").decode("utf-8", errors="replace")


class FileMetadata(BaseModel):
    """Descriptive metadata for a single directory entry.

    Serializes with the camelCase keys the host application expects.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    filename: str = Field(description="Entry name (without directory path)")
    size: int = Field(description="Size in bytes", ge=0)
    is_directory: bool = Field(alias="isDirectory")
    is_file: bool = Field(alias="isFile")
    birthtime: datetime = Field(description="Creation time, or inode change time where unavailable")
    mtime: datetime = Field(description="Last modification time")
    atime: datetime = Field(description="Last access time")

    @field_validator("filename", mode="before")
    @classmethod
    def _decode_filename(cls, value):
        if isinstance(value, str):
            return to_utf8_text(value)
        return value

    @classmethod
    def from_stat(cls, name: str, st: os.stat_result) -> "FileMetadata":
        """Build metadata from an ``os.stat`` result."""
        birth = getattr(st, "st_birthtime", None)
        if birth is None:
            birth = st.st_ctime

        return cls(
            filename=name,
            size=st.st_size,
            is_directory=stat.S_ISDIR(st.st_mode),
            is_file=stat.S_ISREG(st.st_mode),
            birthtime=_timestamp(birth),
            mtime=_timestamp(st.st_mtime),
            atime=_timestamp(st.st_atime),
        )
