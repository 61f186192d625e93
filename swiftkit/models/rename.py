"""Rename operation data models."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from swiftkit.errors import RenameIOError


class RenameMapping(BaseModel):
    """A single caller-supplied old-name to new-name record."""

    old: str = Field(description="Current filename (without directory path)")
    new: str | None = Field(
        description="Desired filename (without directory path); empty or missing means skip",
        default=None,
    )

    def __str__(self) -> str:
        return f"RenameMapping('{self.old}' -> '{self.new}')"


class RenameOp(BaseModel):
    """A single file rename operation with absolute paths."""

    model_config = ConfigDict(frozen=True)

    source: Path = Field(description="Absolute path of the entry to rename")
    target: Path = Field(description="Absolute path the entry will be renamed to")

    def __str__(self) -> str:
        return f"RenameOp('{self.source}' -> '{self.target}')"


class RenamePlan(BaseModel):
    """Ordered rename operations for one invocation, rooted at a single directory."""

    directory: Path = Field(description="Absolute source directory every target must stay inside")
    operations: list[RenameOp] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.operations)

    @property
    def targets(self) -> list[Path]:
        return [op.target for op in self.operations]


class RenameOutcome(BaseModel):
    """Result of executing one rename operation."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    op: RenameOp
    error: RenameIOError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class BatchResult(BaseModel):
    """Per-operation outcomes of an executed plan, in plan order."""

    outcomes: list[RenameOutcome] = Field(default_factory=list)

    @property
    def succeeded(self) -> list[RenameOutcome]:
        return [outcome for outcome in self.outcomes if outcome.ok]

    @property
    def failed(self) -> list[RenameOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.ok]

    @property
    def ok(self) -> bool:
        return not self.failed

    def summary(self) -> str:
        """Return a human-readable summary listing every failure."""
        lines = [
            "Rename Summary:",
            f"  Succeeded: {len(self.succeeded)}",
            f"  Failed: {len(self.failed)}",
        ]
        for outcome in self.failed:
            lines.append(f"  - {outcome.error}")
        return "\n".join(lines)
