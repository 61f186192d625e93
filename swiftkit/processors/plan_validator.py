"""Pre-mutation plan validation.

Checks run sequentially and the first violation raises, so a rejected plan
never reaches the executor.
"""

from collections import Counter
from collections.abc import Sequence
from pathlib import Path

from loguru import logger

from swiftkit.errors import DuplicateTargetError, PathEscapeError, TargetExistsError
from swiftkit.models.rename import RenamePlan
from swiftkit.processors.path_safety import exists_on_disk, is_contained, resolve_lexically


def find_duplicates(targets: Sequence[Path]) -> list[Path]:
    """Return every target that appears more than once, in first-seen order."""
    counts = Counter(targets)
    return [target for target, count in counts.items() if count > 1]


def validate_targets(directory: Path, targets: Sequence[Path]) -> None:
    """Validate candidate target paths against ``directory``.

    Args:
        directory: Resolved source directory.
        targets: Candidate absolute target paths.

    Raises:
        DuplicateTargetError: If two candidates are the same path.
        PathEscapeError: If a candidate resolves outside ``directory``.
        TargetExistsError: If a candidate already exists on disk.
    """
    duplicates = find_duplicates(targets)
    if duplicates:
        logger.warning("Rejected plan in {}: duplicate targets {}", directory, duplicates)
        raise DuplicateTargetError(duplicates)

    for target in targets:
        resolved = resolve_lexically(directory, target)
        if not is_contained(directory, resolved):
            logger.warning("Rejected plan in {}: {} escapes the directory", directory, resolved)
            raise PathEscapeError(directory, resolved)

        if exists_on_disk(resolved):
            logger.warning("Rejected plan in {}: {} already exists", directory, resolved)
            raise TargetExistsError(resolved)


def validate_plan(plan: RenamePlan) -> RenamePlan:
    """Validate every target of ``plan`` and return the plan unchanged."""
    validate_targets(plan.directory, plan.targets)
    return plan
