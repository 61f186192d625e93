"""Batch rename processor: plan, validate, execute."""

from collections.abc import Iterable
from pathlib import Path

from loguru import logger

from swiftkit.config import EngineSettings
from swiftkit.errors import BatchRenameError
from swiftkit.models.rename import BatchResult, RenameMapping, RenamePlan
from swiftkit.processors.batch_executor import execute_plan
from swiftkit.processors.directory import resolve_directory
from swiftkit.processors.plan_validator import validate_plan, validate_targets
from swiftkit.processors.rename_planner import (
    mapping_targets,
    plan_mapping_rename,
    plan_pattern_rename,
    sanitize_mapping,
)


class RenameProcessor:
    """Processor for validated batch renames inside a single directory."""

    def __init__(self, settings: EngineSettings | None = None) -> None:
        """Initialize the rename processor.

        Args:
            settings: Execution tunables. Defaults are used when omitted.
        """
        self.settings = settings or EngineSettings()

    def build_pattern_plan(
        self,
        folder_path: Path | str,
        search: str,
        replace: str,
        extension_filter: str | None = None,
    ) -> RenamePlan:
        """Build and validate a search/replace plan without executing it.

        Raises:
            InvalidDirectoryError: If ``folder_path`` is not a directory.
            DuplicateTargetError: If two entries would get the same name.
            PathEscapeError: If a target leaves the directory.
            TargetExistsError: If a target already exists.
        """
        directory = resolve_directory(folder_path)
        plan = plan_pattern_rename(directory, search, replace, extension_filter)
        return validate_plan(plan)

    def build_mapping_plan(
        self,
        folder_path: Path | str,
        mapping: Iterable[RenameMapping],
        extension_filter: str | None = None,
    ) -> RenamePlan:
        """Build and validate an explicit-mapping plan without executing it.

        Every record of ``mapping`` takes part in validation, whether or not
        its ``old`` entry exists in the directory.

        Raises:
            InvalidDirectoryError: If ``folder_path`` is not a directory.
            DuplicateTargetError: If two records share a new name.
            PathEscapeError: If a target leaves the directory.
            TargetExistsError: If a target already exists.
        """
        directory = resolve_directory(folder_path)
        records = sanitize_mapping(mapping)
        validate_targets(directory, mapping_targets(directory, records))
        return plan_mapping_rename(directory, records, extension_filter)

    def apply(self, plan: RenamePlan) -> BatchResult:
        """Execute a validated plan.

        Raises:
            BatchRenameError: If any operation failed. Completed operations are
                not rolled back; the attached result tells them apart.
        """
        result = execute_plan(
            plan,
            max_workers=self.settings.max_workers,
            recheck=self.settings.recheck_before_rename,
        )
        if not result.ok:
            raise BatchRenameError(result)

        logger.info("Renamed {} file(s) in {}", len(result.succeeded), plan.directory)
        return result

    def bulk_rename(
        self,
        folder_path: Path | str,
        search: str,
        replace: str,
        extension_filter: str | None = None,
    ) -> BatchResult:
        """Replace the first ``search`` occurrence with ``replace`` in every matching name."""
        return self.apply(self.build_pattern_plan(folder_path, search, replace, extension_filter))

    def rename_files(
        self,
        folder_path: Path | str,
        mapping: Iterable[RenameMapping],
        extension_filter: str | None = None,
    ) -> BatchResult:
        """Rename entries according to explicit old-name to new-name records."""
        return self.apply(self.build_mapping_plan(folder_path, mapping, extension_filter))
