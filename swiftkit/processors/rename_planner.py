"""Rename plan builders.

Both builders return a :class:`RenamePlan` of absolute (source, target) pairs.
Nothing here touches the filesystem beyond listing the directory.
"""

from collections.abc import Iterable
from pathlib import Path

from loguru import logger

from swiftkit.models.rename import RenameMapping, RenameOp, RenamePlan
from swiftkit.processors.directory import list_entries
from swiftkit.processors.path_safety import resolve_lexically, sanitize_name


def plan_pattern_rename(
    directory: Path,
    search: str,
    replace: str,
    extension_filter: str | None = None,
) -> RenamePlan:
    """Plan a substring search/replace across a directory's entries.

    Only the first occurrence of ``search`` in each name is replaced. Entries
    that do not contain ``search`` are left out of the plan.

    Args:
        directory: Resolved source directory.
        search: Literal substring to look for.
        replace: Replacement substring, may be empty.
        extension_filter: Optional suffix filter applied before matching.

    Returns:
        Plan with one operation per matching entry.
    """
    plan = RenamePlan(directory=directory)

    for entry in list_entries(directory, extension_filter):
        if search not in entry.name:
            continue

        new_name = sanitize_name(entry.name.replace(search, replace, 1))
        plan.operations.append(
            RenameOp(
                source=resolve_lexically(directory, entry.name),
                target=resolve_lexically(directory, new_name),
            )
        )

    logger.debug("Pattern plan for {!r} -> {!r} in {}: {} operation(s)", search, replace, directory, len(plan))
    return plan


def sanitize_mapping(mapping: Iterable[RenameMapping]) -> list[RenameMapping]:
    """Sanitize both sides of every mapping record, keeping missing ``new`` values as-is."""
    return [
        RenameMapping(
            old=sanitize_name(record.old),
            new=sanitize_name(record.new) if record.new is not None else None,
        )
        for record in mapping
    ]


def mapping_targets(directory: Path, mapping: Iterable[RenameMapping]) -> list[Path]:
    """Absolute targets of every mapping record that names a new filename.

    Covers the whole mapping, including records whose ``old`` entry is not in
    the directory. Records whose ``new`` is missing, null or empty are left
    out, so they take no part in duplicate or existence checks.
    """
    return [resolve_lexically(directory, record.new) for record in mapping if record.new]


def plan_mapping_rename(
    directory: Path,
    mapping: list[RenameMapping],
    extension_filter: str | None = None,
) -> RenamePlan:
    """Plan renames from explicit old-name to new-name records.

    ``mapping`` is expected to be sanitized already (see :func:`sanitize_mapping`).
    Entries without a matching record, or whose record has an empty ``new``,
    are skipped. The first record matching an entry wins.

    Args:
        directory: Resolved source directory.
        mapping: Sanitized rename records.
        extension_filter: Optional suffix filter applied to directory entries.

    Returns:
        Plan with one operation per entry that has a usable record.
    """
    lookup: dict[str, RenameMapping] = {}
    for record in mapping:
        lookup.setdefault(record.old, record)

    plan = RenamePlan(directory=directory)

    for entry in list_entries(directory, extension_filter):
        record = lookup.get(entry.name)
        if record is None or not record.new:
            continue

        plan.operations.append(
            RenameOp(
                source=resolve_lexically(directory, entry.name),
                target=resolve_lexically(directory, record.new),
            )
        )

    logger.debug("Mapping plan in {}: {} of {} record(s) matched", directory, len(plan), len(mapping))
    return plan
