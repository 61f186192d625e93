"""Concurrent execution of validated rename plans."""

import concurrent.futures as cf
import os

from loguru import logger

from swiftkit.errors import RenameIOError, TargetExistsError
from swiftkit.models.rename import BatchResult, RenameOp, RenameOutcome, RenamePlan
from swiftkit.processors.path_safety import exists_on_disk


def _rename_one(op: RenameOp, recheck: bool) -> RenameOutcome:
    try:
        # The directory is not locked; narrow the window since validation.
        if recheck and exists_on_disk(op.target):
            raise TargetExistsError(op.target)
        os.rename(op.source, op.target)
    except OSError as e:
        logger.error("Failed to rename {} -> {}: {}", op.source, op.target, e)
        return RenameOutcome(op=op, error=RenameIOError(op.source, op.target, e))

    logger.debug("Renamed {} -> {}", op.source, op.target)
    return RenameOutcome(op=op)


def execute_plan(
    plan: RenamePlan,
    max_workers: int | None = None,
    recheck: bool = True,
) -> BatchResult:
    """Run every operation of a validated plan concurrently.

    All operations are submitted at once and the call returns only after each
    has settled. A failed operation does not stop or undo its siblings.

    Args:
        plan: Plan that already passed validation.
        max_workers: Pool size; defaults to one worker per operation.
        recheck: Re-probe each target for existence right before renaming it.

    Returns:
        Outcomes in plan order.
    """
    if not plan.operations:
        return BatchResult()

    workers = max_workers or len(plan.operations)
    logger.info("Executing {} rename(s) in {} with {} worker(s)", len(plan), plan.directory, workers)

    with cf.ThreadPoolExecutor(max_workers=workers) as ex:
        futures = [ex.submit(_rename_one, op, recheck) for op in plan.operations]
        outcomes = [future.result() for future in futures]

    result = BatchResult(outcomes=outcomes)
    if not result.ok:
        logger.error("{} of {} rename(s) failed in {}", len(result.failed), len(plan), plan.directory)
    return result
