"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from relcount.adapters.sqlalchemy.unit_of_work import SqlAlchemyUnitOfWork, is_started, startup
from relcount.config import get_counting_policy
from relcount.domain.counting import CountingEnablement, counter_snapshot
from relcount.domain.ports.unit_of_work import CountingUnitOfWork

if TYPE_CHECKING:
    from uuid import UUID

    from relcount.config import CountingPolicy
    from relcount.domain.model import ExecutionCounter

UnitOfWorkFactory = Callable[[], CountingUnitOfWork]


log = getLogger(__name__)


@dataclass(slots=True)
class ExecutionCountsReport:
    """Counter values of one execution and whether they can be relied upon."""

    execution_id: UUID
    trusted: bool
    counts: dict[ExecutionCounter, int]


def read_execution_counts(
    execution_id: UUID,
    *,
    policy: CountingPolicy | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> ExecutionCountsReport | None:
    """Load an execution and report its counters, or ``None`` if it does not exist."""

    effective_policy = policy or get_counting_policy()
    if unit_of_work_factory is None and not is_started():
        startup()
    effective_uow = unit_of_work_factory or (
        lambda: SqlAlchemyUnitOfWork(policy=effective_policy)
    )

    enablement = CountingEnablement(effective_policy)
    with effective_uow() as uow:
        execution = uow.repositories.executions.find_by_id(execution_id)
        if execution is None:
            log.info("Execution %s not found", execution_id)
            return None
        report = ExecutionCountsReport(
            execution_id=execution.id,
            trusted=enablement.is_execution_entity_counting_enabled(execution),
            counts=counter_snapshot(execution),
        )

    log.debug("Read counters for %s: trusted=%s", execution_id, report.trusted)
    return report
