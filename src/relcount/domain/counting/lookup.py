"""Resolve the counting facet of an owning execution."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from uuid import UUID

    from relcount.domain.model import Execution, ExecutionCounters
    from relcount.domain.ports.persistence import ParentLookup

log = getLogger(__name__)


def find_execution_facet(
    executions: ParentLookup[Execution], execution_id: UUID
) -> ExecutionCounters | None:
    """Return the counting facet of an execution, or ``None`` if it cannot count.

    A missing execution is treated like a parent without a facet.
    """

    execution = executions.find_by_id(execution_id)
    if execution is None:
        log.debug("Execution %s not found, leaving counters untouched", execution_id)
        return None
    return execution.counting_facet()
