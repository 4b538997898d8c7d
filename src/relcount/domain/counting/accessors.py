"""Read-side access to execution counters.

Every getter degrades to ``0`` when the execution has no counting facet. A zero
from here does not mean "no children"; callers that need an exact answer must
check ``CountingEnablement`` first and fall back to a real query.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from relcount.domain.model import ExecutionCounter

if TYPE_CHECKING:
    from relcount.domain.model import Execution


def _read(execution: Execution, counter: ExecutionCounter) -> int:
    facet = execution.counting_facet()
    return facet.get(counter) if facet is not None else 0


def get_variable_count(execution: Execution) -> int:
    return _read(execution, ExecutionCounter.VARIABLE)


def get_event_subscription_count(execution: Execution) -> int:
    return _read(execution, ExecutionCounter.EVENT_SUBSCRIPTION)


def get_task_count(execution: Execution) -> int:
    return _read(execution, ExecutionCounter.TASK)


def get_job_count(execution: Execution) -> int:
    return _read(execution, ExecutionCounter.JOB)


def get_timer_job_count(execution: Execution) -> int:
    return _read(execution, ExecutionCounter.TIMER_JOB)


def get_suspended_job_count(execution: Execution) -> int:
    return _read(execution, ExecutionCounter.SUSPENDED_JOB)


def get_dead_letter_job_count(execution: Execution) -> int:
    return _read(execution, ExecutionCounter.DEAD_LETTER_JOB)


def get_external_worker_job_count(execution: Execution) -> int:
    return _read(execution, ExecutionCounter.EXTERNAL_WORKER_JOB)


def get_identity_link_count(execution: Execution) -> int:
    return _read(execution, ExecutionCounter.IDENTITY_LINK)


def counter_snapshot(execution: Execution) -> dict[ExecutionCounter, int]:
    """Return every counter of ``execution`` keyed by counter name."""

    return {counter: _read(execution, counter) for counter in ExecutionCounter}
