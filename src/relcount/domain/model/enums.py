"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum
from typing import Final


class ScopeType(StrEnum):
    """Kind of scope a child entity is attached to."""

    BPMN = "bpmn"
    CMMN = "cmmn"
    TASK = "task"
    BPMN_EXTERNAL_WORKER = "bpmnExternalWorker"
    BPMN_VARIABLE_AGGREGATION = "bpmnVariableAggregation"


# Scopes whose variables hang off an execution through ``sub_scope_id``.
DEPENDENT_SCOPE_TYPES: Final[frozenset[ScopeType]] = frozenset(
    {ScopeType.BPMN_EXTERNAL_WORKER, ScopeType.BPMN_VARIABLE_AGGREGATION}
)


class ExecutionCounter(StrEnum):
    """Denormalized counters carried by a counting execution.

    Values double as attribute names on ``ExecutionCounters``.
    """

    VARIABLE = "variable_count"
    EVENT_SUBSCRIPTION = "event_subscription_count"
    TASK = "task_count"
    JOB = "job_count"
    TIMER_JOB = "timer_job_count"
    SUSPENDED_JOB = "suspended_job_count"
    DEAD_LETTER_JOB = "dead_letter_job_count"
    EXTERNAL_WORKER_JOB = "external_worker_job_count"
    IDENTITY_LINK = "identity_link_count"


class JobKind(StrEnum):
    ASYNC = "async"
    TIMER = "timer"
    SUSPENDED = "suspended"
    DEADLETTER = "deadletter"
    EXTERNAL_WORKER = "externalWorker"


JOB_COUNTER_BY_KIND: Final[dict[JobKind, ExecutionCounter]] = {
    JobKind.ASYNC: ExecutionCounter.JOB,
    JobKind.TIMER: ExecutionCounter.TIMER_JOB,
    JobKind.SUSPENDED: ExecutionCounter.SUSPENDED_JOB,
    JobKind.DEADLETTER: ExecutionCounter.DEAD_LETTER_JOB,
    JobKind.EXTERNAL_WORKER: ExecutionCounter.EXTERNAL_WORKER_JOB,
}


class EngineEventType(StrEnum):
    ENTITY_DELETED = "ENTITY_DELETED"
    VARIABLE_DELETED = "VARIABLE_DELETED"
