"""
Counting facets:
the part of a parent entity that carries denormalized child counters.

A facet is created together with its parent and records, in ``count_enabled``,
whether counting was switched on at that moment. The flag is exposed read-only;
only the counters themselves change afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass

from relcount.domain.model.enums import ExecutionCounter


@dataclass(eq=False, kw_only=True)
class ExecutionCounters:
    """Counting facet of an execution."""

    _count_enabled: bool
    variable_count: int = 0
    event_subscription_count: int = 0
    task_count: int = 0
    job_count: int = 0
    timer_job_count: int = 0
    suspended_job_count: int = 0
    dead_letter_job_count: int = 0
    external_worker_job_count: int = 0
    identity_link_count: int = 0

    @property
    def count_enabled(self) -> bool:
        return self._count_enabled

    def get(self, counter: ExecutionCounter) -> int:
        return getattr(self, counter.value)

    def increment(self, counter: ExecutionCounter) -> None:
        setattr(self, counter.value, self.get(counter) + 1)

    def decrement(self, counter: ExecutionCounter) -> None:
        # no floor: unpaired deletes may drive a counter negative
        setattr(self, counter.value, self.get(counter) - 1)

    def increment_variable_count(self) -> None:
        self.increment(ExecutionCounter.VARIABLE)

    def decrement_variable_count(self) -> None:
        self.decrement(ExecutionCounter.VARIABLE)

    def increment_event_subscription_count(self) -> None:
        self.increment(ExecutionCounter.EVENT_SUBSCRIPTION)

    def decrement_event_subscription_count(self) -> None:
        self.decrement(ExecutionCounter.EVENT_SUBSCRIPTION)


@dataclass(eq=False, kw_only=True)
class TaskCounters:
    """Counting facet of a task."""

    _count_enabled: bool
    variable_count: int = 0

    @property
    def count_enabled(self) -> bool:
        return self._count_enabled
