"""Parent entities that own children and may carry counters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from relcount.domain.model.base import Entity
from relcount.domain.model.counters import ExecutionCounters, TaskCounters

if TYPE_CHECKING:
    from uuid import UUID

    from relcount.config.counting import CountingPolicy


@dataclass(eq=False, kw_only=True)
class Execution(Entity):
    """A path of execution inside a process instance.

    ``counters`` is ``None`` for executions that were stored before counting
    existed; such executions expose no counting facet.
    """

    process_instance_id: UUID | None = None
    parent_id: UUID | None = None
    counters: ExecutionCounters | None = None

    def counting_facet(self) -> ExecutionCounters | None:
        return self.counters


@dataclass(eq=False, kw_only=True)
class Task(Entity):
    name: str | None = None
    execution_id: UUID | None = None
    process_instance_id: UUID | None = None
    counters: TaskCounters | None = None

    def counting_facet(self) -> TaskCounters | None:
        return self.counters


def new_execution(
    policy: CountingPolicy,
    *,
    process_instance_id: UUID | None = None,
    parent_id: UUID | None = None,
    counting: bool = True,
) -> Execution:
    """Create an execution whose snapshot flag mirrors the current global flag.

    Pass ``counting=False`` to build a parent without a counting facet.
    """

    counters = (
        ExecutionCounters(_count_enabled=policy.execution_counting_enabled) if counting else None
    )
    return Execution(
        process_instance_id=process_instance_id,
        parent_id=parent_id,
        counters=counters,
    )


def new_task(
    policy: CountingPolicy,
    *,
    name: str | None = None,
    execution_id: UUID | None = None,
    process_instance_id: UUID | None = None,
    counting: bool = True,
) -> Task:
    counters = TaskCounters(_count_enabled=policy.task_counting_enabled) if counting else None
    return Task(
        name=name,
        execution_id=execution_id,
        process_instance_id=process_instance_id,
        counters=counters,
    )
