"""Decide whether a parent's counters may be trusted and mutated.

Two flags are involved: the global flag, which can change between restarts, and
the snapshot flag on the parent, which records the global state at the moment the
parent was created.

    global / snapshot : result
    T / T : T  regular mode, counters maintained
    T / F : F  parent predates counting, its counters were never incremented
    F / T : F  counting switched off since, counters are frozen
    F / F : F  all disabled

Only when both are true is the result true, which is a plain AND.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from relcount.config.counting import CountingPolicy
    from relcount.domain.model import Execution, ExecutionCounters, Task, TaskCounters


@dataclass(frozen=True, slots=True)
class CountingEnablement:
    policy: CountingPolicy

    def is_execution_counting_enabled_globally(self) -> bool:
        return self.policy.execution_counting_enabled

    def is_task_counting_enabled_globally(self) -> bool:
        """Check if task relationship counting is switched on for the process."""
        return self.policy.task_counting_enabled

    def is_execution_counting_enabled(self, facet: ExecutionCounters | None) -> bool:
        return (
            facet is not None
            and self.is_execution_counting_enabled_globally()
            and facet.count_enabled
        )

    def is_execution_entity_counting_enabled(self, execution: Execution | None) -> bool:
        if execution is None:
            return False
        return self.is_execution_counting_enabled(execution.counting_facet())

    def is_task_facet_counting_enabled(self, facet: TaskCounters | None) -> bool:
        """Same rule as for executions, applied to a task's counting facet."""
        return (
            facet is not None
            and self.is_task_counting_enabled_globally()
            and facet.count_enabled
        )

    def is_task_counting_enabled(self, task: Task | None) -> bool:
        if task is None:
            return False
        return self.is_task_facet_counting_enabled(task.counting_facet())
