"""Counters for tasks, jobs and identity links owned by an execution."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from relcount.domain.counting.lookup import find_execution_facet
from relcount.domain.model import JOB_COUNTER_BY_KIND, ExecutionCounter

if TYPE_CHECKING:
    from uuid import UUID

    from relcount.domain.counting.enablement import CountingEnablement
    from relcount.domain.model import Execution, IdentityLink, Job, Task
    from relcount.domain.ports.persistence import ParentLookup

log = getLogger(__name__)


@dataclass(slots=True)
class ExecutionChildCountMutator:
    """Apply the enablement protocol to the remaining execution counters.

    Tasks and jobs count against their own execution, identity links against the
    process instance. The job counter is chosen by the job's kind.
    """

    enablement: CountingEnablement
    executions: ParentLookup[Execution]

    def handle_task_insert(self, task: Task) -> None:
        self._adjust(task.execution_id, ExecutionCounter.TASK, 1)

    def handle_task_delete(self, task: Task) -> None:
        self._adjust(task.execution_id, ExecutionCounter.TASK, -1)

    def handle_job_insert(self, job: Job) -> None:
        self._adjust(job.execution_id, JOB_COUNTER_BY_KIND[job.kind], 1)

    def handle_job_delete(self, job: Job) -> None:
        self._adjust(job.execution_id, JOB_COUNTER_BY_KIND[job.kind], -1)

    def handle_identity_link_insert(self, link: IdentityLink) -> None:
        self._adjust(link.process_instance_id, ExecutionCounter.IDENTITY_LINK, 1)

    def handle_identity_link_delete(self, link: IdentityLink) -> None:
        self._adjust(link.process_instance_id, ExecutionCounter.IDENTITY_LINK, -1)

    def _adjust(self, execution_id: UUID | None, counter: ExecutionCounter, delta: int) -> None:
        if execution_id is None or not self.enablement.is_execution_counting_enabled_globally():
            return
        facet = find_execution_facet(self.executions, execution_id)
        if facet is None or not self.enablement.is_execution_counting_enabled(facet):
            return
        if delta > 0:
            facet.increment(counter)
        else:
            facet.decrement(counter)
        log.debug("Execution %s %s -> %s", execution_id, counter, facet.get(counter))
