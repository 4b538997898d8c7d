"""Keep variable counters in step with variable inserts and deletes."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from relcount.config.engine import DEFAULT_ENGINE_KEY
from relcount.domain.counting.lookup import find_execution_facet
from relcount.domain.model import (
    DEPENDENT_SCOPE_TYPES,
    EngineEventType,
    create_entity_event,
    create_variable_delete_event,
)

if TYPE_CHECKING:
    from uuid import UUID

    from relcount.domain.counting.enablement import CountingEnablement
    from relcount.domain.model import VariableInstance
    from relcount.domain.ports.events import EventDispatcher
    from relcount.domain.ports.unit_of_work import ParentRepositories

log = getLogger(__name__)


@dataclass(slots=True)
class VariableCountMutator:
    """Adjust ``variable_count`` on the single parent that owns a variable.

    Ownership is resolved in priority order: task, then execution, then (on insert
    only) the execution behind a dependent sub-scope.
    """

    enablement: CountingEnablement
    repositories: ParentRepositories
    event_dispatcher: EventDispatcher | None = None
    engine_key: str = DEFAULT_ENGINE_KEY

    def handle_insert(self, variable: VariableInstance) -> None:
        if variable.task_id is not None and self.enablement.is_task_counting_enabled_globally():
            self._adjust_task(variable.task_id, 1)
        elif (
            variable.execution_id is not None
            and self.enablement.is_execution_counting_enabled_globally()
        ):
            self._adjust_execution(variable.execution_id, 1)
        elif (
            variable.scope_type in DEPENDENT_SCOPE_TYPES
            and self.enablement.is_execution_counting_enabled_globally()
        ):
            if variable.sub_scope_id is None:
                log.debug("Variable %s has no sub-scope id, nothing to count", variable.id)
                return
            self._adjust_execution(variable.sub_scope_id, 1)

    def handle_delete(self, variable: VariableInstance, *, fire_delete_event: bool) -> None:
        # sub-scope owned variables are incremented on insert but never decremented here
        if variable.task_id is not None and self.enablement.is_task_counting_enabled_globally():
            self._adjust_task(variable.task_id, -1)
        elif (
            variable.execution_id is not None
            and self.enablement.is_execution_counting_enabled_globally()
        ):
            self._adjust_execution(variable.execution_id, -1)

        dispatcher = self.event_dispatcher
        if fire_delete_event and dispatcher is not None and dispatcher.is_enabled():
            dispatcher.dispatch_event(
                create_entity_event(EngineEventType.ENTITY_DELETED, variable), self.engine_key
            )
            dispatcher.dispatch_event(create_variable_delete_event(variable), self.engine_key)

    def _adjust_task(self, task_id: UUID, delta: int) -> None:
        task = self.repositories.tasks.find_by_id(task_id)
        facet = task.counting_facet() if task is not None else None
        if facet is None or not self.enablement.is_task_facet_counting_enabled(facet):
            return
        facet.variable_count += delta
        log.debug("Task %s variable_count -> %s", task_id, facet.variable_count)

    def _adjust_execution(self, execution_id: UUID, delta: int) -> None:
        facet = find_execution_facet(self.repositories.executions, execution_id)
        if facet is None or not self.enablement.is_execution_counting_enabled(facet):
            return
        if delta > 0:
            facet.increment_variable_count()
        else:
            facet.decrement_variable_count()
        log.debug("Execution %s variable_count -> %s", execution_id, facet.variable_count)
