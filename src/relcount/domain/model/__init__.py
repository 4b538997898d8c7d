"""Domain model: parents, their counting facets, and counted children."""

from __future__ import annotations

from .base import Entity, new_id
from .children import EventSubscription, IdentityLink, Job, VariableInstance
from .counters import ExecutionCounters, TaskCounters
from .enums import (
    DEPENDENT_SCOPE_TYPES,
    JOB_COUNTER_BY_KIND,
    EngineEventType,
    ExecutionCounter,
    JobKind,
    ScopeType,
)
from .events import (
    EngineEvent,
    EntityEvent,
    VariableEvent,
    create_entity_event,
    create_variable_delete_event,
)
from .parents import Execution, Task, new_execution, new_task

__all__ = [
    "DEPENDENT_SCOPE_TYPES",
    "JOB_COUNTER_BY_KIND",
    "EngineEvent",
    "EngineEventType",
    "Entity",
    "EntityEvent",
    "EventSubscription",
    "Execution",
    "ExecutionCounter",
    "ExecutionCounters",
    "IdentityLink",
    "Job",
    "JobKind",
    "ScopeType",
    "Task",
    "TaskCounters",
    "VariableEvent",
    "VariableInstance",
    "create_entity_event",
    "create_variable_delete_event",
    "new_execution",
    "new_id",
    "new_task",
]
