"""Engine notifications raised by the counting hooks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from relcount.domain.model.enums import EngineEventType

if TYPE_CHECKING:
    from uuid import UUID

    from relcount.domain.model.children import VariableInstance
    from relcount.domain.model.enums import ScopeType


@dataclass(frozen=True, slots=True)
class EntityEvent:
    type: EngineEventType
    entity: object


@dataclass(frozen=True, slots=True)
class VariableEvent:
    type: EngineEventType
    variable_name: str
    variable_value: object
    task_id: UUID | None = None
    execution_id: UUID | None = None
    process_instance_id: UUID | None = None
    scope_id: UUID | None = None
    scope_type: ScopeType | None = None
    sub_scope_id: UUID | None = None


EngineEvent: TypeAlias = EntityEvent | VariableEvent


def create_entity_event(event_type: EngineEventType, entity: object) -> EntityEvent:
    return EntityEvent(type=event_type, entity=entity)


def create_variable_delete_event(variable: VariableInstance) -> VariableEvent:
    return VariableEvent(
        type=EngineEventType.VARIABLE_DELETED,
        variable_name=variable.name,
        variable_value=variable.value,
        task_id=variable.task_id,
        execution_id=variable.execution_id,
        process_instance_id=variable.process_instance_id,
        scope_id=variable.scope_id,
        scope_type=variable.scope_type,
        sub_scope_id=variable.sub_scope_id,
    )
