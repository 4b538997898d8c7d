"""Child entities whose existence is counted on their parents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from relcount.domain.model.base import Entity
from relcount.domain.model.enums import JobKind

if TYPE_CHECKING:
    from uuid import UUID

    from relcount.domain.model.enums import ScopeType


@dataclass(eq=False, kw_only=True)
class VariableInstance(Entity):
    """A named value owned by a task, an execution, or a dependent sub-scope."""

    name: str
    value: object = None
    task_id: UUID | None = None
    execution_id: UUID | None = None
    process_instance_id: UUID | None = None
    scope_id: UUID | None = None
    scope_type: ScopeType | None = None
    sub_scope_id: UUID | None = None


@dataclass(eq=False, kw_only=True)
class EventSubscription(Entity):
    event_type: str
    event_name: str | None = None
    execution_id: UUID | None = None
    process_instance_id: UUID | None = None


@dataclass(eq=False, kw_only=True)
class Job(Entity):
    kind: JobKind = JobKind.ASYNC
    execution_id: UUID | None = None
    process_instance_id: UUID | None = None


@dataclass(eq=False, kw_only=True)
class IdentityLink(Entity):
    """Links a user or group to a process instance (owner, candidate, ...)."""

    type: str
    user_id: str | None = None
    group_id: str | None = None
    process_instance_id: UUID | None = None
