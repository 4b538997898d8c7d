"""Ports for looking up and persisting parents and children."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

from relcount.domain.model import (
    EventSubscription,
    Execution,
    IdentityLink,
    Job,
    Task,
    VariableInstance,
)

if TYPE_CHECKING:
    from uuid import UUID

TEntity = TypeVar("TEntity")
TParent = TypeVar("TParent")
TChild = TypeVar("TChild")


@runtime_checkable
class Repository(Protocol[TEntity]):
    """Minimal repository contract for a persistent entity store."""

    def add(self, entity: TEntity) -> None: ...


@runtime_checkable
class ParentLookup(Protocol[TParent]):
    """Lookup contract used by the counting hooks to resolve an owning parent."""

    def find_by_id(self, entity_id: UUID) -> TParent | None: ...


@runtime_checkable
class ParentRepository(Repository[TParent], ParentLookup[TParent], Protocol[TParent]):
    """Store for parents that can also be looked up by id."""


@runtime_checkable
class ExecutionRepository(ParentRepository[Execution], Protocol):
    """Repository contract for executions."""


@runtime_checkable
class ChildRepository(Repository[TChild], Protocol[TChild]):
    """Repository contract for counted children; ``remove`` must run the delete hook."""

    def remove(self, entity: TChild) -> None: ...


@runtime_checkable
class TaskRepository(ParentRepository[Task], ChildRepository[Task], Protocol):
    """Tasks are parents of variables and children of executions."""


@runtime_checkable
class VariableRepository(ChildRepository[VariableInstance], Protocol):
    def remove(self, entity: VariableInstance, *, fire_delete_event: bool = True) -> None: ...


@runtime_checkable
class EventSubscriptionRepository(ChildRepository[EventSubscription], Protocol):
    """Repository contract for event subscriptions."""


@runtime_checkable
class JobRepository(ChildRepository[Job], Protocol):
    """Repository contract for jobs of every kind."""


@runtime_checkable
class IdentityLinkRepository(ChildRepository[IdentityLink], Protocol):
    """Repository contract for identity links."""
