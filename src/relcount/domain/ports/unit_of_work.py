"""Unit-of-work abstractions for coordinating repositories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, TypeAlias, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from types import TracebackType

    from relcount.domain.model import Execution, Task
    from relcount.domain.ports.persistence import (
        EventSubscriptionRepository,
        ExecutionRepository,
        IdentityLinkRepository,
        JobRepository,
        ParentLookup,
        TaskRepository,
        VariableRepository,
    )


@runtime_checkable
class RepositoryCollection(Protocol):
    """Marker protocol for groups of repositories managed together."""


TRepositories = TypeVar("TRepositories", bound=RepositoryCollection)


@runtime_checkable
class UnitOfWork(Protocol[TRepositories]):
    """Generic unit-of-work boundary around a repository collection."""

    @property
    def repositories(self) -> TRepositories: ...

    def __enter__(self) -> UnitOfWork[TRepositories]: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...


@dataclass(slots=True)
class ParentRepositories(RepositoryCollection):
    """Parent lookups consulted by the counting hooks."""

    executions: ParentLookup[Execution]
    tasks: ParentLookup[Task]


@dataclass(slots=True)
class CountingRepositories(RepositoryCollection):
    """Parents plus the counted children whose add/remove drive the counters."""

    executions: ExecutionRepository
    tasks: TaskRepository
    variables: VariableRepository
    event_subscriptions: EventSubscriptionRepository
    jobs: JobRepository
    identity_links: IdentityLinkRepository


CountingUnitOfWork: TypeAlias = UnitOfWork[CountingRepositories]
