"""Domain port definitions for adapters."""

from __future__ import annotations

from .events import EventDispatcher
from .persistence import (
    ChildRepository,
    EventSubscriptionRepository,
    ExecutionRepository,
    IdentityLinkRepository,
    JobRepository,
    ParentLookup,
    ParentRepository,
    Repository,
    TaskRepository,
    VariableRepository,
)
from .unit_of_work import (
    CountingRepositories,
    CountingUnitOfWork,
    ParentRepositories,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "ChildRepository",
    "CountingRepositories",
    "CountingUnitOfWork",
    "EventDispatcher",
    "EventSubscriptionRepository",
    "ExecutionRepository",
    "IdentityLinkRepository",
    "JobRepository",
    "ParentLookup",
    "ParentRepositories",
    "ParentRepository",
    "Repository",
    "RepositoryCollection",
    "TaskRepository",
    "UnitOfWork",
    "VariableRepository",
]
