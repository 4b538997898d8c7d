"""SQLAlchemy adapter package for relcount."""

from __future__ import annotations

from .mappings import create_all_tables, mapper_registry, start_mappers
from .repositories import (
    SqlAlchemyEventSubscriptionRepository,
    SqlAlchemyExecutionRepository,
    SqlAlchemyIdentityLinkRepository,
    SqlAlchemyJobRepository,
    SqlAlchemyTaskLookup,
    SqlAlchemyTaskRepository,
    SqlAlchemyVariableRepository,
)
from .unit_of_work import SqlAlchemyUnitOfWork, StartupError, shutdown, startup

__all__ = [
    "SqlAlchemyEventSubscriptionRepository",
    "SqlAlchemyExecutionRepository",
    "SqlAlchemyIdentityLinkRepository",
    "SqlAlchemyJobRepository",
    "SqlAlchemyTaskLookup",
    "SqlAlchemyTaskRepository",
    "SqlAlchemyUnitOfWork",
    "SqlAlchemyVariableRepository",
    "StartupError",
    "create_all_tables",
    "mapper_registry",
    "shutdown",
    "start_mappers",
    "startup",
]
