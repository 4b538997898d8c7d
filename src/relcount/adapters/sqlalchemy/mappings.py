"""SQLAlchemy mapping metadata for the relcount domain model."""

from __future__ import annotations

import logging
import uuid
from functools import cache
from typing import TYPE_CHECKING

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    String,
    Table,
    Uuid,
    orm,
)
from sqlalchemy.orm import configure_mappers, relationship

from relcount.domain.model import (
    EventSubscription,
    Execution,
    ExecutionCounters,
    IdentityLink,
    Job,
    JobKind,
    ScopeType,
    Task,
    TaskCounters,
    VariableInstance,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)

UUIDColumnType = Uuid[uuid.UUID]


def _counter_column(name: str) -> Column[int]:
    return Column(name, Integer, nullable=False, default=0, server_default="0")


mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# Parents ---------------------------------------------------------------------

execution_table = Table(
    "execution",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("process_instance_id", UUIDColumnType, nullable=True),
    Column("parent_id", UUIDColumnType, nullable=True),
)

# A missing row means the execution predates counting and has no facet.
execution_counters_table = Table(
    "execution_counters",
    mapper_registry.metadata,
    Column(
        "execution_id",
        UUIDColumnType,
        ForeignKey("execution.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("is_count_enabled", Boolean, key="_count_enabled", nullable=False),
    _counter_column("variable_count"),
    _counter_column("event_subscription_count"),
    _counter_column("task_count"),
    _counter_column("job_count"),
    _counter_column("timer_job_count"),
    _counter_column("suspended_job_count"),
    _counter_column("dead_letter_job_count"),
    _counter_column("external_worker_job_count"),
    _counter_column("identity_link_count"),
)

task_table = Table(
    "task",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("name", String, nullable=True),
    Column("execution_id", UUIDColumnType, nullable=True),
    Column("process_instance_id", UUIDColumnType, nullable=True),
    Index("ix_task_execution", "execution_id"),
)

task_counters_table = Table(
    "task_counters",
    mapper_registry.metadata,
    Column(
        "task_id",
        UUIDColumnType,
        ForeignKey("task.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("is_count_enabled", Boolean, key="_count_enabled", nullable=False),
    _counter_column("variable_count"),
)

# Counted children ------------------------------------------------------------

variable_instance_table = Table(
    "variable_instance",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("name", String, nullable=False),
    Column("value", JSON, nullable=True),
    Column("task_id", UUIDColumnType, nullable=True),
    Column("execution_id", UUIDColumnType, nullable=True),
    Column("process_instance_id", UUIDColumnType, nullable=True),
    Column("scope_id", UUIDColumnType, nullable=True),
    Column("scope_type", Enum(ScopeType, native_enum=False), nullable=True),
    Column("sub_scope_id", UUIDColumnType, nullable=True),
    Index("ix_variable_instance_execution", "execution_id"),
    Index("ix_variable_instance_task", "task_id"),
)

event_subscription_table = Table(
    "event_subscription",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("event_type", String, nullable=False),
    Column("event_name", String, nullable=True),
    Column("execution_id", UUIDColumnType, nullable=True),
    Column("process_instance_id", UUIDColumnType, nullable=True),
    Index("ix_event_subscription_execution", "execution_id"),
)

job_table = Table(
    "job",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("kind", Enum(JobKind, native_enum=False), nullable=False),
    Column("execution_id", UUIDColumnType, nullable=True),
    Column("process_instance_id", UUIDColumnType, nullable=True),
    Index("ix_job_execution", "execution_id"),
)

identity_link_table = Table(
    "identity_link",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("type", String, nullable=False),
    Column("user_id", String, nullable=True),
    Column("group_id", String, nullable=True),
    Column("process_instance_id", UUIDColumnType, nullable=True),
    Index("ix_identity_link_process_instance", "process_instance_id"),
)


@cache
def start_mappers() -> orm.registry:
    """Configure SQLAlchemy mappers for the domain model."""

    log.info("Starting SQLAlchemy mappers")

    mapper_registry.map_imperatively(ExecutionCounters, execution_counters_table)
    mapper_registry.map_imperatively(TaskCounters, task_counters_table)

    mapper_registry.map_imperatively(
        Execution,
        execution_table,
        properties={
            "counters": relationship(
                ExecutionCounters,
                uselist=False,
                cascade="all, delete-orphan",
                lazy="joined",
            ),
        },
    )

    mapper_registry.map_imperatively(
        Task,
        task_table,
        properties={
            "counters": relationship(
                TaskCounters,
                uselist=False,
                cascade="all, delete-orphan",
                lazy="joined",
            ),
        },
    )

    mapper_registry.map_imperatively(VariableInstance, variable_instance_table)
    mapper_registry.map_imperatively(EventSubscription, event_subscription_table)
    mapper_registry.map_imperatively(Job, job_table)
    mapper_registry.map_imperatively(IdentityLink, identity_link_table)

    configure_mappers()
    return mapper_registry


def create_all_tables(engine: Engine) -> None:
    """Create database tables for the mapped metadata."""

    log.info("Creating all tables")
    mapper_registry.metadata.create_all(engine)
