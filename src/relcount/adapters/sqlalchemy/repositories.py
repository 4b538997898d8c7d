"""Repository implementations backed by SQLAlchemy sessions.

Child repositories are the persistence layer that drives the counting hooks:
every ``add`` runs the insert hook and every ``remove`` the delete hook, inside
the same session, so counter changes are flushed with the child rows.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import func, select

from relcount.adapters.sqlalchemy.mappings import (
    event_subscription_table,
    variable_instance_table,
)
from relcount.domain.model import (
    EventSubscription,
    Execution,
    IdentityLink,
    Job,
    Task,
    VariableInstance,
)

if TYPE_CHECKING:
    import uuid

    from sqlalchemy.orm import Session

    from relcount.domain.counting import (
        EventSubscriptionCountMutator,
        ExecutionChildCountMutator,
        VariableCountMutator,
    )


class SqlAlchemyExecutionRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: Execution) -> None:
        self.session.add(entity)

    def find_by_id(self, entity_id: uuid.UUID) -> Execution | None:
        return self.session.get(Execution, entity_id)


class SqlAlchemyTaskLookup:
    """Read-only task access for the counting hooks."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_id(self, entity_id: uuid.UUID) -> Task | None:
        return self.session.get(Task, entity_id)


class SqlAlchemyTaskRepository(SqlAlchemyTaskLookup):
    def __init__(self, session: Session, counts: ExecutionChildCountMutator) -> None:
        super().__init__(session)
        self._counts = counts

    def add(self, entity: Task) -> None:
        self.session.add(entity)
        self._counts.handle_task_insert(entity)

    def remove(self, entity: Task) -> None:
        self._counts.handle_task_delete(entity)
        self.session.delete(entity)


class SqlAlchemyVariableRepository:
    def __init__(self, session: Session, counts: VariableCountMutator) -> None:
        self.session = session
        self._counts = counts

    def add(self, entity: VariableInstance) -> None:
        self.session.add(entity)
        self._counts.handle_insert(entity)

    def remove(self, entity: VariableInstance, *, fire_delete_event: bool = True) -> None:
        self._counts.handle_delete(entity, fire_delete_event=fire_delete_event)
        self.session.delete(entity)

    def count_by_execution(self, execution_id: uuid.UUID) -> int:
        """Count variables directly owned by an execution, bypassing the counters."""

        stmt = (
            select(func.count())
            .select_from(variable_instance_table)
            .where(variable_instance_table.c.execution_id == execution_id)
            .where(variable_instance_table.c.task_id.is_(None))
        )
        return self.session.execute(stmt).scalar_one()


class SqlAlchemyEventSubscriptionRepository:
    def __init__(self, session: Session, counts: EventSubscriptionCountMutator) -> None:
        self.session = session
        self._counts = counts

    def add(self, entity: EventSubscription) -> None:
        self.session.add(entity)
        self._counts.handle_insert(entity)

    def remove(self, entity: EventSubscription) -> None:
        self._counts.handle_delete(entity)
        self.session.delete(entity)

    def count_by_execution(self, execution_id: uuid.UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(event_subscription_table)
            .where(event_subscription_table.c.execution_id == execution_id)
        )
        return self.session.execute(stmt).scalar_one()


class SqlAlchemyJobRepository:
    def __init__(self, session: Session, counts: ExecutionChildCountMutator) -> None:
        self.session = session
        self._counts = counts

    def add(self, entity: Job) -> None:
        self.session.add(entity)
        self._counts.handle_job_insert(entity)

    def remove(self, entity: Job) -> None:
        self._counts.handle_job_delete(entity)
        self.session.delete(entity)


class SqlAlchemyIdentityLinkRepository:
    def __init__(self, session: Session, counts: ExecutionChildCountMutator) -> None:
        self.session = session
        self._counts = counts

    def add(self, entity: IdentityLink) -> None:
        self.session.add(entity)
        self._counts.handle_identity_link_insert(entity)

    def remove(self, entity: IdentityLink) -> None:
        self._counts.handle_identity_link_delete(entity)
        self.session.delete(entity)
