from __future__ import annotations

import pytest

from relcount.config import CountingPolicy
from relcount.domain.counting import counter_snapshot, get_identity_link_count, get_task_count
from relcount.domain.model import (
    JOB_COUNTER_BY_KIND,
    ExecutionCounter,
    IdentityLink,
    Job,
    JobKind,
    Task,
)
from tests.helpers.counting import make_world


def test_task_insert_and_delete_adjust_task_count() -> None:
    world = make_world()
    execution = world.execution()
    task = Task(name="Approve", execution_id=execution.id)

    world.hooks.execution_children.handle_task_insert(task)
    assert get_task_count(execution) == 1

    world.hooks.execution_children.handle_task_delete(task)
    assert get_task_count(execution) == 0


@pytest.mark.parametrize("kind", list(JobKind))
def test_job_kind_selects_counter(kind: JobKind) -> None:
    world = make_world()
    execution = world.execution()

    world.hooks.execution_children.handle_job_insert(Job(kind=kind, execution_id=execution.id))

    snapshot = counter_snapshot(execution)
    expected = JOB_COUNTER_BY_KIND[kind]
    assert snapshot[expected] == 1
    assert sum(snapshot.values()) == 1


def test_job_delete_decrements_same_counter() -> None:
    world = make_world()
    execution = world.execution()
    job = Job(kind=JobKind.DEADLETTER, execution_id=execution.id)

    world.hooks.execution_children.handle_job_insert(job)
    world.hooks.execution_children.handle_job_delete(job)

    assert counter_snapshot(execution)[ExecutionCounter.DEAD_LETTER_JOB] == 0


def test_identity_link_counts_against_process_instance() -> None:
    world = make_world()
    process_instance = world.execution()
    link = IdentityLink(type="starter", user_id="kermit", process_instance_id=process_instance.id)

    world.hooks.execution_children.handle_identity_link_insert(link)
    assert get_identity_link_count(process_instance) == 1

    world.hooks.execution_children.handle_identity_link_delete(link)
    assert get_identity_link_count(process_instance) == 0


def test_children_without_owner_or_flag_are_ignored() -> None:
    world = make_world(CountingPolicy())
    execution = world.execution(policy=CountingPolicy(execution_counting_enabled=True))

    world.hooks.execution_children.handle_task_insert(Task(execution_id=execution.id))
    world.hooks.execution_children.handle_job_insert(Job(execution_id=execution.id))
    world.hooks.execution_children.handle_identity_link_insert(IdentityLink(type="candidate"))

    assert sum(counter_snapshot(execution).values()) == 0
    assert world.executions.lookups == []
