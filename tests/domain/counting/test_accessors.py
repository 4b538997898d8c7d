from __future__ import annotations

import pytest

from relcount.domain.counting import accessors
from relcount.domain.model import Execution, ExecutionCounter, ExecutionCounters

GETTERS = {
    ExecutionCounter.VARIABLE: accessors.get_variable_count,
    ExecutionCounter.EVENT_SUBSCRIPTION: accessors.get_event_subscription_count,
    ExecutionCounter.TASK: accessors.get_task_count,
    ExecutionCounter.JOB: accessors.get_job_count,
    ExecutionCounter.TIMER_JOB: accessors.get_timer_job_count,
    ExecutionCounter.SUSPENDED_JOB: accessors.get_suspended_job_count,
    ExecutionCounter.DEAD_LETTER_JOB: accessors.get_dead_letter_job_count,
    ExecutionCounter.EXTERNAL_WORKER_JOB: accessors.get_external_worker_job_count,
    ExecutionCounter.IDENTITY_LINK: accessors.get_identity_link_count,
}


def test_every_counter_has_a_getter() -> None:
    assert set(GETTERS) == set(ExecutionCounter)


@pytest.mark.parametrize("counter", list(ExecutionCounter))
def test_getter_returns_stored_value(counter: ExecutionCounter) -> None:
    counters = ExecutionCounters(_count_enabled=True)
    setattr(counters, counter.value, 7)
    execution = Execution(counters=counters)

    assert GETTERS[counter](execution) == 7


@pytest.mark.parametrize("counter", list(ExecutionCounter))
def test_getter_defaults_to_zero_without_facet(counter: ExecutionCounter) -> None:
    assert GETTERS[counter](Execution()) == 0


def test_getter_returns_frozen_value_when_counting_disabled() -> None:
    execution = Execution(counters=ExecutionCounters(_count_enabled=False, job_count=3))

    assert accessors.get_job_count(execution) == 3


def test_counter_snapshot_covers_every_counter() -> None:
    execution = Execution(counters=ExecutionCounters(_count_enabled=True, task_count=2))

    snapshot = accessors.counter_snapshot(execution)

    assert snapshot[ExecutionCounter.TASK] == 2
    assert set(snapshot) == set(ExecutionCounter)
    assert accessors.counter_snapshot(Execution()) == dict.fromkeys(ExecutionCounter, 0)
