from __future__ import annotations

import pytest

from relcount.config import CountingPolicy
from relcount.domain.model import (
    ExecutionCounter,
    ExecutionCounters,
    TaskCounters,
    new_execution,
    new_task,
)


def test_new_execution_snapshots_global_flag() -> None:
    enabled = new_execution(CountingPolicy(execution_counting_enabled=True))
    disabled = new_execution(CountingPolicy(execution_counting_enabled=False))

    enabled_facet = enabled.counting_facet()
    disabled_facet = disabled.counting_facet()
    assert enabled_facet is not None
    assert enabled_facet.count_enabled is True
    assert disabled_facet is not None
    assert disabled_facet.count_enabled is False


def test_new_task_snapshots_task_flag_only() -> None:
    task = new_task(CountingPolicy(execution_counting_enabled=True, task_counting_enabled=False))

    facet = task.counting_facet()
    assert facet is not None
    assert facet.count_enabled is False


def test_parents_without_counting_have_no_facet() -> None:
    policy = CountingPolicy(execution_counting_enabled=True, task_counting_enabled=True)

    assert new_execution(policy, counting=False).counting_facet() is None
    assert new_task(policy, counting=False).counting_facet() is None


def test_count_enabled_cannot_be_reassigned() -> None:
    counters = ExecutionCounters(_count_enabled=True)
    task_counters = TaskCounters(_count_enabled=False)

    with pytest.raises(AttributeError):
        counters.count_enabled = False  # pyright: ignore[reportAttributeAccessIssue]
    with pytest.raises(AttributeError):
        task_counters.count_enabled = True  # pyright: ignore[reportAttributeAccessIssue]

    assert counters.count_enabled is True
    assert task_counters.count_enabled is False


def test_counters_start_at_zero() -> None:
    counters = ExecutionCounters(_count_enabled=True)

    assert all(counters.get(counter) == 0 for counter in ExecutionCounter)


def test_increment_and_decrement_touch_only_named_counter() -> None:
    counters = ExecutionCounters(_count_enabled=True)

    counters.increment(ExecutionCounter.TIMER_JOB)
    counters.increment(ExecutionCounter.TIMER_JOB)
    counters.decrement(ExecutionCounter.IDENTITY_LINK)

    assert counters.timer_job_count == 2
    assert counters.identity_link_count == -1
    assert counters.job_count == 0
