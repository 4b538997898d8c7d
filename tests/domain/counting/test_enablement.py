from __future__ import annotations

import pytest

from relcount.config import CountingPolicy
from relcount.domain.counting import CountingEnablement
from relcount.domain.model import (
    Execution,
    ExecutionCounters,
    Task,
    TaskCounters,
    new_execution,
    new_task,
)

TRUTH_TABLE = [
    (True, True, True),
    (True, False, False),
    (False, True, False),
    (False, False, False),
]


@pytest.mark.parametrize(("global_flag", "snapshot", "expected"), TRUTH_TABLE)
def test_execution_counting_requires_both_flags(
    global_flag: bool, snapshot: bool, expected: bool
) -> None:
    enablement = CountingEnablement(CountingPolicy(execution_counting_enabled=global_flag))
    facet = ExecutionCounters(_count_enabled=snapshot)

    assert enablement.is_execution_counting_enabled(facet) is expected
    assert enablement.is_execution_entity_counting_enabled(Execution(counters=facet)) is expected


@pytest.mark.parametrize(("global_flag", "snapshot", "expected"), TRUTH_TABLE)
def test_task_counting_requires_both_flags(
    global_flag: bool, snapshot: bool, expected: bool
) -> None:
    enablement = CountingEnablement(CountingPolicy(task_counting_enabled=global_flag))
    facet = TaskCounters(_count_enabled=snapshot)

    assert enablement.is_task_facet_counting_enabled(facet) is expected
    assert enablement.is_task_counting_enabled(Task(counters=facet)) is expected


def test_global_flags_are_read_from_policy() -> None:
    enablement = CountingEnablement(
        CountingPolicy(execution_counting_enabled=True, task_counting_enabled=False)
    )

    assert enablement.is_execution_counting_enabled_globally() is True
    assert enablement.is_task_counting_enabled_globally() is False


def test_missing_parent_or_facet_is_disabled() -> None:
    enablement = CountingEnablement(
        CountingPolicy(execution_counting_enabled=True, task_counting_enabled=True)
    )

    assert enablement.is_execution_counting_enabled(None) is False
    assert enablement.is_execution_entity_counting_enabled(None) is False
    assert enablement.is_execution_entity_counting_enabled(Execution()) is False
    assert enablement.is_task_facet_counting_enabled(None) is False
    assert enablement.is_task_counting_enabled(None) is False
    assert enablement.is_task_counting_enabled(Task()) is False


def test_later_enabled_global_flag_does_not_trust_older_parents() -> None:
    created_while_off = new_execution(CountingPolicy())
    task_created_while_off = new_task(CountingPolicy())
    enablement = CountingEnablement(
        CountingPolicy(execution_counting_enabled=True, task_counting_enabled=True)
    )

    assert enablement.is_execution_entity_counting_enabled(created_while_off) is False
    assert enablement.is_task_counting_enabled(task_created_while_off) is False
