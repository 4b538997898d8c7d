"""Count-enablement protocol and the hooks that maintain parent counters."""

from __future__ import annotations

from .accessors import (
    counter_snapshot,
    get_dead_letter_job_count,
    get_event_subscription_count,
    get_external_worker_job_count,
    get_identity_link_count,
    get_job_count,
    get_suspended_job_count,
    get_task_count,
    get_timer_job_count,
    get_variable_count,
)
from .enablement import CountingEnablement
from .event_subscriptions import EventSubscriptionCountMutator
from .execution_children import ExecutionChildCountMutator
from .hooks import CountingHooks, build_counting_hooks
from .variables import VariableCountMutator

__all__ = [
    "CountingEnablement",
    "CountingHooks",
    "EventSubscriptionCountMutator",
    "ExecutionChildCountMutator",
    "VariableCountMutator",
    "build_counting_hooks",
    "counter_snapshot",
    "get_dead_letter_job_count",
    "get_event_subscription_count",
    "get_external_worker_job_count",
    "get_identity_link_count",
    "get_job_count",
    "get_suspended_job_count",
    "get_task_count",
    "get_timer_job_count",
    "get_variable_count",
]
