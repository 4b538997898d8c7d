"""Wire the counting hooks against one set of parent repositories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from relcount.config.engine import DEFAULT_ENGINE_KEY
from relcount.domain.counting.enablement import CountingEnablement
from relcount.domain.counting.event_subscriptions import EventSubscriptionCountMutator
from relcount.domain.counting.execution_children import ExecutionChildCountMutator
from relcount.domain.counting.variables import VariableCountMutator

if TYPE_CHECKING:
    from relcount.config.counting import CountingPolicy
    from relcount.domain.ports.events import EventDispatcher
    from relcount.domain.ports.unit_of_work import ParentRepositories


@dataclass(frozen=True, slots=True)
class CountingHooks:
    """Insert/delete hooks a persistence layer calls for counted children."""

    enablement: CountingEnablement
    variables: VariableCountMutator
    event_subscriptions: EventSubscriptionCountMutator
    execution_children: ExecutionChildCountMutator


def build_counting_hooks(
    parents: ParentRepositories,
    *,
    policy: CountingPolicy,
    event_dispatcher: EventDispatcher | None = None,
    engine_key: str = DEFAULT_ENGINE_KEY,
) -> CountingHooks:
    enablement = CountingEnablement(policy)
    return CountingHooks(
        enablement=enablement,
        variables=VariableCountMutator(
            enablement=enablement,
            repositories=parents,
            event_dispatcher=event_dispatcher,
            engine_key=engine_key,
        ),
        event_subscriptions=EventSubscriptionCountMutator(
            enablement=enablement, executions=parents.executions
        ),
        execution_children=ExecutionChildCountMutator(
            enablement=enablement, executions=parents.executions
        ),
    )
