"""Keep ``event_subscription_count`` in step with subscription inserts and deletes."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from relcount.domain.counting.lookup import find_execution_facet

if TYPE_CHECKING:
    from relcount.domain.counting.enablement import CountingEnablement
    from relcount.domain.model import EventSubscription, Execution, ExecutionCounters
    from relcount.domain.ports.persistence import ParentLookup

log = getLogger(__name__)


@dataclass(slots=True)
class EventSubscriptionCountMutator:
    enablement: CountingEnablement
    executions: ParentLookup[Execution]

    def handle_insert(self, subscription: EventSubscription) -> None:
        facet = self._owning_facet(subscription)
        if facet is not None:
            facet.increment_event_subscription_count()
            log.debug(
                "Execution %s event_subscription_count -> %s",
                subscription.execution_id,
                facet.event_subscription_count,
            )

    def handle_delete(self, subscription: EventSubscription) -> None:
        facet = self._owning_facet(subscription)
        if facet is not None:
            facet.decrement_event_subscription_count()
            log.debug(
                "Execution %s event_subscription_count -> %s",
                subscription.execution_id,
                facet.event_subscription_count,
            )

    def _owning_facet(self, subscription: EventSubscription) -> ExecutionCounters | None:
        if (
            subscription.execution_id is None
            or not self.enablement.is_execution_counting_enabled_globally()
        ):
            return None
        facet = find_execution_facet(self.executions, subscription.execution_id)
        return facet if self.enablement.is_execution_counting_enabled(facet) else None
