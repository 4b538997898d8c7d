"""In-process event dispatcher.

Listeners subscribe per event type, or to every type with ``None``. Dispatch is
synchronous and a failing listener propagates to the caller; nothing is retried.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from relcount.domain.model import EngineEvent, EngineEventType

    from typing import TypeAlias

    EventListener: TypeAlias = Callable[[EngineEvent, str], None]

log = getLogger(__name__)


class ListenerEventDispatcher:
    def __init__(self, *, enabled: bool = True) -> None:
        self._enabled = enabled
        self._listeners: dict[EngineEventType | None, list[EventListener]] = {}

    def is_enabled(self) -> bool:
        return self._enabled

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled

    def add_listener(
        self, listener: EventListener, event_type: EngineEventType | None = None
    ) -> None:
        listeners = self._listeners.setdefault(event_type, [])
        if listener not in listeners:
            listeners.append(listener)

    def remove_listener(
        self, listener: EventListener, event_type: EngineEventType | None = None
    ) -> None:
        listeners = self._listeners.get(event_type)
        if listeners and listener in listeners:
            listeners.remove(listener)
            if not listeners:
                del self._listeners[event_type]

    def dispatch_event(self, event: EngineEvent, engine_key: str) -> None:
        if not self._enabled:
            return
        handlers = [*self._listeners.get(event.type, ()), *self._listeners.get(None, ())]
        log.debug("Dispatching %s to %s listener(s) on %s", event.type, len(handlers), engine_key)
        for handler in handlers:
            handler(event, engine_key)
