"""Port for the engine-wide notification dispatcher."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from relcount.domain.model import EngineEvent


@runtime_checkable
class EventDispatcher(Protocol):
    def is_enabled(self) -> bool: ...

    def dispatch_event(self, event: EngineEvent, engine_key: str) -> None: ...
