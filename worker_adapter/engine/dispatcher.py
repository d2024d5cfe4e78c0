"""In-process event bus used to publish events emitted by actions."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Protocol

LOGGER = logging.getLogger(__name__)

Listener = Callable[[str, Any], None]


class EventDispatcherLike(Protocol):
    def dispatch(self, event_name: str, payload: Any) -> None: ...


class EventDispatcher:
    """Fire-and-forget dispatcher; listener failures never reach the caller."""

    def __init__(self) -> None:
        self._listeners: Dict[str, List[Listener]] = {}

    def subscribe(self, event_name: str, listener: Listener) -> None:
        self._listeners.setdefault(event_name, []).append(listener)

    def dispatch(self, event_name: str, payload: Any) -> None:
        listeners = list(self._listeners.get(event_name, ())) + list(self._listeners.get("*", ()))
        LOGGER.debug("Dispatching event %s to %d listeners", event_name, len(listeners))
        for listener in listeners:
            try:
                listener(event_name, payload)
            except Exception:  # noqa: BLE001
                LOGGER.exception("Event listener failed event=%s", event_name)
