from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from ..core.enums import ChangeKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChangeEvent:
    entity: str
    kind: ChangeKind
    record_id: str


Listener = Callable[[ChangeEvent], None]
Unsubscribe = Callable[[], None]


class ChangeNotifier:
    """Synchronous publish/subscribe for a single store.

    Delivery iterates over a snapshot of the listener list, so listeners may
    subscribe or unsubscribe while an event is being delivered. New listeners
    only see events published after they registered.
    """

    def __init__(self, entity: str):
        self._entity = entity
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Unsubscribe:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            # Idempotent: unsubscribing twice is harmless.
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def publish(self, kind: ChangeKind, record_id: str) -> None:
        event = ChangeEvent(entity=self._entity, kind=kind, record_id=record_id)
        snapshot = list(self._listeners)
        logger.debug("%s %s %s -> %d listener(s)", self._entity, kind.value, record_id, len(snapshot))
        for listener in snapshot:
            listener(event)

    def __len__(self) -> int:
        return len(self._listeners)
