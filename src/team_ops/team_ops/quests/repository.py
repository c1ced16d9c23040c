from __future__ import annotations

from typing import Callable, Optional, Protocol, Sequence

from ..core.enums import QuestStatus
from ..database.notifier import Listener, Unsubscribe
from .model import Quest


class QuestRepository(Protocol):
    def create(self, **values) -> str:
        raise NotImplementedError

    def update(self, record_id: str, **patch) -> Quest:
        raise NotImplementedError

    def delete(self, record_id: str) -> None:
        raise NotImplementedError

    def get_by_id(self, record_id: str) -> Quest:
        raise NotImplementedError

    def find(self, record_id: str) -> Optional[Quest]:
        raise NotImplementedError

    def list(self) -> Sequence[Quest]:
        raise NotImplementedError

    def filter(self, predicate: Callable[[Quest], bool]) -> Sequence[Quest]:
        raise NotImplementedError

    def list_by_pic(self, pic_id: str) -> Sequence[Quest]:
        raise NotImplementedError

    def list_by_status(self, status: QuestStatus) -> Sequence[Quest]:
        raise NotImplementedError

    def subscribe(self, listener: Listener) -> Unsubscribe:
        raise NotImplementedError
