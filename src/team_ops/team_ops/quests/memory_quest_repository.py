from __future__ import annotations

from typing import Sequence

from ..common.datetime_utils import now_local
from ..core.enums import QuestStatus
from ..database.memory_store import Clock, InMemoryStore
from .model import Quest


class InMemoryQuestRepository(InMemoryStore[Quest]):
    def __init__(self, *, clock: Clock = now_local):
        super().__init__(Quest, entity="Quest", clock=clock)

    def list_by_pic(self, pic_id: str) -> Sequence[Quest]:
        return self.filter(lambda q: q.assigned_pic_id == pic_id)

    def list_by_status(self, status: QuestStatus) -> Sequence[Quest]:
        return self.filter(lambda q: q.status == status)
