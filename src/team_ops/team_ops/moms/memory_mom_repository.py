from __future__ import annotations

from ..common.datetime_utils import now_local
from ..database.memory_store import Clock, InMemoryStore
from .model import MoM


class InMemoryMoMRepository(InMemoryStore[MoM]):
    def __init__(self, *, clock: Clock = now_local):
        super().__init__(MoM, entity="MoM", clock=clock)
