from __future__ import annotations

from typing import Sequence

from ..common.datetime_utils import now_local
from ..database.memory_store import Clock, InMemoryStore
from .model import Employee


class InMemoryEmployeeRepository(InMemoryStore[Employee]):
    def __init__(self, *, clock: Clock = now_local):
        super().__init__(Employee, entity="Employee", clock=clock)

    def search(self, text: str) -> Sequence[Employee]:
        needle = (text or "").strip().casefold()
        if not needle:
            return self.list()
        return self.filter(lambda e: needle in e.name.casefold() or needle in e.nickname.casefold())
