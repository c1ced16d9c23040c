from __future__ import annotations

from typing import Sequence

from ..common.datetime_utils import now_local
from ..core.enums import TaskStatus
from ..database.memory_store import Clock, InMemoryStore
from .model import Task


class InMemoryTaskRepository(InMemoryStore[Task]):
    def __init__(self, *, clock: Clock = now_local):
        super().__init__(Task, entity="Task", clock=clock)

    def list_by_status(self, status: TaskStatus) -> Sequence[Task]:
        return self.filter(lambda t: t.status == status)

    def list_by_employee(self, employee_id: str) -> Sequence[Task]:
        return self.filter(lambda t: employee_id in t.assigned_employee_ids)

