from __future__ import annotations

from typing import Callable, Iterable, Optional, Protocol, Sequence

from ..core.enums import TaskStatus
from ..database.notifier import Listener, Unsubscribe
from .model import Task


class TaskRepository(Protocol):
    def create(self, **values) -> str:
        raise NotImplementedError

    def update(self, record_id: str, **patch) -> Task:
        raise NotImplementedError

    def delete(self, record_id: str) -> None:
        raise NotImplementedError

    def get_by_id(self, record_id: str) -> Task:
        raise NotImplementedError

    def find(self, record_id: str) -> Optional[Task]:
        raise NotImplementedError

    def get_by_ids(self, record_ids: Iterable[str]) -> Sequence[Task]:
        raise NotImplementedError

    def list(self) -> Sequence[Task]:
        raise NotImplementedError

    def filter(self, predicate: Callable[[Task], bool]) -> Sequence[Task]:
        raise NotImplementedError

    def list_by_status(self, status: TaskStatus) -> Sequence[Task]:
        raise NotImplementedError

    def list_by_employee(self, employee_id: str) -> Sequence[Task]:
        raise NotImplementedError

    def subscribe(self, listener: Listener) -> Unsubscribe:
        raise NotImplementedError
