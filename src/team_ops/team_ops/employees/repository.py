from __future__ import annotations

from typing import Callable, Iterable, Optional, Protocol, Sequence

from ..database.notifier import Listener, Unsubscribe
from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): services depend on this interface, not on a concrete store.
    """

    def create(self, **values) -> str:
        raise NotImplementedError

    def update(self, record_id: str, **patch) -> Employee:
        raise NotImplementedError

    def delete(self, record_id: str) -> None:
        raise NotImplementedError

    def get_by_id(self, record_id: str) -> Employee:
        raise NotImplementedError

    def find(self, record_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_ids(self, record_ids: Iterable[str]) -> Sequence[Employee]:
        raise NotImplementedError

    def list(self) -> Sequence[Employee]:
        raise NotImplementedError

    def filter(self, predicate: Callable[[Employee], bool]) -> Sequence[Employee]:
        raise NotImplementedError

    def subscribe(self, listener: Listener) -> Unsubscribe:
        raise NotImplementedError

    def search(self, text: str) -> Sequence[Employee]:
        raise NotImplementedError
