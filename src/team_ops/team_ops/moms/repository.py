from __future__ import annotations

from typing import Callable, Iterable, Optional, Protocol, Sequence

from ..database.notifier import Listener, Unsubscribe
from .model import MoM


class MoMRepository(Protocol):
    def create(self, **values) -> str:
        raise NotImplementedError

    def update(self, record_id: str, **patch) -> MoM:
        raise NotImplementedError

    def delete(self, record_id: str) -> None:
        raise NotImplementedError

    def get_by_id(self, record_id: str) -> MoM:
        raise NotImplementedError

    def find(self, record_id: str) -> Optional[MoM]:
        raise NotImplementedError

    def get_by_ids(self, record_ids: Iterable[str]) -> Sequence[MoM]:
        raise NotImplementedError

    def list(self) -> Sequence[MoM]:
        raise NotImplementedError

    def filter(self, predicate: Callable[[MoM], bool]) -> Sequence[MoM]:
        raise NotImplementedError

    def subscribe(self, listener: Listener) -> Unsubscribe:
        raise NotImplementedError
