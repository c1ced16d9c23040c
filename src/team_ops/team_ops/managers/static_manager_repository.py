from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..core.exceptions import ValidationError
from .model import Manager
from .repository import ManagerRepository


class StaticManagerRepository(ManagerRepository):
    def __init__(self, managers: Iterable[Manager]):
        self._by_id: dict[str, Manager] = {}
        self._by_email: dict[str, Manager] = {}
        for m in managers:
            key = m.email.strip().lower()
            if key in self._by_email:
                raise ValidationError(f"Duplicate manager email: {m.email}")
            if m.id in self._by_id:
                raise ValidationError(f"Duplicate manager id: {m.id}")
            self._by_id[m.id] = m
            self._by_email[key] = m

    def get_by_id(self, manager_id: str) -> Optional[Manager]:
        return self._by_id.get(manager_id)

    def get_by_email(self, email: str) -> Optional[Manager]:
        return self._by_email.get((email or "").strip().lower())

    def list_all(self) -> Sequence[Manager]:
        return list(self._by_id.values())
