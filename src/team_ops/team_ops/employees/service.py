from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..common.validators import clean_tags, require_non_empty, require_non_empty_tags
from .model import Employee
from .repository import EmployeeRepository


class EmployeeService:
    """Use case: manage employee profiles (form layer).

    Required-field rules live here; the repository accepts any payload.
    """

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def create_employee(
        self,
        *,
        name: str,
        nickname: str = "",
        archetype: Iterable[str],
        special_abilities: Optional[Iterable[str]] = None,
        personalities: Optional[Iterable[str]] = None,
        weaknesses: Optional[Iterable[str]] = None,
    ) -> str:
        return self._employees.create(
            name=require_non_empty(name, "Name"),
            nickname=(nickname or "").strip(),
            archetype=require_non_empty_tags(archetype, "Archetype"),
            special_abilities=clean_tags(special_abilities),
            personalities=clean_tags(personalities),
            weaknesses=clean_tags(weaknesses),
        )

    def update_employee(
        self,
        employee_id: str,
        *,
        name: Optional[str] = None,
        nickname: Optional[str] = None,
        archetype: Optional[Iterable[str]] = None,
        special_abilities: Optional[Iterable[str]] = None,
        personalities: Optional[Iterable[str]] = None,
        weaknesses: Optional[Iterable[str]] = None,
    ) -> Employee:
        patch: dict = {}
        if name is not None:
            patch["name"] = require_non_empty(name, "Name")
        if nickname is not None:
            patch["nickname"] = nickname.strip()
        if archetype is not None:
            patch["archetype"] = require_non_empty_tags(archetype, "Archetype")
        if special_abilities is not None:
            patch["special_abilities"] = clean_tags(special_abilities)
        if personalities is not None:
            patch["personalities"] = clean_tags(personalities)
        if weaknesses is not None:
            patch["weaknesses"] = clean_tags(weaknesses)
        return self._employees.update(employee_id, **patch)

    def delete_employee(self, employee_id: str) -> None:
        # Tasks keep the id; the resolver reports it as dangling afterwards.
        self._employees.delete(employee_id)

    def get(self, employee_id: str) -> Employee:
        return self._employees.get_by_id(employee_id)

    def get_many(self, employee_ids: Iterable[str]) -> Sequence[Employee]:
        return self._employees.get_by_ids(employee_ids)

    def list_all(self) -> Sequence[Employee]:
        return self._employees.list()

    def search(self, text: str) -> Sequence[Employee]:
        return self._employees.search(text)
