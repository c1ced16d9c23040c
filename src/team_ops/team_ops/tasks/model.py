from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import TaskStatus


@dataclass(frozen=True)
class Task:
    """Domain entity: a unit of work assigned to employees.

    ``assigned_employee_ids`` and ``attached_mom_ids`` are soft references;
    nothing checks that they exist.
    """

    id: str
    title: str
    description: str = ""
    due_date: Optional[date] = None
    assigned_employee_ids: tuple[str, ...] = ()
    status: TaskStatus = TaskStatus.TODO
    attached_mom_ids: tuple[str, ...] = ()
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
