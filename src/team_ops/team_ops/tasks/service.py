from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Sequence, Union

from ..common.validators import clean_tags, require_non_empty, require_present
from ..core.enums import TaskStatus
from ..core.exceptions import ValidationError
from .model import Task
from .repository import TaskRepository


def parse_task_status(value: Union[str, TaskStatus]) -> TaskStatus:
    try:
        return TaskStatus(value)
    except ValueError:
        raise ValidationError(f"Unknown task status: {value!r}")


class TaskService:
    """Use case: create, edit and move tasks on the board."""

    def __init__(self, tasks: TaskRepository):
        self._tasks = tasks

    def create_task(
        self,
        *,
        title: str,
        due_date: date,
        created_by: str,
        description: str = "",
        assigned_employee_ids: Optional[Iterable[str]] = None,
        status: Union[str, TaskStatus] = TaskStatus.TODO,
        attached_mom_ids: Optional[Iterable[str]] = None,
    ) -> str:
        return self._tasks.create(
            title=require_non_empty(title, "Title"),
            description=(description or "").strip(),
            due_date=require_present(due_date, "Due date"),
            assigned_employee_ids=clean_tags(assigned_employee_ids),
            status=parse_task_status(status),
            attached_mom_ids=clean_tags(attached_mom_ids),
            created_by=require_non_empty(created_by, "Created by"),
        )

    def update_task(
        self,
        task_id: str,
        *,
        title: Optional[str] = None,
        description: Optional[str] = None,
        due_date: Optional[date] = None,
        assigned_employee_ids: Optional[Iterable[str]] = None,
        status: Union[str, TaskStatus, None] = None,
        attached_mom_ids: Optional[Iterable[str]] = None,
    ) -> Task:
        patch: dict = {}
        if title is not None:
            patch["title"] = require_non_empty(title, "Title")
        if description is not None:
            patch["description"] = description.strip()
        if due_date is not None:
            patch["due_date"] = due_date
        if assigned_employee_ids is not None:
            patch["assigned_employee_ids"] = clean_tags(assigned_employee_ids)
        if status is not None:
            patch["status"] = parse_task_status(status)
        if attached_mom_ids is not None:
            patch["attached_mom_ids"] = clean_tags(attached_mom_ids)
        return self._tasks.update(task_id, **patch)

    def move_task(self, task_id: str, status: Union[str, TaskStatus]) -> Task:
        """Board drag-and-drop: any column to any column."""
        return self._tasks.update(task_id, status=parse_task_status(status))

    def delete_task(self, task_id: str) -> None:
        self._tasks.delete(task_id)

    def get(self, task_id: str) -> Task:
        return self._tasks.get_by_id(task_id)

    def list_all(self) -> Sequence[Task]:
        return self._tasks.list()

    def list_by_status(self, status: Union[str, TaskStatus]) -> Sequence[Task]:
        return self._tasks.list_by_status(parse_task_status(status))

    def list_for_employee(self, employee_id: str) -> Sequence[Task]:
        return self._tasks.list_by_employee(employee_id)
