from __future__ import annotations

from datetime import date

import pytest

from src.team_ops.team_ops.core.enums import TaskStatus
from src.team_ops.team_ops.core.exceptions import NotFoundError, ValidationError
from src.team_ops.team_ops.tasks.memory_task_repository import InMemoryTaskRepository
from src.team_ops.team_ops.tasks.service import TaskService


@pytest.fixture
def repo(clock):
    return InMemoryTaskRepository(clock=clock)


@pytest.fixture
def service(repo):
    return TaskService(repo)


def _create(service, **overrides):
    values = dict(title="Implement login", due_date=date(2024, 3, 15), created_by="1")
    values.update(overrides)
    return service.create_task(**values)


def test_create_task_defaults_to_todo(service):
    task = service.get(_create(service))

    assert task.status == TaskStatus.TODO
    assert task.assigned_employee_ids == ()
    assert task.created_by == "1"


def test_create_task_accepts_status_label(service):
    task = service.get(_create(service, status="Blocked"))
    assert task.status == TaskStatus.BLOCKED


def test_create_task_rejects_unknown_status(service):
    with pytest.raises(ValidationError):
        _create(service, status="Someday")


@pytest.mark.parametrize("field", ["title", "due_date", "created_by"])
def test_create_task_requires_fields(service, field):
    with pytest.raises(ValidationError):
        _create(service, **{field: None})


def test_create_task_does_not_validate_references(service):
    task = service.get(_create(service, assigned_employee_ids=["does-not-exist"]))
    assert task.assigned_employee_ids == ("does-not-exist",)


def test_any_status_transition_is_allowed(service):
    task_id = _create(service)

    for status in (TaskStatus.DONE, TaskStatus.TODO, TaskStatus.BLOCKED, TaskStatus.IN_PROGRESS, TaskStatus.DONE):
        assert service.move_task(task_id, status).status == status


def test_update_task_preserves_untouched_fields(service, clock):
    task_id = _create(service, description="JWT", assigned_employee_ids=["1"])
    clock.advance(minutes=1)

    task = service.update_task(task_id, title="Implement SSO")

    assert task.title == "Implement SSO"
    assert task.description == "JWT"
    assert task.assigned_employee_ids == ("1",)
    assert task.updated_at > task.created_at


def test_queries_by_status_and_employee(service):
    a = _create(service, assigned_employee_ids=["1"], status=TaskStatus.DONE)
    b = _create(service, assigned_employee_ids=["1", "3"])
    _create(service, assigned_employee_ids=["2"])

    assert [t.id for t in service.list_by_status("Done")] == [a]
    assert [t.id for t in service.list_for_employee("1")] == [a, b]
    assert [t.id for t in service.list_for_employee("3")] == [b]


def test_delete_task(service):
    task_id = _create(service)
    service.delete_task(task_id)

    with pytest.raises(NotFoundError):
        service.get(task_id)
    with pytest.raises(NotFoundError):
        service.move_task(task_id, TaskStatus.DONE)
