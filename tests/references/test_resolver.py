from __future__ import annotations

from datetime import date

from src.team_ops.team_ops.core.constants import UNKNOWN_LABEL, UNKNOWN_MOM_LABEL
from src.team_ops.team_ops.employees.model import Employee
from src.team_ops.team_ops.references.resolver import Dangling, resolve


class FakeStore:
    def __init__(self, records):
        self._records = {r.id: r for r in records}

    def find(self, record_id):
        return self._records.get(record_id)


def _employee(container, name, nickname=""):
    return container.employee_service.create_employee(name=name, nickname=nickname, archetype=["Developer"])


def _task(container, **overrides):
    values = dict(title="t", due_date=date(2024, 3, 1), created_by="1")
    values.update(overrides)
    return container.task_service.create_task(**values)


def test_resolve_keeps_order_and_marks_missing():
    alice = Employee(id="1", name="Alice")
    out = resolve(["1", "x", "1"], FakeStore([alice]))

    assert out == [alice, Dangling("x"), alice]
    assert out[1].display == UNKNOWN_LABEL


def test_task_with_unknown_assignee_resolves_partially(container):
    alice = _employee(container, "Alice Johnson", "Ali")
    task = container.task_service.get(_task(container, assigned_employee_ids=[alice, "ghost"]))

    resolved = container.resolver.assignees(task)

    assert resolved[0].name == "Alice Johnson"
    assert resolved[1] == Dangling("ghost")
    assert container.resolver.employee_names(task.assigned_employee_ids) == ["Alice Johnson", UNKNOWN_LABEL]
    assert container.resolver.employee_label(alice) == "Alice Johnson (Ali)"
    assert container.resolver.employee_label("ghost") == UNKNOWN_LABEL


def test_deleting_employee_does_not_cascade(container):
    e1 = _employee(container, "Eve")
    t1 = _task(container, assigned_employee_ids=[e1])

    container.employee_service.delete_employee(e1)

    task = container.task_service.get(t1)
    assert e1 in task.assigned_employee_ids
    assert container.resolver.assignees(task) == [Dangling(e1)]
    assert container.resolver.dangling_references(task)["assigned_employee_ids"] == [e1]


def test_manager_name(container):
    assert container.resolver.manager_name("2") == "Sarah Smith"
    assert container.resolver.manager_name("99") == UNKNOWN_LABEL
    assert container.resolver.manager_name(None) == UNKNOWN_LABEL


def test_mom_title_and_tasks_for_mom(container):
    mom_id = container.mom_service.create_mom(title="Planning", date=date(2024, 2, 1), created_by="1")
    task_id = _task(container, attached_mom_ids=[mom_id, "old-mom"])

    assert container.resolver.mom_title(mom_id) == "Planning"
    assert container.resolver.mom_title("old-mom") == UNKNOWN_MOM_LABEL
    assert [t.id for t in container.resolver.tasks_for_mom(mom_id)] == [task_id]

    resolved = container.resolver.resolve_moms([mom_id, "old-mom"])
    assert resolved[0].title == "Planning"
    assert resolved[1].display == UNKNOWN_MOM_LABEL
    assert container.resolver.dangling_references(container.task_service.get(task_id))["attached_mom_ids"] == ["old-mom"]


def test_task_counts_skip_deleted_tasks(container):
    quest_id = container.quest_service.create_quest(title="Q", assigned_pic_id="1", created_by="1")
    keep = container.quest_service.add_task(quest_id, title="keep", due_date=date(2024, 3, 1), created_by="1")
    drop = container.quest_service.add_task(quest_id, title="drop", due_date=date(2024, 3, 1), created_by="1")
    other = container.quest_service.create_quest(title="Empty", assigned_pic_id="1", created_by="1")

    container.task_service.delete_task(drop)

    assert [t.id for t in container.resolver.tasks_for_quest(quest_id)] == [keep]
    assert container.resolver.task_count_for_quest(quest_id) == 1
    assert container.resolver.task_counts_by_quest() == {quest_id: 1, other: 0}
    assert container.resolver.dangling_task_references(container.quest_service.get(quest_id)) == [drop]
    assert [q.id for q in container.resolver.quests_for_task(keep)] == [quest_id]
    assert container.resolver.tasks_for_quest("missing") == []
