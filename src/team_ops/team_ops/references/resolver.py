from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Protocol, Sequence, TypeVar, Union

from ..core.constants import UNKNOWN_LABEL, UNKNOWN_MOM_LABEL
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..managers.repository import ManagerRepository
from ..moms.model import MoM
from ..moms.repository import MoMRepository
from ..quests.model import Quest
from ..quests.repository import QuestRepository
from ..tasks.model import Task
from ..tasks.repository import TaskRepository

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@dataclass(frozen=True)
class Dangling:
    """Marker for a reference whose target does not exist (any more)."""

    ref_id: str
    display: str = UNKNOWN_LABEL


class _Lookup(Protocol[T_co]):
    def find(self, record_id: str) -> Optional[T_co]:
        ...


def resolve(ids: Iterable[str], store: _Lookup[T]) -> list[Union[T, Dangling]]:
    """Resolve each id to its record or to a ``Dangling`` marker, keeping order."""
    out: list[Union[T, Dangling]] = []
    for ref_id in ids:
        record = store.find(ref_id)
        out.append(record if record is not None else Dangling(ref_id))
    return out


def dangling_ids(resolved: Iterable[object]) -> list[str]:
    return [r.ref_id for r in resolved if isinstance(r, Dangling)]


class ReferenceResolver:
    """Turns soft foreign keys into display-ready joins.

    Nothing here raises on a missing target: the steady state of the system
    includes references to deleted records, and the UI shows "Unknown".
    """

    def __init__(
        self,
        *,
        employees: EmployeeRepository,
        managers: ManagerRepository,
        tasks: TaskRepository,
        moms: MoMRepository,
        quests: QuestRepository,
    ):
        self._employees = employees
        self._managers = managers
        self._tasks = tasks
        self._moms = moms
        self._quests = quests

    # Employees

    def resolve_employees(self, employee_ids: Iterable[str]) -> list[Union[Employee, Dangling]]:
        return resolve(employee_ids, self._employees)

    def employee_name(self, employee_id: str) -> str:
        e = self._employees.find(employee_id)
        return e.name if e else UNKNOWN_LABEL

    def employee_label(self, employee_id: str) -> str:
        """``"Name (Nickname)"`` as shown in task lists."""
        e = self._employees.find(employee_id)
        return e.label if e else UNKNOWN_LABEL

    def employee_names(self, employee_ids: Iterable[str]) -> list[str]:
        return [self.employee_name(i) for i in employee_ids]

    def assignees(self, task: Task) -> list[Union[Employee, Dangling]]:
        return self.resolve_employees(task.assigned_employee_ids)

    # Managers

    def manager_name(self, manager_id: Optional[str]) -> str:
        m = self._managers.get_by_id(manager_id) if manager_id else None
        return m.name if m else UNKNOWN_LABEL

    # Meeting minutes

    def resolve_moms(self, mom_ids: Iterable[str]) -> list[Union[MoM, Dangling]]:
        out: list[Union[MoM, Dangling]] = []
        for r in resolve(mom_ids, self._moms):
            out.append(Dangling(r.ref_id, UNKNOWN_MOM_LABEL) if isinstance(r, Dangling) else r)
        return out

    def mom_title(self, mom_id: str) -> str:
        m = self._moms.find(mom_id)
        return m.title if m else UNKNOWN_MOM_LABEL

    def tasks_for_mom(self, mom_id: str) -> Sequence[Task]:
        return self._tasks.filter(lambda t: mom_id in t.attached_mom_ids)

    # Quests / tasks

    def resolve_tasks(self, task_ids: Iterable[str]) -> list[Union[Task, Dangling]]:
        return resolve(task_ids, self._tasks)

    def tasks_for_quest(self, quest_id: str) -> list[Task]:
        """Existing tasks of a quest, in association order. Dangling ids are skipped."""
        quest = self._quests.find(quest_id)
        if quest is None:
            return []
        return [t for t in self.resolve_tasks(quest.associated_task_ids) if not isinstance(t, Dangling)]

    def task_count_for_quest(self, quest_id: str) -> int:
        return len(self.tasks_for_quest(quest_id))

    def task_counts_by_quest(self) -> dict[str, int]:
        return {q.id: self.task_count_for_quest(q.id) for q in self._quests.list()}

    def quests_for_task(self, task_id: str) -> Sequence[Quest]:
        return self._quests.filter(lambda q: task_id in q.associated_task_ids)

    # Integrity reports (read-only)

    def dangling_references(self, task: Task) -> dict[str, list[str]]:
        return {
            "assigned_employee_ids": dangling_ids(self.resolve_employees(task.assigned_employee_ids)),
            "attached_mom_ids": dangling_ids(resolve(task.attached_mom_ids, self._moms)),
        }

    def dangling_task_references(self, quest: Quest) -> list[str]:
        return dangling_ids(self.resolve_tasks(quest.associated_task_ids))
