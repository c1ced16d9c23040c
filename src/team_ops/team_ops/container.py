from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from werkzeug.security import generate_password_hash

from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import now_local
from .database.bootstrap import DEFAULT_MANAGERS
from .database.memory_store import Clock
from .employees.memory_employee_repository import InMemoryEmployeeRepository
from .employees.service import EmployeeService
from .managers.model import Manager
from .managers.service import AuthService
from .managers.static_manager_repository import StaticManagerRepository
from .moms.memory_mom_repository import InMemoryMoMRepository
from .moms.service import MoMService
from .quests.memory_quest_repository import InMemoryQuestRepository
from .quests.service import QuestService
from .references.resolver import ReferenceResolver
from .reports.service import ReportService
from .tasks.memory_task_repository import InMemoryTaskRepository
from .tasks.service import TaskService


@dataclass(frozen=True)
class Container:
    """The whole object graph, built once at process start and passed around."""

    managers_repo: StaticManagerRepository
    employees_repo: InMemoryEmployeeRepository
    tasks_repo: InMemoryTaskRepository
    moms_repo: InMemoryMoMRepository
    quests_repo: InMemoryQuestRepository
    attendance_repo: InMemoryAttendanceRepository

    auth_service: AuthService
    employee_service: EmployeeService
    task_service: TaskService
    mom_service: MoMService
    quest_service: QuestService
    attendance_service: AttendanceService
    resolver: ReferenceResolver
    report_service: ReportService


def build_container(
    *,
    manager_password: Optional[str] = None,
    manager_password_hash: Optional[str] = None,
    managers: Iterable[Manager] = DEFAULT_MANAGERS,
    clock: Clock = now_local,
) -> Container:
    if manager_password_hash is None:
        if manager_password is None:
            raise ValueError("manager_password or manager_password_hash is required")
        manager_password_hash = generate_password_hash(manager_password)

    managers_repo = StaticManagerRepository(managers)
    employees_repo = InMemoryEmployeeRepository(clock=clock)
    tasks_repo = InMemoryTaskRepository(clock=clock)
    moms_repo = InMemoryMoMRepository(clock=clock)
    quests_repo = InMemoryQuestRepository(clock=clock)
    attendance_repo = InMemoryAttendanceRepository()

    auth_service = AuthService(managers_repo, password_hash=manager_password_hash)
    employee_service = EmployeeService(employees_repo)
    task_service = TaskService(tasks_repo)
    mom_service = MoMService(moms_repo)
    quest_service = QuestService(quests_repo, task_service)
    attendance_service = AttendanceService(attendance_repo)
    resolver = ReferenceResolver(
        employees=employees_repo,
        managers=managers_repo,
        tasks=tasks_repo,
        moms=moms_repo,
        quests=quests_repo,
    )
    report_service = ReportService(
        tasks=tasks_repo,
        moms=moms_repo,
        quests=quests_repo,
        attendance=attendance_repo,
        employee_name=resolver.employee_name,
        employee_count=lambda: len(employees_repo),
        clock=clock,
    )

    return Container(
        managers_repo=managers_repo,
        employees_repo=employees_repo,
        tasks_repo=tasks_repo,
        moms_repo=moms_repo,
        quests_repo=quests_repo,
        attendance_repo=attendance_repo,
        auth_service=auth_service,
        employee_service=employee_service,
        task_service=task_service,
        mom_service=mom_service,
        quest_service=quest_service,
        attendance_service=attendance_service,
        resolver=resolver,
        report_service=report_service,
    )
