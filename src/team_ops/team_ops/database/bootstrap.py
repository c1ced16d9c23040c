"""Demo seed data.

Mirrors the mock data the dashboard ships with so the core can be exercised
end to end. Nothing here is required by the stores themselves.
"""
from __future__ import annotations

import logging
import random
from datetime import date, datetime, time, timedelta
from typing import TYPE_CHECKING, Iterable, Optional

from ..attendance.model import AttendanceRecord, attendance_id
from ..common.datetime_utils import hours_between
from ..core.enums import QuestStatus, TaskStatus
from ..employees.model import Employee
from ..managers.model import Manager
from ..moms.model import MoM
from ..quests.model import Quest
from ..tasks.model import Task

if TYPE_CHECKING:
    from ..container import Container

logger = logging.getLogger(__name__)

DEFAULT_MANAGERS = (
    Manager(id="1", name="John Manager", email="john@company.com"),
    Manager(id="2", name="Sarah Smith", email="sarah@company.com"),
    Manager(id="3", name="Mike Johnson", email="mike@company.com"),
)

PRESENCE_PROBABILITY = 0.9


def _ts(value: str) -> datetime:
    return datetime.strptime(value, "%Y-%m-%d")


def demo_employees() -> list[Employee]:
    return [
        Employee(
            id="1",
            name="Alice Johnson",
            nickname="Ali",
            archetype=("Developer", "QA"),
            special_abilities=("Problem Solving", "Technical Expertise"),
            personalities=("Analytical", "Detail-Oriented"),
            weaknesses=("Perfectionism",),
            created_at=_ts("2024-01-15"),
            updated_at=_ts("2024-01-15"),
        ),
        Employee(
            id="2",
            name="Bob Smith",
            nickname="Bobby",
            archetype=("Designer",),
            special_abilities=("Communication", "Innovation"),
            personalities=("Creative", "Team Player"),
            weaknesses=("Procrastination",),
            created_at=_ts("2024-01-20"),
            updated_at=_ts("2024-01-20"),
        ),
        Employee(
            id="3",
            name="Charlie Brown",
            nickname="Chuck",
            archetype=("Analyst", "Support"),
            special_abilities=("Problem Solving", "Communication"),
            personalities=("Analytical", "Adaptable"),
            weaknesses=("Lack of Focus",),
            created_at=_ts("2024-02-01"),
            updated_at=_ts("2024-02-01"),
        ),
    ]


def demo_tasks() -> list[Task]:
    return [
        Task(
            id="1",
            title="Implement Login System",
            description="Create a secure login system with JWT authentication",
            due_date=date(2024, 3, 15),
            assigned_employee_ids=("1",),
            status=TaskStatus.IN_PROGRESS,
            attached_mom_ids=("1",),
            created_by="1",
            created_at=_ts("2024-02-01"),
            updated_at=_ts("2024-02-10"),
        ),
        Task(
            id="2",
            title="Design Dashboard UI",
            description="Create wireframes and mockups for the main dashboard",
            due_date=date(2024, 3, 10),
            assigned_employee_ids=("2",),
            status=TaskStatus.TODO,
            created_by="1",
            created_at=_ts("2024-02-05"),
            updated_at=_ts("2024-02-05"),
        ),
        Task(
            id="3",
            title="Database Schema Review",
            description="Review and optimize the database schema for performance",
            due_date=date(2024, 3, 20),
            assigned_employee_ids=("1", "3"),
            status=TaskStatus.DONE,
            attached_mom_ids=("2",),
            created_by="2",
            created_at=_ts("2024-01-25"),
            updated_at=_ts("2024-02-15"),
        ),
    ]


def demo_moms() -> list[MoM]:
    return [
        MoM(
            id="1",
            title="Q1 Planning Meeting",
            date=date(2024, 2, 1),
            attendees=("John Manager", "Alice Johnson", "Bob Smith"),
            content=(
                "<h2>Meeting Agenda</h2><p>Discussed Q1 priorities and resource allocation.</p>"
                "<ul><li>Login system implementation</li><li>UI/UX improvements</li>"
                "<li>Database optimization</li></ul>"
            ),
            location="Conference Room A",
            duration="2 hours",
            to_follow_up=(
                "Follow up with development team on login system requirements\n"
                "Schedule UI/UX review session\n"
                "Prepare database optimization proposal"
            ),
            created_by="1",
            created_at=_ts("2024-02-01"),
            updated_at=_ts("2024-02-01"),
        ),
        MoM(
            id="2",
            title="Database Review Session",
            date=date(2024, 2, 15),
            attendees=("Sarah Smith", "Alice Johnson", "Charlie Brown"),
            content=(
                "<h2>Database Schema Review</h2><p>Reviewed current database structure and identified "
                "optimization opportunities.</p><h3>Key Points:</h3><ul><li>Index optimization needed</li>"
                "<li>Query performance improvements</li><li>Data normalization review</li></ul>"
            ),
            location="Virtual Meeting",
            duration="1.5 hours",
            to_follow_up=(
                "Implement database indexing improvements\n"
                "Run performance tests on optimized queries\n"
                "Document normalization recommendations"
            ),
            created_by="2",
            created_at=_ts("2024-02-15"),
            updated_at=_ts("2024-02-15"),
        ),
    ]


def demo_quests() -> list[Quest]:
    return [
        Quest(
            id="1",
            title="Q1 Development Sprint",
            description="Oversee the completion of all Q1 development tasks",
            assigned_pic_id="2",
            status=QuestStatus.ON_PROGRESS,
            associated_task_ids=("1", "2"),
            created_by="1",
            created_at=_ts("2024-02-01"),
            updated_at=_ts("2024-02-01"),
        ),
        Quest(
            id="2",
            title="Database Optimization Project",
            description="Lead the database review and optimization initiative",
            assigned_pic_id="3",
            status=QuestStatus.READY,
            associated_task_ids=("3",),
            created_by="1",
            created_at=_ts("2024-02-10"),
            updated_at=_ts("2024-02-10"),
        ),
    ]


def generate_mock_attendance(
    employee_ids: Iterable[str],
    *,
    start: date,
    end: date,
    rng: Optional[random.Random] = None,
) -> list[AttendanceRecord]:
    """Weekdays only, ~90% presence, in between 9-11 AM, out between 5-8 PM."""
    rng = rng or random.Random()
    employee_ids = list(employee_ids)
    records: list[AttendanceRecord] = []

    day = start
    while day <= end:
        if day.weekday() < 5:
            for employee_id in employee_ids:
                if rng.random() >= PRESENCE_PROBABILITY:
                    continue
                check_in = datetime.combine(day, time(9 + rng.randrange(2), rng.randrange(60)))
                check_out = datetime.combine(day, time(17 + rng.randrange(3), rng.randrange(60)))
                records.append(
                    AttendanceRecord(
                        id=attendance_id(employee_id, day),
                        employee_id=employee_id,
                        work_date=day,
                        check_in_time=check_in,
                        check_out_time=check_out,
                        total_hours=hours_between(check_in, check_out),
                    )
                )
        day += timedelta(days=1)
    return records


def seed_demo_data(
    container: "Container",
    *,
    attendance_start: date,
    attendance_end: date,
    random_seed: Optional[int] = None,
) -> None:
    employees = demo_employees()
    container.employees_repo.seed(employees)
    container.tasks_repo.seed(demo_tasks())
    container.moms_repo.seed(demo_moms())
    container.quests_repo.seed(demo_quests())

    rng = random.Random(random_seed)
    attendance = generate_mock_attendance(
        [e.id for e in employees], start=attendance_start, end=attendance_end, rng=rng
    )
    container.attendance_repo.seed(attendance)

    logger.info(
        "demo data ready: %d employees, %d tasks, %d moms, %d quests, %d attendance records",
        len(container.employees_repo),
        len(container.tasks_repo),
        len(container.moms_repo),
        len(container.quests_repo),
        len(container.attendance_repo),
    )
