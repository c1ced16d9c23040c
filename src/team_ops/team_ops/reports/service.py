from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from functools import lru_cache
from typing import Callable, Optional, Sequence

from pyuca import Collator

from ..attendance.model import AttendanceStatistics
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import (
    DateLike,
    as_date,
    end_of_month,
    end_of_week,
    in_window,
    is_this_week,
    is_today,
    now_local,
    start_of_month,
    start_of_week,
)
from ..core.constants import (
    DEFAULT_DUE_THIS_WEEK_LIMIT,
    DEFAULT_RECENT_ACTIVITY_LIMIT,
    DEFAULT_TOP_PERFORMERS,
    HOURS_PRECISION,
    RECENT_MOMS_PER_FEED,
    RECENT_QUESTS_PER_FEED,
    RECENT_TASKS_PER_FEED,
)
from ..core.enums import TaskStatus
from ..moms.repository import MoMRepository
from ..quests.repository import QuestRepository
from ..tasks.model import Task
from ..tasks.repository import TaskRepository
from .metrics import completion_rate, productivity_score, weekly_growth

logger = logging.getLogger(__name__)

NameLookup = Callable[[str], str]


@dataclass(frozen=True)
class WeeklyGrowth:
    this_week: int
    last_week: int
    growth: float


@dataclass(frozen=True)
class Activity:
    kind: str
    title: str
    time: datetime
    record_id: str


@dataclass(frozen=True)
class MonthlyAttendance:
    rows: list[AttendanceStatistics]
    total_hours: float
    average_hours_per_employee: float
    top_performers: list[AttendanceStatistics]


@dataclass(frozen=True)
class DashboardSummary:
    employee_count: int
    total_tasks: int
    open_tasks: int
    status_counts: dict[TaskStatus, int]
    weekly_growth: WeeklyGrowth
    completion_rate: float
    productivity_score: int
    quest_count: int
    quests_this_week: int
    mom_count: int
    due_today: list[Task]
    due_this_week: list[Task]
    recent_activity: list[Activity]
    monthly_attendance: MonthlyAttendance
    alerts: list[str] = field(default_factory=list)


@lru_cache(maxsize=None)
def _collator() -> Collator:
    # loads the Unicode collation table once
    return Collator()


def _name_sort_key(name: str):
    # Unicode collation order (accents sort with their base letter), exact name breaks ties
    return (_collator().sort_key(name), name)


class ReportService:
    """Derived statistics, recomputed from the stores on every call."""

    def __init__(
        self,
        *,
        tasks: TaskRepository,
        moms: MoMRepository,
        quests: QuestRepository,
        attendance: AttendanceRepository,
        employee_name: NameLookup,
        employee_count: Callable[[], int],
        clock: Callable[[], datetime] = now_local,
    ):
        self._tasks = tasks
        self._moms = moms
        self._quests = quests
        self._attendance = attendance
        self._employee_name = employee_name
        self._employee_count = employee_count
        self._clock = clock

    # Attendance

    def attendance_statistics(self, start: DateLike, end: DateLike) -> list[AttendanceStatistics]:
        """Per-employee totals over an inclusive date range, sorted by name."""
        records = self._attendance.list_between(start=as_date(start), end=as_date(end))

        totals: dict[str, float] = {}
        days: dict[str, set[date]] = {}
        for r in records:
            totals[r.employee_id] = totals.get(r.employee_id, 0.0) + r.total_hours
            days.setdefault(r.employee_id, set()).add(r.work_date)

        rows: list[AttendanceStatistics] = []
        for employee_id, total in totals.items():
            present = len(days[employee_id])
            rows.append(
                AttendanceStatistics(
                    employee_id=employee_id,
                    employee_name=self._employee_name(employee_id),
                    total_hours=round(total, HOURS_PRECISION),
                    days_present=present,
                    average_daily_hours=round(total / present, HOURS_PRECISION),
                )
            )

        rows.sort(key=lambda s: _name_sort_key(s.employee_name))
        return rows

    def monthly_attendance(self, now: Optional[datetime] = None, *, top: int = DEFAULT_TOP_PERFORMERS) -> MonthlyAttendance:
        now = now or self._clock()
        rows = self.attendance_statistics(start_of_month(now), end_of_month(now))
        total = round(sum(s.total_hours for s in rows), HOURS_PRECISION)
        average = round(total / len(rows), HOURS_PRECISION) if rows else 0.0
        performers = sorted(rows, key=lambda s: s.total_hours, reverse=True)[:top]
        return MonthlyAttendance(
            rows=rows,
            total_hours=total,
            average_hours_per_employee=average,
            top_performers=performers,
        )

    # Tasks

    def tasks_by_status(self, status: TaskStatus) -> Sequence[Task]:
        return self._tasks.list_by_status(status)

    def task_status_counts(self) -> dict[TaskStatus, int]:
        counts = {s: 0 for s in TaskStatus}
        for t in self._tasks.list():
            counts[t.status] = counts.get(t.status, 0) + 1
        return counts

    def weekly_task_growth(self, now: Optional[datetime] = None) -> WeeklyGrowth:
        now = now or self._clock()
        previous = now - timedelta(days=7)

        def created_in_week_of(moment: datetime) -> int:
            start, end = start_of_week(moment), end_of_week(moment)
            return len(self._tasks.filter(lambda t: t.created_at is not None and in_window(t.created_at, start, end)))

        this_week = created_in_week_of(now)
        last_week = created_in_week_of(previous)
        return WeeklyGrowth(this_week=this_week, last_week=last_week, growth=weekly_growth(this_week, last_week))

    def task_completion_rate(self) -> float:
        counts = self.task_status_counts()
        return completion_rate(counts[TaskStatus.DONE], sum(counts.values()))

    def due_today(self, now: Optional[datetime] = None) -> list[Task]:
        now = now or self._clock()
        return [
            t for t in self._tasks.list()
            if t.due_date and t.status != TaskStatus.DONE and is_today(t.due_date, now=now)
        ]

    def due_this_week(self, now: Optional[datetime] = None, *, limit: int = DEFAULT_DUE_THIS_WEEK_LIMIT) -> list[Task]:
        """Open tasks due later this week; tasks due today are listed separately."""
        now = now or self._clock()
        items = [
            t for t in self._tasks.list()
            if t.due_date
            and t.status != TaskStatus.DONE
            and is_this_week(t.due_date, now=now)
            and not is_today(t.due_date, now=now)
        ]
        return items[:limit]

    # Activity feed

    def recent_activity(self, now: Optional[datetime] = None, *, limit: int = DEFAULT_RECENT_ACTIVITY_LIMIT) -> list[Activity]:
        now = now or self._clock()

        def newest(records, count: int):
            fresh = [r for r in records if r.created_at and is_this_week(r.created_at, now=now)]
            fresh.sort(key=lambda r: r.created_at, reverse=True)
            return fresh[:count]

        feed = [
            Activity("task", f"New task: {t.title}", t.created_at, t.id)
            for t in newest(self._tasks.list(), RECENT_TASKS_PER_FEED)
        ]
        feed += [
            Activity("mom", f"Meeting: {m.title}", m.created_at, m.id)
            for m in newest(self._moms.list(), RECENT_MOMS_PER_FEED)
        ]
        feed += [
            Activity("quest", f"New quest: {q.title}", q.created_at, q.id)
            for q in newest(self._quests.list(), RECENT_QUESTS_PER_FEED)
        ]
        feed.sort(key=lambda a: a.time, reverse=True)
        return feed[:limit]

    # Dashboard

    def dashboard_summary(self, now: Optional[datetime] = None) -> DashboardSummary:
        now = now or self._clock()
        counts = self.task_status_counts()
        total = sum(counts.values())
        due_today = self.due_today(now)
        quests = self._quests.list()

        alerts: list[str] = []
        if counts[TaskStatus.BLOCKED]:
            n = counts[TaskStatus.BLOCKED]
            alerts.append(f"{n} blocked task{'s' if n != 1 else ''}")
        if due_today:
            n = len(due_today)
            alerts.append(f"{n} task{'s' if n != 1 else ''} due today")

        summary = DashboardSummary(
            employee_count=self._employee_count(),
            total_tasks=total,
            open_tasks=counts[TaskStatus.TODO] + counts[TaskStatus.IN_PROGRESS],
            status_counts=counts,
            weekly_growth=self.weekly_task_growth(now),
            completion_rate=completion_rate(counts[TaskStatus.DONE], total),
            productivity_score=productivity_score(counts[TaskStatus.DONE], counts[TaskStatus.IN_PROGRESS], total),
            quest_count=len(quests),
            quests_this_week=sum(1 for q in quests if q.created_at and is_this_week(q.created_at, now=now)),
            mom_count=len(self._moms.list()),
            due_today=due_today,
            due_this_week=self.due_this_week(now),
            recent_activity=self.recent_activity(now),
            monthly_attendance=self.monthly_attendance(now),
            alerts=alerts,
        )
        logger.debug("dashboard summary: %d tasks, %d alerts", total, len(alerts))
        return summary
