from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's presence on one day.

    Immutable once recorded. ``id`` is derived from employee id and date, so
    there is at most one record per employee per day.
    """

    id: str
    employee_id: str
    work_date: date
    check_in_time: datetime
    check_out_time: datetime
    total_hours: float


@dataclass(frozen=True)
class AttendanceStatistics:
    """Read-model for the attendance report (one row per employee)."""

    employee_id: str
    employee_name: str
    total_hours: float
    days_present: int
    average_daily_hours: float


@dataclass(frozen=True)
class AttendanceSummary:
    """One employee's history at a glance.

    Check-in/out bounds are clock times in minutes since midnight, so records
    from different days compare by time of day.
    """

    employee_id: str
    total_days: int
    total_hours: float
    average_hours: float
    earliest_check_in: int
    latest_check_out: int

    @property
    def earliest_check_in_label(self) -> str:
        return format_minutes(self.earliest_check_in)

    @property
    def latest_check_out_label(self) -> str:
        return format_minutes(self.latest_check_out)


def format_minutes(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def attendance_id(employee_id: str, work_date: date) -> str:
    return f"{employee_id}-{work_date.isoformat()}"
