from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import DateLike, as_date, minutes_of_day
from ..common.validators import require_non_empty
from ..core.constants import HOURS_PRECISION
from ..core.exceptions import ValidationError
from .model import AttendanceRecord, AttendanceSummary
from .repository import AttendanceRepository


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def record(self, employee_id: str, *, check_in: datetime, check_out: datetime) -> str:
        """Store a completed day. The repository derives ``total_hours``."""
        employee_id = require_non_empty(employee_id, "Employee")
        if check_out < check_in:
            raise ValidationError("Check-out cannot be earlier than check-in")

        work_date = check_in.date()
        if self._attendance.get_for_employee_and_date(employee_id, work_date):
            raise ValidationError(f"Attendance for {employee_id} on {work_date.isoformat()} already recorded")

        return self._attendance.create(
            employee_id=employee_id,
            work_date=work_date,
            check_in_time=check_in,
            check_out_time=check_out,
        )

    def get(self, record_id: str) -> AttendanceRecord:
        return self._attendance.get_by_id(record_id)

    def history(
        self,
        employee_id: str,
        *,
        start: Optional[DateLike] = None,
        end: Optional[DateLike] = None,
    ) -> Sequence[AttendanceRecord]:
        """Records of one employee, newest first, optionally bounded (inclusive)."""
        return self._attendance.list_by_employee(
            employee_id,
            start=as_date(start) if start else None,
            end=as_date(end) if end else None,
        )

    def get_today_record(self, employee_id: str, today: date) -> Optional[AttendanceRecord]:
        return self._attendance.get_for_employee_and_date(employee_id, today)

    def summary(
        self,
        employee_id: str,
        *,
        start: Optional[DateLike] = None,
        end: Optional[DateLike] = None,
    ) -> Optional[AttendanceSummary]:
        """Totals over ``history``; ``None`` when there is nothing to summarize."""
        records = self.history(employee_id, start=start, end=end)
        if not records:
            return None

        total = sum(r.total_hours for r in records)
        return AttendanceSummary(
            employee_id=employee_id,
            total_days=len(records),
            total_hours=round(total, HOURS_PRECISION),
            average_hours=round(total / len(records), HOURS_PRECISION),
            earliest_check_in=min(minutes_of_day(r.check_in_time) for r in records),
            latest_check_out=max(minutes_of_day(r.check_out_time) for r in records),
        )
