from __future__ import annotations

from datetime import date, datetime
from typing import Callable, Iterable, Optional, Protocol, Sequence

from ..database.notifier import Listener, Unsubscribe
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    """Attendance records are append-only: there is no update or delete."""

    def create(
        self,
        *,
        employee_id: str,
        work_date: date,
        check_in_time: datetime,
        check_out_time: datetime,
    ) -> str:
        """Store a day; ``total_hours`` is derived from the check-in/out times."""
        raise NotImplementedError

    def seed(self, records: Iterable[AttendanceRecord]) -> int:
        raise NotImplementedError

    def get_by_id(self, record_id: str) -> AttendanceRecord:
        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def filter(self, predicate: Callable[[AttendanceRecord], bool]) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_by_employee(
        self,
        employee_id: str,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_between(self, *, start: date, end: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def subscribe(self, listener: Listener) -> Unsubscribe:
        raise NotImplementedError
