from __future__ import annotations

from datetime import date, datetime
from typing import Callable, Iterable, Optional, Sequence

from ..common.datetime_utils import hours_between
from ..database.memory_store import InMemoryStore
from ..database.notifier import Listener, Unsubscribe
from .model import AttendanceRecord, attendance_id
from .repository import AttendanceRepository


def _derive_id(values: dict) -> str:
    return attendance_id(values["employee_id"], values["work_date"])


class InMemoryAttendanceRepository(AttendanceRepository):
    """Append-only wrapper around a non-timestamped store."""

    def __init__(self):
        self._store: InMemoryStore[AttendanceRecord] = InMemoryStore(
            AttendanceRecord,
            entity="AttendanceRecord",
            id_factory=_derive_id,
            timestamped=False,
        )

    def create(
        self,
        *,
        employee_id: str,
        work_date: date,
        check_in_time: datetime,
        check_out_time: datetime,
    ) -> str:
        return self._store.create(
            employee_id=employee_id,
            work_date=work_date,
            check_in_time=check_in_time,
            check_out_time=check_out_time,
            total_hours=hours_between(check_in_time, check_out_time),
        )

    def seed(self, records: Iterable[AttendanceRecord]) -> int:
        return self._store.seed(records)

    def get_by_id(self, record_id: str) -> AttendanceRecord:
        return self._store.get_by_id(record_id)

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        return self._store.find(attendance_id(employee_id, work_date))

    def list(self) -> Sequence[AttendanceRecord]:
        return self._store.list()

    def filter(self, predicate: Callable[[AttendanceRecord], bool]) -> Sequence[AttendanceRecord]:
        return self._store.filter(predicate)

    def list_by_employee(
        self,
        employee_id: str,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        def matches(r: AttendanceRecord) -> bool:
            if r.employee_id != employee_id:
                return False
            if start and r.work_date < start:
                return False
            if end and r.work_date > end:
                return False
            return True

        items = self._store.filter(matches)
        return sorted(items, key=lambda r: r.work_date, reverse=True)

    def list_between(self, *, start: date, end: date) -> Sequence[AttendanceRecord]:
        return self._store.filter(lambda r: start <= r.work_date <= end)

    def subscribe(self, listener: Listener) -> Unsubscribe:
        return self._store.subscribe(listener)

    def __len__(self) -> int:
        return len(self._store)
