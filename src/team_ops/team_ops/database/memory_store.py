from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import replace
from datetime import datetime, timedelta
from typing import Any, Callable, Generic, Iterable, Optional, Sequence, TypeVar

from ..common.datetime_utils import now_local
from ..core.enums import ChangeKind
from ..core.exceptions import ConflictError, NotFoundError
from .notifier import ChangeNotifier, Listener, Unsubscribe

logger = logging.getLogger(__name__)

T = TypeVar("T")

IdFactory = Callable[[dict], str]
Clock = Callable[[], datetime]

_PROTECTED_FIELDS = frozenset({"id", "created_at", "updated_at"})


def new_uuid(_fields: dict) -> str:
    return str(uuid.uuid4())


class InMemoryStore(Generic[T]):
    """Owns the mutable collection of one record type.

    Records are frozen dataclasses with an ``id`` field; timestamped records
    also carry ``created_at`` / ``updated_at``. ``list()`` and ``filter()``
    return records in insertion order. The store performs no business
    validation: services do that before calling in.

    Every mutation notifies subscribers synchronously before returning. The
    lock is re-entrant so listeners may read (or even mutate) the store while
    an event is being delivered.
    """

    def __init__(
        self,
        record_type: type[T],
        *,
        entity: Optional[str] = None,
        id_factory: IdFactory = new_uuid,
        clock: Clock = now_local,
        timestamped: bool = True,
    ):
        self._record_type = record_type
        self._entity = entity or record_type.__name__
        self._id_factory = id_factory
        self._clock = clock
        self._timestamped = timestamped
        self._records: dict[str, T] = {}
        self._notifier = ChangeNotifier(self._entity)
        self._lock = threading.RLock()

    @property
    def entity(self) -> str:
        return self._entity

    # Commands

    def create(self, **values: Any) -> str:
        with self._lock:
            record_id = self._id_factory(values)
            if record_id in self._records:
                raise ConflictError(f"{self._entity} {record_id!r} already exists")

            if self._timestamped:
                now = self._clock()
                values = {**values, "created_at": now, "updated_at": now}
            record = self._record_type(id=record_id, **values)

            self._records[record_id] = record
            logger.debug("created %s %s", self._entity, record_id)
            self._notifier.publish(ChangeKind.CREATED, record_id)
            return record_id

    def update(self, record_id: str, **patch: Any) -> T:
        with self._lock:
            current = self.get_by_id(record_id)
            changes = {k: v for k, v in patch.items() if k not in _PROTECTED_FIELDS}
            if self._timestamped:
                changes["updated_at"] = self._next_updated_at(current)

            record = replace(current, **changes)
            self._records[record_id] = record
            logger.debug("updated %s %s (%s)", self._entity, record_id, ", ".join(sorted(patch)) or "-")
            self._notifier.publish(ChangeKind.UPDATED, record_id)
            return record

    def delete(self, record_id: str) -> None:
        with self._lock:
            if record_id not in self._records:
                raise NotFoundError(self._entity, record_id)
            del self._records[record_id]
            logger.debug("deleted %s %s", self._entity, record_id)
            self._notifier.publish(ChangeKind.DELETED, record_id)

    def seed(self, records: Iterable[T]) -> int:
        """Load pre-built records (fixed ids/timestamps) from a seed provider."""
        count = 0
        with self._lock:
            for record in records:
                record_id = getattr(record, "id")
                if record_id in self._records:
                    raise ConflictError(f"{self._entity} {record_id!r} already exists")
                self._records[record_id] = record
                self._notifier.publish(ChangeKind.CREATED, record_id)
                count += 1
        logger.debug("seeded %d %s record(s)", count, self._entity)
        return count

    # Queries

    def get_by_id(self, record_id: str) -> T:
        record = self._records.get(record_id)
        if record is None:
            raise NotFoundError(self._entity, record_id)
        return record

    def find(self, record_id: str) -> Optional[T]:
        return self._records.get(record_id)

    def exists(self, record_id: str) -> bool:
        return record_id in self._records

    def list(self) -> Sequence[T]:
        return list(self._records.values())

    def filter(self, predicate: Callable[[T], bool]) -> Sequence[T]:
        return [r for r in self._records.values() if predicate(r)]

    def get_by_ids(self, record_ids: Iterable[str]) -> Sequence[T]:
        wanted = set(record_ids)
        return [r for rid, r in self._records.items() if rid in wanted]

    def subscribe(self, listener: Listener) -> Unsubscribe:
        return self._notifier.subscribe(listener)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    def _next_updated_at(self, current: T) -> datetime:
        # updated_at must strictly increase even when the clock has not ticked
        previous = getattr(current, "updated_at")
        now = self._clock()
        if now <= previous:
            now = previous + timedelta(microseconds=1)
        return now
