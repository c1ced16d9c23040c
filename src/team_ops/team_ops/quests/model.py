from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import QuestStatus


@dataclass(frozen=True)
class Quest:
    """Domain entity: an organizational initiative owned by a manager (PIC).

    ``assigned_pic_id`` is a Manager id, ``associated_task_ids`` are Task
    ids. Both are soft references.
    """

    id: str
    title: str
    description: str = ""
    assigned_pic_id: Optional[str] = None
    status: QuestStatus = QuestStatus.NEW
    associated_task_ids: tuple[str, ...] = ()
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
