from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional, Sequence, Union

from ..common.validators import clean_tags, require_non_empty
from ..core.enums import QuestStatus
from ..core.exceptions import ValidationError
from ..tasks.service import TaskService
from .model import Quest
from .repository import QuestRepository

logger = logging.getLogger(__name__)


def parse_quest_status(value: Union[str, QuestStatus]) -> QuestStatus:
    try:
        return QuestStatus(value)
    except ValueError:
        raise ValidationError(f"Unknown quest status: {value!r}")


class QuestService:
    """Use case: manage quests and the tasks that belong to them."""

    def __init__(self, quests: QuestRepository, tasks: TaskService):
        self._quests = quests
        self._tasks = tasks

    def create_quest(
        self,
        *,
        title: str,
        assigned_pic_id: str,
        created_by: str,
        description: str = "",
        status: Union[str, QuestStatus] = QuestStatus.NEW,
        associated_task_ids: Optional[Iterable[str]] = None,
    ) -> str:
        return self._quests.create(
            title=require_non_empty(title, "Title"),
            description=(description or "").strip(),
            assigned_pic_id=require_non_empty(assigned_pic_id, "PIC"),
            status=parse_quest_status(status),
            associated_task_ids=clean_tags(associated_task_ids),
            created_by=require_non_empty(created_by, "Created by"),
        )

    def update_quest(
        self,
        quest_id: str,
        *,
        title: Optional[str] = None,
        description: Optional[str] = None,
        assigned_pic_id: Optional[str] = None,
        status: Union[str, QuestStatus, None] = None,
    ) -> Quest:
        patch: dict = {}
        if title is not None:
            patch["title"] = require_non_empty(title, "Title")
        if description is not None:
            patch["description"] = description.strip()
        if assigned_pic_id is not None:
            patch["assigned_pic_id"] = require_non_empty(assigned_pic_id, "PIC")
        if status is not None:
            patch["status"] = parse_quest_status(status)
        return self._quests.update(quest_id, **patch)

    def move_quest(self, quest_id: str, status: Union[str, QuestStatus]) -> Quest:
        return self._quests.update(quest_id, status=parse_quest_status(status))

    def delete_quest(self, quest_id: str) -> None:
        # Associated tasks stay in the task store.
        self._quests.delete(quest_id)

    def add_task(
        self,
        quest_id: str,
        *,
        title: str,
        due_date: date,
        created_by: str,
        **task_fields,
    ) -> str:
        """Create a task and associate it with the quest in one step."""
        quest = self._quests.get_by_id(quest_id)
        task_id = self._tasks.create_task(title=title, due_date=due_date, created_by=created_by, **task_fields)
        self._quests.update(quest_id, associated_task_ids=quest.associated_task_ids + (task_id,))
        logger.info("task %s added to quest %s", task_id, quest_id)
        return task_id

    def attach_task(self, quest_id: str, task_id: str) -> Quest:
        quest = self._quests.get_by_id(quest_id)
        if task_id in quest.associated_task_ids:
            return quest
        return self._quests.update(quest_id, associated_task_ids=quest.associated_task_ids + (task_id,))

    def detach_task(self, quest_id: str, task_id: str) -> Quest:
        quest = self._quests.get_by_id(quest_id)
        if task_id not in quest.associated_task_ids:
            raise ValidationError(f"Task {task_id!r} is not part of quest {quest_id!r}")
        remaining = tuple(t for t in quest.associated_task_ids if t != task_id)
        return self._quests.update(quest_id, associated_task_ids=remaining)

    def get(self, quest_id: str) -> Quest:
        return self._quests.get_by_id(quest_id)

    def list_all(self) -> Sequence[Quest]:
        return self._quests.list()

    def list_by_pic(self, pic_id: str) -> Sequence[Quest]:
        return self._quests.list_by_pic(pic_id)

    def list_by_status(self, status: Union[str, QuestStatus]) -> Sequence[Quest]:
        return self._quests.list_by_status(parse_quest_status(status))
