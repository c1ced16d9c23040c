from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Role of an authenticated user. Only managers log in."""

    MANAGER = "manager"


class TaskStatus(str, Enum):
    """Task board columns. Any status may move to any other."""

    TODO = "To Do"
    IN_PROGRESS = "In Progress"
    DONE = "Done"
    BLOCKED = "Blocked"


class QuestStatus(str, Enum):
    """Quest board columns. Any status may move to any other."""

    NEW = "New"
    READY = "Ready"
    ON_PROGRESS = "On Progress"
    DONE = "Done"


class ChangeKind(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
