from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class Manager:
    """Domain entity: a manager who can log in, own quests and author records."""

    id: str
    name: str
    email: str
    role: Role = Role.MANAGER
