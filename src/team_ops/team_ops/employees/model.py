from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: a team member and their profile tags."""

    id: str
    name: str
    nickname: str = ""
    archetype: tuple[str, ...] = ()
    special_abilities: tuple[str, ...] = ()
    personalities: tuple[str, ...] = ()
    weaknesses: tuple[str, ...] = ()
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def label(self) -> str:
        return f"{self.name} ({self.nickname})" if self.nickname else self.name

    @property
    def first_name(self) -> str:
        return self.name.split(" ")[0] if self.name else ""
