from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class MoM:
    """Domain entity: minutes of a meeting.

    ``attendees`` are display names typed by the author, not employee ids.
    ``content`` is rich text stored as HTML markup.
    """

    id: str
    title: str
    date: Optional[date] = None
    attendees: tuple[str, ...] = ()
    content: str = ""
    location: Optional[str] = None
    duration: Optional[str] = None
    to_follow_up: Optional[str] = None
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def follow_up_items(self) -> list[str]:
        return [line.strip() for line in (self.to_follow_up or "").splitlines() if line.strip()]
