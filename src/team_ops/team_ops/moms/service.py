from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Sequence

from ..common.validators import clean_tags, optional_text, require_non_empty, require_present
from .model import MoM
from .repository import MoMRepository


class MoMService:
    """Use case: record and edit meeting minutes."""

    def __init__(self, moms: MoMRepository):
        self._moms = moms

    def create_mom(
        self,
        *,
        title: str,
        date: date,
        created_by: str,
        attendees: Optional[Iterable[str]] = None,
        content: str = "",
        location: Optional[str] = None,
        duration: Optional[str] = None,
        to_follow_up: Optional[str] = None,
    ) -> str:
        return self._moms.create(
            title=require_non_empty(title, "Title"),
            date=require_present(date, "Date"),
            attendees=clean_tags(attendees),
            content=content or "",
            location=optional_text(location),
            duration=optional_text(duration),
            to_follow_up=optional_text(to_follow_up),
            created_by=require_non_empty(created_by, "Created by"),
        )

    def update_mom(
        self,
        mom_id: str,
        *,
        title: Optional[str] = None,
        date: Optional[date] = None,
        attendees: Optional[Iterable[str]] = None,
        content: Optional[str] = None,
        location: Optional[str] = None,
        duration: Optional[str] = None,
        to_follow_up: Optional[str] = None,
    ) -> MoM:
        """``None`` leaves a field unchanged; blank text clears an optional field."""
        patch: dict = {}
        if title is not None:
            patch["title"] = require_non_empty(title, "Title")
        if date is not None:
            patch["date"] = date
        if attendees is not None:
            patch["attendees"] = clean_tags(attendees)
        if content is not None:
            patch["content"] = content
        if location is not None:
            patch["location"] = optional_text(location)
        if duration is not None:
            patch["duration"] = optional_text(duration)
        if to_follow_up is not None:
            patch["to_follow_up"] = optional_text(to_follow_up)
        return self._moms.update(mom_id, **patch)

    def delete_mom(self, mom_id: str) -> None:
        self._moms.delete(mom_id)

    def get(self, mom_id: str) -> MoM:
        return self._moms.get_by_id(mom_id)

    def get_many(self, mom_ids: Iterable[str]) -> Sequence[MoM]:
        return self._moms.get_by_ids(mom_ids)

    def list_all(self) -> Sequence[MoM]:
        """Newest meeting first."""
        return sorted(self._moms.list(), key=lambda m: m.date or date.min, reverse=True)
