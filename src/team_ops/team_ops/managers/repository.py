from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Manager


class ManagerRepository(Protocol):
    """Read-only: managers come from a static seed list."""

    def get_by_id(self, manager_id: str) -> Optional[Manager]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Manager]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Manager]:
        raise NotImplementedError
