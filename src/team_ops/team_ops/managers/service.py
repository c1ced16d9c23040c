from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from werkzeug.security import check_password_hash

from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError
from .model import Manager
from .repository import ManagerRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What the presentation layer keeps after login."""

    manager_id: str
    name: str
    email: str
    role: Role


class AuthService:
    """Use case: log a manager in and out.

    Every manager shares one password, stored only as a werkzeug hash. The
    session is a single flag plus the current user; nothing is persisted.
    """

    def __init__(self, managers: ManagerRepository, *, password_hash: str):
        self._managers = managers
        self._password_hash = password_hash
        self._current: Optional[SessionUser] = None

    @property
    def is_authenticated(self) -> bool:
        return self._current is not None

    @property
    def current_user(self) -> Optional[SessionUser]:
        return self._current

    def authenticate(self, email: str, password: str) -> SessionUser:
        manager = self._managers.get_by_email(email)
        if not manager:
            raise AuthenticationError("Invalid email or password")

        try:
            ok = check_password_hash(self._password_hash, password or "")
        except ValueError:
            # e.g. a placeholder or corrupted hash in settings
            ok = False

        if not ok:
            raise AuthenticationError("Invalid email or password")

        return self._to_session(manager)

    def login(self, email: str, password: str) -> bool:
        try:
            self._current = self.authenticate(email, password)
        except AuthenticationError:
            logger.info("login failed for %s", email)
            return False
        logger.info("manager %s logged in", self._current.manager_id)
        return True

    def logout(self) -> None:
        if self._current:
            logger.info("manager %s logged out", self._current.manager_id)
        self._current = None

    def require_login(self) -> SessionUser:
        if self._current is None:
            raise AuthorizationError("Please log in to continue")
        return self._current

    @staticmethod
    def _to_session(manager: Manager) -> SessionUser:
        return SessionUser(
            manager_id=manager.id,
            name=manager.name,
            email=manager.email,
            role=manager.role,
        )
