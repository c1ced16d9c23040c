from __future__ import annotations

import pytest
from werkzeug.security import generate_password_hash

from src.team_ops.team_ops.core.enums import Role
from src.team_ops.team_ops.core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from src.team_ops.team_ops.database.bootstrap import DEFAULT_MANAGERS
from src.team_ops.team_ops.managers.model import Manager
from src.team_ops.team_ops.managers.service import AuthService
from src.team_ops.team_ops.managers.static_manager_repository import StaticManagerRepository


@pytest.fixture
def auth():
    return AuthService(StaticManagerRepository(DEFAULT_MANAGERS), password_hash=generate_password_hash("password"))


def test_login_success_sets_session(auth):
    assert auth.is_authenticated is False

    assert auth.login("sarah@company.com", "password") is True

    assert auth.is_authenticated is True
    assert auth.current_user.manager_id == "2"
    assert auth.current_user.role == Role.MANAGER


def test_login_is_case_insensitive_on_email(auth):
    assert auth.login("  John@Company.com ", "password") is True
    assert auth.current_user.name == "John Manager"


def test_login_wrong_password_returns_false(auth):
    assert auth.login("john@company.com", "wrong") is False
    assert auth.is_authenticated is False


def test_login_unknown_email_returns_false(auth):
    assert auth.login("nobody@company.com", "password") is False


def test_authenticate_raises_on_bad_credentials(auth):
    with pytest.raises(AuthenticationError):
        auth.authenticate("john@company.com", "nope")


def test_corrupted_hash_never_authenticates():
    auth = AuthService(StaticManagerRepository(DEFAULT_MANAGERS), password_hash="CHANGE_ME")
    assert auth.login("john@company.com", "CHANGE_ME") is False


def test_logout_clears_session(auth):
    auth.login("john@company.com", "password")
    auth.logout()

    assert auth.is_authenticated is False
    assert auth.current_user is None


def test_require_login(auth):
    with pytest.raises(AuthorizationError):
        auth.require_login()

    auth.login("mike@company.com", "password")
    assert auth.require_login().manager_id == "3"


def test_manager_emails_must_be_unique():
    with pytest.raises(ValidationError):
        StaticManagerRepository(
            [
                Manager(id="1", name="A", email="a@company.com"),
                Manager(id="2", name="B", email="A@company.com"),
            ]
        )


def test_manager_lookup():
    repo = StaticManagerRepository(DEFAULT_MANAGERS)

    assert repo.get_by_id("2").name == "Sarah Smith"
    assert repo.get_by_id("9") is None
    assert len(repo.list_all()) == 3
