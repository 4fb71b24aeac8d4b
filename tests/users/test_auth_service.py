from __future__ import annotations

import pytest
from werkzeug.security import check_password_hash

from employee_attendance.core.enums import Role
from employee_attendance.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    ValidationError,
)
from employee_attendance.users.service import AuthService


def test_register_assigns_admin_role_to_sentinel_id(container):
    session = container.auth_service.register("admin1", "Boss", "pw")

    assert session.user.role == Role.ADMIN
    assert container.auth_service.resolve(session.token).role == Role.ADMIN


def test_register_assigns_user_role_to_other_ids(container):
    session = container.auth_service.register("e42", "Alice", "pw")

    assert session.user.role == Role.USER


def test_register_respects_configured_admin_id(users_repo, container):
    auth = AuthService(users_repo, container.token_service, admin_employee_id="chief")

    assert auth.register("chief", "C", "pw").user.role == Role.ADMIN
    assert auth.register("admin1", "A", "pw").user.role == Role.USER


def test_register_same_employee_twice_conflicts(container, users_repo):
    container.auth_service.register("e42", "Alice", "pw")

    with pytest.raises(ConflictError):
        container.auth_service.register("e42", "Someone else", "other")

    assert len(users_repo.list_all()) == 1


def test_register_stores_only_a_hash(container, users_repo):
    container.auth_service.register("e42", "Alice", "s3cret")

    stored = users_repo.get_by_employee_id("e42")
    assert stored.password_hash != "s3cret"
    assert check_password_hash(stored.password_hash, "s3cret")


@pytest.mark.parametrize(
    "employee_id,name,password",
    [("", "A", "pw"), ("e1", "  ", "pw"), ("e1", "A", ""), (None, "A", "pw")],
)
def test_register_requires_all_fields(container, employee_id, name, password):
    with pytest.raises(ValidationError):
        container.auth_service.register(employee_id, name, password)


def test_login_returns_token_and_role(container):
    container.auth_service.register("e42", "Alice", "pw")

    session = container.auth_service.authenticate("e42", "pw")

    assert session.user.role == Role.USER
    resolved = container.auth_service.resolve(session.token)
    assert resolved.employee_id == "e42"


@pytest.mark.parametrize("employee_id", ["admin1", "e1", "e2"])
def test_login_wrong_password_fails_for_any_user(container, employee_id):
    container.auth_service.register(employee_id, "Name", "right")

    with pytest.raises(AuthenticationError) as exc:
        container.auth_service.authenticate(employee_id, "wrong")

    assert str(exc.value) == "Invalid Credentials"


def test_login_unknown_user_gives_same_error_as_wrong_password(container):
    container.auth_service.register("e1", "Name", "right")

    with pytest.raises(AuthenticationError) as unknown:
        container.auth_service.authenticate("nobody", "right")
    with pytest.raises(AuthenticationError) as wrong:
        container.auth_service.authenticate("e1", "wrong")

    assert str(unknown.value) == str(wrong.value)


def test_login_with_corrupt_stored_hash_fails_cleanly(container, users_repo):
    users_repo.create_user(employee_id="e9", name="Legacy", password_hash="CHANGE_ME", role=Role.USER)

    with pytest.raises(AuthenticationError):
        container.auth_service.authenticate("e9", "CHANGE_ME")


def test_resolve_rejects_token_of_deleted_user(container, users_repo):
    session = container.auth_service.register("e42", "Alice", "pw")
    users_repo.delete_by_id(session.user.user_id)

    with pytest.raises(AuthorizationError):
        container.auth_service.resolve(session.token)


def test_resolve_rejects_missing_token(container):
    with pytest.raises(AuthorizationError):
        container.auth_service.resolve(None)
