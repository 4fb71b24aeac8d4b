from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from employee_attendance.core.enums import Role
from employee_attendance.core.exceptions import AuthorizationError
from employee_attendance.users.tokens import TokenService

SECRET = "unit-test-secret-value-long-enough"


def test_issue_and_verify_round_trip():
    tokens = TokenService(SECRET)

    claims = tokens.verify(tokens.issue(user_id=7, role=Role.ADMIN))

    assert claims.user_id == 7
    assert claims.role == Role.ADMIN


def test_token_expires_after_one_hour():
    tokens = TokenService(SECRET)
    issued_at = datetime.now(timezone.utc) - timedelta(hours=1, seconds=5)

    token = tokens.issue(user_id=1, role=Role.USER, now=issued_at)

    payload = jwt.decode(token, SECRET, algorithms=["HS256"], options={"verify_exp": False})
    assert payload["exp"] - payload["iat"] == 3600
    with pytest.raises(AuthorizationError, match="expired"):
        tokens.verify(token)


def test_token_signed_with_other_secret_is_rejected():
    forged = TokenService("another-secret-entirely-different").issue(user_id=1, role=Role.ADMIN)

    with pytest.raises(AuthorizationError):
        TokenService(SECRET).verify(forged)


@pytest.mark.parametrize("token", ["", None, "garbage", "a.b.c"])
def test_malformed_tokens_are_rejected(token):
    with pytest.raises(AuthorizationError):
        TokenService(SECRET).verify(token)


def test_token_with_unexpected_claims_is_rejected():
    now = datetime.now(timezone.utc)
    token = jwt.encode({"user": "nope", "iat": now, "exp": now + timedelta(hours=1)}, SECRET, algorithm="HS256")

    with pytest.raises(AuthorizationError):
        TokenService(SECRET).verify(token)


def test_empty_secret_is_refused():
    with pytest.raises(ValueError):
        TokenService("")
