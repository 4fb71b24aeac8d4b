from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_ADMIN_EMPLOYEE_ID
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, ConflictError, NotFoundError
from .model import User
from .repository import UserRepository
from .tokens import TokenService

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid Credentials"


@dataclass(frozen=True)
class SessionUser:
    """Caller identity resolved from a session token."""

    user_id: int
    employee_id: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


@dataclass(frozen=True)
class IssuedSession:
    token: str
    user: User


class AuthService:
    """Use cases: register, login, resolve a session token."""

    def __init__(
        self,
        users: UserRepository,
        tokens: TokenService,
        *,
        admin_employee_id: str = DEFAULT_ADMIN_EMPLOYEE_ID,
    ):
        self._users = users
        self._tokens = tokens
        self._admin_employee_id = admin_employee_id

    def role_for(self, employee_id: str) -> Role:
        return Role.ADMIN if employee_id == self._admin_employee_id else Role.USER

    def register(self, employee_id: str, name: str, password: str) -> IssuedSession:
        employee_id = require_non_empty(employee_id, "Employee ID")
        name = require_non_empty(name, "Name")
        require_non_empty(password, "Password")

        if self._users.get_by_employee_id(employee_id):
            raise ConflictError("User already exists")

        # A concurrent signup that slips past the check above is rejected by the store.
        user = self._users.create_user(
            employee_id=employee_id,
            name=name,
            password_hash=generate_password_hash(password),
            role=self.role_for(employee_id),
        )
        logger.info("Registered user id=%s role=%s", user.user_id, user.role.value)
        return IssuedSession(token=self._tokens.issue(user_id=user.user_id, role=user.role), user=user)

    def authenticate(self, employee_id: str, password: str) -> IssuedSession:
        if not isinstance(employee_id, str) or not isinstance(password, str):
            raise AuthenticationError(INVALID_CREDENTIALS)

        user = self._users.get_by_employee_id(employee_id.strip())
        if not user:
            raise AuthenticationError(INVALID_CREDENTIALS)

        try:
            ok = check_password_hash(user.password_hash, password)
        except (ValueError, TypeError):
            # e.g. placeholder hashes or corrupted values
            ok = False

        if not ok:
            logger.info("Failed login for user id=%s", user.user_id)
            raise AuthenticationError(INVALID_CREDENTIALS)

        return IssuedSession(token=self._tokens.issue(user_id=user.user_id, role=user.role), user=user)

    def resolve(self, token: Optional[str]) -> SessionUser:
        claims = self._tokens.verify(token)
        user = self._users.get_by_id(claims.user_id)
        if not user:
            raise AuthorizationError("User no longer exists")
        return SessionUser(user_id=user.user_id, employee_id=user.employee_id, role=claims.role)


class UserService:
    """Use case: role-scoped user listing."""

    def __init__(self, users: UserRepository):
        self._users = users

    def list_users(self, *, current_role: Role, current_user_id: int) -> Sequence[User]:
        if current_role == Role.ADMIN:
            return list(self._users.list_all())

        user = self._users.get_by_id(current_user_id)
        if not user:
            raise NotFoundError("User not found")
        return [user]
