from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_employee_id(self, employee_id: str) -> Optional[User]:
        raise NotImplementedError

    def create_user(
        self,
        *,
        employee_id: str,
        name: str,
        password_hash: str,
        role: Role,
    ) -> User:
        """Persist a new user.

        Raises ConflictError when ``employee_id`` is already taken.
        """

        raise NotImplementedError

    def list_all(self) -> Sequence[User]:
        raise NotImplementedError
