from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Plain data object; no DB access code here.
    """

    user_id: int
    employee_id: str
    name: str
    password_hash: str
    role: Role = Role.USER
    created_at: Optional[datetime] = None

    def to_public_dict(self) -> dict:
        return {
            "id": self.user_id,
            "employeeId": self.employee_id,
            "name": self.name,
            "role": self.role.value,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
