from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .config import Settings
from .database.connection import DBConfig, DatabaseConnection
from .database.memory import InMemoryAttendanceRepository, InMemoryUserRepository
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, UserService
from .users.tokens import TokenService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    attendance_repo: AttendanceRepository

    token_service: TokenService
    auth_service: AuthService
    user_service: UserService
    attendance_service: AttendanceService


def build_container(
    settings: Settings,
    *,
    users_repo: Optional[UserRepository] = None,
    attendance_repo: Optional[AttendanceRepository] = None,
) -> Container:
    """Wire repositories and services.

    Repositories passed in explicitly win over the store selected by settings.
    """

    if users_repo is None or attendance_repo is None:
        if settings.store == "memory":
            users_repo = users_repo or InMemoryUserRepository()
            attendance_repo = attendance_repo or InMemoryAttendanceRepository()
        else:
            conn = DatabaseConnection(DBConfig.from_dict(settings.db_config))
            users_repo = users_repo or MySQLUserRepository(conn)
            attendance_repo = attendance_repo or MySQLAttendanceRepository(conn)

    token_service = TokenService(settings.jwt_secret, ttl_seconds=settings.token_ttl_seconds)
    auth_service = AuthService(users_repo, token_service, admin_employee_id=settings.admin_employee_id)
    user_service = UserService(users_repo)
    attendance_service = AttendanceService(attendance_repo, users_repo)

    return Container(
        users_repo=users_repo,
        attendance_repo=attendance_repo,
        token_service=token_service,
        auth_service=auth_service,
        user_service=user_service,
        attendance_service=attendance_service,
    )
