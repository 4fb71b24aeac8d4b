"""In-memory repositories.

Used by the test-suite and by local runs with ``STORE=memory``. A lock
serializes each check-and-insert so the uniqueness rules match the MySQL
schema (unique employee id, one attendance record per user per day).
"""
from __future__ import annotations

import threading
from datetime import date, datetime
from typing import Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import now_local
from ..core.constants import ALREADY_MARKED_MESSAGE
from ..core.enums import Role
from ..core.exceptions import ConflictError
from ..users.model import User


class InMemoryUserRepository:
    def __init__(self):
        self._lock = threading.Lock()
        self._by_id: dict[int, User] = {}
        self._next_id = 1

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._by_id.get(int(user_id))

    def get_by_employee_id(self, employee_id: str) -> Optional[User]:
        for user in list(self._by_id.values()):
            if user.employee_id == employee_id:
                return user
        return None

    def create_user(self, *, employee_id: str, name: str, password_hash: str, role: Role) -> User:
        with self._lock:
            if self.get_by_employee_id(employee_id):
                raise ConflictError("User already exists")
            user = User(
                user_id=self._next_id,
                employee_id=employee_id,
                name=name,
                password_hash=password_hash,
                role=role,
                created_at=now_local(),
            )
            self._by_id[user.user_id] = user
            self._next_id += 1
            return user

    def delete_by_id(self, user_id: int) -> bool:
        with self._lock:
            return self._by_id.pop(int(user_id), None) is not None

    def list_all(self) -> Sequence[User]:
        return list(self._by_id.values())


class InMemoryAttendanceRepository:
    def __init__(self):
        self._lock = threading.Lock()
        self._records: list[AttendanceRecord] = []
        self._days: set[tuple[int, date]] = set()

    def get_for_user_between(self, user_id: int, start: datetime, end: datetime) -> Optional[AttendanceRecord]:
        for r in list(self._records):
            if r.user_id == user_id and start <= r.marked_at < end:
                return r
        return None

    def create_record(self, *, user_id: int, employee_id: str, name: str, marked_at: datetime) -> AttendanceRecord:
        key = (int(user_id), marked_at.date())
        with self._lock:
            if key in self._days:
                raise ConflictError(ALREADY_MARKED_MESSAGE)
            record = AttendanceRecord(
                attendance_id=len(self._records) + 1,
                user_id=int(user_id),
                employee_id=employee_id,
                name=name,
                marked_at=marked_at,
                work_date=marked_at.date(),
            )
            self._records.append(record)
            self._days.add(key)
            return record

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        return [r for r in list(self._records) if r.employee_id == employee_id]
