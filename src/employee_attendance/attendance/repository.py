from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_for_user_between(self, user_id: int, start: datetime, end: datetime) -> Optional[AttendanceRecord]:
        """Record for ``user_id`` with ``start <= marked_at < end``, if any."""

        raise NotImplementedError

    def create_record(
        self,
        *,
        user_id: int,
        employee_id: str,
        name: str,
        marked_at: datetime,
    ) -> AttendanceRecord:
        """Insert a record for the calendar day of ``marked_at``.

        Raises ConflictError if the user already has a record for that day.
        """

        raise NotImplementedError

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
