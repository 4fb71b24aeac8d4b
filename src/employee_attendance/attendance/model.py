from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance mark for a user on a calendar day."""

    attendance_id: int
    user_id: int
    employee_id: str
    name: str
    marked_at: datetime
    work_date: date

    def to_public_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "userId": self.user_id,
            "employeeId": self.employee_id,
            "name": self.name,
            "date": self.marked_at.isoformat(),
        }
