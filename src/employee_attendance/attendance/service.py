from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import day_window, now_local
from ..common.validators import require_non_empty
from ..core.constants import ALREADY_MARKED_MESSAGE
from ..core.exceptions import ConflictError, NotFoundError, PermissionDeniedError
from ..users.repository import UserRepository
from ..users.service import SessionUser
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Attendance ledger: at most one record per user per local calendar day."""

    def __init__(self, attendance: AttendanceRepository, users: UserRepository):
        self._attendance = attendance
        self._users = users

    @staticmethod
    def ensure_can_act_for(caller: SessionUser, employee_id: str) -> None:
        if caller.is_admin or caller.employee_id == employee_id:
            return
        raise PermissionDeniedError("Access denied")

    def mark_attendance(
        self,
        employee_id: str,
        *,
        caller: Optional[SessionUser] = None,
        now: Optional[datetime] = None,
    ) -> AttendanceRecord:
        employee_id = require_non_empty(employee_id, "User ID")

        if caller is not None:
            self.ensure_can_act_for(caller, employee_id)

        user = self._users.get_by_employee_id(employee_id)
        if not user:
            logger.info("Mark attendance rejected: unknown employee")
            raise NotFoundError("User not found")

        now = now or now_local()
        start, end = day_window(now)

        if self._attendance.get_for_user_between(user.user_id, start, end):
            raise ConflictError(ALREADY_MARKED_MESSAGE)

        # The repository rejects a concurrent insert for the same user-day.
        record = self._attendance.create_record(
            user_id=user.user_id,
            employee_id=user.employee_id,
            name=user.name,
            marked_at=now,
        )
        logger.info("Attendance marked for user id=%s on %s", user.user_id, record.work_date.isoformat())
        return record

    def get_history(self, employee_id: str, *, caller: Optional[SessionUser] = None) -> Sequence[AttendanceRecord]:
        employee_id = require_non_empty(employee_id, "Employee ID")
        if caller is not None:
            self.ensure_can_act_for(caller, employee_id)

        records = list(self._attendance.list_for_employee(employee_id))
        if not records:
            raise NotFoundError("No attendance records found for this employee")

        logger.debug("Found %d attendance record(s)", len(records))
        return records
