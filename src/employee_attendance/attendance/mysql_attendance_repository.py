from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

import mysql.connector

from ..core.constants import ALREADY_MARKED_MESSAGE
from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = "attendance_id, user_id, employee_id, name, marked_at, work_date"


def _row_to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        user_id=int(r["user_id"]),
        employee_id=r["employee_id"],
        name=r["name"],
        marked_at=r["marked_at"],
        work_date=r["work_date"],
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_user_between(self, user_id: int, start: datetime, end: datetime) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE user_id=%s AND marked_at >= %s AND marked_at < %s
                ORDER BY marked_at ASC
                LIMIT 1
                """,
                (int(user_id), start, end),
            )
            r = fetchone(cur)
            return _row_to_record(r) if r else None

    def create_record(
        self,
        *,
        user_id: int,
        employee_id: str,
        name: str,
        marked_at: datetime,
    ) -> AttendanceRecord:
        work_date = marked_at.date()
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO attendance_records(user_id, employee_id, name, marked_at, work_date)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (int(user_id), employee_id, name, marked_at, work_date),
                )
                attendance_id = int(cur.lastrowid)
        except mysql.connector.IntegrityError as e:
            # uq_attendance_user_day
            if is_duplicate_key(e):
                raise ConflictError(ALREADY_MARKED_MESSAGE) from e
            raise

        return AttendanceRecord(
            attendance_id=attendance_id,
            user_id=int(user_id),
            employee_id=employee_id,
            name=name,
            marked_at=marked_at,
            work_date=work_date,
        )

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE employee_id=%s
                ORDER BY marked_at ASC
                """,
                (employee_id,),
            )
            return [_row_to_record(r) for r in fetchall(cur)]
