from __future__ import annotations

from datetime import date
from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceDay, MonthlyAttendance
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_employee_and_month(self, employee_id: int, month: str) -> Optional[MonthlyAttendance]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, employee_id, month
                FROM attendance
                WHERE employee_id=%s AND month=%s
                """,
                (int(employee_id), month),
            )
            head = fetchone(cur)
            if not head:
                return None

            cur.execute(
                """
                SELECT work_date, status
                FROM attendance_days
                WHERE attendance_id=%s
                ORDER BY work_date
                """,
                (int(head["attendance_id"]),),
            )
            days = tuple(AttendanceDay(work_date=r["work_date"], status=r["status"]) for r in fetchall(cur))
            return MonthlyAttendance(
                attendance_id=int(head["attendance_id"]),
                employee_id=int(head["employee_id"]),
                month=head["month"],
                records=days,
            )

    def upsert_day(self, *, employee_id: int, month: str, work_date: date, status: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(employee_id, month)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE attendance_id=LAST_INSERT_ID(attendance_id)
                """,
                (int(employee_id), month),
            )
            attendance_id = int(cur.lastrowid)
            cur.execute(
                """
                INSERT INTO attendance_days(attendance_id, work_date, status)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE status=VALUES(status)
                """,
                (attendance_id, work_date, status),
            )
