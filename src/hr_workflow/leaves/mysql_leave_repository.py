from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import LeaveStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, revision_clause
from .model import LeaveRequest
from .repository import LeaveRepository

_COLUMNS = "leave_id, employee_email, employee_id, start_date, end_date, reason, status, created_at, revision"


def _to_leave(r: dict) -> LeaveRequest:
    return LeaveRequest(
        leave_id=int(r["leave_id"]),
        employee_email=r["employee_email"],
        employee_id=(int(r["employee_id"]) if r.get("employee_id") is not None else None),
        start_date=r["start_date"],
        end_date=r["end_date"],
        reason=r.get("reason"),
        status=LeaveStatus(r["status"]),
        created_at=r.get("created_at"),
        revision=int(r.get("revision") or 1),
    )


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(
        self,
        *,
        employee_email: str,
        employee_id: Optional[int],
        start_date: date,
        end_date: date,
        reason: Optional[str],
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO leave_requests(employee_email, employee_id, start_date, end_date, reason, status)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (employee_email, employee_id, start_date, end_date, reason, LeaveStatus.PENDING.value),
            )
            return int(cur.lastrowid)

    def get_by_id(self, leave_id: int) -> Optional[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM leave_requests WHERE leave_id=%s", (int(leave_id),))
            r = fetchone(cur)
            return _to_leave(r) if r else None

    def list_for_email(self, employee_email: str) -> Sequence[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM leave_requests WHERE employee_email=%s ORDER BY leave_id",
                (employee_email,),
            )
            return [_to_leave(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM leave_requests ORDER BY created_at DESC, leave_id DESC")
            return [_to_leave(r) for r in fetchall(cur)]

    def update_status(self, *, leave_id: int, status: LeaveStatus, expected_revision: Optional[int] = None) -> bool:
        extra, extra_params = revision_clause(expected_revision)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                UPDATE leave_requests
                SET status=%s, revision=revision+1
                WHERE leave_id=%s{extra}
                """,
                (status.value, int(leave_id)) + extra_params,
            )
            return cur.rowcount > 0
