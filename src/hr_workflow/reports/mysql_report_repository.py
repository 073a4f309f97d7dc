from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..core.enums import ReportStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, revision_clause
from .model import WorkReport
from .repository import WorkReportRepository

_COLUMNS = (
    "report_id, employee_email, start_date, end_date, total_hours, report_name, description, "
    "status, manager_comment, submitted_at, revision"
)


def _to_report(r: dict) -> WorkReport:
    return WorkReport(
        report_id=int(r["report_id"]),
        employee_email=r["employee_email"],
        start_date=r["start_date"],
        end_date=r["end_date"],
        total_hours=float(r["total_hours"]),
        report_name=r["report_name"],
        description=r["description"],
        status=ReportStatus(r["status"]),
        manager_comment=r.get("manager_comment") or "",
        submitted_at=r["submitted_at"],
        revision=int(r.get("revision") or 1),
    )


class MySQLWorkReportRepository(WorkReportRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(
        self,
        *,
        employee_email: str,
        start_date: date,
        end_date: date,
        total_hours: float,
        report_name: str,
        description: str,
        submitted_at: datetime,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO work_reports(
                    employee_email, start_date, end_date, total_hours, report_name, description,
                    status, manager_comment, submitted_at
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    employee_email,
                    start_date,
                    end_date,
                    total_hours,
                    report_name,
                    description,
                    ReportStatus.PENDING.value,
                    "",
                    submitted_at,
                ),
            )
            return int(cur.lastrowid)

    def get_by_id(self, report_id: int) -> Optional[WorkReport]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM work_reports WHERE report_id=%s", (int(report_id),))
            r = fetchone(cur)
            return _to_report(r) if r else None

    def list_reports(self, *, employee_email: Optional[str] = None) -> Sequence[WorkReport]:
        clauses = ["1=1"]
        params: list[object] = []
        if employee_email is not None:
            clauses.append("employee_email=%s")
            params.append(employee_email)

        where = " AND ".join(clauses)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM work_reports
                WHERE {where}
                ORDER BY submitted_at DESC, report_id DESC
                """,
                tuple(params),
            )
            return [_to_report(r) for r in fetchall(cur)]

    def update_status(
        self,
        *,
        report_id: int,
        status: ReportStatus,
        manager_comment: str,
        expected_revision: Optional[int] = None,
    ) -> bool:
        extra, extra_params = revision_clause(expected_revision)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                UPDATE work_reports
                SET status=%s, manager_comment=%s, revision=revision+1
                WHERE report_id=%s{extra}
                """,
                (status.value, manager_comment, int(report_id)) + extra_params,
            )
            return cur.rowcount > 0
