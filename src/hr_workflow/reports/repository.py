from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import ReportStatus
from .model import WorkReport


class WorkReportRepository(Protocol):
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
        raise NotImplementedError

    def get_by_id(self, report_id: int) -> Optional[WorkReport]:
        raise NotImplementedError

    def list_reports(self, *, employee_email: Optional[str] = None) -> Sequence[WorkReport]:
        """Most recently submitted first."""

        raise NotImplementedError

    def update_status(
        self,
        *,
        report_id: int,
        status: ReportStatus,
        manager_comment: str,
        expected_revision: Optional[int] = None,
    ) -> bool:
        """Set status and comment in a single statement."""

        raise NotImplementedError
