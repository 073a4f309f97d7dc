from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import now_local, parse_iso_date, parse_iso_moment
from ..common.validators import parse_status, require_int, require_non_empty, require_number
from ..core.enums import ReportStatus, Role
from ..core.exceptions import AuthorizationError, ConflictError, NotFoundError, ValidationError
from .model import WorkReport
from .repository import WorkReportRepository

logger = logging.getLogger(__name__)


class WorkReportService:
    def __init__(self, reports: WorkReportRepository):
        self._reports = reports

    def submit_work_report(
        self,
        *,
        current_role: Role,
        employee_email: str,
        start_date,
        end_date,
        total_hours,
        report_name: Optional[str],
        description: Optional[str],
        now: Optional[datetime] = None,
    ) -> WorkReport:
        if current_role != Role.EMPLOYEE:
            raise AuthorizationError("Only employees can submit work reports")

        employee_email = require_non_empty(employee_email, "Email")
        report_name = require_non_empty(report_name, "Report name")
        description = require_non_empty(description, "Description")
        hours = require_number(total_hours, "Total hours")

        start = parse_iso_date(start_date, "Start date")
        end = parse_iso_date(end_date, "End date")
        # Ordering compares the full instants when timestamps are sent.
        if end < start or parse_iso_moment(end_date, "End date") < parse_iso_moment(start_date, "Start date"):
            raise ValidationError("End date cannot be before start date")

        report_id = self._reports.create(
            employee_email=employee_email,
            start_date=start,
            end_date=end,
            total_hours=hours,
            report_name=report_name,
            description=description,
            submitted_at=now or now_local(),
        )
        logger.info("work report %s submitted by %s", report_id, employee_email)

        report = self._reports.get_by_id(report_id)
        if not report:
            raise NotFoundError("Report not found")
        return report

    def list_work_reports(self, *, employee_email: Optional[str] = None) -> list[WorkReport]:
        """Filtered by employee when an email is given; newest submission first."""

        return list(self._reports.list_reports(employee_email=employee_email))

    def update_report_status(
        self,
        *,
        current_role: Role,
        report_id,
        status: Optional[str],
        manager_comment: Optional[str],
        expected_revision: Optional[int] = None,
    ) -> WorkReport:
        if current_role != Role.MANAGER:
            raise AuthorizationError("Only managers can review work reports")

        new_status = parse_status(ReportStatus, status)
        report_id = require_int(report_id, "Report ID")

        report = self._reports.get_by_id(report_id)
        if not report:
            raise NotFoundError("Report not found")

        ok = self._reports.update_status(
            report_id=report_id,
            status=new_status,
            manager_comment=(manager_comment or "").strip(),
            expected_revision=expected_revision,
        )
        if not ok:
            raise ConflictError("Report was modified by someone else, reload and try again")

        logger.info("work report %s status %s -> %s", report_id, report.status.value, new_status.value)
        updated = self._reports.get_by_id(report_id)
        if not updated:
            raise NotFoundError("Report not found")
        return updated
