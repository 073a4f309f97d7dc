from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..common.datetime_utils import isoformat
from ..core.enums import ReportStatus


@dataclass(frozen=True)
class WorkReport:
    """Hours an employee reports for a period; reviewed by a manager."""

    report_id: int
    employee_email: str
    start_date: date
    end_date: date
    total_hours: float
    report_name: str
    description: str
    status: ReportStatus
    submitted_at: datetime
    manager_comment: str = ""
    revision: int = 1

    def to_dict(self) -> dict:
        return {
            "id": self.report_id,
            "employeeEmail": self.employee_email,
            "startDate": isoformat(self.start_date),
            "endDate": isoformat(self.end_date),
            "totalHours": self.total_hours,
            "reportName": self.report_name,
            "description": self.description,
            "status": self.status.value,
            "managerComment": self.manager_comment,
            "submittedAt": isoformat(self.submitted_at),
            "revision": self.revision,
        }
