from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional

from ..common.datetime_utils import month_key, now_local, parse_iso_date
from ..common.validators import require_int, require_non_empty
from ..core.constants import ATTENDANCE_ABSENT, ATTENDANCE_PRESENT
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError
from ..users.repository import EmployeeRepository
from .model import AttendanceDay, AttendanceSummary, MonthlyAttendance
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttendanceOverview:
    attendance: MonthlyAttendance
    summary: AttendanceSummary


class AttendanceService:
    """Monthly attendance roll-up. Reading never writes."""

    def __init__(self, attendance: AttendanceRepository, employees: EmployeeRepository):
        self._attendance = attendance
        self._employees = employees

    @staticmethod
    def summarize(records: Iterable[AttendanceDay]) -> AttendanceSummary:
        """Count "present" and "absent" days; any other status counts nowhere."""

        present = 0
        absent = 0
        for r in records:
            if r.status == ATTENDANCE_PRESENT:
                present += 1
            elif r.status == ATTENDANCE_ABSENT:
                absent += 1
        return AttendanceSummary(present=present, absent=absent)

    def get_attendance_summary(self, *, employee_email: str, now: Optional[datetime] = None) -> AttendanceOverview:
        employee = self._employees.get_by_email(require_non_empty(employee_email, "Email"))
        if not employee:
            raise NotFoundError("Employee not found")

        month = month_key(now or now_local())
        attendance = self._attendance.get_for_employee_and_month(employee.employee_id, month)
        if attendance is None:
            attendance = MonthlyAttendance(employee_id=employee.employee_id, month=month)

        return AttendanceOverview(attendance=attendance, summary=self.summarize(attendance.records))

    def record_day(self, *, current_role: Role, employee_id, work_date, status: Optional[str]) -> None:
        if current_role != Role.MANAGER:
            raise AuthorizationError("Only managers can record attendance")

        employee_id = require_int(employee_id, "Employee ID")
        day = parse_iso_date(work_date, "Date")
        status = require_non_empty(status, "Status").lower()

        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found")

        self._attendance.upsert_day(
            employee_id=employee_id,
            month=month_key(day),
            work_date=day,
            status=status,
        )
        logger.info("attendance %s for employee %s on %s", status, employee_id, day)
