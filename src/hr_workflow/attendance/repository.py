from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from .model import MonthlyAttendance


class AttendanceRepository(Protocol):
    def get_for_employee_and_month(self, employee_id: int, month: str) -> Optional[MonthlyAttendance]:
        raise NotImplementedError

    def upsert_day(self, *, employee_id: int, month: str, work_date: date, status: str) -> None:
        """Create the month document if needed and set one day's status."""

        raise NotImplementedError
