from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..common.datetime_utils import isoformat


@dataclass(frozen=True)
class AttendanceDay:
    work_date: date
    status: str

    def to_dict(self) -> dict:
        return {"date": isoformat(self.work_date), "status": self.status}


@dataclass(frozen=True)
class MonthlyAttendance:
    """One employee's attendance for a "YYYY-MM" month, days ordered by date."""

    employee_id: int
    month: str
    records: tuple[AttendanceDay, ...] = field(default_factory=tuple)
    attendance_id: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "employeeId": self.employee_id,
            "month": self.month,
            "records": [r.to_dict() for r in self.records],
        }


@dataclass(frozen=True)
class AttendanceSummary:
    present: int
    absent: int

    @property
    def total(self) -> int:
        return self.present + self.absent

    def to_dict(self) -> dict:
        return {"present": self.present, "absent": self.absent, "total": self.total}
