from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import isoformat
from ..core.enums import LeaveStatus


@dataclass(frozen=True)
class LeaveRequest:
    leave_id: int
    employee_email: str
    start_date: date
    end_date: date
    status: LeaveStatus
    employee_id: Optional[int] = None
    reason: Optional[str] = None
    created_at: Optional[datetime] = None
    revision: int = 1

    def to_dict(self) -> dict:
        return {
            "id": self.leave_id,
            "email": self.employee_email,
            "employeeId": self.employee_id,
            "startDate": isoformat(self.start_date),
            "endDate": isoformat(self.end_date),
            "reason": self.reason,
            "status": self.status.value,
            "createdAt": isoformat(self.created_at),
            "revision": self.revision,
        }
