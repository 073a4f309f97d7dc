from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import isoformat


@dataclass(frozen=True)
class TeamMembership:
    """A manager's claim on an employee; (manager_id, employee_id) is unique."""

    membership_id: int
    manager_id: int
    employee_id: int
    added_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.membership_id,
            "managerId": self.manager_id,
            "employeeId": self.employee_id,
            "addedAt": isoformat(self.added_at),
        }
