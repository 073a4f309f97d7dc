from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveStatus
from .model import LeaveRequest


class LeaveRepository(Protocol):
    def create(
        self,
        *,
        employee_email: str,
        employee_id: Optional[int],
        start_date: date,
        end_date: date,
        reason: Optional[str],
    ) -> int:
        raise NotImplementedError

    def get_by_id(self, leave_id: int) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def list_for_email(self, employee_email: str) -> Sequence[LeaveRequest]:
        """History of one employee in insertion order."""

        raise NotImplementedError

    def list_all(self) -> Sequence[LeaveRequest]:
        """Every request, newest first."""

        raise NotImplementedError

    def update_status(self, *, leave_id: int, status: LeaveStatus, expected_revision: Optional[int] = None) -> bool:
        raise NotImplementedError
