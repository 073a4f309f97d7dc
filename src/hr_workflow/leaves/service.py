from __future__ import annotations

import logging
from typing import Optional

from ..common.datetime_utils import parse_iso_date
from ..common.validators import parse_status, require_int, require_non_empty
from ..core.enums import LeaveStatus, Role
from ..core.exceptions import AuthorizationError, ConflictError, NotFoundError
from ..users.directory import IdentityDirectory
from .model import LeaveRequest
from .repository import LeaveRepository

logger = logging.getLogger(__name__)


class LeaveService:
    """Leave workflow: employees request, managers approve or reject."""

    def __init__(self, leaves: LeaveRepository, directory: IdentityDirectory):
        self._leaves = leaves
        self._directory = directory

    def apply_leave(
        self,
        *,
        current_role: Role,
        employee_email: str,
        start_date,
        end_date,
        reason: Optional[str],
    ) -> list[LeaveRequest]:
        """Create a Pending request and return the employee's whole leave history.

        Note: start/end ordering is not checked here, unlike work reports.
        """

        if current_role != Role.EMPLOYEE:
            raise AuthorizationError("Only employees can apply for leave")

        employee_email = require_non_empty(employee_email, "Email")
        start = parse_iso_date(start_date, "Start date")
        end = parse_iso_date(end_date, "End date")

        card = self._directory.employee_by_email(employee_email)
        leave_id = self._leaves.create(
            employee_email=employee_email,
            employee_id=card.person_id if card else None,
            start_date=start,
            end_date=end,
            reason=(reason or "").strip() or None,
        )
        logger.info("leave %s requested by %s", leave_id, employee_email)

        return self.list_history(employee_email=employee_email)

    def list_history(self, *, employee_email: str) -> list[LeaveRequest]:
        return list(self._leaves.list_for_email(require_non_empty(employee_email, "Email")))

    def list_leave_requests(self, *, current_role: Role) -> list[dict]:
        if current_role != Role.MANAGER:
            raise AuthorizationError("Only managers can review leave requests")

        leaves = list(self._leaves.list_all())
        cards = self._directory.employees(l.employee_id for l in leaves)

        out: list[dict] = []
        for leave, card in zip(leaves, cards):
            row = leave.to_dict()
            row["employeeName"] = card.name if card else None
            row["employeeEmail"] = card.email if card else None
            out.append(row)
        return out

    def update_leave_status(
        self,
        *,
        current_role: Role,
        leave_id,
        status: Optional[str],
        expected_revision: Optional[int] = None,
    ) -> LeaveRequest:
        if current_role != Role.MANAGER:
            raise AuthorizationError("Only managers can decide leave requests")

        new_status = parse_status(LeaveStatus, status)
        leave_id = require_int(leave_id, "Leave ID")

        leave = self._leaves.get_by_id(leave_id)
        if not leave:
            raise NotFoundError("Leave not found")

        # Any status may overwrite any prior one; only the value set is enforced.
        if not self._leaves.update_status(leave_id=leave_id, status=new_status, expected_revision=expected_revision):
            raise ConflictError("Leave request was modified by someone else, reload and try again")

        logger.info("leave %s status %s -> %s", leave_id, leave.status.value, new_status.value)
        updated = self._leaves.get_by_id(leave_id)
        if not updated:
            raise NotFoundError("Leave not found")
        return updated
