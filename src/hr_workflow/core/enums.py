from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Caller role, taken from a verified token."""

    EMPLOYEE = "Employee"
    MANAGER = "Manager"


class TaskStatus(str, Enum):
    PENDING = "Pending"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"


class LeaveStatus(str, Enum):
    """Leave approval flow: employee requests, manager decides."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class ReportStatus(str, Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"
