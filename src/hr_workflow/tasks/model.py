from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import isoformat
from ..core.enums import TaskStatus


@dataclass(frozen=True)
class Task:
    """Domain entity: a task a manager assigned to an employee."""

    task_id: int
    employee_id: int
    title: str
    description: str
    deadline: datetime
    status: TaskStatus
    created_at: Optional[datetime] = None
    revision: int = 1

    def to_dict(self) -> dict:
        return {
            "id": self.task_id,
            "employeeId": self.employee_id,
            "title": self.title,
            "description": self.description,
            "deadline": isoformat(self.deadline),
            "status": self.status.value,
            "createdAt": isoformat(self.created_at),
            "revision": self.revision,
        }
