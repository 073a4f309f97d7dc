from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import isoformat


@dataclass(frozen=True)
class Todo:
    todo_id: int
    employee_email: str
    text: str
    completed: bool = False
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.todo_id,
            "employeeEmail": self.employee_email,
            "text": self.text,
            "completed": self.completed,
            "createdAt": isoformat(self.created_at),
        }
