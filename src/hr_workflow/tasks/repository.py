from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import TaskStatus
from .model import Task


class TaskRepository(Protocol):
    def create(self, *, employee_id: int, title: str, description: str, deadline: datetime) -> int:
        """Insert a task in status Pending and return its id."""

        raise NotImplementedError

    def get_by_id(self, task_id: int) -> Optional[Task]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: int) -> Sequence[Task]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Task]:
        raise NotImplementedError

    def update_status(self, *, task_id: int, status: TaskStatus, expected_revision: Optional[int] = None) -> bool:
        """Overwrite the status and bump the revision.

        Returns False when no row matched (missing, or revision mismatch).
        """

        raise NotImplementedError
