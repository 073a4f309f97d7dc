from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..common.datetime_utils import parse_iso_datetime
from ..common.validators import parse_status, require_int
from ..core.enums import Role, TaskStatus
from ..core.exceptions import AuthorizationError, ConflictError, NotFoundError, ValidationError
from ..users.repository import EmployeeRepository
from .model import Task
from .repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssignedTask:
    task: Task
    employee_name: str


class TaskService:
    """Task workflow: managers assign, managers or the owning employee move the status."""

    def __init__(self, tasks: TaskRepository, employees: EmployeeRepository):
        self._tasks = tasks
        self._employees = employees

    def assign_task(
        self,
        *,
        current_role: Role,
        employee_id,
        title: Optional[str],
        description: Optional[str],
        deadline,
    ) -> AssignedTask:
        if current_role != Role.MANAGER:
            raise AuthorizationError("Only managers can assign tasks")

        title = (title or "").strip()
        description = (description or "").strip()
        if employee_id in (None, "") or not title or not description or not deadline:
            raise ValidationError("All fields are required")

        employee_id = require_int(employee_id, "Employee ID")
        deadline_dt = parse_iso_datetime(deadline, "Deadline")

        # Resolve the employee first so a bad id never leaves an orphan task behind.
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")

        task_id = self._tasks.create(
            employee_id=employee.employee_id,
            title=title,
            description=description,
            deadline=deadline_dt,
        )
        logger.info("task %s assigned to employee %s", task_id, employee.employee_id)

        task = self._tasks.get_by_id(task_id)
        if not task:
            raise NotFoundError("Task not found")
        return AssignedTask(task=task, employee_name=employee.name)

    def update_task_status(
        self,
        *,
        current_role: Role,
        caller_id: int,
        task_id,
        status: Optional[str],
        expected_revision: Optional[int] = None,
    ) -> Task:
        new_status = parse_status(TaskStatus, status)
        task_id = require_int(task_id, "Task ID")

        task = self._tasks.get_by_id(task_id)
        if not task:
            raise NotFoundError("Task not found")

        if current_role == Role.EMPLOYEE:
            if task.employee_id != int(caller_id):
                raise AuthorizationError("You can only update your own tasks")
        elif current_role != Role.MANAGER:
            raise AuthorizationError("You do not have permission")

        if not self._tasks.update_status(task_id=task_id, status=new_status, expected_revision=expected_revision):
            raise ConflictError("Task was modified by someone else, reload and try again")

        logger.info("task %s status %s -> %s", task_id, task.status.value, new_status.value)
        updated = self._tasks.get_by_id(task_id)
        if not updated:
            raise NotFoundError("Task not found")
        return updated

    def list_for_employee(self, *, employee_id: int) -> list[Task]:
        return list(self._tasks.list_for_employee(int(employee_id)))

    def dashboard(self, *, current_role: Role) -> list[dict]:
        """Every employee with the tasks assigned to them."""

        if current_role != Role.MANAGER:
            raise AuthorizationError("Only managers can view the dashboard")

        by_employee: dict[int, list[dict]] = {}
        for t in self._tasks.list_all():
            by_employee.setdefault(t.employee_id, []).append(t.to_dict())

        out: list[dict] = []
        for e in self._employees.list_all():
            row = e.to_dict()
            row["tasks"] = by_employee.get(e.employee_id, [])
            out.append(row)
        return out
