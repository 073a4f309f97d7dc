from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..core.enums import TaskStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, revision_clause
from .model import Task
from .repository import TaskRepository

_COLUMNS = "task_id, employee_id, title, description, deadline, status, created_at, revision"


def _to_task(r: dict) -> Task:
    return Task(
        task_id=int(r["task_id"]),
        employee_id=int(r["employee_id"]),
        title=r["title"],
        description=r["description"],
        deadline=r["deadline"],
        status=TaskStatus(r["status"]),
        created_at=r.get("created_at"),
        revision=int(r.get("revision") or 1),
    )


class MySQLTaskRepository(TaskRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, employee_id: int, title: str, description: str, deadline: datetime) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO tasks(employee_id, title, description, deadline, status)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (int(employee_id), title, description, deadline, TaskStatus.PENDING.value),
            )
            return int(cur.lastrowid)

    def get_by_id(self, task_id: int) -> Optional[Task]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM tasks WHERE task_id=%s", (int(task_id),))
            r = fetchone(cur)
            return _to_task(r) if r else None

    def list_for_employee(self, employee_id: int) -> Sequence[Task]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM tasks WHERE employee_id=%s ORDER BY deadline, task_id",
                (int(employee_id),),
            )
            return [_to_task(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[Task]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM tasks ORDER BY employee_id, deadline, task_id")
            return [_to_task(r) for r in fetchall(cur)]

    def update_status(self, *, task_id: int, status: TaskStatus, expected_revision: Optional[int] = None) -> bool:
        extra, extra_params = revision_clause(expected_revision)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                UPDATE tasks
                SET status=%s, revision=revision+1
                WHERE task_id=%s{extra}
                """,
                (status.value, int(task_id)) + extra_params,
            )
            return cur.rowcount > 0
