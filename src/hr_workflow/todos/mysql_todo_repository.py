from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Todo
from .repository import TodoRepository


def _to_todo(r: dict) -> Todo:
    return Todo(
        todo_id=int(r["todo_id"]),
        employee_email=r["employee_email"],
        text=r["text"],
        completed=bool(r.get("completed")),
        created_at=r.get("created_at"),
    )


class MySQLTodoRepository(TodoRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, employee_email: str, text: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO todos(employee_email, text, completed) VALUES(%s,%s,0)",
                (employee_email, text),
            )
            return int(cur.lastrowid)

    def get_by_id(self, todo_id: int) -> Optional[Todo]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT todo_id, employee_email, text, completed, created_at FROM todos WHERE todo_id=%s",
                (int(todo_id),),
            )
            r = fetchone(cur)
            return _to_todo(r) if r else None

    def list_for_email(self, employee_email: str) -> Sequence[Todo]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT todo_id, employee_email, text, completed, created_at
                FROM todos
                WHERE employee_email=%s
                ORDER BY created_at DESC, todo_id DESC
                """,
                (employee_email,),
            )
            return [_to_todo(r) for r in fetchall(cur)]

    def set_completed(self, *, todo_id: int, completed: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE todos SET completed=%s WHERE todo_id=%s",
                (1 if completed else 0, int(todo_id)),
            )
            return cur.rowcount > 0

    def delete_by_id(self, todo_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM todos WHERE todo_id=%s", (int(todo_id),))
            return cur.rowcount > 0
