from __future__ import annotations

from ..common.validators import require_int, require_non_empty
from ..core.exceptions import AuthorizationError, NotFoundError
from .model import Todo
from .repository import TodoRepository


class TodoService:
    """Personal to-do list of an employee."""

    def __init__(self, todos: TodoRepository):
        self._todos = todos

    def list_todos(self, *, employee_email: str) -> list[Todo]:
        return list(self._todos.list_for_email(require_non_empty(employee_email, "Email")))

    def add_todo(self, *, employee_email: str, text: str) -> Todo:
        employee_email = require_non_empty(employee_email, "Email")
        todo_id = self._todos.create(employee_email=employee_email, text=require_non_empty(text, "Text"))
        todo = self._todos.get_by_id(todo_id)
        if not todo:
            raise NotFoundError("Todo not found")
        return todo

    def _owned(self, todo_id, employee_email: str) -> Todo:
        todo = self._todos.get_by_id(require_int(todo_id, "Todo ID"))
        if not todo:
            raise NotFoundError("Todo not found")
        if todo.employee_email.lower() != employee_email.lower():
            raise AuthorizationError("You can only change your own todos")
        return todo

    def toggle_todo(self, *, todo_id, employee_email: str) -> Todo:
        todo = self._owned(todo_id, employee_email)
        self._todos.set_completed(todo_id=todo.todo_id, completed=not todo.completed)
        updated = self._todos.get_by_id(todo.todo_id)
        if not updated:
            raise NotFoundError("Todo not found")
        return updated

    def delete_todo(self, *, todo_id, employee_email: str) -> None:
        todo = self._owned(todo_id, employee_email)
        if not self._todos.delete_by_id(todo.todo_id):
            raise NotFoundError("Todo not found")
