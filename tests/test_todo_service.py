from __future__ import annotations

import pytest

from hr_workflow.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from hr_workflow.todos.service import TodoService

from inmemory import InMemoryTodos


def test_todo_lifecycle():
    repo = InMemoryTodos()
    svc = TodoService(repo)

    first = svc.add_todo(employee_email="alice@example.com", text="File expenses")
    second = svc.add_todo(employee_email="alice@example.com", text="Book travel")
    svc.add_todo(employee_email="bob@example.com", text="Not yours")

    assert [t.text for t in svc.list_todos(employee_email="alice@example.com")] == ["Book travel", "File expenses"]

    assert svc.toggle_todo(todo_id=first.todo_id, employee_email="alice@example.com").completed is True
    assert svc.toggle_todo(todo_id=first.todo_id, employee_email="alice@example.com").completed is False

    svc.delete_todo(todo_id=str(second.todo_id), employee_email="alice@example.com")
    assert [t.todo_id for t in svc.list_todos(employee_email="alice@example.com")] == [first.todo_id]


def test_todo_ownership_and_missing():
    repo = InMemoryTodos()
    svc = TodoService(repo)
    todo = svc.add_todo(employee_email="alice@example.com", text="File expenses")

    with pytest.raises(AuthorizationError):
        svc.delete_todo(todo_id=todo.todo_id, employee_email="bob@example.com")
    with pytest.raises(NotFoundError, match="Todo not found"):
        svc.toggle_todo(todo_id=999, employee_email="alice@example.com")
    with pytest.raises(ValidationError):
        svc.add_todo(employee_email="alice@example.com", text="  ")
    assert list(repo.rows) == [todo.todo_id]
