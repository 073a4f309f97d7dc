from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import api_errors, current_identity, json_body, own_email, role_required
from ..core.enums import Role
from ..container import Container


def register(app: Flask, container: Container) -> None:
    employee_required = role_required(container.token_service, Role.EMPLOYEE)

    @app.route("/employee/getTodos", methods=["POST"], endpoint="get_todos")
    @api_errors("Failed to fetch todos", envelope=True)
    @employee_required
    def get_todos():
        todos = container.todo_service.list_todos(employee_email=own_email(json_body().get("email")))
        return jsonify({"success": True, "todos": [t.to_dict() for t in todos]})

    @app.route("/employee/addTodo", methods=["POST"], endpoint="add_todo")
    @api_errors("Failed to add todo", envelope=True)
    @employee_required
    def add_todo():
        body = json_body()
        todo = container.todo_service.add_todo(employee_email=own_email(body.get("email")), text=body.get("text"))
        return jsonify({"success": True, "message": "Todo added successfully", "todo": todo.to_dict()})

    @app.route("/employee/toggleTodo", methods=["POST"], endpoint="toggle_todo")
    @api_errors("Failed to toggle todo", envelope=True)
    @employee_required
    def toggle_todo():
        todo = container.todo_service.toggle_todo(
            todo_id=json_body().get("id"),
            employee_email=current_identity().email,
        )
        return jsonify({"success": True, "message": "Todo updated successfully", "todo": todo.to_dict()})

    @app.route("/employee/deleteTodo", methods=["POST"], endpoint="delete_todo")
    @api_errors("Failed to delete todo", envelope=True)
    @employee_required
    def delete_todo():
        container.todo_service.delete_todo(
            todo_id=json_body().get("id"),
            employee_email=current_identity().email,
        )
        return jsonify({"success": True, "message": "Todo deleted successfully"})
