from __future__ import annotations

from flask import Flask, jsonify

from ..common.validators import optional_int
from ..common.web import api_errors, current_identity, json_body, own_email, role_required
from ..core.constants import DEADLINE_DISPLAY_FORMAT
from ..core.enums import Role
from ..container import Container


def register(app: Flask, container: Container) -> None:
    manager_required = role_required(container.token_service, Role.MANAGER)
    employee_required = role_required(container.token_service, Role.EMPLOYEE)

    @app.route("/manager/dashboard", methods=["GET"], endpoint="manager_dashboard")
    @api_errors("Internal Server Error")
    @manager_required
    def manager_dashboard():
        identity = current_identity()
        employees = container.task_service.dashboard(current_role=identity.role)
        return jsonify(
            {
                "manager": {"id": identity.user_id, "name": identity.name, "email": identity.email},
                "employees": employees,
            }
        )

    @app.route("/manager/assignTask", methods=["POST"], endpoint="assign_task")
    @api_errors("Server error")
    @manager_required
    def assign_task():
        body = json_body()
        assigned = container.task_service.assign_task(
            current_role=current_identity().role,
            employee_id=body.get("employeeId"),
            title=body.get("title"),
            description=body.get("description"),
            deadline=body.get("deadline"),
        )
        task = assigned.task
        return (
            jsonify(
                {
                    "message": "Task assigned successfully",
                    "employeeName": assigned.employee_name,
                    "task": {
                        "id": task.task_id,
                        "title": task.title,
                        "description": task.description,
                        "deadline": task.deadline.strftime(DEADLINE_DISPLAY_FORMAT),
                        "status": task.status.value,
                    },
                }
            ),
            201,
        )

    def _update_status(task_id) -> dict:
        body = json_body()
        identity = current_identity()
        task = container.task_service.update_task_status(
            current_role=identity.role,
            caller_id=identity.user_id,
            task_id=task_id,
            status=body.get("status"),
            expected_revision=optional_int(body.get("revision"), "Revision"),
        )
        return task.to_dict()

    @app.route("/manager/tasks/<task_id>/status", methods=["PUT"], endpoint="manager_task_status")
    @api_errors("Server error")
    @manager_required
    def manager_task_status(task_id: str):
        return jsonify({"message": "Task status updated", "task": _update_status(task_id)})

    @app.route("/manager/updateTaskStatus", methods=["POST"], endpoint="manager_update_task_status")
    @api_errors("Server error")
    @manager_required
    def manager_update_task_status():
        _update_status(json_body().get("taskId"))
        return jsonify({"message": "Task status updated successfully"})

    @app.route("/employee/getTasks", methods=["POST"], endpoint="employee_tasks")
    @api_errors("Failed to fetch tasks", envelope=True)
    @employee_required
    def employee_tasks():
        identity = current_identity()
        own_email(json_body().get("email"))
        tasks = container.task_service.list_for_employee(employee_id=identity.user_id)
        return jsonify({"success": True, "tasks": [t.to_dict() for t in tasks]})

    @app.route("/employee/tasks/<task_id>/status", methods=["PUT"], endpoint="employee_task_status")
    @api_errors("Server error")
    @employee_required
    def employee_task_status(task_id: str):
        return jsonify({"message": "Task status updated", "task": _update_status(task_id)})
