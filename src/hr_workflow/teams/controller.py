from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import api_errors, current_identity, json_body, role_required
from ..core.enums import Role
from ..container import Container


def register(app: Flask, container: Container) -> None:
    manager_required = role_required(container.token_service, Role.MANAGER)

    @app.route("/manager/employees", methods=["GET"], endpoint="list_employees")
    @api_errors("Internal server error")
    @manager_required
    def list_employees():
        employees = container.team_service.list_employees(current_role=current_identity().role)
        return jsonify([e.to_dict() for e in employees])

    @app.route("/manager/addEmployee", methods=["POST"], endpoint="add_team_member")
    @api_errors("Server error")
    @manager_required
    def add_team_member():
        identity = current_identity()
        membership = container.team_service.add_team_member(
            current_role=identity.role,
            manager_id=identity.user_id,
            employee_id=json_body().get("employeeId"),
        )
        return jsonify({"message": "Employee added successfully!", "membership": membership.to_dict()})

    @app.route("/manager/team", methods=["GET"], endpoint="list_team")
    @api_errors("Failed to fetch team", envelope=True)
    @manager_required
    def list_team():
        identity = current_identity()
        members = container.team_service.list_team(current_role=identity.role, manager_id=identity.user_id)
        return jsonify({"success": True, "members": members})
