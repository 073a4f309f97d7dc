from __future__ import annotations

from flask import Flask, jsonify

from ..common.validators import optional_int
from ..common.web import api_errors, current_identity, json_body, own_email, role_required
from ..core.enums import Role
from ..container import Container


def register(app: Flask, container: Container) -> None:
    manager_required = role_required(container.token_service, Role.MANAGER)
    employee_required = role_required(container.token_service, Role.EMPLOYEE)

    @app.route("/employee/applyLeave", methods=["POST"], endpoint="apply_leave")
    @api_errors("Failed to apply for leave", envelope=True)
    @employee_required
    def apply_leave():
        body = json_body()
        history = container.leave_service.apply_leave(
            current_role=current_identity().role,
            employee_email=own_email(body.get("email")),
            start_date=body.get("startDate"),
            end_date=body.get("endDate"),
            reason=body.get("reason"),
        )
        return jsonify({"success": True, "leaveHistory": [l.to_dict() for l in history]})

    @app.route("/employee/getLeaves", methods=["POST"], endpoint="get_leaves")
    @api_errors("Failed to fetch leaves", envelope=True)
    @employee_required
    def get_leaves():
        leaves = container.leave_service.list_history(employee_email=own_email(json_body().get("email")))
        return jsonify({"success": True, "leaves": [l.to_dict() for l in leaves]})

    @app.route("/manager/getLeaveRequests", methods=["GET"], endpoint="get_leave_requests")
    @api_errors("Failed to fetch leave requests", envelope=True)
    @manager_required
    def get_leave_requests():
        leaves = container.leave_service.list_leave_requests(current_role=current_identity().role)
        return jsonify({"success": True, "leaves": leaves})

    @app.route("/manager/updateLeaveStatus", methods=["POST"], endpoint="update_leave_status")
    @api_errors("Failed to update leave status", envelope=True)
    @manager_required
    def update_leave_status():
        body = json_body()
        leave = container.leave_service.update_leave_status(
            current_role=current_identity().role,
            leave_id=body.get("leaveId"),
            status=body.get("status"),
            expected_revision=optional_int(body.get("revision"), "Revision"),
        )
        return jsonify({"success": True, "leave": leave.to_dict()})
