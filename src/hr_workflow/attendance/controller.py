from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import api_errors, current_identity, json_body, own_email, role_required
from ..core.enums import Role
from ..container import Container


def register(app: Flask, container: Container) -> None:
    manager_required = role_required(container.token_service, Role.MANAGER)
    employee_required = role_required(container.token_service, Role.EMPLOYEE)

    @app.route("/employee/getAttendance", methods=["POST"], endpoint="get_attendance")
    @api_errors("Failed to fetch attendance", envelope=True)
    @employee_required
    def get_attendance():
        overview = container.attendance_service.get_attendance_summary(
            employee_email=own_email(json_body().get("email"))
        )
        return jsonify(
            {
                "success": True,
                "attendance": overview.attendance.to_dict(),
                "summary": overview.summary.to_dict(),
            }
        )

    @app.route("/manager/recordAttendance", methods=["POST"], endpoint="record_attendance")
    @api_errors("Failed to record attendance", envelope=True)
    @manager_required
    def record_attendance():
        body = json_body()
        container.attendance_service.record_day(
            current_role=current_identity().role,
            employee_id=body.get("employeeId"),
            work_date=body.get("date"),
            status=body.get("status"),
        )
        return jsonify({"success": True, "message": "Attendance recorded"})
