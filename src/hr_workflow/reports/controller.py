from __future__ import annotations

from flask import Flask, jsonify

from ..common.validators import optional_int
from ..common.web import api_errors, current_identity, json_body, own_email, role_required
from ..core.enums import Role
from ..container import Container


def register(app: Flask, container: Container) -> None:
    manager_required = role_required(container.token_service, Role.MANAGER)
    employee_required = role_required(container.token_service, Role.EMPLOYEE)

    @app.route("/employee/submitWorkReport", methods=["POST"], endpoint="submit_work_report")
    @api_errors("Failed to submit work report", envelope=True)
    @employee_required
    def submit_work_report():
        body = json_body()
        # Legacy clients send the employee's email in "employeeId".
        report = container.report_service.submit_work_report(
            current_role=current_identity().role,
            employee_email=own_email(body.get("employeeId") or body.get("email")),
            start_date=body.get("startDate"),
            end_date=body.get("endDate"),
            total_hours=body.get("totalHours"),
            report_name=body.get("reportName"),
            description=body.get("description"),
        )
        return jsonify({"success": True, "message": "Work report submitted successfully", "report": report.to_dict()})

    @app.route("/employee/getWorkReports", methods=["POST"], endpoint="get_work_reports")
    @api_errors("Failed to fetch work reports", envelope=True)
    @employee_required
    def get_work_reports():
        reports = container.report_service.list_work_reports(employee_email=own_email(json_body().get("email")))
        return jsonify({"success": True, "reports": [r.to_dict() for r in reports]})

    @app.route("/manager/workReports", methods=["GET"], endpoint="all_work_reports")
    @api_errors("Failed to fetch work reports", envelope=True)
    @manager_required
    def all_work_reports():
        reports = container.report_service.list_work_reports()
        return jsonify({"success": True, "reports": [r.to_dict() for r in reports]})

    @app.route("/manager/updateReportStatus", methods=["POST"], endpoint="update_report_status")
    @api_errors("Failed to update report status", envelope=True)
    @manager_required
    def update_report_status():
        body = json_body()
        report = container.report_service.update_report_status(
            current_role=current_identity().role,
            report_id=body.get("reportId"),
            status=body.get("status"),
            manager_comment=body.get("managerComment"),
            expected_revision=optional_int(body.get("revision"), "Revision"),
        )
        return jsonify({"success": True, "report": report.to_dict()})
