from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import api_errors, json_body, own_email, role_required
from ..core.enums import Role
from ..core.exceptions import AuthorizationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    employee_required = role_required(container.token_service, Role.EMPLOYEE)

    def _check_registration_role(body: dict, expected: Role) -> None:
        # Older clients send the role they register for; a mismatch is refused.
        role = body.get("role")
        if role is not None and role != expected.value:
            raise AuthorizationError(f"Only {expected.value}s can be registered here")

    # -------- Employees --------
    @app.route("/employee/register", methods=["POST"], endpoint="register_employee")
    @api_errors("Registration failed")
    def register_employee():
        body = json_body()
        _check_registration_role(body, Role.EMPLOYEE)
        container.auth_service.register_employee(
            name=body.get("name"),
            email=body.get("email"),
            password=body.get("password"),
        )
        return jsonify({"message": "Employee registered successfully"})

    @app.route("/employee/login", methods=["POST"], endpoint="login_employee")
    @api_errors("Login failed")
    def login_employee():
        body = json_body()
        result = container.auth_service.login_employee(email=body.get("email"), password=body.get("password"))
        return jsonify({"message": "Login successful", "token": result.token, "employee": result.account.to_dict()})

    @app.route("/employee/getProfile", methods=["POST"], endpoint="get_profile")
    @api_errors("Failed to fetch profile", envelope=True)
    @employee_required
    def get_profile():
        employee = container.profile_service.get_profile(email=own_email(json_body().get("email")))
        return jsonify({"success": True, "profile": employee.profile()})

    @app.route("/employee/updateProfile", methods=["POST"], endpoint="update_profile")
    @api_errors("Profile update failed", envelope=True)
    @employee_required
    def update_profile():
        body = json_body()
        employee = container.profile_service.update_profile(
            email=own_email(body.get("email")),
            name=body.get("name"),
            phone=body.get("phone"),
            address=body.get("address"),
            department=body.get("department"),
        )
        return jsonify({"success": True, "message": "Profile updated successfully", "profile": employee.profile()})

    # -------- Managers --------
    @app.route("/manager/register", methods=["POST"], endpoint="register_manager")
    @api_errors("Registration failed")
    def register_manager():
        body = json_body()
        _check_registration_role(body, Role.MANAGER)
        container.auth_service.register_manager(
            name=body.get("name"),
            email=body.get("email"),
            password=body.get("password"),
        )
        return jsonify({"message": "Manager registered successfully"})

    @app.route("/manager/login", methods=["POST"], endpoint="login_manager")
    @api_errors("Login failed")
    def login_manager():
        body = json_body()
        result = container.auth_service.login_manager(email=body.get("email"), password=body.get("password"))
        return jsonify({"message": "Login successful", "token": result.token, "manager": result.account.to_dict()})
