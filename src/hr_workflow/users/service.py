from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ConflictError, NotFoundError
from .model import Employee, Manager
from .repository import EmployeeRepository, ManagerRepository
from .tokens import Identity, TokenService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginResult:
    token: str
    account: Union[Employee, Manager]


class AuthService:
    """Use cases: register and log in employees and managers."""

    def __init__(self, employees: EmployeeRepository, managers: ManagerRepository, tokens: TokenService):
        self._employees = employees
        self._managers = managers
        self._tokens = tokens

    def register_employee(self, *, name: str, email: str, password: str) -> int:
        name = require_non_empty(name, "Name")
        email = require_non_empty(email, "Email")
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)

        if self._employees.get_by_email(email):
            raise ConflictError("Employee already exists")

        employee_id = self._employees.create(name=name, email=email, password_hash=generate_password_hash(password))
        logger.info("employee registered id=%s", employee_id)
        return employee_id

    def register_manager(self, *, name: str, email: str, password: str) -> int:
        name = require_non_empty(name, "Name")
        email = require_non_empty(email, "Email")
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)

        if self._managers.get_by_email(email):
            raise ConflictError("Manager already exists")

        manager_id = self._managers.create(name=name, email=email, password_hash=generate_password_hash(password))
        logger.info("manager registered id=%s", manager_id)
        return manager_id

    @staticmethod
    def _password_matches(password_hash: str, password: str) -> bool:
        try:
            return check_password_hash(password_hash, password or "")
        except ValueError:
            # e.g. placeholder hashes or corrupted values
            return False

    def login_employee(self, *, email: str, password: str) -> LoginResult:
        employee = self._employees.get_by_email((email or "").strip())
        if not employee:
            raise AuthenticationError("Employee not found")
        if not self._password_matches(employee.password_hash, password):
            raise AuthenticationError("Invalid credentials")

        token = self._tokens.issue(
            Identity(user_id=employee.employee_id, email=employee.email, name=employee.name, role=Role.EMPLOYEE)
        )
        return LoginResult(token=token, account=employee)

    def login_manager(self, *, email: str, password: str) -> LoginResult:
        manager = self._managers.get_by_email((email or "").strip())
        if not manager:
            raise AuthenticationError("Manager not found")
        if not self._password_matches(manager.password_hash, password):
            raise AuthenticationError("Invalid credentials")

        token = self._tokens.issue(
            Identity(user_id=manager.manager_id, email=manager.email, name=manager.name, role=Role.MANAGER)
        )
        return LoginResult(token=token, account=manager)


class ProfileService:
    """Use case: employees view and edit their own profile."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def get_profile(self, *, email: str) -> Employee:
        employee = self._employees.get_by_email(require_non_empty(email, "Email"))
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def update_profile(
        self,
        *,
        email: str,
        name: Optional[str] = None,
        phone: Optional[str] = None,
        address: Optional[str] = None,
        department: Optional[str] = None,
    ) -> Employee:
        employee = self.get_profile(email=email)

        def keep(new: Optional[str], old: Optional[str]) -> Optional[str]:
            new = (new or "").strip()
            return new or old

        self._employees.update_profile(
            employee_id=employee.employee_id,
            name=keep(name, employee.name),
            phone=keep(phone, employee.phone),
            address=keep(address, employee.address),
            department=keep(department, employee.department),
        )
        return self.get_profile(email=email)
