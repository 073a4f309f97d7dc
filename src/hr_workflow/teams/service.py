from __future__ import annotations

import logging

from ..common.validators import require_int
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..users.directory import IdentityDirectory
from ..users.model import Employee
from ..users.repository import EmployeeRepository
from .model import TeamMembership
from .repository import TeamRepository

logger = logging.getLogger(__name__)


class TeamService:
    def __init__(self, teams: TeamRepository, employees: EmployeeRepository, directory: IdentityDirectory):
        self._teams = teams
        self._employees = employees
        self._directory = directory

    def add_team_member(self, *, current_role: Role, manager_id: int, employee_id) -> TeamMembership:
        if current_role != Role.MANAGER:
            raise AuthorizationError("Only managers can build a team")
        if employee_id in (None, ""):
            raise ValidationError("Employee ID is required")

        employee_id = require_int(employee_id, "Employee ID")
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found")

        membership_id = self._teams.add(manager_id=int(manager_id), employee_id=employee_id)
        logger.info("manager %s added employee %s to team", manager_id, employee_id)

        membership = self._teams.get_by_id(membership_id)
        if not membership:
            raise NotFoundError("Team membership not found")
        return membership

    def list_team(self, *, current_role: Role, manager_id: int) -> list[dict]:
        if current_role != Role.MANAGER:
            raise AuthorizationError("Only managers can view a team")

        memberships = list(self._teams.list_for_manager(int(manager_id)))
        cards = self._directory.employees(m.employee_id for m in memberships)

        out: list[dict] = []
        for m, card in zip(memberships, cards):
            row = m.to_dict()
            row["employee"] = card.to_dict() if card else None
            out.append(row)
        return out

    def list_employees(self, *, current_role: Role) -> list[Employee]:
        if current_role != Role.MANAGER:
            raise AuthorizationError("Only managers can list employees")
        return list(self._employees.list_all())
