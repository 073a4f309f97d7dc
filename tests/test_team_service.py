from __future__ import annotations

import pytest

from hr_workflow.core.enums import Role
from hr_workflow.core.exceptions import AuthorizationError, ConflictError, NotFoundError, ValidationError
from hr_workflow.teams.service import TeamService
from hr_workflow.users.directory import IdentityDirectory

from inmemory import InMemoryEmployees, InMemoryManagers, InMemoryTeams


@pytest.fixture
def setup():
    employees = InMemoryEmployees()
    managers = InMemoryManagers()
    teams = InMemoryTeams()
    svc = TeamService(teams, employees, IdentityDirectory(employees, managers))
    boss = managers.add("Boss", "boss@example.com")
    alice = employees.add("Alice", "alice@example.com")
    return svc, teams, boss, alice


def test_add_member_then_list_team(setup):
    svc, teams, boss, alice = setup

    membership = svc.add_team_member(current_role=Role.MANAGER, manager_id=boss.manager_id, employee_id=str(alice.employee_id))

    assert membership.employee_id == alice.employee_id
    rows = svc.list_team(current_role=Role.MANAGER, manager_id=boss.manager_id)
    assert rows[0]["employee"] == {"id": alice.employee_id, "name": "Alice", "email": "alice@example.com"}


def test_duplicate_member_conflicts(setup):
    svc, teams, boss, alice = setup
    svc.add_team_member(current_role=Role.MANAGER, manager_id=boss.manager_id, employee_id=alice.employee_id)

    with pytest.raises(ConflictError, match="already in your team"):
        svc.add_team_member(current_role=Role.MANAGER, manager_id=boss.manager_id, employee_id=alice.employee_id)
    assert len(teams.rows) == 1


def test_same_employee_in_two_teams(setup):
    svc, teams, boss, alice = setup
    svc.add_team_member(current_role=Role.MANAGER, manager_id=boss.manager_id, employee_id=alice.employee_id)
    svc.add_team_member(current_role=Role.MANAGER, manager_id=boss.manager_id + 1, employee_id=alice.employee_id)
    assert len(teams.rows) == 2


def test_add_member_errors(setup):
    svc, teams, boss, _ = setup

    with pytest.raises(ValidationError, match="Employee ID is required"):
        svc.add_team_member(current_role=Role.MANAGER, manager_id=boss.manager_id, employee_id="")
    with pytest.raises(NotFoundError, match="Employee not found"):
        svc.add_team_member(current_role=Role.MANAGER, manager_id=boss.manager_id, employee_id=404)
    with pytest.raises(AuthorizationError):
        svc.add_team_member(current_role=Role.EMPLOYEE, manager_id=boss.manager_id, employee_id=1)
    assert teams.rows == {}


def test_list_employees_is_manager_only(setup):
    svc, _, _, alice = setup
    assert [e.email for e in svc.list_employees(current_role=Role.MANAGER)] == [alice.email]
    with pytest.raises(AuthorizationError):
        svc.list_employees(current_role=Role.EMPLOYEE)
