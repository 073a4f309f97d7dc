from __future__ import annotations

import pytest

from hr_workflow.core.enums import Role
from hr_workflow.core.exceptions import AuthenticationError, ConflictError, NotFoundError, ValidationError
from hr_workflow.users.service import AuthService, ProfileService
from hr_workflow.users.tokens import Identity, TokenService

from inmemory import InMemoryEmployees, InMemoryManagers


@pytest.fixture
def auth():
    employees = InMemoryEmployees()
    managers = InMemoryManagers()
    tokens = TokenService("test-secret", max_age=3600)
    return AuthService(employees, managers, tokens), employees, managers, tokens


def test_register_and_login_employee(auth):
    svc, employees, _, tokens = auth

    employee_id = svc.register_employee(name="Alice", email="alice@example.com", password="hunter22")
    assert employees.get_by_id(employee_id).password_hash != "hunter22"

    result = svc.login_employee(email="alice@example.com", password="hunter22")
    identity = tokens.verify(result.token)
    assert identity == Identity(user_id=employee_id, email="alice@example.com", name="Alice", role=Role.EMPLOYEE)


def test_register_rules(auth):
    svc, _, _, _ = auth
    svc.register_manager(name="Boss", email="boss@example.com", password="secret1")

    with pytest.raises(ConflictError, match="Manager already exists"):
        svc.register_manager(name="Boss", email="boss@example.com", password="secret1")
    with pytest.raises(ValidationError):
        svc.register_employee(name="Al", email="al@example.com", password="123")
    with pytest.raises(ValidationError):
        svc.register_employee(name="", email="al@example.com", password="123456")


def test_login_failures(auth):
    svc, _, _, _ = auth
    svc.register_manager(name="Boss", email="boss@example.com", password="secret1")

    with pytest.raises(AuthenticationError, match="Manager not found"):
        svc.login_manager(email="nobody@example.com", password="secret1")
    with pytest.raises(AuthenticationError, match="Invalid credentials"):
        svc.login_manager(email="boss@example.com", password="wrong")


def test_manager_token_carries_manager_role(auth):
    svc, _, _, tokens = auth
    svc.register_manager(name="Boss", email="boss@example.com", password="secret1")

    result = svc.login_manager(email="boss@example.com", password="secret1")
    assert tokens.verify(result.token).role == Role.MANAGER


def test_token_rejects_tampering_and_expiry():
    tokens = TokenService("test-secret", max_age=3600)
    token = tokens.issue(Identity(user_id=1, email="a@example.com", name="A", role=Role.EMPLOYEE))

    with pytest.raises(AuthenticationError):
        TokenService("other-secret").verify(token)
    with pytest.raises(AuthenticationError):
        tokens.verify(token[:-2] + "xx")
    with pytest.raises(AuthenticationError, match="expired"):
        TokenService("test-secret", max_age=-1).verify(token)


def test_profile_update_keeps_blank_fields():
    employees = InMemoryEmployees()
    employees.add("Alice", "alice@example.com")
    svc = ProfileService(employees)

    svc.update_profile(email="alice@example.com", phone="555-0100", department="Finance")
    profile = svc.update_profile(email="alice@example.com", name=" ", phone="", address="1 Main St")

    assert profile.profile() == {
        "name": "Alice",
        "email": "alice@example.com",
        "phone": "555-0100",
        "address": "1 Main St",
        "department": "Finance",
    }


def test_profile_for_unknown_email():
    with pytest.raises(NotFoundError):
        ProfileService(InMemoryEmployees()).get_profile(email="ghost@example.com")
