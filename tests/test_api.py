from __future__ import annotations

import pytest

from hr_workflow.core.enums import Role
from hr_workflow.main import create_app
from hr_workflow.users.tokens import Identity, TokenService

from inmemory import build_store, build_test_container


@pytest.fixture
def store():
    return build_store()


@pytest.fixture
def client(store):
    app = create_app(container=build_test_container(store), settings_module="hr_workflow.config.testing")
    return app.test_client()


@pytest.fixture
def people(store):
    boss = store.managers.add("Boss", "boss@example.com", "manager123")
    alice = store.employees.add("Alice", "alice@example.com", "employee123")
    bob = store.employees.add("Bob", "bob@example.com", "employee123")
    return boss, alice, bob


def _bearer(identity: Identity) -> dict:
    return {"Authorization": f"Bearer {TokenService('test-secret').issue(identity)}"}


def _manager(boss) -> dict:
    return _bearer(Identity(user_id=boss.manager_id, email=boss.email, name=boss.name, role=Role.MANAGER))


def _employee(e) -> dict:
    return _bearer(Identity(user_id=e.employee_id, email=e.email, name=e.name, role=Role.EMPLOYEE))


def test_health(client):
    assert client.get("/health").get_json() == {"status": "ok"}


def test_login_returns_usable_token(client, people):
    resp = client.post("/manager/login", json={"email": "boss@example.com", "password": "manager123"})
    assert resp.status_code == 200
    token = resp.get_json()["token"]

    resp = client.get("/manager/employees", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 200
    assert [e["email"] for e in resp.get_json()] == ["alice@example.com", "bob@example.com"]


def test_login_wrong_password_is_401(client, people):
    resp = client.post("/employee/login", json={"email": "alice@example.com", "password": "nope"})
    assert resp.status_code == 401
    assert resp.get_json() == {"error": "Invalid credentials"}


def test_register_with_mismatched_role_is_forbidden(client, store):
    resp = client.post(
        "/manager/register",
        json={"name": "Eve", "email": "eve@example.com", "password": "secret1", "role": "Employee"},
    )
    assert resp.status_code == 403
    assert store.managers.rows == {}


def test_manager_endpoints_require_token_and_role(client, people):
    _, alice, _ = people

    assert client.get("/manager/allReviews").status_code == 401
    assert client.get("/manager/allReviews", headers={"Authorization": "Bearer garbage"}).status_code == 401

    resp = client.get("/manager/getLeaveRequests", headers=_employee(alice))
    assert resp.status_code == 403
    assert resp.get_json()["success"] is False


def test_assign_and_update_task_flow(client, store, people):
    boss, alice, bob = people

    resp = client.post(
        "/manager/assignTask",
        json={
            "employeeId": alice.employee_id,
            "title": "Audit",
            "description": "Check invoices",
            "deadline": "2025-05-01T12:30:00",
        },
        headers=_manager(boss),
    )
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["employeeName"] == "Alice"
    assert body["task"]["deadline"] == "2025-05-01 12:30"
    assert body["task"]["status"] == "Pending"
    task_id = body["task"]["id"]

    resp = client.put(f"/employee/tasks/{task_id}/status", json={"status": "Completed"}, headers=_employee(bob))
    assert resp.status_code == 403

    resp = client.put(f"/employee/tasks/{task_id}/status", json={"status": "Done"}, headers=_employee(alice))
    assert resp.status_code == 400

    resp = client.put(
        f"/employee/tasks/{task_id}/status", json={"status": "InProgress", "revision": 1}, headers=_employee(alice)
    )
    assert resp.status_code == 200
    assert resp.get_json()["task"]["revision"] == 2

    resp = client.put(
        f"/manager/tasks/{task_id}/status", json={"status": "Completed", "revision": 1}, headers=_manager(boss)
    )
    assert resp.status_code == 409

    resp = client.post("/manager/updateTaskStatus", json={"taskId": 999, "status": "Completed"}, headers=_manager(boss))
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Task not found"}

    resp = client.post("/employee/getTasks", json={}, headers=_employee(alice))
    assert [t["status"] for t in resp.get_json()["tasks"]] == ["InProgress"]

    resp = client.get("/manager/dashboard", headers=_manager(boss))
    data = resp.get_json()
    assert data["manager"]["email"] == "boss@example.com"
    assert {e["name"]: len(e["tasks"]) for e in data["employees"]} == {"Alice": 1, "Bob": 0}


def test_leave_flow(client, store, people):
    boss, alice, _ = people

    resp = client.post(
        "/employee/applyLeave",
        json={"startDate": "2025-06-10", "endDate": "2025-06-01", "reason": "Trip"},
        headers=_employee(alice),
    )
    assert resp.status_code == 200
    history = resp.get_json()["leaveHistory"]
    assert history[0]["status"] == "Pending"
    leave_id = history[0]["id"]

    resp = client.get("/manager/getLeaveRequests", headers=_manager(boss))
    leaves = resp.get_json()["leaves"]
    assert leaves[0]["employeeName"] == "Alice"
    assert leaves[0]["employeeEmail"] == "alice@example.com"

    resp = client.post(
        "/manager/updateLeaveStatus", json={"leaveId": leave_id, "status": "Approved"}, headers=_manager(boss)
    )
    assert resp.get_json()["leave"]["status"] == "Approved"

    resp = client.post("/manager/updateLeaveStatus", json={"leaveId": 999, "status": "Approved"}, headers=_manager(boss))
    assert resp.status_code == 404
    assert resp.get_json() == {"success": False, "error": "Leave not found"}


def test_employee_cannot_read_someone_elses_leaves(client, people):
    _, alice, _ = people
    resp = client.post("/employee/getLeaves", json={"email": "bob@example.com"}, headers=_employee(alice))
    assert resp.status_code == 403


def test_work_report_flow(client, store, people):
    boss, alice, _ = people

    resp = client.post(
        "/employee/submitWorkReport",
        json={
            "employeeId": "alice@example.com",
            "startDate": "2025-06-09",
            "endDate": "2025-06-02",
            "totalHours": 40,
            "reportName": "Week 23",
            "description": "Closing",
        },
        headers=_employee(alice),
    )
    assert resp.status_code == 400
    assert resp.get_json() == {"success": False, "error": "End date cannot be before start date"}
    assert store.reports.rows == {}

    resp = client.post(
        "/employee/submitWorkReport",
        json={
            "startDate": "2025-06-02",
            "endDate": "2025-06-06",
            "totalHours": 40,
            "reportName": "Week 23",
            "description": "Closing",
        },
        headers=_employee(alice),
    )
    report_id = resp.get_json()["report"]["id"]

    resp = client.post(
        "/manager/updateReportStatus",
        json={"reportId": report_id, "status": "Approved", "managerComment": "Thanks"},
        headers=_manager(boss),
    )
    assert resp.get_json()["report"]["managerComment"] == "Thanks"

    reports = client.get("/manager/workReports", headers=_manager(boss)).get_json()["reports"]
    assert [r["status"] for r in reports] == ["Approved"]


def test_review_endpoints(client, people):
    boss, alice, _ = people

    resp = client.post(
        "/manager/submitReview",
        json={"employeeId": 404, "reviewText": "Great", "rating": 5, "tasksCompleted": 3},
        headers=_manager(boss),
    )
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Employee not found"}

    resp = client.post(
        "/manager/submitReview",
        json={"employeeId": alice.employee_id, "reviewText": "Great", "rating": 5, "tasksCompleted": 3},
        headers=_manager(boss),
    )
    review_id = resp.get_json()["review"]["id"]

    resp = client.put(
        f"/manager/updateReview/{review_id}",
        json={"tasksCompleted": 4, "averageRating": 4.5, "remarks": "Keep going"},
        headers=_manager(boss),
    )
    assert resp.get_json()["review"]["remarks"] == "Keep going"

    reviews = client.get("/manager/allReviews", headers=_manager(boss)).get_json()
    assert reviews[0]["employeeId"]["name"] == "Alice"


def test_team_endpoints(client, people):
    boss, alice, _ = people

    resp = client.post("/manager/addEmployee", json={"employeeId": alice.employee_id}, headers=_manager(boss))
    assert resp.get_json()["message"] == "Employee added successfully!"

    resp = client.post("/manager/addEmployee", json={"employeeId": alice.employee_id}, headers=_manager(boss))
    assert resp.status_code == 409

    members = client.get("/manager/team", headers=_manager(boss)).get_json()["members"]
    assert [m["employee"]["email"] for m in members] == ["alice@example.com"]


def test_attendance_endpoints(client, people):
    boss, alice, _ = people

    resp = client.post(
        "/manager/recordAttendance",
        json={"employeeId": alice.employee_id, "date": "2025-06-02", "status": "present"},
        headers=_manager(boss),
    )
    assert resp.status_code == 200

    resp = client.post("/employee/getAttendance", json={}, headers=_employee(alice))
    body = resp.get_json()
    assert body["success"] is True
    assert set(body["summary"]) == {"present", "absent", "total"}


def test_profile_and_todos(client, people):
    _, alice, bob = people

    resp = client.post("/employee/updateProfile", json={"phone": "555-0100"}, headers=_employee(alice))
    assert resp.get_json()["profile"]["phone"] == "555-0100"

    todo = client.post("/employee/addTodo", json={"text": "Submit timesheet"}, headers=_employee(alice)).get_json()["todo"]

    resp = client.post("/employee/toggleTodo", json={"id": todo["id"]}, headers=_employee(bob))
    assert resp.status_code == 403

    resp = client.post("/employee/toggleTodo", json={"id": todo["id"]}, headers=_employee(alice))
    assert resp.get_json()["todo"]["completed"] is True

    client.post("/employee/deleteTodo", json={"id": todo["id"]}, headers=_employee(alice))
    assert client.post("/employee/getTodos", json={}, headers=_employee(alice)).get_json()["todos"] == []


def test_unexpected_failure_is_500_with_fixed_message(client, store, people, monkeypatch):
    boss, _, _ = people

    def boom():
        raise RuntimeError("db down")

    monkeypatch.setattr(store.reports, "list_reports", lambda **kw: boom())
    resp = client.get("/manager/workReports", headers=_manager(boss))
    assert resp.status_code == 500
    assert resp.get_json() == {"success": False, "error": "Failed to fetch work reports"}
