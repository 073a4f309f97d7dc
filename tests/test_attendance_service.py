from __future__ import annotations

from datetime import date, datetime

import pytest

from hr_workflow.attendance.model import AttendanceDay
from hr_workflow.attendance.service import AttendanceService
from hr_workflow.core.enums import Role
from hr_workflow.core.exceptions import AuthorizationError, NotFoundError, ValidationError

from inmemory import InMemoryAttendance, InMemoryEmployees

NOW = datetime(2025, 4, 21, 10, 0)


def test_summary_counts_present_and_absent_only():
    employees = InMemoryEmployees()
    alice = employees.add("Alice", "alice@example.com")
    attendance = InMemoryAttendance()
    attendance.put(alice.employee_id, "2025-04", ["present"] * 18 + ["absent"] * 2 + ["leave"])
    svc = AttendanceService(attendance, employees)

    overview = svc.get_attendance_summary(employee_email="alice@example.com", now=NOW)

    assert overview.summary.to_dict() == {"present": 18, "absent": 2, "total": 20}
    assert len(overview.attendance.records) == 21


def test_summary_without_records_is_empty_and_nothing_is_created():
    employees = InMemoryEmployees()
    alice = employees.add("Alice", "alice@example.com")
    attendance = InMemoryAttendance()
    attendance.put(alice.employee_id, "2025-03", ["present"])
    svc = AttendanceService(attendance, employees)

    overview = svc.get_attendance_summary(employee_email="alice@example.com", now=NOW)

    assert overview.summary.to_dict() == {"present": 0, "absent": 0, "total": 0}
    assert overview.attendance.month == "2025-04"
    assert overview.attendance.attendance_id is None
    assert list(attendance.docs) == [(alice.employee_id, "2025-03")]


def test_summary_for_unknown_employee():
    svc = AttendanceService(InMemoryAttendance(), InMemoryEmployees())
    with pytest.raises(NotFoundError, match="Employee not found"):
        svc.get_attendance_summary(employee_email="ghost@example.com", now=NOW)


def test_summarize_ignores_unknown_statuses():
    days = [AttendanceDay(work_date=date(2025, 4, i), status=s) for i, s in enumerate(["present", "Present", "holiday"], 1)]
    summary = AttendanceService.summarize(days)
    assert (summary.present, summary.absent, summary.total) == (1, 0, 1)


def test_record_day_upserts_into_month():
    employees = InMemoryEmployees()
    alice = employees.add("Alice", "alice@example.com")
    attendance = InMemoryAttendance()
    svc = AttendanceService(attendance, employees)

    svc.record_day(current_role=Role.MANAGER, employee_id=alice.employee_id, work_date="2025-04-01", status="Present")
    svc.record_day(current_role=Role.MANAGER, employee_id=alice.employee_id, work_date="2025-04-02", status="absent")
    svc.record_day(current_role=Role.MANAGER, employee_id=alice.employee_id, work_date="2025-04-02", status="present")

    overview = svc.get_attendance_summary(employee_email="alice@example.com", now=NOW)
    assert [d.status for d in overview.attendance.records] == ["present", "present"]
    assert overview.summary.present == 2


def test_record_day_rules():
    employees = InMemoryEmployees()
    alice = employees.add("Alice", "alice@example.com")
    attendance = InMemoryAttendance()
    svc = AttendanceService(attendance, employees)

    with pytest.raises(AuthorizationError):
        svc.record_day(current_role=Role.EMPLOYEE, employee_id=alice.employee_id, work_date="2025-04-01", status="present")
    with pytest.raises(NotFoundError):
        svc.record_day(current_role=Role.MANAGER, employee_id=99, work_date="2025-04-01", status="present")
    with pytest.raises(ValidationError):
        svc.record_day(current_role=Role.MANAGER, employee_id=alice.employee_id, work_date="01/04/2025", status="present")
    assert attendance.docs == {}
