from __future__ import annotations

from datetime import datetime

import pytest

from hr_workflow.core.enums import ReportStatus, Role
from hr_workflow.core.exceptions import AuthorizationError, ConflictError, NotFoundError, ValidationError
from hr_workflow.reports.service import WorkReportService

from inmemory import InMemoryReports


def _submit(svc, **overrides):
    kwargs = dict(
        current_role=Role.EMPLOYEE,
        employee_email="alice@example.com",
        start_date="2025-03-03",
        end_date="2025-03-07",
        total_hours=38.5,
        report_name="Week 10",
        description="Migration work",
        now=datetime(2025, 3, 7, 18, 0),
    )
    kwargs.update(overrides)
    return svc.submit_work_report(**kwargs)


def test_submit_report_starts_pending():
    svc = WorkReportService(InMemoryReports())

    report = _submit(svc)

    assert report.status == ReportStatus.PENDING
    assert report.total_hours == 38.5
    assert report.manager_comment == ""
    assert report.submitted_at == datetime(2025, 3, 7, 18, 0)


def test_report_with_end_before_start_is_rejected_and_not_stored():
    repo = InMemoryReports()
    svc = WorkReportService(repo)

    with pytest.raises(ValidationError, match="End date cannot be before start date"):
        _submit(svc, start_date="2025-03-07", end_date="2025-03-03")
    assert repo.rows == {}


@pytest.mark.parametrize("field", ["report_name", "description", "total_hours", "employee_email"])
def test_report_missing_field_is_rejected(field):
    repo = InMemoryReports()
    svc = WorkReportService(repo)

    with pytest.raises(ValidationError):
        _submit(svc, **{field: None})
    assert repo.rows == {}


@pytest.mark.parametrize("hours", ["nan", "inf", "-inf", float("nan"), float("inf")])
def test_report_non_finite_hours_are_rejected(hours):
    repo = InMemoryReports()
    svc = WorkReportService(repo)

    with pytest.raises(ValidationError, match="Total hours must be a number"):
        _submit(svc, total_hours=hours)
    assert repo.rows == {}


def test_report_timestamps_compare_full_instants():
    repo = InMemoryReports()
    svc = WorkReportService(repo)

    with pytest.raises(ValidationError, match="End date cannot be before start date"):
        _submit(svc, start_date="2025-03-07T15:00:00", end_date="2025-03-07T09:00:00")
    assert repo.rows == {}

    report = _submit(svc, start_date="2025-03-07T09:00:00", end_date="2025-03-07T15:00:00")
    assert report.start_date == report.end_date


def test_reports_listed_newest_submission_first():
    svc = WorkReportService(InMemoryReports())
    _submit(svc, report_name="old", now=datetime(2025, 3, 1, 9, 0))
    _submit(svc, report_name="new", now=datetime(2025, 3, 8, 9, 0))
    _submit(svc, report_name="bob", employee_email="bob@example.com", now=datetime(2025, 3, 5, 9, 0))

    assert [r.report_name for r in svc.list_work_reports()] == ["new", "bob", "old"]
    assert [r.report_name for r in svc.list_work_reports(employee_email="alice@example.com")] == ["new", "old"]


def test_manager_reviews_report_with_comment():
    svc = WorkReportService(InMemoryReports())
    report = _submit(svc)

    updated = svc.update_report_status(
        current_role=Role.MANAGER,
        report_id=report.report_id,
        status="Rejected",
        manager_comment="  Missing Friday  ",
    )

    assert updated.status == ReportStatus.REJECTED
    assert updated.manager_comment == "Missing Friday"


def test_update_missing_report_is_not_found():
    repo = InMemoryReports()
    svc = WorkReportService(repo)
    _submit(svc)
    before = dict(repo.rows)

    with pytest.raises(NotFoundError, match="Report not found"):
        svc.update_report_status(current_role=Role.MANAGER, report_id=77, status="Approved", manager_comment=None)
    assert repo.rows == before


def test_report_rules_for_roles_and_revisions():
    svc = WorkReportService(InMemoryReports())
    report = _submit(svc)

    with pytest.raises(AuthorizationError):
        _submit(svc, current_role=Role.MANAGER)
    with pytest.raises(AuthorizationError):
        svc.update_report_status(
            current_role=Role.EMPLOYEE, report_id=report.report_id, status="Approved", manager_comment=None
        )

    svc.update_report_status(
        current_role=Role.MANAGER,
        report_id=report.report_id,
        status="Approved",
        manager_comment=None,
        expected_revision=1,
    )
    with pytest.raises(ConflictError):
        svc.update_report_status(
            current_role=Role.MANAGER,
            report_id=report.report_id,
            status="Rejected",
            manager_comment=None,
            expected_revision=1,
        )
