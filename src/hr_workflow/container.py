from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_TOKEN_MAX_AGE
from .database.connection import DBConfig, DatabaseConnection
from .leaves.mysql_leave_repository import MySQLLeaveRepository
from .leaves.service import LeaveService
from .reports.mysql_report_repository import MySQLWorkReportRepository
from .reports.service import WorkReportService
from .reviews.mysql_review_repository import MySQLReviewRepository
from .reviews.service import ReviewService
from .tasks.mysql_task_repository import MySQLTaskRepository
from .tasks.service import TaskService
from .teams.mysql_team_repository import MySQLTeamRepository
from .teams.service import TeamService
from .todos.mysql_todo_repository import MySQLTodoRepository
from .todos.service import TodoService
from .users.directory import IdentityDirectory
from .users.mysql_employee_repository import MySQLEmployeeRepository
from .users.mysql_manager_repository import MySQLManagerRepository
from .users.service import AuthService, ProfileService
from .users.tokens import TokenService


@dataclass(frozen=True)
class Container:
    token_service: TokenService
    directory: IdentityDirectory

    auth_service: AuthService
    profile_service: ProfileService
    team_service: TeamService
    task_service: TaskService
    leave_service: LeaveService
    report_service: WorkReportService
    review_service: ReviewService
    attendance_service: AttendanceService
    todo_service: TodoService


def build_services(
    *,
    employees,
    managers,
    teams,
    tasks,
    leaves,
    reports,
    reviews,
    attendance,
    todos,
    token_service: TokenService,
) -> Container:
    """Wire services over any set of repositories (MySQL in production, fakes in tests)."""

    directory = IdentityDirectory(employees, managers)
    return Container(
        token_service=token_service,
        directory=directory,
        auth_service=AuthService(employees, managers, token_service),
        profile_service=ProfileService(employees),
        team_service=TeamService(teams, employees, directory),
        task_service=TaskService(tasks, employees),
        leave_service=LeaveService(leaves, directory),
        report_service=WorkReportService(reports),
        review_service=ReviewService(reviews, employees),
        attendance_service=AttendanceService(attendance, employees),
        todo_service=TodoService(todos),
    )


def build_container(*, db_config: dict, secret_key: str, token_max_age: int = DEFAULT_TOKEN_MAX_AGE) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return build_services(
        employees=MySQLEmployeeRepository(conn),
        managers=MySQLManagerRepository(conn),
        teams=MySQLTeamRepository(conn),
        tasks=MySQLTaskRepository(conn),
        leaves=MySQLLeaveRepository(conn),
        reports=MySQLWorkReportRepository(conn),
        reviews=MySQLReviewRepository(conn),
        attendance=MySQLAttendanceRepository(conn),
        todos=MySQLTodoRepository(conn),
        token_service=TokenService(secret_key, max_age=token_max_age),
    )
