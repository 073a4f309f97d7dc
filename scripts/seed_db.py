from __future__ import annotations

import importlib
from datetime import date, timedelta

from hr_workflow.config import get_settings_module
from hr_workflow.container import build_container
from hr_workflow.core.enums import Role
from hr_workflow.database.bootstrap import ensure_demo_users


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    ensure_demo_users(db_config)

    # A few attendance days for the demo employee so the monthly summary is not empty.
    container = build_container(db_config=db_config, secret_key=settings.SECRET_KEY)
    employee = container.directory.employee_by_email("employee@example.com")
    if employee:
        first = date.today().replace(day=1)
        for offset, status in enumerate(["present", "present", "absent", "leave", "present"]):
            container.attendance_service.record_day(
                current_role=Role.MANAGER,
                employee_id=employee.person_id,
                work_date=first + timedelta(days=offset),
                status=status,
            )

    print(
        "OK: Seeded database -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
    )


if __name__ == "__main__":
    main()
