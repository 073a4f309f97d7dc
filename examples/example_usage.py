"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the workflow rules live in the services.
"""

import importlib

from hr_workflow.config import get_settings_module
from hr_workflow.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, secret_key=settings.SECRET_KEY)
    for report in container.report_service.list_work_reports():
        print(report.to_dict())


if __name__ == "__main__":
    main()
