from __future__ import annotations

import logging
from typing import Iterable, Optional

import mysql.connector

from .model import PersonCard
from .repository import EmployeeRepository, ManagerRepository

logger = logging.getLogger(__name__)


class IdentityDirectory:
    """Resolves employee/manager ids and emails to display cards."""

    def __init__(self, employees: EmployeeRepository, managers: ManagerRepository):
        self._employees = employees
        self._managers = managers

    def employee(self, employee_id: int) -> Optional[PersonCard]:
        e = self._employees.get_by_id(int(employee_id))
        if not e:
            return None
        return PersonCard(person_id=e.employee_id, name=e.name, email=e.email)

    def employee_by_email(self, email: str) -> Optional[PersonCard]:
        e = self._employees.get_by_email(email)
        if not e:
            return None
        return PersonCard(person_id=e.employee_id, name=e.name, email=e.email)

    def manager(self, manager_id: int) -> Optional[PersonCard]:
        m = self._managers.get_by_id(int(manager_id))
        if not m:
            return None
        return PersonCard(person_id=m.manager_id, name=m.name, email=m.email)

    def employees(self, employee_ids: Iterable[Optional[int]]) -> list[Optional[PersonCard]]:
        """Resolve many ids, keeping input order.

        A missing id or a storage failure for one id yields None for that
        position; the rest of the batch is still resolved.
        """

        cache: dict[int, Optional[PersonCard]] = {}
        out: list[Optional[PersonCard]] = []
        for employee_id in employee_ids:
            if employee_id is None:
                out.append(None)
                continue
            if employee_id not in cache:
                try:
                    cache[employee_id] = self.employee(employee_id)
                except mysql.connector.Error:
                    logger.warning("employee lookup failed for id=%s", employee_id, exc_info=True)
                    cache[employee_id] = None
            out.append(cache[employee_id])
        return out
