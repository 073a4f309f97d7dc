from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee, Manager


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): services depend on this interface, never on a concrete database.
    """

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def create(self, *, name: str, email: str, password_hash: str) -> int:
        """Raises ConflictError when the email is already registered."""

        raise NotImplementedError

    def update_profile(
        self,
        *,
        employee_id: int,
        name: str,
        phone: Optional[str],
        address: Optional[str],
        department: Optional[str],
    ) -> None:
        raise NotImplementedError


class ManagerRepository(Protocol):
    def get_by_id(self, manager_id: int) -> Optional[Manager]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Manager]:
        raise NotImplementedError

    def create(self, *, name: str, email: str, password_hash: str) -> int:
        raise NotImplementedError
