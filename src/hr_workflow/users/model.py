from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import isoformat
from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: Plain data object (no DB access code). The password hash never leaves the service layer.
    """

    employee_id: int
    name: str
    email: str
    password_hash: str
    role: Role = Role.EMPLOYEE
    phone: Optional[str] = None
    address: Optional[str] = None
    department: Optional[str] = None
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.employee_id,
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
            "phone": self.phone,
            "address": self.address,
            "department": self.department,
            "createdAt": isoformat(self.created_at),
        }

    def profile(self) -> dict:
        return {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "address": self.address,
            "department": self.department,
        }


@dataclass(frozen=True)
class Manager:
    manager_id: int
    name: str
    email: str
    password_hash: str
    role: Role = Role.MANAGER
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.manager_id,
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
            "createdAt": isoformat(self.created_at),
        }


@dataclass(frozen=True)
class PersonCard:
    """Denormalized display data used to enrich workflow results."""

    person_id: int
    name: str
    email: str

    def to_dict(self) -> dict:
        return {"id": self.person_id, "name": self.name, "email": self.email}
