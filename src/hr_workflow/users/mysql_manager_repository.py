from __future__ import annotations

from typing import Optional

from mysql.connector.errors import IntegrityError

from ..core.enums import Role
from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, is_duplicate_key
from .model import Manager
from .repository import ManagerRepository


def _to_manager(row: dict) -> Manager:
    return Manager(
        manager_id=int(row["manager_id"]),
        name=row["name"],
        email=row["email"],
        password_hash=row["password_hash"],
        role=Role(row.get("role") or Role.MANAGER.value),
        created_at=row.get("created_at"),
    )


class MySQLManagerRepository(ManagerRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, manager_id: int) -> Optional[Manager]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT manager_id, name, email, password_hash, role, created_at FROM managers WHERE manager_id=%s",
                (int(manager_id),),
            )
            row = fetchone(cur)
            return _to_manager(row) if row else None

    def get_by_email(self, email: str) -> Optional[Manager]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT manager_id, name, email, password_hash, role, created_at FROM managers WHERE email=%s",
                (email,),
            )
            row = fetchone(cur)
            return _to_manager(row) if row else None

    def create(self, *, name: str, email: str, password_hash: str) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "INSERT INTO managers(name, email, password_hash, role) VALUES(%s,%s,%s,%s)",
                    (name, email, password_hash, Role.MANAGER.value),
                )
                return int(cur.lastrowid)
        except IntegrityError as exc:
            if is_duplicate_key(exc):
                raise ConflictError("Manager already exists") from exc
            raise
