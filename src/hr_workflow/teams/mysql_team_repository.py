from __future__ import annotations

from typing import Optional, Sequence

from mysql.connector.errors import IntegrityError

from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from .model import TeamMembership
from .repository import TeamRepository


def _to_membership(r: dict) -> TeamMembership:
    return TeamMembership(
        membership_id=int(r["membership_id"]),
        manager_id=int(r["manager_id"]),
        employee_id=int(r["employee_id"]),
        added_at=r.get("added_at"),
    )


class MySQLTeamRepository(TeamRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def add(self, *, manager_id: int, employee_id: int) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "INSERT INTO team_memberships(manager_id, employee_id) VALUES(%s,%s)",
                    (int(manager_id), int(employee_id)),
                )
                return int(cur.lastrowid)
        except IntegrityError as exc:
            if is_duplicate_key(exc):
                raise ConflictError("Employee is already in your team") from exc
            raise

    def get_by_id(self, membership_id: int) -> Optional[TeamMembership]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT membership_id, manager_id, employee_id, added_at
                FROM team_memberships
                WHERE membership_id=%s
                """,
                (int(membership_id),),
            )
            r = fetchone(cur)
            return _to_membership(r) if r else None

    def list_for_manager(self, manager_id: int) -> Sequence[TeamMembership]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT membership_id, manager_id, employee_id, added_at
                FROM team_memberships
                WHERE manager_id=%s
                ORDER BY added_at, membership_id
                """,
                (int(manager_id),),
            )
            return [_to_membership(r) for r in fetchall(cur)]
