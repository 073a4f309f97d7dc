from __future__ import annotations

import logging
import re
from contextlib import closing
from pathlib import Path
from typing import Iterator

from werkzeug.security import generate_password_hash

from .connection import DatabaseConnection, DBConfig

logger = logging.getLogger(__name__)

_SKIPPED_LINES = re.compile(r"(?im)^\s*(--.*|CREATE\s+DATABASE\b.*?;|USE\b.*?;)\s*$")

DEMO_MANAGER = ("Demo Manager", "manager@example.com", "manager123")
DEMO_EMPLOYEE = ("Demo Employee", "employee@example.com", "employee123")


def _factory(db_config: dict) -> DatabaseConnection:
    # Fresh factory: bootstrap may target another database than the app singleton.
    return DatabaseConnection(DBConfig.from_dict(db_config))


def split_schema(sql: str) -> Iterator[str]:
    """Yield the statements of a schema file.

    Comment lines and CREATE DATABASE / USE lines are dropped so the file can
    be applied to whatever database DB_CONFIG names. A ';' inside a quoted
    literal does not end a statement.
    """

    sql = _SKIPPED_LINES.sub("", sql)
    start = 0
    quote = None
    i = 0
    while i < len(sql):
        ch = sql[i]
        if ch == "\\":
            i += 2
            continue
        if quote:
            if ch == quote:
                quote = None
        elif ch in ("'", '"'):
            quote = ch
        elif ch == ";":
            stmt = sql[start:i].strip()
            if stmt:
                yield stmt
            start = i + 1
        i += 1

    tail = sql[start:].strip()
    if tail:
        yield tail


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    with closing(_factory(db_config).connect(with_database=False)) as conn:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)

    statements = list(split_schema(Path(schema_path).read_text(encoding="utf-8")))
    with closing(_factory(db_config).connect()) as conn:
        cur = conn.cursor()
        for stmt in statements:
            cur.execute(stmt)
        conn.commit()
    logger.info("schema applied from %s (%d statements)", schema_path, len(statements))


def ensure_demo_users(db_config: dict) -> None:
    """Create (or reset) a demo manager and employee, linked as a team."""

    with closing(_factory(db_config).connect()) as conn:
        cur = conn.cursor(dictionary=True)

        def upsert(table: str, id_col: str, account: tuple[str, str, str], role: str) -> int:
            name, email, password = account
            password_hash = generate_password_hash(password)
            cur.execute(f"SELECT {id_col} AS id FROM {table} WHERE email=%s", (email,))
            existing = cur.fetchone()
            if existing:
                cur.execute(
                    f"UPDATE {table} SET name=%s, password_hash=%s WHERE {id_col}=%s",
                    (name, password_hash, existing["id"]),
                )
                return int(existing["id"])
            cur.execute(
                f"INSERT INTO {table}(name, email, password_hash, role) VALUES(%s,%s,%s,%s)",
                (name, email, password_hash, role),
            )
            return int(cur.lastrowid)

        manager_id = upsert("managers", "manager_id", DEMO_MANAGER, "Manager")
        employee_id = upsert("employees", "employee_id", DEMO_EMPLOYEE, "Employee")
        cur.execute(
            "INSERT IGNORE INTO team_memberships(manager_id, employee_id) VALUES(%s,%s)",
            (manager_id, employee_id),
        )
        conn.commit()
    logger.info("demo users ready (%s / %s)", DEMO_MANAGER[1], DEMO_EMPLOYEE[1])


def list_tables(db_config: dict) -> list[str]:
    with closing(_factory(db_config).connect()) as conn:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
