from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, revision_clause
from ..users.model import PersonCard
from .model import Review, ReviewView
from .repository import ReviewRepository


def _to_review(r: dict) -> Review:
    return Review(
        review_id=int(r["review_id"]),
        employee_id=int(r["employee_id"]),
        review_text=r["review_text"],
        rating=float(r["rating"]),
        tasks_completed=int(r["tasks_completed"]),
        average_rating=(float(r["average_rating"]) if r.get("average_rating") is not None else None),
        remarks=r.get("remarks"),
        created_at=r.get("created_at"),
        revision=int(r.get("revision") or 1),
    )


class MySQLReviewRepository(ReviewRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, employee_id: int, review_text: str, rating: float, tasks_completed: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO reviews(employee_id, review_text, rating, tasks_completed)
                VALUES(%s,%s,%s,%s)
                """,
                (int(employee_id), review_text, rating, int(tasks_completed)),
            )
            return int(cur.lastrowid)

    def get_by_id(self, review_id: int) -> Optional[Review]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT review_id, employee_id, review_text, rating, tasks_completed,
                       average_rating, remarks, created_at, revision
                FROM reviews
                WHERE review_id=%s
                """,
                (int(review_id),),
            )
            r = fetchone(cur)
            return _to_review(r) if r else None

    def list_with_employees(self) -> Sequence[ReviewView]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT r.review_id, r.employee_id, r.review_text, r.rating, r.tasks_completed,
                       r.average_rating, r.remarks, r.created_at, r.revision,
                       e.employee_id AS e_id, e.name AS e_name, e.email AS e_email
                FROM reviews r
                LEFT JOIN employees e ON e.employee_id = r.employee_id
                ORDER BY r.created_at DESC, r.review_id DESC
                """
            )
            out: list[ReviewView] = []
            for r in fetchall(cur):
                employee = None
                if r.get("e_id") is not None:
                    employee = PersonCard(person_id=int(r["e_id"]), name=r["e_name"], email=r["e_email"])
                out.append(ReviewView(review=_to_review(r), employee=employee))
            return out

    def update_fields(
        self,
        *,
        review_id: int,
        tasks_completed: int,
        average_rating: float,
        remarks: str,
        expected_revision: Optional[int] = None,
    ) -> bool:
        extra, extra_params = revision_clause(expected_revision)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                UPDATE reviews
                SET tasks_completed=%s, average_rating=%s, remarks=%s, revision=revision+1
                WHERE review_id=%s{extra}
                """,
                (int(tasks_completed), average_rating, remarks, int(review_id)) + extra_params,
            )
            return cur.rowcount > 0
