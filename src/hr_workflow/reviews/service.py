from __future__ import annotations

import logging
from typing import Optional

from ..common.validators import require_int, require_number
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ConflictError, NotFoundError, ValidationError
from ..users.repository import EmployeeRepository
from .model import Review, ReviewView
from .repository import ReviewRepository

logger = logging.getLogger(__name__)


class ReviewService:
    """Performance reviews: manager-authored, later amendable by a manager only."""

    def __init__(self, reviews: ReviewRepository, employees: EmployeeRepository):
        self._reviews = reviews
        self._employees = employees

    def submit_review(
        self,
        *,
        current_role: Role,
        employee_id,
        review_text: Optional[str],
        rating,
        tasks_completed,
    ) -> Review:
        if current_role != Role.MANAGER:
            raise AuthorizationError("Only managers can submit reviews")

        review_text = (review_text or "").strip()
        if employee_id in (None, "") or not review_text or rating is None or tasks_completed is None:
            raise ValidationError("Employee ID, review text, rating, and tasksCompleted are required")

        employee_id = require_int(employee_id, "Employee ID")
        # Presence and type only; the rating scale is up to the team.
        rating = require_number(rating, "Rating")
        tasks_completed = require_int(tasks_completed, "Tasks completed")

        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")

        review_id = self._reviews.create(
            employee_id=employee.employee_id,
            review_text=review_text,
            rating=rating,
            tasks_completed=tasks_completed,
        )
        logger.info("review %s submitted for employee %s", review_id, employee.employee_id)

        review = self._reviews.get_by_id(review_id)
        if not review:
            raise NotFoundError("Review not found")
        return review

    def list_reviews(self, *, current_role: Role) -> list[ReviewView]:
        if current_role != Role.MANAGER:
            raise AuthorizationError("Only managers can list reviews")
        return list(self._reviews.list_with_employees())

    def update_review(
        self,
        *,
        current_role: Role,
        review_id,
        tasks_completed,
        average_rating,
        remarks,
        expected_revision: Optional[int] = None,
    ) -> Review:
        if current_role != Role.MANAGER:
            raise AuthorizationError("Only managers can update reviews")

        if tasks_completed is None or average_rating is None or remarks is None:
            raise ValidationError("All review fields are required")

        review_id = require_int(review_id, "Review ID")
        tasks_completed = require_int(tasks_completed, "Tasks completed")
        average_rating = require_number(average_rating, "Average rating")

        if not self._reviews.get_by_id(review_id):
            raise NotFoundError("Review not found")

        ok = self._reviews.update_fields(
            review_id=review_id,
            tasks_completed=tasks_completed,
            average_rating=average_rating,
            remarks=str(remarks),
            expected_revision=expected_revision,
        )
        if not ok:
            raise ConflictError("Review was modified by someone else, reload and try again")

        updated = self._reviews.get_by_id(review_id)
        if not updated:
            raise NotFoundError("Review not found")
        return updated
