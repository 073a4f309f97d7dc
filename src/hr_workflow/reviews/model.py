from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import isoformat
from ..users.model import PersonCard


@dataclass(frozen=True)
class Review:
    """Performance review written by a manager.

    averageRating and remarks are only filled by a later amendment.
    """

    review_id: int
    employee_id: int
    review_text: str
    rating: float
    tasks_completed: int
    average_rating: Optional[float] = None
    remarks: Optional[str] = None
    created_at: Optional[datetime] = None
    revision: int = 1

    def to_dict(self) -> dict:
        return {
            "id": self.review_id,
            "employeeId": self.employee_id,
            "reviewText": self.review_text,
            "rating": self.rating,
            "tasksCompleted": self.tasks_completed,
            "averageRating": self.average_rating,
            "remarks": self.remarks,
            "createdAt": isoformat(self.created_at),
            "revision": self.revision,
        }


@dataclass(frozen=True)
class ReviewView:
    """Read-model: review with the employee populated (None when the employee is gone)."""

    review: Review
    employee: Optional[PersonCard]

    def to_dict(self) -> dict:
        data = self.review.to_dict()
        data["employeeId"] = self.employee.to_dict() if self.employee else None
        return data
