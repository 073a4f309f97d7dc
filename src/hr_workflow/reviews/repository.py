from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Review, ReviewView


class ReviewRepository(Protocol):
    def create(self, *, employee_id: int, review_text: str, rating: float, tasks_completed: int) -> int:
        raise NotImplementedError

    def get_by_id(self, review_id: int) -> Optional[Review]:
        raise NotImplementedError

    def list_with_employees(self) -> Sequence[ReviewView]:
        """Every review joined with its employee, newest first."""

        raise NotImplementedError

    def update_fields(
        self,
        *,
        review_id: int,
        tasks_completed: int,
        average_rating: float,
        remarks: str,
        expected_revision: Optional[int] = None,
    ) -> bool:
        raise NotImplementedError
