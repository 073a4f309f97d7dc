from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import TeamMembership


class TeamRepository(Protocol):
    def add(self, *, manager_id: int, employee_id: int) -> int:
        """Insert a membership; raises ConflictError if the pair already exists."""

        raise NotImplementedError

    def get_by_id(self, membership_id: int) -> Optional[TeamMembership]:
        raise NotImplementedError

    def list_for_manager(self, manager_id: int) -> Sequence[TeamMembership]:
        raise NotImplementedError
