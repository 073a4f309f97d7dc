from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Todo


class TodoRepository(Protocol):
    def create(self, *, employee_email: str, text: str) -> int:
        raise NotImplementedError

    def get_by_id(self, todo_id: int) -> Optional[Todo]:
        raise NotImplementedError

    def list_for_email(self, employee_email: str) -> Sequence[Todo]:
        """Newest first."""

        raise NotImplementedError

    def set_completed(self, *, todo_id: int, completed: bool) -> bool:
        raise NotImplementedError

    def delete_by_id(self, todo_id: int) -> bool:
        raise NotImplementedError
