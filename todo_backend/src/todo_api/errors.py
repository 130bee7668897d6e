from __future__ import annotations

from typing import List


class TodoError(Exception):
    """Base class for errors raised by the todo store."""


class TodoNotFoundError(TodoError):
    """Raised when no todo exists for the requested id."""

    def __init__(self, todo_id: object) -> None:
        super().__init__(f"Todo {todo_id} not found")
        self.todo_id = todo_id


class TodoValidationError(TodoError):
    """Raised when todo data fails validation; carries the list of messages."""

    def __init__(self, errors: List[str]) -> None:
        super().__init__("; ".join(errors))
        self.errors = list(errors)
