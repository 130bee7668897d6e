from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from threading import RLock
from typing import Dict, Iterable, List, Optional, Tuple

from .errors import TodoNotFoundError, TodoValidationError
from .models import TodoEntity
from .schemas import TodoCreate, TodoUpdate
from .validation import validate_todo_data

logger = logging.getLogger(__name__)

SAMPLE_TODOS: Tuple[Tuple[str, str], ...] = (
    ("Learn FastAPI", "Study routers and dependencies and build an API"),
    ("Build a Todo app", "Create a full-stack todo application"),
)

_TICK = timedelta(microseconds=1)


@dataclass(frozen=True)
class ListQuery:
    """
    Filters for listing todos. Both filters must match when both are set.
    """
    completed: Optional[bool] = None
    search: Optional[str] = None


# PUBLIC_INTERFACE
class TodoStore:
    """
    Thread-safe in-memory todo store.

    Items are kept in insertion order in a dict keyed by id. Ids come from a
    monotonic counter and are never reused, even after deletion. Every
    public method returns copies so callers cannot mutate stored items.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._items: Dict[int, TodoEntity] = {}
        self._next_id = 1

    @classmethod
    def with_sample_data(cls) -> "TodoStore":
        """Return a store holding the two pending sample todos (ids 1 and 2)."""
        store = cls()
        for title, description in SAMPLE_TODOS:
            store.create(TodoCreate(title=title, description=description))
        return store

    def _now(self) -> datetime:
        return datetime.now(timezone.utc)

    def _now_after(self, previous: datetime) -> datetime:
        # updated_at must move forward even if the clock has not
        now = self._now()
        return now if now > previous else previous + _TICK

    def _allocate_id(self) -> int:
        with self._lock:
            i = self._next_id
            self._next_id += 1
            return i

    def _require(self, todo_id: int) -> TodoEntity:
        item = self._items.get(todo_id)
        if item is None:
            raise TodoNotFoundError(todo_id)
        return item

    def count(self) -> int:
        with self._lock:
            return len(self._items)

    def list(self, query: Optional[ListQuery] = None) -> List[TodoEntity]:
        """
        Return todos matching the query, in insertion order.
        - completed: exact match on the completion flag
        - search: case-insensitive substring of title or description
        """
        q = query or ListQuery()
        with self._lock:
            items: Iterable[TodoEntity] = self._items.values()

            if q.completed is not None:
                items = [t for t in items if t["completed"] == q.completed]

            if q.search:
                s = q.search.lower()
                items = [
                    t for t in items
                    if s in t["title"].lower() or s in (t["description"] or "").lower()
                ]

            result = [t.copy() for t in items]
        logger.debug(
            "Listed %d todos (completed=%s search=%r)", len(result), q.completed, q.search
        )
        return result

    def get(self, todo_id: int) -> TodoEntity:
        with self._lock:
            return self._require(todo_id).copy()

    def create(self, data: TodoCreate) -> TodoEntity:
        """
        Validate and store a new pending todo.

        Raises:
            TodoValidationError: title/description violate the length rules.
        """
        errors = validate_todo_data(data.title, data.description)
        if errors:
            raise TodoValidationError(errors)

        with self._lock:
            now = self._now()
            entity: TodoEntity = {
                "id": self._allocate_id(),
                "title": data.title.strip(),  # type: ignore[union-attr]
                "description": (data.description or "").strip(),
                "completed": False,
                "created_at": now,
                "updated_at": now,
            }
            self._items[entity["id"]] = entity
        logger.info("Created todo id=%d", entity["id"])
        return entity.copy()

    def update(self, todo_id: int, data: TodoUpdate) -> TodoEntity:
        """
        Merge the provided fields over an existing todo and re-validate the
        merged result. Fields absent from the request keep their stored value.

        Raises:
            TodoNotFoundError: no todo with this id.
            TodoValidationError: the merged todo is invalid; nothing is changed.
        """
        provided = data.model_fields_set
        with self._lock:
            existing = self._require(todo_id)

            title = data.title if "title" in provided else existing["title"]
            description = data.description if "description" in provided else existing["description"]
            completed = existing["completed"]
            if data.completed is not None:
                completed = data.completed

            errors = validate_todo_data(title, description)
            if errors:
                raise TodoValidationError(errors)

            updated = existing.copy()
            updated["title"] = title.strip()  # type: ignore[union-attr]
            updated["description"] = (description or "").strip()
            updated["completed"] = completed
            updated["updated_at"] = self._now_after(existing["updated_at"])

            self._items[todo_id] = updated
        logger.info("Updated todo id=%d fields=%s", todo_id, sorted(provided))
        return updated.copy()

    def toggle(self, todo_id: int) -> TodoEntity:
        with self._lock:
            updated = self._require(todo_id).copy()
            updated["completed"] = not updated["completed"]
            updated["updated_at"] = self._now_after(updated["updated_at"])
            self._items[todo_id] = updated
        logger.info("Toggled todo id=%d completed=%s", todo_id, updated["completed"])
        return updated.copy()

    def delete(self, todo_id: int) -> TodoEntity:
        """Remove a todo and return it. Raises TodoNotFoundError if absent."""
        with self._lock:
            self._require(todo_id)
            removed = self._items.pop(todo_id)
        logger.info("Deleted todo id=%d", todo_id)
        return removed

    def delete_completed(self) -> int:
        """Remove every completed todo; remaining items keep their order."""
        with self._lock:
            doomed = [i for i, t in self._items.items() if t["completed"]]
            for i in doomed:
                del self._items[i]
        logger.info("Deleted %d completed todos", len(doomed))
        return len(doomed)
