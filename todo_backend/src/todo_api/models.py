from __future__ import annotations

from datetime import datetime
from typing import TypedDict


# PUBLIC_INTERFACE
class TodoEntity(TypedDict):
    """
    In-memory record for a single todo item.

    Fields:
    - id: Unique integer identifier, never reused within a process
    - title: Trimmed title (1..100 chars)
    - description: Trimmed description (0..500 chars, '' when not given)
    - completed: Boolean completion flag
    - created_at: UTC creation timestamp
    - updated_at: UTC last update timestamp
    """

    id: int
    title: str
    description: str
    completed: bool
    created_at: datetime
    updated_at: datetime
