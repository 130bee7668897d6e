from __future__ import annotations

from typing import Any, List

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500


# PUBLIC_INTERFACE
def validate_todo_data(title: Any, description: Any = None) -> List[str]:
    """
    Validate the title/description pair of a todo.

    The title must be a string that is non-empty after trimming and at most
    TITLE_MAX_LENGTH characters. The description is optional (None is
    allowed) and must be at most DESCRIPTION_MAX_LENGTH characters.

    Returns:
        A list of human-readable error messages; empty when the data is valid.
    """
    errors: List[str] = []

    if not isinstance(title, str) or not title.strip():
        errors.append("Title is required")
    elif len(title.strip()) > TITLE_MAX_LENGTH:
        errors.append(f"Title must be less than {TITLE_MAX_LENGTH} characters")

    if description is not None:
        if not isinstance(description, str):
            errors.append("Description must be a string")
        elif len(description.strip()) > DESCRIPTION_MAX_LENGTH:
            errors.append(f"Description must be less than {DESCRIPTION_MAX_LENGTH} characters")

    return errors
