from __future__ import annotations

from typing import Any, Dict, Iterable, Optional


# PUBLIC_INTERFACE
def error_envelope(
    error: str,
    message: Optional[str] = None,
    details: Optional[Iterable[str]] = None,
) -> Dict[str, Any]:
    """
    Build the standard error envelope returned by exception handlers.

    Args:
        error: Short error summary, e.g. 'Todo not found'.
        message: Optional longer explanation.
        details: Optional validation messages.

    Returns:
        Dict with keys: success (False), error, and message/details when given.
    """
    body: Dict[str, Any] = {"success": False, "error": error}
    if message is not None:
        body["message"] = message
    if details is not None:
        body["details"] = list(details)
    return body


def format_validation_errors(errors: Iterable[Dict[str, Any]]) -> list[str]:
    """
    Flatten pydantic/FastAPI error dicts into 'field: message' strings.

    The leading 'body'/'query'/'path' location segment is dropped.
    """
    messages = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path")]
        msg = str(err.get("msg", "Invalid value"))
        messages.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return messages
