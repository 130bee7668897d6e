from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter

from .. import __version__
from ..schemas import HealthOut

router = APIRouter(tags=["health"])


# PUBLIC_INTERFACE
@router.get("/health", response_model=HealthOut, summary="Health Check")
def health_check() -> HealthOut:
    """
    Liveness endpoint.

    Returns:
        A JSON object with a status message, the current UTC time and the API version.
    """
    return HealthOut(
        message="Todo API is running",
        timestamp=datetime.now(timezone.utc),
        version=__version__,
    )
