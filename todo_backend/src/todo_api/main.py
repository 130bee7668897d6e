import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .errors import TodoNotFoundError, TodoValidationError
from .routers import health as health_router
from .routers import pages as pages_router
from .routers import todos as todos_router
from .settings import Settings, get_settings
from .store import TodoStore
from .utils import error_envelope, format_validation_errors

logger = logging.getLogger(__name__)

openapi_tags = [
    {"name": "health", "description": "Service health and status endpoints."},
    {
        "name": "todos",
        "description": "CRUD operations for Todo items with completion and text filters.",
    },
]


def _todo_exists(store: TodoStore, raw_id: str) -> bool:
    try:
        store.get(int(raw_id))
    except (ValueError, TodoNotFoundError):
        return False
    return True


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(TodoValidationError)
    async def todo_validation_handler(request: Request, exc: TodoValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_envelope("Validation failed", details=exc.errors),
        )

    @app.exception_handler(TodoNotFoundError)
    async def todo_not_found_handler(request: Request, exc: TodoNotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=error_envelope("Todo not found"),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """
        Report malformed requests with the same envelope as store validation.

        When the path names a todo, its existence is checked first: a
        non-integer or unknown id is reported as not found even if the body
        is also malformed.
        """
        raw_id = request.path_params.get("todo_id")
        if raw_id is not None and not _todo_exists(request.app.state.store, raw_id):
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content=error_envelope("Todo not found"),
            )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_envelope("Validation failed", details=format_validation_errors(exc.errors())),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # Unmatched paths and unsupported methods both mean "no such endpoint"
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content=error_envelope(
                    "Route not found", message="The requested endpoint does not exist"
                ),
            )
        return JSONResponse(
            status_code=exc.status_code,
            content=error_envelope(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
        """
        Log the error with its traceback and return the generic 500 envelope.

        Starlette re-raises the exception after this response is sent, so the
        server also logs it.
        """
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_envelope("Internal server error"),
        )


# PUBLIC_INTERFACE
def create_app(settings: Optional[Settings] = None, store: Optional[TodoStore] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings to use; loaded from the environment when omitted.
        store: Store to serve; when omitted a new one is created, seeded with
            sample todos if settings.seed_sample_todos is set.
    """
    settings = settings or get_settings()
    if store is None:
        store = TodoStore.with_sample_data() if settings.seed_sample_todos else TodoStore()

    app = FastAPI(
        title="Todo API",
        description="In-memory task tracking API.",
        version=__version__,
        openapi_tags=openapi_tags,
    )
    app.state.settings = settings
    app.state.store = store

    # Configure CORS based on settings (.env -> CORS_ALLOW_ORIGINS), with '*' fallback
    allow_all = (settings.cors_allow_origins == ["*"]) or (len(settings.cors_allow_origins) == 0)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def ignore_trailing_slash(request: Request, call_next):
        # "/api/todos/" is served like "/api/todos" instead of redirecting
        path = request.scope["path"]
        if path != "/" and path.endswith("/"):
            request.scope["path"] = path.rstrip("/") or "/"
        return await call_next(request)

    _register_exception_handlers(app)

    app.include_router(health_router.router)
    app.include_router(todos_router.router)
    app.include_router(pages_router.router)
    return app


app = create_app()
