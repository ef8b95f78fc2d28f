import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.core.errors import DatabaseError, classify_store_error

logger = logging.getLogger(__name__)

INTERNAL_ERROR_BODY = {"success": False, "message": "Internal Server Error"}


def _internal_error() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=INTERNAL_ERROR_BODY,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Collapse store and unexpected failures into a generic 500."""

    @app.exception_handler(DatabaseError)
    async def database_error_handler(request: Request, exc: DatabaseError):
        logger.error(
            f"{exc.message} on {request.method} {request.url.path}",
            extra={"error_category": exc.category.value, "path": request.url.path},
        )
        return _internal_error()

    # Store errors raised outside a managed session
    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError):
        category = classify_store_error(exc)
        logger.error(
            f"Store error ({category.value}) on {request.method} {request.url.path}: {exc}",
            extra={"error_category": category.value, "path": request.url.path},
        )
        return _internal_error()

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.method} {request.url.path}: {exc}",
            exc_info=True,
        )
        return _internal_error()
