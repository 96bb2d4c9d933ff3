"""Exception handlers mapping service and store errors to JSON responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from accounts.config import get_settings
from accounts.exceptions import AccountsError

logger = logging.getLogger(__name__)


def error_response(message: str, status_code: int, **extra) -> JSONResponse:
    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse({"message": message, **extra}, status_code=status_code, headers=headers)


def register_error_handlers(app: FastAPI) -> None:
    """Attach the application's error handlers."""

    @app.exception_handler(AccountsError)
    async def handle_accounts_error(request: Request, exc: AccountsError):
        return error_response(exc.message, exc.status_code)

    # Malformed bodies and query params are 400, not FastAPI's default 422
    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        return error_response(
            "Invalid input",
            status.HTTP_400_BAD_REQUEST,
            errors=jsonable_encoder(exc.errors()),
        )

    @app.exception_handler(SQLAlchemyError)
    async def handle_store_error(request: Request, exc: SQLAlchemyError):
        logger.exception(f"Database error on {request.method} {request.url.path}", exc_info=exc)
        if get_settings().is_production:
            return error_response("Database error", status.HTTP_500_INTERNAL_SERVER_ERROR)
        return error_response(
            "Database error",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            error=str(getattr(exc, "orig", None) or exc),
        )
