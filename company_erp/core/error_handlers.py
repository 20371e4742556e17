"""
Exception handlers mapping application errors to the JSON error envelope.

Every error leaves the API as ``{"success": false, "error": <message>}``;
request validation failures additionally carry field-level ``errors``.
"""

from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from company_erp.core.exceptions import BaseAppException, InternalError, create_validation_error
from company_erp.core.logging import get_logger

logger = get_logger(__name__)


def _format_field_errors(exc: RequestValidationError) -> List[Dict[str, str]]:
    field_errors = []
    for error in exc.errors():
        # Drop the leading "body"/"query"/"path" segment.
        loc = [str(part) for part in error.get("loc", ())]
        field = ".".join(loc[1:]) if len(loc) > 1 else ".".join(loc)
        message = error.get("msg", "Invalid value")
        ctx_error = (error.get("ctx") or {}).get("error")
        if ctx_error is not None:
            message = str(ctx_error)
        field_errors.append({"field": field, "message": message})
    return field_errors


async def app_exception_handler(request: Request, exc: BaseAppException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            "application_error",
            error_code=exc.error_code.value,
            error_message=exc.message,
            path=request.url.path,
        )
    else:
        logger.info(
            "request_rejected",
            error_code=exc.error_code.value,
            error_message=exc.message,
            path=request.url.path,
        )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = create_validation_error(_format_field_errors(exc))
    logger.info(
        "validation_failed",
        path=request.url.path,
        field_errors=error.details.get("field_errors"),
    )
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    content: Dict[str, Any] = {"success": False, "error": str(exc.detail)}
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("database_error", path=request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content=InternalError().to_dict())


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        error_type=type(exc).__name__,
        exc_info=exc,
    )
    return JSONResponse(status_code=500, content=InternalError().to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    """Install the envelope-producing handlers on ``app``."""
    app.add_exception_handler(BaseAppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = ["register_exception_handlers"]
