from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
import logging

from messagely.core.exceptions import MessagelyError

logger = logging.getLogger(__name__)


def _error_body(request: Request, status_code: int, message: str) -> dict:
    return {
        "success": False,
        "message": message,
        "status_code": status_code,
        "path": str(request.url.path)
    }


async def messagely_exception_handler(request: Request, exc: MessagelyError):
    """Map domain errors to their status code"""
    logger.warning(f"{type(exc).__name__} ({exc.status_code}): {exc.message} - {request.url.path}")

    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(request, exc.status_code, exc.message)
    )


async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions with structured error response"""
    logger.warning(f"HTTP {exc.status_code}: {exc.detail} - {request.url.path}")

    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(request, exc.status_code, exc.detail),
        headers=getattr(exc, "headers", None)
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle validation errors with detailed error information"""
    logger.warning(f"Validation error: {exc.errors()} - {request.url.path}")

    content = _error_body(request, 422, "Validation error")
    content["errors"] = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    return JSONResponse(status_code=422, content=content)


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions"""
    logger.error(f"Unexpected error: {str(exc)} - {request.url.path}", exc_info=True)

    return JSONResponse(
        status_code=500,
        content=_error_body(request, 500, "Internal server error")
    )
