"""Global error handling middleware and exception handlers"""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
import traceback
import logging

logger = logging.getLogger(__name__)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Global error handler middleware"""

    async def dispatch(self, request: Request, call_next):
        try:
            response = await call_next(request)
            return response
        except Exception as exc:
            logger.error(f"Unhandled error: {exc}")
            logger.error(traceback.format_exc())

            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "error": "Internal server error",
                    "detail": str(exc) if logger.isEnabledFor(logging.DEBUG) else "An unexpected error occurred"
                }
            )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as {"error": ...}"""
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        message = "Method not allowed"
    else:
        message = exc.detail

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message},
        headers=getattr(exc, "headers", None)
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Request validation failed: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request"}
    )


def setup_error_handlers(app: FastAPI):
    """
    Register error middleware and exception handlers

    Args:
        app: FastAPI application instance
    """
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
