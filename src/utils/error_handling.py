"""
Centralized Error Handling and Logging System
Maps the service error taxonomy onto HTTP responses and keeps internal
detail in the server logs only.
"""

import json
import logging
import traceback
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from contextvars import ContextVar

from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from utils.exceptions import NotFoundError, StoreError, ValidationError

# Context variable for request tracing
request_id_var: ContextVar[str] = ContextVar('request_id', default='')

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."
VALIDATION_ERROR_MESSAGE = "Validation failed"

# Location prefixes FastAPI adds in front of the offending field name
_LOCATION_ROOTS = {"body", "path", "query", "header", "cookie"}


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


class StructuredLogger:
    """Structured logging with consistent format and context"""

    @staticmethod
    def log_error(
        error_type: str,
        message: str,
        request: Optional[Request] = None,
        exception: Optional[Exception] = None,
        extra_context: Optional[Dict] = None,
        include_traceback: bool = True
    ) -> str:
        """Log structured error with full context and return its trace ID"""

        trace_id = request_id_var.get('') or str(uuid.uuid4())[:8]

        log_entry: Dict[str, Any] = {
            "timestamp": utc_timestamp(),
            "trace_id": trace_id,
            "error_type": error_type,
            "message": message,
            "level": "ERROR"
        }

        if request:
            log_entry["request"] = {
                "method": request.method,
                "path": request.url.path,
                "query_params": dict(request.query_params),
                "client_ip": request.client.host if request.client else None,
            }

        if exception:
            log_entry["exception"] = {
                "type": type(exception).__name__,
                "details": str(exception),
                "module": getattr(exception, '__module__', 'unknown')
            }
            cause = exception.__cause__
            if cause is not None:
                log_entry["exception"]["cause"] = f"{type(cause).__name__}: {cause}"

            if include_traceback:
                log_entry["exception"]["traceback"] = "".join(
                    traceback.format_exception(type(exception), exception, exception.__traceback__)
                )

        if extra_context:
            log_entry["context"] = extra_context

        logger.error(json.dumps(log_entry, indent=2, default=str))

        return trace_id


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Middleware that tags each request with a trace ID and logs its outcome"""

    async def dispatch(self, request: Request, call_next):
        trace_id = str(uuid.uuid4())[:8]
        request_id_var.set(trace_id)
        request.state.trace_id = trace_id

        try:
            response = await call_next(request)
        except Exception as e:
            # Unhandled errors would otherwise reach ServerErrorMiddleware, outside this one
            StructuredLogger.log_error(
                "internal_server_error",
                f"Unhandled exception: {str(e)}",
                request=request,
                exception=e
            )
            response = JSONResponse(
                status_code=500,
                content=_error_body(500, GENERIC_ERROR_MESSAGE)
            )
        response.headers["X-Trace-ID"] = trace_id

        logger.info(f"Request {request.method} {request.url.path} responded {response.status_code}")
        return response


def _error_body(status_code: int, message: str, **extra) -> Dict[str, Any]:
    body = {"status": status_code, "message": message}
    body.update(extra)
    body["timestamp"] = utc_timestamp()
    return body


def _field_from_location(location) -> str:
    parts = [str(part) for part in location]
    if len(parts) > 1 and parts[0] in _LOCATION_ROOTS:
        parts = parts[1:]
    return ".".join(parts) if parts else "request"


# Global Exception Handlers
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed requests (missing fields, wrong types) as 400 with per-field messages"""

    errors: Dict[str, str] = {}
    for error in exc.errors():
        field = _field_from_location(error.get("loc", ()))
        errors.setdefault(field, error.get("msg", "Invalid value"))

    logger.info(f"Request validation failed for {request.method} {request.url.path}: {errors}")

    return JSONResponse(
        status_code=400,
        content=_error_body(400, VALIDATION_ERROR_MESSAGE, errors=errors)
    )


async def field_validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Report field constraint violations raised by the service layer"""

    logger.info(f"Field validation failed for {request.method} {request.url.path}: {exc.errors}")

    return JSONResponse(
        status_code=400,
        content=_error_body(400, VALIDATION_ERROR_MESSAGE, errors=exc.errors)
    )


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    """Missing records are expected control flow, logged at warning level only"""

    logger.warning(f"{exc.resource} {exc.record_id} not found ({request.method} {request.url.path})")

    return JSONResponse(
        status_code=404,
        content=_error_body(404, exc.message)
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle HTTP exceptions raised by routing or by endpoints"""

    if exc.status_code >= 500:
        StructuredLogger.log_error(
            f"http_{exc.status_code}",
            f"HTTP {exc.status_code}: {exc.detail}",
            request=request,
            exception=exc,
            include_traceback=False
        )
        message = GENERIC_ERROR_MESSAGE
    else:
        message = str(exc.detail)

    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.status_code, message),
        headers=getattr(exc, "headers", None)
    )


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    """Persistence failures: full detail to the log, generic message to the caller"""

    StructuredLogger.log_error(
        "store_error",
        f"Store operation '{exc.operation}' failed",
        request=request,
        exception=exc,
        extra_context={"operation": exc.operation, "detail": exc.detail}
    )

    return JSONResponse(
        status_code=500,
        content=_error_body(500, GENERIC_ERROR_MESSAGE)
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all other exceptions without exposing internal details"""

    StructuredLogger.log_error(
        "internal_server_error",
        f"Unhandled exception: {str(exc)}",
        request=request,
        exception=exc
    )

    return JSONResponse(
        status_code=500,
        content=_error_body(500, GENERIC_ERROR_MESSAGE)
    )


def setup_error_handling(app):
    """Setup error handling for FastAPI app"""

    app.add_middleware(RequestContextMiddleware)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ValidationError, field_validation_error_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    logger.info("Centralized error handling system initialized")
