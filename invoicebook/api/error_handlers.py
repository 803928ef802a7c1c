# invoicebook/api/error_handlers.py
"""
Global exception handlers. Every failure is answered as {"error": "<message>"}
with the status code its error kind maps to.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from invoicebook.errors import InvoicebookError, ValidationError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InvoicebookError, invoicebook_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


async def invoicebook_error_handler(request: Request, exc: InvoicebookError):
    if isinstance(exc, ValidationError):
        logger.warning(
            "Rejected %s %s: %s", request.method, request.url.path, exc.message,
            extra={"error_kind": exc.kind.value, "path": request.url.path},
        )
    else:
        logger.error(
            "%s %s failed: %s", request.method, request.url.path, exc.message,
            extra={"error_kind": exc.kind.value, "path": request.url.path},
        )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def request_validation_handler(request: Request, exc: RequestValidationError):
    message = format_validation_errors(exc.errors())
    logger.warning("Invalid request body on %s: %s", request.url.path, message)
    return JSONResponse(status_code=400, content={"error": message})


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(
        "Unhandled exception on %s: %s", request.url.path, exc, exc_info=exc,
    )
    return JSONResponse(status_code=500, content={"error": str(exc)})


def format_validation_errors(errors) -> str:
    """
    "body.invoice.status: Field required; body.email: value is not a valid email address"
    """
    parts = []
    for e in errors:
        loc = ".".join(str(part) for part in e.get("loc", ()))
        parts.append(f"{loc}: {e.get('msg')}" if loc else str(e.get("msg")))
    return "; ".join(parts) or "invalid request"
