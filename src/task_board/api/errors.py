"""Exception handlers mapping failures to JSON error responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


def format_validation_errors(exc: RequestValidationError) -> str:
    """Turn pydantic errors into a single readable sentence."""
    messages = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        if error.get("type") == "json_invalid":
            messages.append("Request body is not valid JSON")
        elif field:
            messages.append(f"{field}: {error.get('msg')}")
        else:
            messages.append(str(error.get("msg")))
    return "; ".join(messages) or "Invalid request"


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed requests with 400 and a readable message."""
    detail = format_validation_errors(exc)
    logger.info(f"[API] Rejected {request.method} {request.url.path}: {detail}")
    return JSONResponse(status_code=400, content={"detail": detail})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log the failure and answer with a generic 500."""
    logger.exception(f"[API] Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def register_error_handlers(app: FastAPI) -> None:
    """Install the handlers on the application."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
