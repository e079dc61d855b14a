"""Exception handlers for the FastAPI application."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from api.errors import format_issues

logger = logging.getLogger(__name__)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Turn request validation failures into a 400 with field-indexed issues."""
    issues = format_issues(exc.errors())
    logger.info(f"Rejected {request.method} {request.url.path}: {len(issues)} invalid field(s)")
    return JSONResponse(
        status_code=400,
        content={"error": "Validation failed", "issues": issues},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the service's exception handlers on ``app``."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
