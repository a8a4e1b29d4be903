"""Global exception handlers.

- LevelError -> its own envelope and status
- RequestValidationError -> VALIDATION_FAILED with field-level messages
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from level.core.errors import LevelError, ValidationFailed

log = structlog.get_logger()


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(LevelError)
    async def level_error_handler(request: Request, exc: LevelError):
        log.info(
            "request.domain_error",
            code=exc.code,
            message=exc.message,
            path=request.url.path,
        )
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        log.info("request.invalid", path=request.url.path, errors=len(exc.errors()))
        return JSONResponse(
            status_code=ValidationFailed.http_status,
            content=_build_validation_error_response(exc),
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Collapse Pydantic errors into field -> messages."""
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(loc) or "body"
        errors.setdefault(field, []).append(error.get("msg", "is invalid"))
    return {
        "error": {
            "code": "VALIDATION_FAILED",
            "message": "Validation failed",
            "status": ValidationFailed.http_status,
            "step": "request",
            "errors": errors,
        }
    }
