"""Error Handlers — global exception handlers for responses the handler set never produces.

Invariants:
    - Framework HTTP errors (unknown route, wrong method) → envelope with status=fail
    - Exception (catch-all) → 500 envelope, never leaks internal details
    - Store errors never reach these handlers: services/ turns them into HTTP 200

Design Decisions:
    - Handlers are module-level functions registered via add_exception_handler,
      so they can be exercised without a running app
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from users_api.core.domain_types import EnvelopeStatus
from users_api.core.envelope import Envelope

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "internal server error"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)


async def http_error_handler(
    request: Request, exc: StarletteHTTPException,
) -> JSONResponse:
    """Wrap framework HTTP errors (404 route, 405 method) in the envelope."""
    logger.info(
        f"HTTP {exc.status_code} on {request.method} {request.url.path}",
        extra={"path": request.url.path},
    )
    body = Envelope(status=EnvelopeStatus.FAIL, message=str(exc.detail))
    return JSONResponse(
        status_code=exc.status_code,
        content=body.to_response(),
        headers=getattr(exc, "headers", None),
    )


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all — never leaks internal details."""
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        extra={"path": request.url.path},
        exc_info=exc,
    )
    body = Envelope(status=EnvelopeStatus.FAIL, message=INTERNAL_ERROR_MESSAGE)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=body.to_response(),
    )
