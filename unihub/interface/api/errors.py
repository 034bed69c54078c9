"""Exception handlers mapping domain errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from unihub.domain.error import (
    ConflictError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    UnauthenticatedError,
    ValidationError,
)
from unihub.util.jwt import JWTError

# Most specific first; DomainError is the fallback
STATUS_BY_ERROR: list[tuple[type[DomainError], int, str]] = [
    (ValidationError, status.HTTP_422_UNPROCESSABLE_ENTITY, "validation_error"),
    (NotFoundError, status.HTTP_404_NOT_FOUND, "not_found"),
    (ForbiddenError, status.HTTP_403_FORBIDDEN, "forbidden"),
    (UnauthenticatedError, status.HTTP_401_UNAUTHORIZED, "unauthenticated"),
    (ConflictError, status.HTTP_409_CONFLICT, "conflict"),
]


def _classify(exc: DomainError) -> tuple[int, str]:
    for error_type, status_code, kind in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code, kind
    return status.HTTP_400_BAD_REQUEST, "domain_error"


def _error_body(detail: str, kind: str) -> dict[str, str]:
    # "message" mirrors "detail" for clients that read either key
    return {"detail": detail, "message": detail, "error": kind}


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Render a domain error as ``{"detail", "message", "error"[, "field"]}``."""
    status_code, kind = _classify(exc)

    if isinstance(exc, ValidationError):
        body = _error_body(exc.message, kind)
        body["field"] = exc.field
    else:
        body = _error_body(str(exc), kind)

    logfire.warn(
        "Request rejected",
        path=request.url.path,
        method=request.method,
        error=kind,
        status_code=status_code,
        message=str(exc),
    )
    return JSONResponse(status_code=status_code, content=body)


async def handle_jwt_error(request: Request, exc: JWTError) -> JSONResponse:
    """Invalid or expired credentials are an authentication failure."""
    logfire.warn("Invalid credentials", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content=_error_body(str(exc), "unauthenticated"),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Log anything unhandled and answer with a bare 500."""
    logfire.error(
        "Unexpected error",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("Internal server error", "internal_error"),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the handlers on an application."""
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(JWTError, handle_jwt_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
