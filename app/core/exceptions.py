"""Domain exceptions raised by services and translated to HTTP responses."""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse


class DomainError(Exception):
    """Base class for domain-level errors. Services raise these, never HTTPException."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.__class__.__name__)
        self.message = message or self.__class__.__name__


class NotFoundError(DomainError):
    status_code = status.HTTP_404_NOT_FOUND


class PermissionDeniedError(DomainError):
    """Acting profile's enterprise does not own the resource."""

    status_code = status.HTTP_403_FORBIDDEN


class ConflictError(DomainError):
    status_code = status.HTTP_409_CONFLICT


class ValidationFailedError(DomainError):
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Render a domain error with the same body shape as HTTPException."""
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    """Attach domain error handlers to the application."""
    app.add_exception_handler(DomainError, domain_error_handler)
