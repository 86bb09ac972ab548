from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class FitTrackError(Exception):
    """Base class for every error the API turns into a JSON response."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message}


@dataclass(frozen=True)
class FieldError:
    path: str
    message: str


class ValidationFailed(FitTrackError):
    status_code = 400

    def __init__(self, errors: Sequence[FieldError]):
        self.errors: List[FieldError] = list(errors)
        super().__init__(_format_field_errors(self.errors))

    @classmethod
    def from_pydantic(cls, errors: Iterable[Dict[str, Any]]) -> "ValidationFailed":
        return cls([FieldError(path=_path_from_loc(e.get("loc", ())), message=e.get("msg", "Invalid value")) for e in errors])

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "errors": [{"path": e.path, "message": e.message} for e in self.errors],
        }


class NotFound(FitTrackError):
    status_code = 404


class ConstraintViolation(FitTrackError):
    """Uniqueness (409) or dangling reference (400) rejected by the store."""

    def __init__(self, message: str, kind: str = "unique"):
        super().__init__(message)
        self.kind = kind

    @property
    def status_code(self) -> int:  # type: ignore[override]
        return 400 if self.kind == "reference" else 409


class StorageUnavailable(FitTrackError):
    status_code = 503


def _path_from_loc(loc: Sequence[Any]) -> str:
    parts = [str(p) for p in loc]
    # FastAPI prefixes body errors with "body"; callers only care about the field.
    if parts and parts[0] == "body":
        parts = parts[1:]
    return ".".join(parts)


def _format_field_errors(errors: Sequence[FieldError]) -> str:
    if not errors:
        return "Validation error"
    chunks = []
    for err in errors:
        if err.path:
            chunks.append(f'{err.message} at "{err.path}"')
        else:
            chunks.append(err.message)
    return "Validation error: " + "; ".join(chunks)


def _log(exc: FitTrackError, request: Request) -> None:
    where = f"{request.method} {request.url.path}"
    if isinstance(exc, StorageUnavailable):
        logger.error("%s -> storage unavailable: %s", where, exc.message)
    elif isinstance(exc, ConstraintViolation):
        logger.warning("%s -> constraint violation (%s): %s", where, exc.kind, exc.message)
    elif isinstance(exc, ValidationFailed):
        logger.info("%s -> %s", where, exc.message)
    else:
        logger.debug("%s -> %s %s", where, exc.status_code, exc.message)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(FitTrackError)
    async def fittrack_error_handler(request: Request, exc: FitTrackError):
        _log(exc, request)
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        failed = ValidationFailed.from_pydantic(exc.errors())
        _log(failed, request)
        return JSONResponse(status_code=failed.status_code, content=failed.to_dict())

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        # Starlette re-raises after this response is sent, so the server log keeps the traceback
        logger.error("%s %s -> unhandled %s", request.method, request.url.path, type(exc).__name__)
        return JSONResponse(status_code=500, content={"message": "Internal server error"})
