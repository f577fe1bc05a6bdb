"""Exception types and the JSON error handler used by the API."""

from __future__ import annotations

from fastapi import Request, status
from fastapi.responses import JSONResponse

from people_api.models.common import ErrorResponse


class ApiError(Exception):
    """Error rendered as a fixed ``{error_code, error_message}`` payload."""

    def __init__(self, status_code: int, error_code: str, error_message: str) -> None:
        super().__init__(error_message)
        self.status_code = status_code
        self.error_code = error_code
        self.error_message = error_message


class DataSourceError(RuntimeError):
    """Raised when the spreadsheet or file-storage provider call fails."""


class UnknownFieldError(LookupError):
    """Raised when filtering by a category or field that does not exist."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown field: {name!r}")
        self.name = name


def unauthorized() -> ApiError:
    return ApiError(status.HTTP_401_UNAUTHORIZED, "unauthorized", "Invalid secret key")


def employee_failure() -> ApiError:
    return ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, "00001", "Internal Server Error")


def master_data_failure() -> ApiError:
    return ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, "00002", "Internal Server Error")


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    payload = ErrorResponse(error_code=exc.error_code, error_message=exc.error_message)
    return JSONResponse(status_code=exc.status_code, content=payload.model_dump())
