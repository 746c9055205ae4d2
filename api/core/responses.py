"""Response envelopes.

Success:  {"data": ..., "message": "..."}
List:     {"data": [...], "message": "...", "totalCount": n,
           "currentPage": p, "totalPages": t}
Error:    {"error": "...", "message": "..."}
"""

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from core.exceptions import AppError

# Generic failure status for service-level errors (not-found, storage, bad input)
FAILURE_STATUS = 400


def send_formatted(data: Any, message: str, status_code: int = 200) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"data": jsonable_encoder(data), "message": message},
    )


def send_array_formatted(
    page: dict[str, Any], message: str, status_code: int = 200
) -> JSONResponse:
    """Render a repository page ({data, total_count, current_page, total_pages})."""
    return JSONResponse(
        status_code=status_code,
        content={
            "data": jsonable_encoder(page["data"]),
            "message": message,
            "totalCount": page["total_count"],
            "currentPage": page["current_page"],
            "totalPages": page["total_pages"],
        },
    )


def send_error(
    error: BaseException | str, message: str, status_code: int | None = None
) -> JSONResponse:
    if status_code is None:
        if isinstance(error, AppError):
            status_code = error.status_code
        else:
            status_code = FAILURE_STATUS

    if isinstance(error, AppError):
        detail = error.detail
    elif isinstance(error, BaseException):
        # Driver errors embed SQL and bound parameters; those stay in the logs
        detail = type(error).__name__
    else:
        detail = error

    return JSONResponse(
        status_code=status_code,
        content={"error": detail, "message": message},
    )
