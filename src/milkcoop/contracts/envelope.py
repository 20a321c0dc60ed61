"""
Response envelope.

Every endpoint answers with ``{"status": ..., "message"?: ..., <key>?: ...}``.
Values are passed through FastAPI's jsonable_encoder so UUIDs, datetimes and
Decimals serialize the same way everywhere.
"""

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

STATUS_SUCCESS = "success"
STATUS_ERROR = "error"


def success(status_code: int = 200, message: str | None = None, **data: Any) -> JSONResponse:
    """Build a success envelope; keyword arguments become top-level keys."""
    body: dict[str, Any] = {"status": STATUS_SUCCESS}
    if message is not None:
        body["message"] = message
    body.update(data)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": STATUS_ERROR, "message": message},
    )
