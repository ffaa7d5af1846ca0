"""Helpers for building response envelopes."""

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from food_tracker.api.schemas import ApiResponse


def ok(data: object = None, message: str | None = None) -> ApiResponse:
    """Wrap a successful result; dataclass DTOs are encoded to plain JSON."""
    return ApiResponse(success=True, data=jsonable_encoder(data), message=message)


def failure(
    status_code: int, message: str, errors: list[str] | None = None
) -> JSONResponse:
    body = ApiResponse(success=False, message=message, errors=errors or [message])
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))
