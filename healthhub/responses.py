from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def envelope(success: bool, message: str, data: Any = None) -> dict:
    return {"success": success, "message": message, "data": data}


def success_response(
    status_code: int,
    success: bool,
    message: str,
    data: Any = None,
) -> JSONResponse:
    """Uniform response body used by every endpoint.

    `success=False` with a 200 status is reserved for empty result sets.
    """
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(envelope(success, message, data)),
    )


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=envelope(False, message, None))
