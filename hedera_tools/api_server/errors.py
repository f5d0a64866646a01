"""
Uniform error responses.

Every error leaves the API as {"status": <int>, "message": <str>, "code": <str>}
with the HTTP status mirrored in the body.
"""

from __future__ import annotations

from typing import Any, Mapping

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from hedera_tools.core.exceptions import ApiError
from hedera_tools.hedera_logging import get_logger

logger = get_logger(__name__)

INVALID_BODY_STATUS = 400
INVALID_BODY_CODE = "invalid-body-error"


def send_error(error: ApiError | Mapping[str, Any]) -> JSONResponse:
    """Render an error descriptor (ApiError or {status, message, code}) as JSON."""
    if isinstance(error, ApiError):
        error = error.to_dict()
    status = int(error["status"])
    return JSONResponse(
        status_code=status,
        content={"status": status, "message": error["message"], "code": error["code"]},
    )


def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return send_error(exc)


def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed JSON or wrongly typed fields."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = f"{location}: {first.get('msg', 'Invalid request body')}" if location else first.get("msg", "Invalid request body")
    logger.info("request_body_invalid", path=request.url.path, error_count=len(errors))
    return send_error({"status": INVALID_BODY_STATUS, "message": message, "code": INVALID_BODY_CODE})
