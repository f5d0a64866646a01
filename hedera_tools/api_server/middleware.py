"""
HTTP middleware — request context and timing.

Responsibilities:
- Correlation id per request (X-Request-ID, generated when absent), echoed on the response.
- Bind request_id, method, path and user agent into structlog contextvars.
- Log request completion with status and latency.
- Remember the caller's user agent in the session when sessions are mounted.
"""

from __future__ import annotations

import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from hedera_tools.hedera_logging import get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
MAX_USER_AGENT_LEN = 256


class RequestContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        user_agent = (request.headers.get("user-agent") or "")[:MAX_USER_AGENT_LEN]
        request.state.request_id = request_id
        request.state.user_agent = user_agent
        if "session" in request.scope:
            request.session["user_agent"] = user_agent

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            user_agent=user_agent,
        )
        t_start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("request_unhandled_error")
            raise
        elapsed_ms = (time.perf_counter() - t_start) * 1000
        response.headers[REQUEST_ID_HEADER] = request_id
        logger.info("request_completed", status_code=response.status_code, latency_ms=round(elapsed_ms, 2))
        structlog.contextvars.clear_contextvars()
        return response
