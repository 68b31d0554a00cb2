"""Request ID middleware for StrataForge.

Reuses a well-formed incoming X-Request-ID header (at most 128 characters
of [A-Za-z0-9._:-]) or generates a UUID4, stores it in a
ContextVar so error logging can read it without the Request object, and
attaches it as a X-Request-ID response header.
"""

import re
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# Incoming ids end up in every log line; anything else gets a fresh UUID.
_VALID_REQUEST_ID = re.compile(r"[A-Za-z0-9._:\-]{1,128}")

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def get_request_id() -> str:
    return request_id_var.get()


def incoming_request_id(request: Request) -> str:
    candidate = request.headers.get(REQUEST_ID_HEADER, "")
    if _VALID_REQUEST_ID.fullmatch(candidate):
        return candidate
    return str(uuid.uuid4())


def request_id_for(request: Request) -> str:
    return getattr(request.state, "request_id", "") or get_request_id()


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Sets the request ID ContextVar and adds the X-Request-ID header to
    every response."""

    async def dispatch(self, request: Request, call_next) -> Response:  # type: ignore[override]
        req_id = incoming_request_id(request)
        # request.state outlives the ContextVar reset, so handlers mounted
        # outside this middleware can still read the id.
        request.state.request_id = req_id
        token = request_id_var.set(req_id)
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)
        response.headers[REQUEST_ID_HEADER] = req_id
        return response
