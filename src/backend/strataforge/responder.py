"""ErrorResponder -- turns a failure classification into an HTTP response.

For every call the responder:
  1. fixes the status code from ERROR_PAGES, before any rendering,
  2. writes exactly one log entry through the ErrorLogger,
  3. renders the error page (or the JSON envelope for API clients).

A renderer that is missing or raises never changes the status code: the
static fallback body is sent instead and the render failure is logged as
a separate "error_page_render_failed" event. The responder never raises.
"""

import logging
from collections.abc import Mapping
from dataclasses import replace
from http import HTTPStatus
from typing import Any

from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse, Response

from strataforge.error_logger import ErrorLogger
from strataforge.errors import Classification, ErrorPage, error_page
from strataforge.middleware import REQUEST_ID_HEADER, request_id_for
from strataforge.rendering import TemplateRenderer, fallback_body


def _status_title(status_code: int, default: str) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return default


def wants_json(request: Request) -> bool:
    accept = request.headers.get("accept", "")
    return "application/json" in accept and "text/html" not in accept


class ErrorResponder:
    def __init__(
        self, error_logger: ErrorLogger, renderer: TemplateRenderer | None = None
    ) -> None:
        self.error_logger = error_logger
        self.renderer = renderer

    def forbidden(self, request: Request, message: str | None = None) -> Response:
        return self.respond(request, Classification.FORBIDDEN, message)

    def unauthorized(self, request: Request, message: str | None = None) -> Response:
        return self.respond(request, Classification.UNAUTHORIZED, message)

    def not_found(self, request: Request, message: str | None = None) -> Response:
        return self.respond(request, Classification.NOT_FOUND, message)

    def internal_error(
        self,
        request: Request,
        message: str | None = None,
        cause: BaseException | str | None = None,
    ) -> Response:
        return self.respond(request, Classification.INTERNAL_ERROR, message, cause)

    def respond(
        self,
        request: Request,
        classification: Classification,
        message: str | None = None,
        cause: BaseException | str | None = None,
        fields: Mapping[str, Any] | None = None,
        status_code: int | None = None,
    ) -> Response:
        """Log and build the error response.

        status_code overrides the classification's code, for framework errors
        such as 503 that share the internal error page.
        """
        page = error_page(classification)
        if status_code is not None and status_code != page.status_code:
            page = replace(
                page, status_code=status_code, title=_status_title(status_code, page.title)
            )
        status_code = page.status_code

        entry: dict[str, Any] = {"classification": classification.name, "status": status_code}
        entry.update(fields or {})
        self.error_logger.log_with_fields(
            request, message or page.title, cause, entry, level=page.log_level
        )

        # Internal failure details stay in the log, never in the body.
        public_message = page.title
        if classification is not Classification.INTERNAL_ERROR and message:
            public_message = message

        request_id = request_id_for(request)
        headers = {REQUEST_ID_HEADER: request_id} if request_id else None

        if wants_json(request):
            return JSONResponse(
                status_code=status_code,
                content={
                    "error": {
                        "code": page.code,
                        "message": public_message,
                        "request_id": request_id,
                    }
                },
                headers=headers,
            )

        body = self._render(request, page, public_message, request_id)
        return HTMLResponse(body, status_code=status_code, headers=headers)

    def _render(
        self, request: Request, page: ErrorPage, message: str, request_id: str
    ) -> str:
        if self.renderer is None:
            return fallback_body(page.status_code, page.title, message)

        context = {
            "title": page.title,
            "message": message,
            "status_code": page.status_code,
            "request_id": request_id,
        }
        try:
            return self.renderer.render(page.template, context)
        except Exception as exc:  # noqa: BLE001
            self.error_logger.log_with_fields(
                request,
                "error_page_render_failed",
                exc,
                {"template": page.template, "status": page.status_code},
                level=logging.ERROR,
            )
            return fallback_body(page.status_code, page.title, message)
