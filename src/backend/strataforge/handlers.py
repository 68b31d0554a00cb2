"""Global exception handlers for StrataForge.

Routes domain errors, framework HTTP errors and unhandled exceptions through
the ErrorResponder so every failure gets the same status mapping, error page
and log entry.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from strataforge.errors import StrataForgeError, classify_status
from strataforge.middleware import REQUEST_ID_HEADER, request_id_for
from strataforge.responder import ErrorResponder


def get_responder(request: Request) -> ErrorResponder:
    return request.app.state.error_responder


async def strataforge_error_handler(request: Request, exc: StrataForgeError) -> Response:
    return get_responder(request).respond(
        request, exc.classification, exc.message or None, exc.cause
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    classification = classify_status(exc.status_code)
    if classification is None:
        request_id = request_id_for(request)
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": {
                    "code": "HTTP_ERROR",
                    "message": str(exc.detail),
                    "request_id": request_id,
                }
            },
            headers={**(exc.headers or {}), REQUEST_ID_HEADER: request_id},
        )
    detail = exc.detail if isinstance(exc.detail, str) else None
    response = get_responder(request).respond(
        request, classification, detail, status_code=exc.status_code
    )
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_error_handler(request: Request, exc: Exception) -> Response:
    return get_responder(request).internal_error(
        request, f"Unhandled {type(exc).__name__}", exc
    )


def register_error_handlers(app: FastAPI, responder: ErrorResponder) -> None:
    """Attach the responder to the app and register all error handlers."""
    app.state.error_responder = responder
    app.add_exception_handler(StrataForgeError, strataforge_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_error_handler)
