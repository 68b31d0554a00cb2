"""Health check endpoints for StrataForge.

Both endpoints are unauthenticated and mounted at root.
"""

import importlib.metadata

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from strataforge.errors import Classification, error_page
from strataforge.handlers import get_responder
from strataforge.responder import ErrorResponder

router = APIRouter(tags=["health"])


def _version() -> str:
    try:
        return importlib.metadata.version("strataforge")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0"


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe: returns 200 if the application process is running."""
    return {"status": "ok", "version": _version()}


@router.get("/health/ready")
async def health_ready(responder: ErrorResponder = Depends(get_responder)):
    """Readiness probe: returns 200 if error pages render, 503 otherwise."""
    if responder.renderer is None:
        return JSONResponse(
            status_code=503,
            content={"status": "unavailable", "detail": "no template renderer configured"},
        )
    page = error_page(Classification.NOT_FOUND)
    try:
        responder.renderer.render(
            page.template,
            {"title": page.title, "message": "", "status_code": page.status_code, "request_id": ""},
        )
        return JSONResponse(status_code=200, content={"status": "ok"})
    except Exception as exc:  # noqa: BLE001
        return JSONResponse(
            status_code=503,
            content={"status": "unavailable", "detail": str(exc)},
        )
