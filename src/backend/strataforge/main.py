"""StrataForge FastAPI application factory.

Entry point: uvicorn strataforge.main:app
"""

import enum
import logging

from fastapi import FastAPI

from strataforge.config import AppSettings, settings as default_settings
from strataforge.error_logger import ErrorLogger, StructuredLogger
from strataforge.handlers import register_error_handlers
from strataforge.logging_config import configure_logging
from strataforge.middleware import RequestIDMiddleware
from strataforge.rendering import Jinja2Renderer, TemplateRenderer
from strataforge.responder import ErrorResponder
from strataforge.routers import health


class _Default(enum.Enum):
    TEMPLATES = "templates"


def create_app(
    settings: AppSettings | None = None,
    renderer: TemplateRenderer | None | _Default = _Default.TEMPLATES,
    logger: StructuredLogger | None = None,
) -> FastAPI:
    """Build the application.

    Pass renderer=None to run without templates (every error page uses the
    static fallback body) and logger to substitute the error log sink.
    """
    if settings is None:
        settings = default_settings
    configure_logging(level=settings.LOG_LEVEL, fmt=settings.LOG_FORMAT)

    if isinstance(renderer, _Default):
        renderer = Jinja2Renderer(settings.TEMPLATES_DIR)

    if logger is None:
        logger = logging.getLogger(settings.ERROR_LOGGER_NAME)
    responder = ErrorResponder(ErrorLogger(logger), renderer)

    app = FastAPI(title=settings.APP_NAME)
    app.add_middleware(RequestIDMiddleware)
    register_error_handlers(app, responder)
    app.include_router(health.router)
    return app


app = create_app()
