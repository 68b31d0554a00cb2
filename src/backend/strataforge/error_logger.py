"""ErrorLogger -- adapts a request plus failure data into one structured log record.

The wrapped logger only needs a logging.Logger-style log(level, msg, ...)
method. Fields travel in the record's ``error_fields`` attribute rather than
as top-level extras, so keys like "message" or "args" never clash with
reserved LogRecord attributes.

Logging must never break request handling: any exception raised by the
logger is caught here and reported to stderr.
"""

import logging
import sys
from collections.abc import Mapping
from typing import Any, Protocol

from starlette.requests import Request

from strataforge.middleware import request_id_for


class StructuredLogger(Protocol):
    def log(self, level: int, msg: str, *args: Any, **kwargs: Any) -> None: ...


class ErrorLogger:
    def __init__(self, logger: StructuredLogger) -> None:
        if logger is None:
            raise ValueError("ErrorLogger requires a logger")
        self._logger = logger

    def log(
        self,
        request: Request,
        message: str,
        cause: BaseException | str | None = None,
        level: int = logging.ERROR,
    ) -> None:
        self.log_with_fields(request, message, cause, level=level)

    def log_with_fields(
        self,
        request: Request,
        message: str,
        cause: BaseException | str | None = None,
        fields: Mapping[str, Any] | None = None,
        level: int = logging.ERROR,
    ) -> None:
        """Like log(), with extra fields merged over the defaults."""
        try:
            entry = self._base_fields(request, message, cause)
            entry.update(fields or {})
            exc_info = None
            if isinstance(cause, BaseException) and level >= logging.ERROR:
                exc_info = (type(cause), cause, cause.__traceback__)
            self._logger.log(
                level,
                message,
                exc_info=exc_info,
                extra={"error_fields": entry, "request_id": entry["request_id"]},
            )
        except Exception as exc:  # noqa: BLE001
            print(f"strataforge: error logger failed: {exc!r}", file=sys.stderr)

    @staticmethod
    def _base_fields(
        request: Request, message: str, cause: BaseException | str | None
    ) -> dict[str, Any]:
        fields: dict[str, Any] = {
            "method": request.method,
            "path": request.url.path,
            "remote_addr": request.client.host if request.client else None,
            "request_id": request_id_for(request) or None,
            "message": message,
            "cause": None if cause is None else str(cause),
        }
        if isinstance(cause, BaseException):
            fields["cause_type"] = type(cause).__name__
        return fields
