"""StrataForge failure classifications and domain error hierarchy.

Every client-visible failure falls into one Classification. ERROR_PAGES maps
each classification to its HTTP status code, machine-readable code, error
page template and log level. The ErrorResponder reads only this table, so
adding a classification means adding one row here.

Request handlers raise StrataForgeError subclasses; the handlers registered
in strataforge.handlers turn them into responses via the ErrorResponder.
"""

import enum
import logging
from dataclasses import dataclass


class Classification(enum.Enum):
    FORBIDDEN = "forbidden"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    INTERNAL_ERROR = "internal_error"


@dataclass(frozen=True)
class ErrorPage:
    status_code: int
    code: str
    template: str
    title: str
    log_level: int


ERROR_PAGES: dict[Classification, ErrorPage] = {
    Classification.FORBIDDEN: ErrorPage(
        403, "FORBIDDEN", "errors/403.html", "Forbidden", logging.WARNING
    ),
    Classification.UNAUTHORIZED: ErrorPage(
        401, "UNAUTHORIZED", "errors/401.html", "Unauthorized", logging.WARNING
    ),
    Classification.NOT_FOUND: ErrorPage(
        404, "NOT_FOUND", "errors/404.html", "Not Found", logging.INFO
    ),
    Classification.INTERNAL_ERROR: ErrorPage(
        500, "INTERNAL_ERROR", "errors/500.html", "Internal Server Error", logging.ERROR
    ),
}


def error_page(classification: Classification) -> ErrorPage:
    return ERROR_PAGES[classification]


def classify_status(status_code: int) -> Classification | None:
    """Return the classification for an HTTP status code, or None.

    Any 5xx status is treated as an internal error.
    """
    for classification, page in ERROR_PAGES.items():
        if page.status_code == status_code:
            return classification
    if status_code >= 500:
        return Classification.INTERNAL_ERROR
    return None


class StrataForgeError(Exception):
    classification: Classification = Classification.INTERNAL_ERROR

    def __init__(self, message: str = "", cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    @property
    def status_code(self) -> int:
        return ERROR_PAGES[self.classification].status_code

    @property
    def code(self) -> str:
        return ERROR_PAGES[self.classification].code


class ForbiddenError(StrataForgeError):
    classification = Classification.FORBIDDEN


class UnauthorizedError(StrataForgeError):
    classification = Classification.UNAUTHORIZED


class NotFoundError(StrataForgeError):
    classification = Classification.NOT_FOUND


class InternalError(StrataForgeError):
    classification = Classification.INTERNAL_ERROR
