"""Domain exceptions raised by the blog handlers.

The handlers never raise HTTP errors themselves. ``inkwell.main`` maps each
exception kind to a status code and an ``ErrorResponse`` body, so callers can
branch on the exception type instead of matching message text.

Usage:
    >>> from inkwell.core.exceptions import NotFoundError
    >>> raise NotFoundError("Category with id 7 not found")
"""


class InkwellError(Exception):
    """Base class for expected domain errors."""

    error_code = "BAD_REQUEST"
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(InkwellError):
    """A referenced category, tag, article or static page does not exist."""

    error_code = "NOT_FOUND"
    status_code = 404


class UniqueConstraintViolation(InkwellError):
    """A slug is already used by another row of the same entity type."""

    error_code = "CONFLICT"
    status_code = 409


class ReferentialIntegrityError(InkwellError):
    """A delete is blocked by rows that still reference the target."""

    error_code = "PRECONDITION_FAILED"
    status_code = 412


__all__ = [
    "InkwellError",
    "NotFoundError",
    "UniqueConstraintViolation",
    "ReferentialIntegrityError",
]
