"""
Catalog error taxonomy
======================

Services raise these to signal outcomes that map onto HTTP status codes.
Endpoints wrap their service calls in ``translate_failures`` so that any
other exception becomes an ``InternalFailureError`` with a fixed message.
"""

from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

from fastapi import status

from movie_catalog.core.logging import get_logger

logger = get_logger(__name__)


class CatalogError(Exception):
    """Base class for errors rendered as ``{"message": ...}`` responses"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, error: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error = error

    def to_dict(self) -> Dict[str, Any]:
        content: Dict[str, Any] = {"message": self.message}
        if self.error is not None:
            content["error"] = self.error
        return content


class BadRequestError(CatalogError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(CatalogError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(CatalogError):
    status_code = status.HTTP_409_CONFLICT


class InternalFailureError(CatalogError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


@contextmanager
def translate_failures(message: str, include_error: bool = False) -> Iterator[None]:
    """
    Convert unexpected exceptions raised inside the block into an
    ``InternalFailureError`` carrying ``message``.

    Catalog errors pass through unchanged. With ``include_error`` the
    cause's text is attached to the response body.
    """
    try:
        yield
    except CatalogError:
        raise
    except Exception as e:
        logger.error("Operation failed", failure_message=message, error=str(e), exc_info=True)
        raise InternalFailureError(message, error=str(e) if include_error else None) from e


__all__ = [
    "CatalogError",
    "BadRequestError",
    "NotFoundError",
    "ConflictError",
    "InternalFailureError",
    "translate_failures",
]
