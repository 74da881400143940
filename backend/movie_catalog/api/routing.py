"""
Route classes
"""

from typing import Callable, Dict, Tuple, Type

from fastapi import Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.routing import APIRoute

from movie_catalog.core.exceptions import InternalFailureError
from movie_catalog.core.logging import get_logger

logger = get_logger(__name__)


def failure_message_route(failures: Dict[str, Tuple[str, bool]]) -> Type[APIRoute]:
    """
    Build a route class that reports undecodable input (wrong JSON types,
    malformed body, non-numeric ids) as the endpoint's own internal failure.

    ``failures`` maps an endpoint name to ``(message, include_error)``,
    the same pair the endpoint hands to ``translate_failures``.
    """

    class FailureMessageRoute(APIRoute):

        def get_route_handler(self) -> Callable:
            handler = super().get_route_handler()
            if self.name not in failures:
                return handler

            message, include_error = failures[self.name]

            async def route_handler(request: Request) -> Response:
                try:
                    return await handler(request)
                except RequestValidationError as e:
                    logger.warning(
                        "Request could not be decoded",
                        endpoint=self.name,
                        errors=[error.get("msg") for error in e.errors()],
                    )
                    raise InternalFailureError(message, error=str(e) if include_error else None) from e

            return route_handler

    return FailureMessageRoute
