"""Translate transport results into the typed error model."""

import logging
from collections.abc import Callable

import httpx

from twilio_client_core.errors.exceptions import ApiConnectionError, ApiError, ServerError
from twilio_client_core.errors.models import ErrorPayload

logger = logging.getLogger(__name__)

SuccessPredicate = Callable[[int], bool]


def default_success(status_code: int) -> bool:
    """Return True for any 2xx status code."""
    return 200 <= status_code < 300


def raise_for_status(
    response: httpx.Response | None,
    *,
    operation: str,
    is_success: SuccessPredicate = default_success,
) -> httpx.Response:
    """Raise the appropriate exception for a failed request.

    The same mapping applies to single fetches and to every page fetch made
    while iterating a result set.

    Args:
        response: HTTP response, or None when the transport produced none
        operation: Human-readable name of the call, e.g. ``"Notification read"``
        is_success: Predicate deciding which status codes count as success

    Returns:
        The response unchanged when its status is a success

    Raises:
        ApiConnectionError: No response was obtained
        ApiError: Non-success status with a structured error body
        ServerError: Non-success status with an empty or malformed body
    """
    if response is None:
        raise ApiConnectionError(f"{operation} failed: Unable to connect to server")

    status_code = response.status_code
    if is_success(status_code):
        return response

    payload = ErrorPayload.from_response(response)
    if payload is None:
        logger.warning(f"{operation} failed with HTTP {status_code} and no error payload")
        raise ServerError(response=response)

    logger.warning(f"{operation} failed with HTTP {status_code}: [{payload.code}] {payload.message}")
    raise ApiError(
        message=payload.to_exception_message(),
        code=payload.code,
        more_info=payload.more_info,
        status=payload.status if payload.status is not None else status_code,
        response=response,
    )
