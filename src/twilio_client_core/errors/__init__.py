"""Error model and HTTP failure mapping for API clients."""

from twilio_client_core.errors.exceptions import (
    ApiConnectionError,
    ApiError,
    ParseError,
    ServerError,
    TwilioError,
)
from twilio_client_core.errors.handler import SuccessPredicate, default_success, raise_for_status
from twilio_client_core.errors.models import ErrorPayload

__all__ = [
    "ApiConnectionError",
    "ApiError",
    "ErrorPayload",
    "ParseError",
    "ServerError",
    "SuccessPredicate",
    "TwilioError",
    "default_success",
    "raise_for_status",
]
