"""Structured exceptions for API errors."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class TwilioError(Exception):
    """Base exception for every error raised by the client core."""

    pass


class ApiConnectionError(TwilioError):
    """No response was obtained from the API (socket, DNS, TLS, timeout...)."""

    pass


class ApiError(TwilioError):
    """The API answered with a non-success status and a structured error body."""

    def __init__(
        self,
        message: str,
        code: int | None = None,
        more_info: str | None = None,
        status: int | None = None,
        response: "httpx.Response | None" = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.more_info = more_info
        self.status = status
        self.response = response


class ServerError(ApiError):
    """Non-success status whose body could not be read as an error payload."""

    DEFAULT_MESSAGE = "Server Error, no content"

    def __init__(self, message: str = DEFAULT_MESSAGE, response: "httpx.Response | None" = None):
        super().__init__(message, response=response)


class ParseError(ApiError):
    """A response body did not match the expected JSON shape."""

    pass
