"""Error payload returned by the API on failed requests."""

import json
from dataclasses import dataclass
from typing import Any

import httpx


@dataclass(frozen=True)
class ErrorPayload:
    """Structured error body: ``{"message", "code", "more_info", "status"}``."""

    message: str
    code: int | None = None
    more_info: str | None = None
    status: int | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "ErrorPayload | None":
        """Build a payload from decoded JSON, or None if it is not an error object."""
        if not isinstance(data, dict):
            return None
        if "message" not in data and "code" not in data:
            return None

        code = data.get("code")
        status = data.get("status")
        try:
            code = int(code) if code is not None else None
            status = int(status) if status is not None else None
        except (TypeError, ValueError):
            return None

        message = data.get("message")
        return cls(
            message=str(message) if message is not None else "",
            code=code,
            more_info=data.get("more_info"),
            status=status,
        )

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ErrorPayload | None":
        """Parse the error payload from an HTTP response.

        Args:
            response: HTTP response object

        Returns:
            ErrorPayload or None if the body is empty or malformed
        """
        try:
            content = response.read()
        except (httpx.HTTPError, httpx.StreamError):
            return None
        if not content or not content.strip():
            return None

        try:
            data = json.loads(content)
        except (ValueError, UnicodeDecodeError):
            return None

        return cls.from_dict(data)

    def to_exception_message(self) -> str:
        """Convert the payload to an exception message."""
        if self.message:
            return self.message
        if self.code is not None:
            return f"Error {self.code}"
        return "Unknown API error"
