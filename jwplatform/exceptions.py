"""
Custom exceptions for the JW Platform client library.

Transport failures (DNS, connection, timeout) are not wrapped: they surface
as the ``requests.RequestException`` raised by the HTTP session.
"""

import json
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional


class JWPlatformError(Exception):
    """Base exception for JW Platform client errors."""
    pass


class ConfigurationError(JWPlatformError):
    """Raised when client configuration is invalid."""
    pass


class DecodeError(JWPlatformError, ValueError):
    """Raised when a response body cannot be decoded as JSON."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: bytes = b""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class EncodeError(JWPlatformError, TypeError):
    """Raised when a request body cannot be serialized (strict_body only)."""
    pass


class UploadError(JWPlatformError):
    """Raised when the v1 create step of an upload is rejected."""
    pass


@dataclass
class JWError:
    """A single error entry returned by the V2 Platform API."""

    code: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "JWError":
        return cls(
            code=data.get("code", ""),
            description=data.get("description", ""),
        )


class JWErrorResponse(JWPlatformError):
    """
    Structured V2 Platform API error.

    Raised for every response with status >= 400. Inspect ``status_code``
    and ``errors`` rather than parsing the message.
    """

    def __init__(self, errors: Optional[List[JWError]] = None, status_code: int = 0):
        self.errors = list(errors or [])
        self.status_code = status_code
        super().__init__(self.errors, self.status_code)

    @classmethod
    def from_dict(cls, data: Any, status_code: int) -> "JWErrorResponse":
        """
        Build an error from the ``{"errors": [...]}`` wire shape.

        Args:
            data: Decoded JSON error body
            status_code: HTTP status of the response

        Returns:
            JWErrorResponse carrying the entries and status code
        """
        entries = []
        if isinstance(data, dict):
            entries = [JWError.from_dict(item) for item in data.get("errors") or []]
        return cls(entries, status_code)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "errors": [asdict(error) for error in self.errors],
            "StatusCode": self.status_code,
        }

    def __str__(self) -> str:
        try:
            return json.dumps(self.to_dict(), separators=(',', ':'))
        except (TypeError, ValueError) as e:
            return f"Unknown error when parsing JSON response: {e}"
