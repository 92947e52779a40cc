"""Typed errors for the directions client.

Every failure the client can report has its own type so callers can
tell "bad input" from "provider rejected" from "no results" without
parsing messages.

All errors inherit from DirectionsClientError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class DirectionsClientError(Exception):
    """Base error for the directions client.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass(init=False)
class ValidationError(DirectionsClientError):
    """Malformed, ambiguous or missing input.

    Raised before any network I/O.

    Attributes:
        field: Name of the offending field (e.g. 'from', 'to.lat', 'mode')
    """

    field: str = ""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        self.cause = None
        Exception.__init__(self, message)

    def __str__(self) -> str:
        return f"directions: invalid {self.field}: {self.message}"


@dataclass
class ConfigurationError(DirectionsClientError):
    """Invalid or missing client configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""


@dataclass
class MissingAPIKeyError(ConfigurationError):
    """No API key was configured for the client."""

    setting_name: str = "api_key"


@dataclass
class InvalidURLError(ConfigurationError):
    """The configured base URL could not be parsed."""

    setting_name: str = "base_url"


@dataclass(init=False)
class APIError(DirectionsClientError):
    """The provider answered with a non-2xx HTTP status.

    Attributes:
        status_code: HTTP status code returned by the provider
        body: Raw response body, whitespace-trimmed
    """

    status_code: int = 0
    body: str = ""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        self.message = f"directions api error ({status_code})"
        self.cause = None
        Exception.__init__(self, self.message)

    def __str__(self) -> str:
        if self.body:
            return f"{self.message}: {self.body}"
        return self.message


@dataclass
class TransportError(DirectionsClientError):
    """The request never produced an HTTP response (DNS, connection, timeout)."""


@dataclass
class CancelledError(TransportError):
    """The caller cancelled the call while it was in flight."""


@dataclass
class EmptyResponseError(DirectionsClientError):
    """The provider answered with an empty body."""


@dataclass
class DecodeError(DirectionsClientError):
    """The response body is not a valid directions envelope."""


@dataclass
class ProviderStatusError(DirectionsClientError):
    """The provider envelope reported a status other than OK.

    Attributes:
        status: Status string from the envelope (e.g. 'ZERO_RESULTS')
        error_message: Optional provider-supplied explanation
    """

    status: str = ""
    error_message: str = ""


@dataclass
class NoResultsError(DirectionsClientError):
    """The envelope was OK but carried no route or no leg."""
