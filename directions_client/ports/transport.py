"""Transport port - Abstraction for the outbound HTTP call.

The directions service only needs "GET this URL and give me the body";
tests swap in a fake, production uses the requests adapter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.context import CallContext


class HttpTransportPort(Protocol):
    """Port for executing a single GET request.

    Implementation: adapters/http/requests_transport.py
    """

    def get(self, url: str, context: CallContext) -> bytes:
        """Fetch ``url`` and return the raw response body.

        Args:
            url: Fully-qualified URL including the API key.
            context: Deadline and cancellation for this call.

        Returns:
            The response body (never empty).

        Raises:
            APIError: On a non-2xx status.
            EmptyResponseError: On an empty body.
            TransportError: On network failure or cancellation.
        """
        ...
