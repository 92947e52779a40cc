"""requests-based HTTP transport.

Executes one GET per call through an injected ``requests.Session``.
Nothing is retried; every failure is classified and raised to the
caller.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

import requests

from ...config import DirectionsConfig, get_config
from ...domain.context import CallContext
from ...domain.errors import (
    APIError,
    CancelledError,
    EmptyResponseError,
    TransportError,
)
from .query_builder import redact_api_key

CHUNK_SIZE = 16 * 1024
CANCEL_POLL_SECONDS = 0.05


@dataclass
class RequestsTransport:
    """HTTP transport implementing HttpTransportPort with requests.

    The body is streamed and capped at ``config.max_response_bytes``;
    anything past the cap is dropped. The cancel event of the call
    context is honoured before the request is sent, while waiting for
    the response and between body chunks.

    Attributes:
        config: Provider connection configuration
        session: Session used for the call (one is created when omitted)
    """

    config: DirectionsConfig = field(default_factory=lambda: get_config().directions)
    session: Optional[requests.Session] = None

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.session is None:
            self.session = requests.Session()
            self.session.headers["User-Agent"] = self.config.user_agent

    def get(self, url: str, context: CallContext) -> bytes:
        """Fetch ``url`` and return its body.

        The request runs on a worker thread while the caller watches the
        cancel event, so cancelling returns immediately even when the
        server has not answered yet. The abandoned worker drops the
        response as soon as it arrives.

        Raises:
            CancelledError: If the context is cancelled before or during the call.
            TransportError: On DNS, connection, timeout or read failures.
            APIError: On a non-2xx status.
            EmptyResponseError: On a 2xx response with an empty body.
        """
        if context.cancelled:
            raise CancelledError("directions: request cancelled")

        timeout = context.timeout_seconds
        if timeout is None:
            timeout = self.config.timeout_seconds
        self._logger.debug(
            "Sending directions request",
            extra={"url": redact_api_key(url), "timeout": timeout},
        )

        outcome: Dict[str, Any] = {}
        done = threading.Event()

        def fetch() -> None:
            try:
                outcome["result"] = self._fetch(url, timeout, context)
            except BaseException as e:  # handed back to the calling thread
                outcome["error"] = e
            finally:
                done.set()

        worker = threading.Thread(target=fetch, name="directions-request", daemon=True)
        worker.start()
        while not done.wait(CANCEL_POLL_SECONDS):
            if context.cancelled:
                self._logger.info(
                    "Directions request cancelled in flight",
                    extra={"url": redact_api_key(url)},
                )
                raise CancelledError("directions: request cancelled")

        if "error" in outcome:
            raise outcome["error"]
        payload, status_code = outcome["result"]

        self._logger.debug(
            "Directions response received",
            extra={"status_code": status_code, "bytes": len(payload)},
        )

        if not 200 <= status_code < 300:
            raise APIError(status_code, payload.decode("utf-8", errors="replace").strip())
        if not payload:
            raise EmptyResponseError("directions: empty response")
        return payload

    def _fetch(self, url: str, timeout: float, context: CallContext) -> Tuple[bytes, int]:
        assert self.session is not None
        try:
            with self.session.get(url, timeout=timeout, stream=True) as response:
                return self._read_body(response, context), response.status_code
        except requests.RequestException as e:
            if context.cancelled:
                raise CancelledError("directions: request cancelled", cause=e) from e
            self._logger.warning(
                "Directions request failed",
                extra={"url": redact_api_key(url), "error": str(e)},
            )
            raise TransportError("directions: request failed", cause=e) from e

    def _read_body(self, response: requests.Response, context: CallContext) -> bytes:
        limit = self.config.max_response_bytes
        buffer = bytearray()
        for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
            if context.cancelled:
                raise CancelledError("directions: request cancelled")
            buffer.extend(chunk)
            if len(buffer) >= limit:
                self._logger.warning(
                    "Directions response truncated",
                    extra={"limit_bytes": limit},
                )
                del buffer[limit:]
                break
        return bytes(buffer)
