"""Directions service - Single directions call.

Runs one request through the whole chain:
normalize → validate → resolve endpoints → build URL → GET → decode → map.
The first failing stage raises; nothing is retried.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..adapters.google.mapper import map_directions_payload
from ..adapters.http.query_builder import (
    build_directions_url,
    directions_query,
    redact_api_key,
)
from ..config import DirectionsConfig, get_config
from ..domain.context import CallContext
from ..domain.locations import resolve_location, validate_request
from ..domain.models import DirectionsRequest, DirectionsResponse
from ..domain.normalization import normalize_request
from ..ports.transport import HttpTransportPort


@dataclass
class DirectionsService:
    """Fetches directions between two locations from the provider.

    Attributes:
        transport: Executes the HTTP GET
        config: API key, base URL and timeout defaults
    """

    transport: HttpTransportPort
    config: DirectionsConfig = field(default_factory=lambda: get_config().directions)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def directions(
        self,
        request: DirectionsRequest,
        context: Optional[CallContext] = None,
    ) -> DirectionsResponse:
        """Fetch directions for ``request``.

        Args:
            request: The caller's request, in any case/whitespace.
            context: Deadline and cancellation (a fresh one when omitted).

        Returns:
            The mapped response for the provider's best route.

        Raises:
            ValidationError: If the request is invalid (before any I/O).
            MissingAPIKeyError: If no API key is configured.
            InvalidURLError: If the base URL is unusable.
            APIError: If the provider answers with a non-2xx status.
            TransportError: On network failure or cancellation.
            EmptyResponseError: If the body is empty.
            DecodeError: If the body is not a directions envelope.
            ProviderStatusError: If the envelope status is not OK.
            NoResultsError: If no route or leg was returned.
        """
        context = context or CallContext()

        request = normalize_request(request)
        validate_request(request)

        origin = resolve_location(
            "from",
            request.origin_place_id,
            request.origin_location,
            request.origin_text,
        )
        destination = resolve_location(
            "to",
            request.destination_place_id,
            request.destination_location,
            request.destination_text,
        )

        url = build_directions_url(
            self.config.base_url,
            directions_query(request, origin, destination),
            self.config.api_key,
        )
        self._logger.info(
            "Requesting directions",
            extra={"mode": request.mode, "url": redact_api_key(url)},
        )

        if context.timeout_seconds is None:
            context = CallContext(
                timeout_seconds=self.config.timeout_seconds,
                cancel_event=context.cancel_event,
            )
        payload = self.transport.get(url, context)
        response = map_directions_payload(payload, request.mode)

        self._logger.info(
            "Directions mapped",
            extra={
                "mode": response.mode,
                "steps": len(response.steps),
                "distance_meters": response.distance_meters,
                "duration_seconds": response.duration_seconds,
            },
        )
        return response
