"""Client for a mapping provider's legacy Directions HTTP API.

Turns a loosely specified trip (free text, place id or coordinates
for each end, plus a travel mode) into one provider call and maps the
JSON answer into flat, immutable response models.

    from directions_client import DirectionsRequest, create_client

    client = create_client(api_key="...")
    response = client.directions(
        DirectionsRequest(origin_text="Alexanderplatz", destination_text="Zoo", mode="bike")
    )
"""

from __future__ import annotations

from typing import Optional

import requests

from .config import DirectionsConfig, get_config
from .container import Container
from .domain import (
    APIError,
    CallContext,
    CancelledError,
    ConfigurationError,
    DecodeError,
    DirectionsClientError,
    DirectionsComparison,
    DirectionsRequest,
    DirectionsResponse,
    DirectionsStep,
    EmptyResponseError,
    InvalidURLError,
    LatLng,
    MissingAPIKeyError,
    NoResultsError,
    ProviderStatusError,
    TransportError,
    TravelMode,
    UnitSystem,
    ValidationError,
    location_from_parts,
)
from .services import ComparisonService, DirectionsService


def _build_container(
    api_key: Optional[str],
    base_url: Optional[str],
    session: Optional[requests.Session],
    config: Optional[DirectionsConfig],
) -> Container:
    app_config = get_config()
    directions_config = config or app_config.directions
    overrides = {}
    if api_key is not None:
        overrides["api_key"] = api_key
    if base_url is not None:
        overrides["base_url"] = base_url
    if overrides:
        directions_config = directions_config.model_copy(update=overrides)
    app_config = app_config.model_copy(update={"directions": directions_config})
    return Container.create_default(app_config, session=session)


def create_client(
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
    session: Optional[requests.Session] = None,
    config: Optional[DirectionsConfig] = None,
) -> DirectionsService:
    """Build a DirectionsService backed by requests.

    Args:
        api_key: Overrides the configured API key.
        base_url: Overrides the configured Directions endpoint.
        session: Session to send requests through.
        config: Base configuration (defaults to get_config().directions).

    Returns:
        A ready-to-use DirectionsService.
    """
    return _build_container(api_key, base_url, session, config).resolve(DirectionsService)


def create_comparison_client(
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
    session: Optional[requests.Session] = None,
    config: Optional[DirectionsConfig] = None,
) -> ComparisonService:
    """Build a ComparisonService; arguments as for ``create_client``."""
    return _build_container(api_key, base_url, session, config).resolve(ComparisonService)


__all__ = [
    "create_client",
    "create_comparison_client",
    "CallContext",
    "DirectionsService",
    "ComparisonService",
    "DirectionsRequest",
    "DirectionsResponse",
    "DirectionsStep",
    "DirectionsComparison",
    "LatLng",
    "TravelMode",
    "UnitSystem",
    "location_from_parts",
    "DirectionsClientError",
    "ValidationError",
    "ConfigurationError",
    "MissingAPIKeyError",
    "InvalidURLError",
    "APIError",
    "TransportError",
    "CancelledError",
    "EmptyResponseError",
    "DecodeError",
    "ProviderStatusError",
    "NoResultsError",
]
