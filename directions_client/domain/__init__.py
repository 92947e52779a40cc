"""Domain layer - Request/response models, normalization and errors.

This module contains the immutable models, the location forms and
the typed errors used throughout the client. No I/O happens here.
"""

from .context import CallContext
from .errors import (
    APIError,
    CancelledError,
    ConfigurationError,
    DecodeError,
    DirectionsClientError,
    EmptyResponseError,
    InvalidURLError,
    MissingAPIKeyError,
    NoResultsError,
    ProviderStatusError,
    TransportError,
    ValidationError,
)
from .locations import (
    CoordinateLocation,
    LocationSpec,
    PlaceIdLocation,
    TextLocation,
    resolve_location,
    validate_location,
    validate_request,
)
from .models import (
    DirectionsComparison,
    DirectionsRequest,
    DirectionsResponse,
    DirectionsStep,
    LatLng,
    TravelMode,
    UnitSystem,
)
from .normalization import location_from_parts, normalize_mode, normalize_request

__all__ = [
    "CallContext",
    # Models
    "LatLng",
    "TravelMode",
    "UnitSystem",
    "DirectionsRequest",
    "DirectionsResponse",
    "DirectionsStep",
    "DirectionsComparison",
    # Locations
    "LocationSpec",
    "TextLocation",
    "PlaceIdLocation",
    "CoordinateLocation",
    "validate_location",
    "resolve_location",
    "validate_request",
    # Normalization
    "normalize_mode",
    "normalize_request",
    "location_from_parts",
    # Errors
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
