"""Location specifications and request validation.

An endpoint (origin or destination) is exactly one of free text, a
provider place identifier or a coordinate pair. Callers supply the
three forms as separate optional fields; ``resolve_location`` checks
that exactly one is set and turns it into a tagged variant that knows
its own wire form.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .errors import ValidationError
from .models import DirectionsRequest, LatLng, UnitSystem
from .normalization import normalize_mode

PLACE_ID_PREFIX = "place_id:"


@dataclass(frozen=True, slots=True)
class TextLocation:
    """An address or place name, resolved by the provider."""

    text: str

    def to_wire(self) -> str:
        return self.text.strip()


@dataclass(frozen=True, slots=True)
class PlaceIdLocation:
    """A provider-issued place identifier."""

    place_id: str

    def to_wire(self) -> str:
        return PLACE_ID_PREFIX + self.place_id.strip()


@dataclass(frozen=True, slots=True)
class CoordinateLocation:
    """A latitude/longitude pair, sent with six decimal places."""

    location: LatLng

    def to_wire(self) -> str:
        return f"{self.location.lat:.6f},{self.location.lng:.6f}"


LocationSpec = Union[TextLocation, PlaceIdLocation, CoordinateLocation]


def validate_location(
    label: str,
    place_id: str,
    location: Optional[LatLng],
    text: str,
) -> None:
    """Check that exactly one location form is set for an endpoint.

    Args:
        label: Endpoint label used as the error field ('from' or 'to').
        place_id: Place identifier, or empty.
        location: Coordinates, or None.
        text: Free-text address, or empty.

    Raises:
        ValidationError: On zero forms, several forms, or coordinates
            out of range.
    """
    provided = 0
    if place_id.strip():
        provided += 1
    if location is not None:
        provided += 1
        if not -90 <= location.lat <= 90:
            raise ValidationError(f"{label}.lat", "must be -90..90")
        if not -180 <= location.lng <= 180:
            raise ValidationError(f"{label}.lng", "must be -180..180")
    if text.strip():
        provided += 1

    if provided == 0:
        raise ValidationError(label, "required")
    if provided > 1:
        raise ValidationError(label, "use only one of text, place_id, or lat/lng")


def resolve_location(
    label: str,
    place_id: str,
    location: Optional[LatLng],
    text: str,
) -> LocationSpec:
    """Validate an endpoint and return its tagged location form."""
    validate_location(label, place_id, location, text)
    if place_id.strip():
        return PlaceIdLocation(place_id.strip())
    if location is not None:
        return CoordinateLocation(location)
    return TextLocation(text.strip())


def validate_request(request: DirectionsRequest) -> None:
    """Validate a normalized request.

    Raises:
        ValidationError: For the first offending field, checked in the
            order mode, from, to, units.
    """
    if not normalize_mode(request.mode):
        raise ValidationError("mode", "must be walk, drive, bicycle, or transit")
    validate_location(
        "from",
        request.origin_place_id,
        request.origin_location,
        request.origin_text,
    )
    validate_location(
        "to",
        request.destination_place_id,
        request.destination_location,
        request.destination_text,
    )
    if request.units and request.units not in {u.value for u in UnitSystem}:
        raise ValidationError("units", "must be metric or imperial")
