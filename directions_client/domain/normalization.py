"""Request normalization.

Turns caller input into the canonical form the validator and the
query builder expect. Nothing here raises for bad mode or units: an
unknown mode becomes the empty sentinel and the validator rejects it.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, Optional

from .errors import ValidationError
from .models import DirectionsRequest, LatLng, TravelMode, UnitSystem

MODE_ALIASES: Dict[str, TravelMode] = {
    "walk": TravelMode.WALKING,
    "walking": TravelMode.WALKING,
    "drive": TravelMode.DRIVING,
    "driving": TravelMode.DRIVING,
    "bike": TravelMode.BICYCLING,
    "bicycle": TravelMode.BICYCLING,
    "bicycling": TravelMode.BICYCLING,
    "transit": TravelMode.TRANSIT,
}

DEFAULT_MODE = TravelMode.WALKING
DEFAULT_UNITS = UnitSystem.METRIC


def normalize_mode(mode: Optional[str]) -> str:
    """Map a user-supplied mode onto its canonical token.

    Args:
        mode: Mode or alias in any case (e.g. 'WALK', 'bike', 'Driving').

    Returns:
        The canonical token ('walking', 'driving', 'bicycling', 'transit'),
        or '' when the mode is unknown.
    """
    resolved = MODE_ALIASES.get((mode or "").strip().lower())
    return resolved.value if resolved is not None else ""


def normalize_request(request: DirectionsRequest) -> DirectionsRequest:
    """Return a canonical copy of ``request``.

    Text and place-id fields are trimmed, an empty mode defaults to
    walking, units default to metric and are lower-cased otherwise.
    """
    mode = request.mode.strip().lower()
    if not mode:
        mode = DEFAULT_MODE.value
    mode = normalize_mode(mode)

    units = request.units.strip().lower()
    if not units:
        units = DEFAULT_UNITS.value

    return replace(
        request,
        origin_text=request.origin_text.strip(),
        destination_text=request.destination_text.strip(),
        origin_place_id=request.origin_place_id.strip(),
        destination_place_id=request.destination_place_id.strip(),
        mode=mode,
        language=request.language.strip(),
        region=request.region.strip(),
        units=units,
    )


def location_from_parts(
    label: str, lat: Optional[float], lng: Optional[float]
) -> Optional[LatLng]:
    """Build coordinates from separately supplied latitude and longitude.

    Args:
        label: Endpoint label used in the error field ('from' or 'to').
        lat: Latitude, or None when not supplied.
        lng: Longitude, or None when not supplied.

    Returns:
        LatLng when both parts are given, None when neither is.

    Raises:
        ValidationError: If only one of the two parts is given.
    """
    if lat is None and lng is None:
        return None
    if lat is None or lng is None:
        raise ValidationError(f"{label}_location", "lat and lng required")
    return LatLng(lat=float(lat), lng=float(lng))
