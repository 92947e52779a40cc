"""Immutable domain models for the directions client.

All models are frozen dataclasses with slots. Requests are created per
call and never persisted; responses are produced once per successful
call and never mutated afterward.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class TravelMode(str, Enum):
    """Travel modes accepted by the provider, as sent on the wire."""

    WALKING = "walking"
    DRIVING = "driving"
    BICYCLING = "bicycling"
    TRANSIT = "transit"


class UnitSystem(str, Enum):
    """Unit systems used for the human-readable distance texts."""

    METRIC = "metric"
    IMPERIAL = "imperial"


@dataclass(frozen=True, slots=True)
class LatLng:
    """A latitude/longitude pair.

    Ranges are checked by the request validator so that a bad value is
    reported against the endpoint it belongs to.
    """

    lat: float
    lng: float


@dataclass(frozen=True, slots=True)
class DirectionsRequest:
    """A directions query between two locations.

    Each endpoint takes at most one of free text, a place identifier or
    coordinates. Mode, units, language and region are case-insensitive
    on input and are canonicalized by ``normalize_request``.

    Attributes:
        origin_text: Origin address or place name
        destination_text: Destination address or place name
        origin_place_id: Provider place identifier for the origin
        destination_place_id: Provider place identifier for the destination
        origin_location: Origin coordinates
        destination_location: Destination coordinates
        mode: walk, drive, bicycle or transit (aliases accepted)
        language: BCP-47 language code (e.g. en, en-US)
        region: CLDR region code (e.g. US, DE)
        units: metric or imperial
    """

    origin_text: str = ""
    destination_text: str = ""
    origin_place_id: str = ""
    destination_place_id: str = ""
    origin_location: Optional[LatLng] = None
    destination_location: Optional[LatLng] = None
    mode: str = ""
    language: str = ""
    region: str = ""
    units: str = ""


@dataclass(frozen=True, slots=True)
class DirectionsStep:
    """A single navigation step, in provider leg order."""

    instruction: str = ""
    distance_text: str = ""
    distance_meters: int = 0
    duration_text: str = ""
    duration_seconds: int = 0
    travel_mode: str = ""
    maneuver: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-ready mapping with empty values omitted."""
        return _omit_empty(
            {
                "instruction": self.instruction,
                "distance_text": self.distance_text,
                "distance_meters": self.distance_meters,
                "duration_text": self.duration_text,
                "duration_seconds": self.duration_seconds,
                "travel_mode": self.travel_mode,
                "maneuver": self.maneuver,
            }
        )


@dataclass(frozen=True, slots=True)
class DirectionsResponse:
    """A single route summary with its steps.

    Attributes:
        mode: The requested travel mode, upper-cased (e.g. 'WALKING')
        summary: Provider route summary (usually the main road name)
        start_address: Resolved origin address
        end_address: Resolved destination address
        distance_text: Human-readable total distance
        distance_meters: Total distance in meters
        duration_text: Human-readable total duration
        duration_seconds: Total duration in seconds
        warnings: Provider warnings to show alongside the route
        steps: Navigation steps in leg order
    """

    mode: str
    summary: str = ""
    start_address: str = ""
    end_address: str = ""
    distance_text: str = ""
    distance_meters: int = 0
    duration_text: str = ""
    duration_seconds: int = 0
    warnings: tuple[str, ...] = field(default_factory=tuple)
    steps: tuple[DirectionsStep, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-ready mapping with empty values omitted.

        ``mode`` is always present.
        """
        data = _omit_empty(
            {
                "summary": self.summary,
                "start_address": self.start_address,
                "end_address": self.end_address,
                "distance_text": self.distance_text,
                "distance_meters": self.distance_meters,
                "duration_text": self.duration_text,
                "duration_seconds": self.duration_seconds,
                "warnings": list(self.warnings),
                "steps": [step.to_dict() for step in self.steps],
            }
        )
        return {"mode": self.mode, **data}


@dataclass(frozen=True, slots=True)
class DirectionsComparison:
    """Two responses for the same trip in different modes.

    Attributes:
        primary: Response for the requested mode
        alternate: Response for the comparison mode
    """

    primary: DirectionsResponse
    alternate: DirectionsResponse

    def to_list(self) -> List[Dict[str, Any]]:
        """Return both responses in call order, primary first."""
        return [self.primary.to_dict(), self.alternate.to_dict()]


def _omit_empty(values: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in values.items() if value}
