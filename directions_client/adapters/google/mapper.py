"""Directions response mapping.

Decodes the provider envelope and flattens the best route into a
DirectionsResponse. Only the first route and its first leg are used;
the provider orders routes best match first.
"""

from __future__ import annotations

import html
import re

from pydantic import ValidationError as PydanticValidationError

from ...domain.errors import DecodeError, NoResultsError, ProviderStatusError
from ...domain.models import DirectionsResponse, DirectionsStep
from .wire import DirectionsEnvelope, WireStep

STATUS_OK = "OK"

_HTML_TAG = re.compile(r"<[^>]+>")


def clean_instruction(raw: str) -> str:
    """Turn an HTML step instruction into plain text.

    Tags are stripped, entities unescaped and whitespace runs collapsed
    to single spaces.

    >>> clean_instruction("Head <b>north</b> on Main&nbsp;St")
    'Head north on Main St'
    """
    cleaned = _HTML_TAG.sub("", raw)
    cleaned = html.unescape(cleaned)
    return " ".join(cleaned.split())


def decode_envelope(payload: bytes) -> DirectionsEnvelope:
    """Parse the raw body into the wire envelope.

    Raises:
        DecodeError: If the body is not JSON or does not fit the schema.
    """
    try:
        return DirectionsEnvelope.model_validate_json(payload)
    except PydanticValidationError as e:
        raise DecodeError("directions: decode directions response", cause=e) from e


def map_step(step: WireStep) -> DirectionsStep:
    return DirectionsStep(
        instruction=clean_instruction(step.html_instructions),
        distance_text=step.distance.text,
        distance_meters=step.distance.value,
        duration_text=step.duration.text,
        duration_seconds=step.duration.value,
        travel_mode=step.travel_mode,
        maneuver=step.maneuver,
    )


def map_directions_payload(payload: bytes, mode: str) -> DirectionsResponse:
    """Map a raw provider body onto a DirectionsResponse.

    Args:
        payload: Raw response body from a 2xx response.
        mode: The requested (normalized) travel mode; echoed upper-cased.

    Returns:
        The mapped response for the first route's first leg.

    Raises:
        DecodeError: If the body cannot be decoded.
        ProviderStatusError: If the envelope status is not OK.
        NoResultsError: If there is no route or the first route has no leg.
    """
    envelope = decode_envelope(payload)

    if envelope.status != STATUS_OK:
        error_message = envelope.error_message.strip()
        message = f"directions: status {envelope.status}"
        if error_message:
            message = f"{message}: {error_message}"
        raise ProviderStatusError(
            message,
            status=envelope.status,
            error_message=error_message,
        )
    if not envelope.routes or not envelope.routes[0].legs:
        raise NoResultsError("directions: no directions returned")

    route = envelope.routes[0]
    leg = route.legs[0]

    return DirectionsResponse(
        mode=mode.upper(),
        summary=route.summary,
        start_address=leg.start_address,
        end_address=leg.end_address,
        distance_text=leg.distance.text,
        distance_meters=leg.distance.value,
        duration_text=leg.duration.text,
        duration_seconds=leg.duration.value,
        warnings=tuple(route.warnings),
        steps=tuple(map_step(step) for step in leg.steps),
    )
