"""Directions query construction.

Builds the provider URL from a configurable base endpoint. Query
parameters already present on the base URL are kept; the directions
keys overwrite same-named ones.
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Tuple
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from ...domain.errors import InvalidURLError, MissingAPIKeyError
from ...domain.locations import LocationSpec
from ...domain.models import DirectionsRequest

API_KEY_PARAM = "key"

# ':' and ',' stay readable in place_id:<id> and "<lat>,<lng>".
_SAFE_CHARS = ":,"


def directions_query(
    request: DirectionsRequest,
    origin: LocationSpec,
    destination: LocationSpec,
) -> Dict[str, str]:
    """Assemble the query mapping for a normalized request.

    Optional keys are only included when they carry a value.
    """
    query = {
        "origin": origin.to_wire(),
        "destination": destination.to_wire(),
        "mode": request.mode,
    }
    if request.language.strip():
        query["language"] = request.language
    if request.region.strip():
        query["region"] = request.region
    if request.units.strip():
        query["units"] = request.units
    return query


def build_directions_url(base_url: str, query: Mapping[str, str], api_key: str) -> str:
    """Return ``base_url`` with the directions query and API key set.

    Args:
        base_url: Directions endpoint, possibly carrying its own query.
        query: Keys to set; blank values are skipped.
        api_key: Provider API key.

    Returns:
        The fully-qualified URL.

    Raises:
        MissingAPIKeyError: If ``api_key`` is blank.
        InvalidURLError: If ``base_url`` is not an absolute http(s) URL.
    """
    if not api_key or not api_key.strip():
        raise MissingAPIKeyError("directions: missing API key")

    try:
        parsed = urlsplit(base_url)
    except ValueError as e:
        raise InvalidURLError("directions: invalid directions url", cause=e) from e
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvalidURLError(f"directions: invalid directions url {base_url!r}")

    overridden = {key for key, value in query.items() if value.strip()}
    overridden.add(API_KEY_PARAM)

    params: List[Tuple[str, str]] = [
        (key, value)
        for key, value in parse_qsl(parsed.query, keep_blank_values=True)
        if key not in overridden
    ]
    params.extend((key, value) for key, value in query.items() if value.strip())
    params.append((API_KEY_PARAM, api_key))

    return urlunsplit(parsed._replace(query=urlencode(params, safe=_SAFE_CHARS)))


def redact_api_key(url: str) -> str:
    """Return ``url`` with the API key value masked, for logging."""
    parsed = urlsplit(url)
    params = [
        (key, "REDACTED" if key == API_KEY_PARAM else value)
        for key, value in parse_qsl(parsed.query, keep_blank_values=True)
    ]
    return urlunsplit(parsed._replace(query=urlencode(params, safe=_SAFE_CHARS)))
