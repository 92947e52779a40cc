"""Tests for decoding and mapping the directions envelope."""

import json

import pytest

from directions_client.adapters.google.mapper import (
    clean_instruction,
    decode_envelope,
    map_directions_payload,
)
from directions_client.domain.errors import (
    DecodeError,
    NoResultsError,
    ProviderStatusError,
)


def _body(payload) -> bytes:
    return json.dumps(payload).encode("utf-8")


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Head <b>north</b>", "Head north"),
        ("Turn <b>left</b> onto <b>Elm&nbsp;St</b>", "Turn left onto Elm St"),
        ("  Keep   right\n at the fork ", "Keep right at the fork"),
        ("Take the A&amp;B exit", "Take the A&B exit"),
        (
            'Turn right<div style="font-size:0.9em">Destination will be on the left</div>',
            "Turn rightDestination will be on the left",
        ),
        ("", ""),
    ],
)
def test_clean_instruction(raw, expected):
    assert clean_instruction(raw) == expected


def test_maps_first_route_and_leg(ok_payload):
    response = map_directions_payload(_body(ok_payload), "walking")

    assert response.mode == "WALKING"
    assert response.summary == "Main"
    assert response.start_address == "Start"
    assert response.end_address == "End"
    assert response.distance_meters == 1000
    assert response.distance_text == "1 km"
    assert response.duration_seconds == 600
    assert response.duration_text == "10 mins"
    assert response.warnings == ("test",)


def test_steps_keep_provider_order(ok_payload):
    response = map_directions_payload(_body(ok_payload), "walking")

    assert [step.instruction for step in response.steps] == [
        "Head north",
        "Turn left onto Elm St",
    ]
    second = response.steps[1]
    assert second.distance_meters == 800
    assert second.duration_seconds == 480
    assert second.travel_mode == "WALKING"
    assert second.maneuver == "turn-left"


def test_mode_echoes_request_not_payload(ok_payload):
    response = map_directions_payload(_body(ok_payload), "transit")
    assert response.mode == "TRANSIT"


def test_extra_routes_and_legs_are_ignored(ok_payload):
    route = ok_payload["routes"][0]
    second_leg = dict(route["legs"][0], start_address="Elsewhere")
    route["legs"].append(second_leg)
    ok_payload["routes"].append(dict(route, summary="Alternate"))

    response = map_directions_payload(_body(ok_payload), "walking")

    assert response.summary == "Main"
    assert response.start_address == "Start"


def test_status_not_ok_echoes_status():
    payload = {"status": "ZERO_RESULTS", "routes": []}

    with pytest.raises(ProviderStatusError) as exc_info:
        map_directions_payload(_body(payload), "walking")

    assert exc_info.value.status == "ZERO_RESULTS"
    assert "ZERO_RESULTS" in str(exc_info.value)


def test_status_error_message_is_kept():
    payload = {
        "status": "REQUEST_DENIED",
        "error_message": " The provided API key is invalid. ",
        "routes": None,
    }

    with pytest.raises(ProviderStatusError) as exc_info:
        map_directions_payload(_body(payload), "walking")

    assert exc_info.value.error_message == "The provided API key is invalid."
    assert str(exc_info.value) == (
        "directions: status REQUEST_DENIED: The provided API key is invalid."
    )


def test_empty_routes_is_no_results():
    with pytest.raises(NoResultsError):
        map_directions_payload(_body({"status": "OK", "routes": []}), "walking")


def test_route_without_legs_is_no_results():
    payload = {"status": "OK", "routes": [{"summary": "x", "legs": []}]}
    with pytest.raises(NoResultsError):
        map_directions_payload(_body(payload), "walking")


@pytest.mark.parametrize(
    "body",
    [b"not json", b"[]", b'{"status": "OK", "routes": "nope"}', b'{"status": '],
)
def test_malformed_body_is_decode_error(body):
    with pytest.raises(DecodeError) as exc_info:
        decode_envelope(body)
    assert exc_info.value.cause is not None


def test_missing_optional_fields_default_to_empty():
    payload = {"status": "OK", "routes": [{"legs": [{"steps": [{}]}]}]}

    response = map_directions_payload(_body(payload), "driving")

    assert response.summary == ""
    assert response.warnings == ()
    assert response.distance_meters == 0
    assert response.steps[0].instruction == ""


def test_null_fields_decode_as_empty_values():
    payload = {
        "status": "OK",
        "error_message": None,
        "routes": [
            {
                "summary": None,
                "warnings": None,
                "legs": [
                    {
                        "distance": {"text": None, "value": None},
                        "duration": None,
                        "start_address": None,
                        "end_address": "End",
                        "steps": [
                            {
                                "html_instructions": "Head <b>north</b>",
                                "distance": None,
                                "duration": {"text": "2 mins", "value": None},
                                "travel_mode": None,
                                "maneuver": None,
                            }
                        ],
                    }
                ],
            }
        ],
    }

    response = map_directions_payload(_body(payload), "walking")

    assert response.summary == ""
    assert response.warnings == ()
    assert response.distance_text == ""
    assert response.distance_meters == 0
    assert response.duration_seconds == 0
    assert response.start_address == ""
    assert response.end_address == "End"
    step = response.steps[0]
    assert step.instruction == "Head north"
    assert step.distance_meters == 0
    assert step.duration_text == "2 mins"
    assert step.duration_seconds == 0
    assert step.travel_mode == ""
    assert step.maneuver == ""


def test_null_steps_decode_as_no_steps(ok_payload):
    ok_payload["routes"][0]["legs"][0]["steps"] = None

    assert map_directions_payload(_body(ok_payload), "walking").steps == ()


def test_null_legs_is_no_results(ok_payload):
    ok_payload["routes"][0]["legs"] = None

    with pytest.raises(NoResultsError):
        map_directions_payload(_body(ok_payload), "walking")
