"""Shared fixtures: a local directions server and a fake transport."""

from __future__ import annotations

import json
import threading
import time
from dataclasses import dataclass, field
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Dict, List, Tuple
from urllib.parse import parse_qs, urlsplit

import pytest
import requests

from directions_client.config import reset_config
from directions_client.container import reset_container
from directions_client.domain.context import CallContext

OK_PAYLOAD = {
    "status": "OK",
    "routes": [
        {
            "summary": "Main",
            "warnings": ["test"],
            "legs": [
                {
                    "distance": {"text": "1 km", "value": 1000},
                    "duration": {"text": "10 mins", "value": 600},
                    "start_address": "Start",
                    "end_address": "End",
                    "steps": [
                        {
                            "html_instructions": "Head <b>north</b>",
                            "distance": {"text": "0.2 km", "value": 200},
                            "duration": {"text": "2 mins", "value": 120},
                            "travel_mode": "WALKING",
                        },
                        {
                            "html_instructions": "Turn <b>left</b> onto <b>Elm&nbsp;St</b>",
                            "distance": {"text": "0.8 km", "value": 800},
                            "duration": {"text": "8 mins", "value": 480},
                            "travel_mode": "WALKING",
                            "maneuver": "turn-left",
                        },
                    ],
                }
            ],
        }
    ],
}


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keep environment variables from leaking into configuration."""
    for name in (
        "DIRECTIONS_API_KEY",
        "GOOGLE_PLACES_API_KEY",
        "DIRECTIONS_BASE_URL",
        "DIRECTIONS_TIMEOUT_SECONDS",
        "DIRECTIONS_MAX_RESPONSE_BYTES",
        "DIRECTIONS_USER_AGENT",
        "DIRECTIONS_LOG_LEVEL",
        "DIRECTIONS_LOG_FORMAT",
        "DIRECTIONS_LOG_STRUCTURED",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


@pytest.fixture
def ok_payload() -> dict:
    return json.loads(json.dumps(OK_PAYLOAD))


class DirectionsServer(ThreadingHTTPServer):
    """Local HTTP server answering every GET with a canned response."""

    daemon_threads = True

    def __init__(self) -> None:
        super().__init__(("127.0.0.1", 0), _DirectionsHandler)
        self.status_code = 200
        self.body = b""
        self.delay_seconds = 0.0
        self.requests: List[Dict[str, List[str]]] = []
        self.paths: List[str] = []

    @property
    def url(self) -> str:
        host, port = self.server_address[:2]
        return f"http://{host}:{port}/maps/api/directions/json"

    def respond(self, status_code: int = 200, body=b"") -> None:
        if isinstance(body, dict):
            body = json.dumps(body).encode("utf-8")
        elif isinstance(body, str):
            body = body.encode("utf-8")
        self.status_code = status_code
        self.body = body


class _DirectionsHandler(BaseHTTPRequestHandler):
    def do_GET(self) -> None:  # noqa: N802
        server: DirectionsServer = self.server  # type: ignore[assignment]
        parts = urlsplit(self.path)
        server.paths.append(parts.path)
        server.requests.append(parse_qs(parts.query, keep_blank_values=True))
        if server.delay_seconds:
            time.sleep(server.delay_seconds)
        self.send_response(server.status_code)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(server.body)))
        self.end_headers()
        try:
            self.wfile.write(server.body)
        except (BrokenPipeError, ConnectionResetError):
            pass

    def log_message(self, format, *args) -> None:
        pass


@pytest.fixture
def directions_server():
    server = DirectionsServer()
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield server
    finally:
        server.shutdown()
        server.server_close()
        thread.join(timeout=5)


@pytest.fixture
def session():
    """A session that ignores proxy settings from the environment."""
    s = requests.Session()
    s.trust_env = False
    yield s
    s.close()


@dataclass
class FakeTransport:
    """Transport double returning queued bodies or raising queued errors."""

    responses: List[object] = field(default_factory=list)
    calls: List[Tuple[str, CallContext]] = field(default_factory=list)

    def get(self, url: str, context: CallContext) -> bytes:
        self.calls.append((url, context))
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        if isinstance(result, dict):
            return json.dumps(result).encode("utf-8")
        return result

    def queries(self) -> List[Dict[str, List[str]]]:
        return [parse_qs(urlsplit(url).query) for url, _ in self.calls]


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport()
