"""HTTP adapters - URL construction and the requests transport.

Available implementations:
- RequestsTransport: HttpTransportPort backed by requests.Session
"""

from .query_builder import build_directions_url, directions_query, redact_api_key
from .requests_transport import RequestsTransport

__all__ = [
    "RequestsTransport",
    "build_directions_url",
    "directions_query",
    "redact_api_key",
]
