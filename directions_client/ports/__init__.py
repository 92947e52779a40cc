"""Ports layer - Interfaces (Protocols) between the services and I/O.

Ports define the contracts the services depend on, so the network
can be replaced by a test double.
"""

from .transport import HttpTransportPort

__all__ = ["HttpTransportPort"]
