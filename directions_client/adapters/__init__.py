"""Adapters layer - Concrete implementations behind the ports.

This module connects the client to external systems:
- HTTP (URL construction, requests transport)
- The provider's legacy Directions JSON schema
"""
