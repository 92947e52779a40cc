"""Services layer - Application orchestration.

Available services:
- DirectionsService: One directions call, request to mapped response
- ComparisonService: The same trip in two travel modes
"""

from .comparison_service import ComparisonService
from .directions_service import DirectionsService

__all__ = ["DirectionsService", "ComparisonService"]
