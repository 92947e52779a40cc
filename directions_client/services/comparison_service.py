"""Comparison service - Same trip, two travel modes."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Optional

from ..domain.context import CallContext
from ..domain.errors import ValidationError
from ..domain.models import DirectionsComparison, DirectionsRequest
from ..domain.normalization import normalize_mode, normalize_request
from .directions_service import DirectionsService


@dataclass
class ComparisonService:
    """Runs a directions request twice, in its own mode and an alternate one.

    The calls are sequential and share one CallContext. A failure in
    either call propagates and discards the other result.

    Attributes:
        directions_service: Performs each single call
    """

    directions_service: DirectionsService

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def compare(
        self,
        request: DirectionsRequest,
        alternate_mode: str,
        context: Optional[CallContext] = None,
    ) -> DirectionsComparison:
        """Fetch directions for ``request`` and for ``alternate_mode``.

        Args:
            request: The primary request.
            alternate_mode: Mode to compare with (aliases accepted).
            context: Deadline and cancellation shared by both calls.

        Returns:
            Both responses, primary first.

        Raises:
            ValidationError: On field 'compare' if the alternate mode is
                invalid or equal to the primary mode, before any I/O.
            DirectionsClientError: Whatever either call raises.
        """
        context = context or CallContext()

        primary_mode = normalize_request(request).mode
        compare_mode = normalize_mode(alternate_mode)
        if not compare_mode:
            raise ValidationError("compare", "must be walk, drive, bicycle, or transit")
        if compare_mode == primary_mode:
            raise ValidationError("compare", "must be different from mode")

        self._logger.info(
            "Comparing travel modes",
            extra={"primary_mode": primary_mode, "compare_mode": compare_mode},
        )

        primary = self.directions_service.directions(request, context)
        alternate = self.directions_service.directions(
            replace(request, mode=compare_mode), context
        )
        return DirectionsComparison(primary=primary, alternate=alternate)
