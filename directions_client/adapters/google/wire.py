"""Wire-format models for the legacy Directions JSON envelope.

These mirror the provider schema and stay private to the adapter; the
mapper converts them into the public domain models. Unknown fields
are ignored; missing and ``null`` fields fall back to empty values.
"""

from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, Field, model_validator


class WireModel(BaseModel):
    """Base for wire models: a ``null`` field decodes as its default."""

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class WireValue(WireModel):
    text: str = ""
    value: int = 0


class WireStep(WireModel):
    html_instructions: str = ""
    distance: WireValue = Field(default_factory=WireValue)
    duration: WireValue = Field(default_factory=WireValue)
    travel_mode: str = ""
    maneuver: str = ""


class WireLeg(WireModel):
    distance: WireValue = Field(default_factory=WireValue)
    duration: WireValue = Field(default_factory=WireValue)
    start_address: str = ""
    end_address: str = ""
    steps: List[WireStep] = Field(default_factory=list)


class WireRoute(WireModel):
    summary: str = ""
    warnings: List[str] = Field(default_factory=list)
    legs: List[WireLeg] = Field(default_factory=list)


class DirectionsEnvelope(WireModel):
    """Top-level Directions API response."""

    status: str = ""
    error_message: str = ""
    routes: List[WireRoute] = Field(default_factory=list)
