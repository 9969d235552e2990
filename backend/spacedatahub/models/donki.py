"""
Typed views over DONKI event payloads.

DONKI records are sparse: any nested field may be missing or null. Every
field here is optional, and unparseable timestamps or speeds come through
as None so callers can treat them as "does not qualify".
"""

import math
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from spacedatahub.core.timeutils import parse_timestamp


class _DonkiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)


class ImpactRecord(_DonkiModel):
    """Modeled arrival of a CME at one location ("L1", "Mars", ...)."""
    location: Optional[str] = None
    estimated_time_of_arrival: Optional[datetime] = Field(default=None, alias="estimatedTimeOfArrival")
    # Set only for full trajectory simulations; heuristic entries are not trusted.
    is_gltf: bool = Field(default=False, alias="isGltf")

    @field_validator("estimated_time_of_arrival", mode="before")
    @classmethod
    def _parse_eta(cls, value):
        return parse_timestamp(value)

    @field_validator("is_gltf", mode="before")
    @classmethod
    def _none_is_false(cls, value):
        return False if value is None else value


class AnalysisRecord(_DonkiModel):
    speed: Optional[float] = None  # km/s
    impacts: Optional[List[ImpactRecord]] = None

    @field_validator("speed", mode="before")
    @classmethod
    def _parse_speed(cls, value):
        if value is None or isinstance(value, bool):
            return None
        try:
            speed = float(value)
        except (TypeError, ValueError):
            return None
        return speed if math.isfinite(speed) else None

    @field_validator("impacts", mode="before")
    @classmethod
    def _drop_bad_impacts(cls, value):
        # Each impact stands alone; a malformed sibling does not spoil the rest.
        if not isinstance(value, list):
            return None
        impacts = []
        for item in value:
            try:
                impacts.append(ImpactRecord.model_validate(item))
            except ValidationError:
                continue
        return impacts


class EventRecord(_DonkiModel):
    start_time: Optional[datetime] = Field(default=None, alias="startTime")
    note: Optional[str] = None
    link: Optional[str] = None
    # Kept raw; only the first entry is ever read, see primary_analysis.
    cme_analyses: Optional[List[Any]] = Field(default=None, alias="cmeAnalyses")

    @field_validator("start_time", mode="before")
    @classmethod
    def _parse_start(cls, value):
        return parse_timestamp(value)

    @field_validator("note", "link", mode="before")
    @classmethod
    def _text_or_none(cls, value):
        return value if isinstance(value, str) else None

    @field_validator("cme_analyses", mode="before")
    @classmethod
    def _list_or_none(cls, value):
        return value if isinstance(value, list) else None

    @property
    def primary_analysis(self) -> Optional[AnalysisRecord]:
        """The provider lists the most accurate analysis first."""
        if not self.cme_analyses:
            return None
        try:
            return AnalysisRecord.model_validate(self.cme_analyses[0])
        except ValidationError:
            return None


def parse_events(raw_events: List[Dict[str, Any]]) -> List[EventRecord]:
    """
    Convert raw DONKI dicts to EventRecords, dropping records whose shape
    cannot be interpreted at all.
    """
    events = []
    for raw in raw_events:
        if not isinstance(raw, dict):
            continue
        try:
            events.append(EventRecord.model_validate(raw))
        except ValidationError:
            continue
    return events
