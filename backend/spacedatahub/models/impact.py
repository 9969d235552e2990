import enum
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel

from spacedatahub.models.donki import EventRecord


class TargetBody(str, enum.Enum):
    MOON = "Moon"
    MARS = "Mars"


class AnalysisKind(str, enum.Enum):
    MODELED = "MODELED"      # provider's full trajectory simulation
    ESTIMATED = "ESTIMATED"  # local distance / speed estimate


@dataclass(frozen=True)
class TargetProfile:
    location_token: str
    reference_distance_km: float


# Mean heliocentric separations, not ephemerides. L1 stands in for the Moon's vicinity.
TARGET_PROFILES: Dict[TargetBody, TargetProfile] = {
    TargetBody.MOON: TargetProfile(location_token="L1", reference_distance_km=150_000_000),
    TargetBody.MARS: TargetProfile(location_token="Mars", reference_distance_km=225_000_000),
}


class ImpactVerdict(BaseModel):
    is_impact: bool
    summary: str
    analysis_kind: Optional[AnalysisKind] = None
    arrival_time: Optional[datetime] = None
    hours_until_arrival: Optional[int] = None
    source_speed_km_s: Optional[float] = None
    reference_link: Optional[str] = None
    source_event: Optional[EventRecord] = None

    @classmethod
    def negative(cls, summary: str) -> "ImpactVerdict":
        return cls(is_impact=False, summary=summary)
