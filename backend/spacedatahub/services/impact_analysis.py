"""
CME Impact Analysis Service

Answers "is a CME about to hit this body, and when?" from DONKI CME
analysis records, using two strategies in strict priority order:

1. MODELED: arrival times from the provider's full trajectory simulation
   (impact entries flagged isGltf) at the target's location token.
2. ESTIMATED: for halo CMEs with a measured speed and no usable model,
   arrival = start time + reference distance / speed.

A MODELED candidate always wins, even if an ESTIMATED one would arrive
earlier. Within a strategy the earliest arrival wins, first seen on ties.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from spacedatahub.core.timeutils import hours_until, utcnow
from spacedatahub.models.donki import EventRecord, parse_events
from spacedatahub.models.impact import (
    TARGET_PROFILES,
    AnalysisKind,
    ImpactVerdict,
    TargetBody,
)
from spacedatahub.services.donki import DonkiClient

logger = logging.getLogger(__name__)

SUMMARY_FETCH_FAILED = "Error connecting to NASA forecast models."
SUMMARY_NO_EVENTS = "No significant solar events analyzed recently."
SUMMARY_NO_IMPACT = "No impact predicted for your target."

HALO_CME_MARKER = "halo cme"


def is_halo_cme(note: Optional[str]) -> bool:
    """
    Heuristic: the analyst note mentions a halo CME.

    Halo CMEs expand in every direction as seen from Earth, which usually
    means the ejecta is headed into the inner solar system. DONKI has no
    structured field for this, only free text.
    """
    return bool(note) and HALO_CME_MARKER in note.lower()


def find_modeled_impact(events: List[EventRecord], target: TargetBody, now: datetime) -> Optional[ImpactVerdict]:
    token = TARGET_PROFILES[target].location_token
    best: Optional[ImpactVerdict] = None

    for event in events:
        analysis = event.primary_analysis
        if analysis is None or not analysis.impacts:
            continue
        for impact in analysis.impacts:
            if impact.location != token or not impact.is_gltf:
                continue
            arrival = impact.estimated_time_of_arrival
            if arrival is None or arrival <= now:
                continue
            if best is None or arrival < best.arrival_time:
                hours = hours_until(arrival, now)
                best = ImpactVerdict(
                    is_impact=True,
                    analysis_kind=AnalysisKind.MODELED,
                    arrival_time=arrival,
                    hours_until_arrival=hours,
                    summary=f"ALERT (NASA model): impact predicted for {target.value} in {hours} hours.",
                    source_speed_km_s=analysis.speed,
                    reference_link=event.link,
                    source_event=event,
                )
    return best


def find_estimated_impact(events: List[EventRecord], target: TargetBody, now: datetime) -> Optional[ImpactVerdict]:
    distance_km = TARGET_PROFILES[target].reference_distance_km
    best: Optional[ImpactVerdict] = None

    for event in events:
        analysis = event.primary_analysis
        if analysis is None or not analysis.speed or analysis.speed <= 0:
            continue
        if not is_halo_cme(event.note) or event.start_time is None:
            continue

        try:
            arrival = event.start_time + timedelta(seconds=distance_km / analysis.speed)
        except OverflowError:
            continue
        if arrival <= now:
            continue
        if best is None or arrival < best.arrival_time:
            hours = hours_until(arrival, now)
            best = ImpactVerdict(
                is_impact=True,
                analysis_kind=AnalysisKind.ESTIMATED,
                arrival_time=arrival,
                hours_until_arrival=hours,
                summary=f"ALERT (analytical estimate): possible halo CME impact on {target.value} in ~{hours} hours.",
                source_speed_km_s=analysis.speed,
                reference_link=event.link,
                source_event=event,
            )
    return best


def evaluate_impact(
    raw_events: Optional[List[Dict[str, Any]]],
    target: TargetBody,
    now: Optional[datetime] = None,
) -> ImpactVerdict:
    """
    Reduce a CMEAnalysis fetch result to a single verdict for one target.

    raw_events is the DonkiClient result: None when the fetch failed, a
    (possibly empty) list of raw event dicts otherwise.
    """
    target = TargetBody(target)
    if raw_events is None:
        return ImpactVerdict.negative(SUMMARY_FETCH_FAILED)
    if len(raw_events) == 0:
        return ImpactVerdict.negative(SUMMARY_NO_EVENTS)

    now = now or utcnow()
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    events = parse_events(raw_events)

    modeled = find_modeled_impact(events, target, now)
    if modeled is not None:
        logger.info(f"Most imminent threat (NASA model) for {target.value}: arrival {modeled.arrival_time.isoformat()}")
        return modeled

    logger.info(f"No modeled impact found. Trying analytical estimate for {target.value}...")
    estimated = find_estimated_impact(events, target, now)
    if estimated is not None:
        logger.info(f"Most imminent threat (analytical estimate) for {target.value}: arrival {estimated.arrival_time.isoformat()}")
        return estimated

    return ImpactVerdict.negative(SUMMARY_NO_IMPACT)


class ImpactAnalyzer:
    """Fetches the latest CME analyses and evaluates them for a target body."""

    def __init__(self, client: DonkiClient):
        self.client = client

    async def analyze(self, target: TargetBody, now: Optional[datetime] = None) -> ImpactVerdict:
        raw_events = await self.client.get_cme_analysis()
        return evaluate_impact(raw_events, target, now)


async def analyze_impact(
    target: TargetBody,
    client: Optional[DonkiClient] = None,
    now: Optional[datetime] = None,
) -> ImpactVerdict:
    analyzer = ImpactAnalyzer(client or DonkiClient.from_settings())
    return await analyzer.analyze(target, now)
