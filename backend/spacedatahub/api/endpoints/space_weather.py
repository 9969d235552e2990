from datetime import date
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from spacedatahub.models.impact import ImpactVerdict, TargetBody
from spacedatahub.services.donki import DonkiClient, EventCategory
from spacedatahub.services.impact_analysis import ImpactAnalyzer

router = APIRouter()


def get_donki_client() -> DonkiClient:
    return DonkiClient.from_settings()


@router.get("/events", response_model=Dict[str, Optional[List[Dict[str, Any]]]])
async def get_all_events(client: DonkiClient = Depends(get_donki_client)):
    """
    Get CME, geomagnetic storm, solar flare, SEP and high speed stream events
    for the default window. A category that could not be fetched is null.
    """
    return await client.get_all_events()


@router.get("/events/{category}", response_model=List[Dict[str, Any]])
async def get_events(
    category: EventCategory,
    start_date: Optional[date] = Query(None, description="First day of the window (UTC)"),
    end_date: Optional[date] = Query(None, description="Last day of the window (UTC)"),
    client: DonkiClient = Depends(get_donki_client),
):
    """
    Get DONKI events of a single category.
    """
    data = await client.fetch_category(category, start_date, end_date)
    if data is None:
        raise HTTPException(status_code=502, detail=f"DONKI {category.value} data unavailable")
    return data


@router.get("/impact/{target}", response_model=ImpactVerdict)
async def get_impact_analysis(target: TargetBody, client: DonkiClient = Depends(get_donki_client)):
    """
    Most imminent CME impact for the target body.
    Prefers NASA's simulation results, falls back to a distance/speed estimate for halo CMEs.
    """
    return await ImpactAnalyzer(client).analyze(target)
