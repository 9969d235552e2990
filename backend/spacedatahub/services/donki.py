"""
NASA DONKI (Space Weather Database Of Notifications, Knowledge, Information) client.

Every fetch resolves to either a list of raw event dicts or None. None means
"no data available" (HTTP error, network failure, malformed body) and is
distinct from an empty list, which means the window had no events.
"""

import asyncio
import enum
import logging
from datetime import date
from typing import Any, Dict, List, Optional

import httpx

from spacedatahub.core.config import Settings, settings
from spacedatahub.core.timeutils import default_date_window

logger = logging.getLogger(__name__)


class EventCategory(str, enum.Enum):
    CME = "CME"
    GST = "GST"
    FLR = "FLR"
    SEP = "SEP"
    HSS = "HSS"
    CME_ANALYSIS = "CMEAnalysis"


# Extra query params DONKI needs per endpoint
CATEGORY_PARAMS: Dict[EventCategory, Dict[str, str]] = {
    EventCategory.SEP: {"mostAccurateOnly": "true"},
    EventCategory.CME_ANALYSIS: {"mostAccurateOnly": "true"},
}


class DonkiClient:
    """
    Async client for the DONKI REST endpoints.

    Usage:
        client = DonkiClient(api_key="...")
        storms = await client.get_geomagnetic_storms()
        everything = await client.get_all_events()
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.nasa.gov/DONKI",
        timeout: float = 30.0,
        lookback_days: int = 10,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.lookback_days = lookback_days
        self._transport = transport

    @classmethod
    def from_settings(cls, config: Settings = settings, **kwargs) -> "DonkiClient":
        return cls(
            api_key=config.NASA_API_KEY,
            base_url=config.DONKI_BASE_URL,
            timeout=config.DONKI_TIMEOUT_SECONDS,
            lookback_days=config.DONKI_LOOKBACK_DAYS,
            **kwargs,
        )

    def build_params(
        self,
        category: EventCategory,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        **params: Any,
    ) -> Dict[str, Any]:
        default_start, default_end = default_date_window(lookback_days=self.lookback_days)
        query = {
            "startDate": (start_date or default_start).isoformat(),
            "endDate": (end_date or default_end).isoformat(),
            "api_key": self.api_key,
        }
        query.update(CATEGORY_PARAMS.get(category, {}))
        query.update(params)
        return query

    async def fetch_category(
        self,
        category: EventCategory,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        **params: Any,
    ) -> Optional[List[Dict[str, Any]]]:
        category = EventCategory(category)
        url = f"{self.base_url}/{category.value}"
        query = self.build_params(category, start_date, end_date, **params)

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                resp = await client.get(url, params=query)
                resp.raise_for_status()
            except httpx.HTTPStatusError as e:
                logger.error(f"DONKI {category.value} returned HTTP {e.response.status_code}: {e.response.reason_phrase}")
                return None
            except Exception as e:
                logger.error(f"Failed to fetch DONKI {category.value} from {url}: {e!r}")
                return None

        # DONKI answers some empty windows with a blank 200 body
        if not resp.content.strip():
            return []

        try:
            data = resp.json()
        except ValueError as e:
            logger.error(f"Malformed DONKI {category.value} response: {e}")
            return None

        if not isinstance(data, list):
            logger.error(f"Unexpected DONKI {category.value} payload type: {type(data).__name__}")
            return None

        logger.info(f"Fetched {len(data)} DONKI {category.value} records")
        return data

    # ── Per-category accessors ──

    async def get_coronal_mass_ejections(self, start_date=None, end_date=None, **params):
        return await self.fetch_category(EventCategory.CME, start_date, end_date, **params)

    async def get_geomagnetic_storms(self, start_date=None, end_date=None, **params):
        return await self.fetch_category(EventCategory.GST, start_date, end_date, **params)

    async def get_solar_flares(self, start_date=None, end_date=None, **params):
        return await self.fetch_category(EventCategory.FLR, start_date, end_date, **params)

    async def get_solar_energetic_particles(self, start_date=None, end_date=None, **params):
        return await self.fetch_category(EventCategory.SEP, start_date, end_date, **params)

    async def get_high_speed_streams(self, start_date=None, end_date=None, **params):
        return await self.fetch_category(EventCategory.HSS, start_date, end_date, **params)

    async def get_cme_analysis(self, start_date=None, end_date=None, **params):
        return await self.fetch_category(EventCategory.CME_ANALYSIS, start_date, end_date, **params)

    async def get_all_events(self) -> Dict[str, Optional[List[Dict[str, Any]]]]:
        """
        Fetch all five event categories in parallel.

        Individual failures show up as None values. An exception escaping
        any single fetch fails the whole call.
        """
        logger.info("Fetching all DONKI space weather event categories...")
        cmes, storms, flares, particles, streams = await asyncio.gather(
            self.get_coronal_mass_ejections(),
            self.get_geomagnetic_storms(),
            self.get_solar_flares(),
            self.get_solar_energetic_particles(),
            self.get_high_speed_streams(),
        )
        return {
            "coronalMassEjections": cmes,
            "geomagneticStorms": storms,
            "solarFlares": flares,
            "solarEnergeticParticles": particles,
            "highSpeedStreams": streams,
        }
