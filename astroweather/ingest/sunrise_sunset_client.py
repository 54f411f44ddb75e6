"""sunrise-sunset.org API client."""

import logging

from astroweather.config.schema import DEFAULT_USER_AGENT, SUNTIMES_BASE_URL
from astroweather.errors import DecodeError, ProviderError
from astroweather.ingest.fetcher import fetch_json
from astroweather.ingest.request_builder import build_suntimes_url
from astroweather.models.suntimes import SUCCESS_STATUS, SunTimesResponse

logger = logging.getLogger(__name__)


class SunriseSunsetClient:
    def __init__(
        self,
        base_url: str = SUNTIMES_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
    ):
        self.base_url = base_url
        self.user_agent = user_agent
        self.timeout = timeout

    def get_sun_times(self, lat: str, lng: str) -> SunTimesResponse:
        """Fetch sunrise and sunset for a coordinate pair.

        Raises ProviderError unless the response status is "OK".
        """
        url = build_suntimes_url(lat, lng, base_url=self.base_url)
        data = fetch_json(
            url, SunTimesResponse, timeout=self.timeout, user_agent=self.user_agent
        )
        if data.status != SUCCESS_STATUS:
            logger.debug("sunrise-sunset status=%s for %s,%s", data.status, lat, lng)
            raise ProviderError(f"API returned error status: {data.status}")
        if data.results is None:
            raise DecodeError("status OK but results missing")
        return data
