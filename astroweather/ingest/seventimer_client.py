"""7timer.info ASTRO forecast client."""

import logging

from astroweather.config.schema import ASTRO_BASE_URL, DEFAULT_USER_AGENT
from astroweather.errors import ProviderError
from astroweather.ingest.fetcher import fetch_json
from astroweather.ingest.request_builder import build_astro_url
from astroweather.models.forecast import ForecastResponse

logger = logging.getLogger(__name__)


class SevenTimerClient:
    def __init__(
        self,
        base_url: str = ASTRO_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
    ):
        self.base_url = base_url
        self.user_agent = user_agent
        self.timeout = timeout

    def get_astro_forecast(self, lat: str, lng: str) -> ForecastResponse:
        """Fetch the ASTRO product for a coordinate pair.

        The provider has no status field; an empty data series is treated
        as a provider failure since there is no entry to report.
        """
        url = build_astro_url(lat, lng, base_url=self.base_url)
        forecast = fetch_json(
            url, ForecastResponse, timeout=self.timeout, user_agent=self.user_agent
        )
        if not forecast.series:
            logger.debug("7timer returned no forecast entries for %s,%s", lat, lng)
            raise ProviderError(f"no forecast entries returned for {lat},{lng}")
        logger.info(
            "Fetched %s forecast init=%s with %d entries",
            forecast.product, forecast.init, len(forecast.series),
        )
        return forecast
