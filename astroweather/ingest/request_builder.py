"""Query URL construction for the 7timer and sunrise-sunset providers."""

import httpx

from astroweather.config.schema import ASTRO_BASE_URL, SUNTIMES_BASE_URL

# ac=0 turns off the "forecast ahead" shift, tzshift=0 keeps init in UTC
ASTRO_FIXED_PARAMS = {
    "ac": "0",
    "unit": "metric",
    "output": "json",
    "tzshift": "0",
}


def build_astro_url(
    lat: str | float, lng: str | float, base_url: str = ASTRO_BASE_URL
) -> str:
    params = {"lat": str(lat), "lng": str(lng), **ASTRO_FIXED_PARAMS}
    return str(httpx.URL(base_url, params=params))


def build_suntimes_url(
    lat: str | float, lng: str | float, base_url: str = SUNTIMES_BASE_URL
) -> str:
    params = {"lat": str(lat), "lng": str(lng)}
    return str(httpx.URL(base_url, params=params))
