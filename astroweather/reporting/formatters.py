"""Console and JSON formatters for decoded provider responses."""

import json
from dataclasses import asdict

from astroweather.interpret.fields import interpret_entry
from astroweather.models.forecast import ForecastResponse
from astroweather.models.suntimes import SunTimesResponse


def format_forecast_text(f: ForecastResponse) -> str:
    """Plain text summary of the first forecast entry."""
    r = interpret_entry(f.series[0])
    lines = [
        "Weather forecast for location:",
        f"Initial timestamp: {f.init}",
        f"Product: {f.product}",
        f"Timepoint: {r.timepoint} hours",
        f"Cloud cover: {r.cloud_cover}",
        f"Lifted index: {r.lifted_index}",
        f"Temperature 2 meters: {r.temperature}",
        f"Seeing range: {r.seeing}",
        f"Transparency range: {r.transparency}",
        f"Relative humidity 2 meters: {r.humidity}",
        f"Precipitation type: {r.precipitation}",
        f"Wind: {r.wind}",
    ]
    return "\n".join(lines)


def format_forecast_json(f: ForecastResponse) -> str:
    """JSON summary of the first forecast entry for programmatic consumption."""
    data = {
        "product": f.product,
        "init": f.init,
        "entry": asdict(interpret_entry(f.series[0])),
    }
    return json.dumps(data, indent=2)


def format_suntimes_text(s: SunTimesResponse) -> str:
    suffix = f" {s.tzid}" if s.tzid else ""
    lines = [
        f"Sunrise: {s.results.sunrise}{suffix}",
        f"Sunset: {s.results.sunset}{suffix}",
    ]
    return "\n".join(lines)
