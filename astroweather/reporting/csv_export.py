"""CSV export of every forecast entry with a short metadata header."""

import csv
import logging
from pathlib import Path

from astroweather.errors import ExportError
from astroweather.interpret.fields import COLUMNS, interpret_entry
from astroweather.models.common import Coordinate
from astroweather.models.forecast import ForecastResponse

logger = logging.getLogger(__name__)

TITLE = "Weather forecasts data for"


def write_forecast_csv(
    forecast: ForecastResponse, coord: Coordinate, path: str | Path
) -> int:
    """Write the forecast to ``path``. Returns the number of data rows."""
    path = Path(path)
    header_rows = [
        [TITLE],
        ["Latitude", coord.lat],
        ["Longitude", coord.lng],
        ["Initial Timestamp", forecast.init],
        ["Product", forecast.product],
        list(COLUMNS),
    ]
    try:
        with open(path, "w", newline="") as handle:
            writer = csv.writer(handle)
            writer.writerows(header_rows)
            for entry in forecast.series:
                writer.writerow(interpret_entry(entry).as_row())
    except OSError as e:
        logger.debug("Could not write %s: %s", path, e)
        raise ExportError(f"writing {path}: {e}") from e

    logger.info("Wrote %d forecast rows to %s", len(forecast.series), path)
    return len(forecast.series)
