"""Map 7timer coded fields to the range strings documented by the provider.

Every lookup is total over the integers: any code outside a table's domain,
negative or past the end, yields UNDEFINED.
"""

from dataclasses import astuple, dataclass
from types import MappingProxyType

from astroweather.models.forecast import ForecastEntry

UNDEFINED = "undefined"

# Dense tables are indexed by code; code 0 is not used by the provider
CLOUD_COVER: tuple[str, ...] = (
    UNDEFINED, "0-6 %", "6-19 %", "19-31 %", "31-44 %", "44-56 %",
    "56-69 %", "69-81 %", "81-94 %", "94-100 %",
)

SEEING: tuple[str, ...] = (
    UNDEFINED, "<0.5", "0.5-0.75", "0.75-1", "1-1.25", "1.25-1.5",
    "1.5-2", "2-2.5", ">2.5",
)  # arcseconds

TRANSPARENCY: tuple[str, ...] = (
    UNDEFINED, "<0.3", "0.3-0.4", "0.4-0.5", "0.5-0.6", "0.6-0.7",
    "0.7-0.85", "0.85-1", ">1",
)  # magnitudes per air mass

WIND_SPEED: tuple[str, ...] = (
    UNDEFINED,
    "Below 0.3m/s (calm)",
    "0.3-3.4m/s (light)",
    "3.4-8.0m/s (moderate)",
    "8.0-10.8m/s (fresh)",
    "10.8-17.2m/s (strong)",
    "17.2-24.5m/s (gale)",
    "24.5-32.6m/s (storm)",
    "Over 32.6m/s (hurricane)",
)

LIFTED_INDEX = MappingProxyType({
    -10: "below -7",
    -6: "-7 to -5",
    -4: "-5 to -3",
    -1: "-3 to 0",
    2: "0 to 4",
    6: "4 to 8",
    10: "8 to 11",
    15: "over 11",
})

RELATIVE_HUMIDITY = MappingProxyType({
    -4: "0-5 %", -3: "5-10 %", -2: "10-15 %", -1: "15-20 %",
    0: "20-25 %", 1: "25-30 %", 2: "30-35 %", 3: "35-40 %",
    4: "40-45 %", 5: "45-50 %", 6: "50-55 %", 7: "55-60 %",
    8: "60-65 %", 9: "65-70 %", 10: "70-75 %", 11: "75-80 %",
    12: "80-85 %", 13: "85-90 %", 14: "90-95 %", 15: "95-99 %",
    16: "100 %",
})

COLUMNS: tuple[str, ...] = (
    "Timepoint",
    "Cloud Cover",
    "Lifted Index",
    "Temperature 2m",
    "Seeing",
    "Transparency",
    "Humidity",
    "Precipitation",
    "Wind 10m",
)


def _dense(code: int, table: tuple[str, ...]) -> str:
    if 0 <= code < len(table):
        return table[code]
    return UNDEFINED


def cloud_cover_label(code: int) -> str:
    return _dense(code, CLOUD_COVER)


def seeing_label(code: int) -> str:
    return _dense(code, SEEING)


def transparency_label(code: int) -> str:
    return _dense(code, TRANSPARENCY)


def wind_speed_label(code: int) -> str:
    return _dense(code, WIND_SPEED)


def lifted_index_label(code: int) -> str:
    return LIFTED_INDEX.get(code, UNDEFINED)


def relative_humidity_label(code: int) -> str:
    return RELATIVE_HUMIDITY.get(code, UNDEFINED)


def wind_label(direction: str, speed_code: int) -> str:
    return f"{direction} {wind_speed_label(speed_code)}"


def temperature_label(celsius: int) -> str:
    return f"{celsius} C"


@dataclass(frozen=True)
class EntryRecord:
    """One forecast entry rendered for display, in column order."""

    timepoint: int
    cloud_cover: str
    lifted_index: str
    temperature: str
    seeing: str
    transparency: str
    humidity: str
    precipitation: str
    wind: str

    def as_row(self) -> list[str]:
        return [str(v) for v in astuple(self)]


def interpret_entry(entry: ForecastEntry) -> EntryRecord:
    return EntryRecord(
        timepoint=entry.timepoint,
        cloud_cover=cloud_cover_label(entry.cloudcover),
        lifted_index=lifted_index_label(entry.lifted_index),
        temperature=temperature_label(entry.temp2m),
        seeing=seeing_label(entry.seeing),
        transparency=transparency_label(entry.transparency),
        humidity=relative_humidity_label(entry.rh2m),
        precipitation=entry.prec_type,
        wind=wind_label(entry.wind10m.direction, entry.wind10m.speed),
    )
