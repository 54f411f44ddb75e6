"""7timer ASTRO forecast data models."""

from pydantic import BaseModel, Field, StrictInt, StrictStr


class Wind(BaseModel):
    model_config = {"frozen": True}

    direction: StrictStr
    speed: StrictInt  # provider speed code, not m/s


class ForecastEntry(BaseModel):
    model_config = {"frozen": True}

    timepoint: StrictInt  # hours after init
    cloudcover: StrictInt
    seeing: StrictInt
    transparency: StrictInt
    lifted_index: StrictInt
    rh2m: StrictInt
    wind10m: Wind
    temp2m: StrictInt  # Celsius
    prec_type: StrictStr


class ForecastResponse(BaseModel):
    model_config = {"frozen": True, "populate_by_name": True}

    product: StrictStr
    init: StrictStr  # YYYYMMDDHH
    series: tuple[ForecastEntry, ...] = Field(alias="dataseries")
