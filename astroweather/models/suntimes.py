"""sunrise-sunset.org response models."""

from pydantic import BaseModel, field_validator

SUCCESS_STATUS = "OK"


class SunTimes(BaseModel):
    model_config = {"frozen": True}

    sunrise: str
    sunset: str


class SunTimesResponse(BaseModel):
    model_config = {"frozen": True}

    results: SunTimes | None = None
    status: str
    tzid: str = ""

    @field_validator("results", mode="before")
    @classmethod
    def _empty_results(cls, v):
        # Error responses carry "results": ""
        return None if v == "" else v
