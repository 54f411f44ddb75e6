"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field

ASTRO_BASE_URL = "https://www.7timer.info/bin/astro.php"
SUNTIMES_BASE_URL = "https://api.sunrise-sunset.org/json"
DEFAULT_USER_AGENT = "astroweather/0.1.0"


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str
    timeout: float = Field(default=30.0, gt=0.0)
    user_agent: str = DEFAULT_USER_AGENT


class ProvidersConfig(BaseModel):
    model_config = {"extra": "forbid"}

    astro: ProviderConfig = ProviderConfig(base_url=ASTRO_BASE_URL)
    suntimes: ProviderConfig = ProviderConfig(base_url=SUNTIMES_BASE_URL)


class ExportConfig(BaseModel):
    model_config = {"extra": "forbid"}

    csv_path: str = "forecasts.csv"


class LoggingConfig(BaseModel):
    model_config = {"extra": "forbid"}

    level: LogLevel = LogLevel.WARNING


class LocationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    name: str
    slug: str
    lat: str
    lng: str


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    providers: ProvidersConfig = ProvidersConfig()
    export: ExportConfig = ExportConfig()
    logging: LoggingConfig = LoggingConfig()
    locations: list[LocationConfig] = []

    def find_location(self, slug: str) -> LocationConfig | None:
        for loc in self.locations:
            if loc.slug.lower() == slug.lower():
                return loc
        return None
