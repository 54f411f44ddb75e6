"""Default named locations offered when the config file lists none."""

from astroweather.config.schema import LocationConfig

DEFAULT_LOCATIONS: list[LocationConfig] = [
    LocationConfig(
        name="Vienna",
        slug="vienna",
        lat="48.208",
        lng="16.372",
    ),
    LocationConfig(
        name="Bratislava",
        slug="bratislava",
        lat="48.14816",
        lng="17.10674",
    ),
]
