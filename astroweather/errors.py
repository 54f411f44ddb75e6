"""Error taxonomy for fetching, decoding and exporting provider data."""


class AstroWeatherError(Exception):
    """Base class for every terminal failure reported by the CLI."""


class InputError(AstroWeatherError):
    """Coordinate input could not be parsed."""


class TransportError(AstroWeatherError):
    """Network failure or non-success HTTP status."""


class DecodeError(AstroWeatherError):
    """Response body is not valid JSON or does not match the expected shape."""


class ProviderError(AstroWeatherError):
    """Well-formed response that signals a provider-level failure."""


class ExportError(AstroWeatherError):
    """Output file could not be created or written."""
