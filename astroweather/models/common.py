"""Common types and helpers shared across models."""

from dataclasses import dataclass

from astroweather.errors import InputError


@dataclass(frozen=True)
class Coordinate:
    lat: str  # decimal degrees, forwarded verbatim
    lng: str


def parse_coordinate_line(line: str) -> Coordinate:
    """Parse one line of the form '<lat> <lng>'.

    Exactly two whitespace-separated tokens are accepted. The tokens are not
    checked for range or numeric format.
    """
    tokens = line.split()
    if len(tokens) != 2:
        raise InputError(
            f"expected '<latitude> <longitude>', got {len(tokens)} token(s): {line.strip()!r}"
        )
    return Coordinate(lat=tokens[0], lng=tokens[1])
