"""Codec for the combined geography column.

Listings store their location as PostGIS ``GEOGRAPHY(POINT)`` text in
longitude-first order, e.g. ``POINT(123.1948 13.6218)``. Forms edit the
two coordinates as separate numeric fields.
"""

import re

_NUMBER = r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?"

POINT_PATTERN = re.compile(
    rf"^\s*(?:SRID=\d+;)?\s*POINT\s*\(\s*({_NUMBER})\s+({_NUMBER})\s*\)\s*$",
    re.IGNORECASE,
)


def _format_coordinate(value: float) -> str:
    # repr gives the shortest string that parses back to the same float
    return repr(float(value))


def encode_point(latitude: float, longitude: float) -> str:
    """Encode a coordinate pair as WKT point text (longitude first)."""
    return f"POINT({_format_coordinate(longitude)} {_format_coordinate(latitude)})"


def decode_point(text: object) -> tuple[float, float] | None:
    """Decode WKT/EWKT point text into ``(latitude, longitude)``.

    Returns None for anything that is not point text, including None.
    """
    if not isinstance(text, str):
        return None

    match = POINT_PATTERN.match(text)
    if match is None:
        return None

    longitude, latitude = float(match.group(1)), float(match.group(2))
    return latitude, longitude


def decode_point_or_default(
    text: object,
    default: tuple[float, float],
) -> tuple[float, float]:
    """Decode point text, falling back to ``default`` when it is malformed."""
    decoded = decode_point(text)
    if decoded is None:
        return default
    return decoded
