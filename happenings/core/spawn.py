"""Spawn extraction - Pure functions.

This module turns the free-form body of a spawn announcement into a
typed SpawnRecord. Each optional attribute has its own matcher that
returns None when the text does not mention it; only the coordinate
pair is mandatory.
"""

import re
from dataclasses import dataclass
from enum import Enum

from happenings.core.errors import ParseError


class Missing(Enum):
    """Marker for an attribute the post did not mention."""
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


UNKNOWN = Missing.UNKNOWN

MAP_URL_TEMPLATE = "https://maps.google.com/?q={latitude:.5f},{longitude:.5f}"

# "35.41025,139.93" or "-37.7835, 144.95107"; both parts need a fraction
COORDINATES_PATTERN = re.compile(
    r"(?<![\d.])(-?\d{1,2}\.\d+)\s*,\s*(-?\d{1,3}\.\d+)(?!\.?\d)"
)

IV_PATTERN = re.compile(r"(?<![\w.])(\d{1,3}(?:\.\d+)?)\s*%")

LETTER_PATTERNS = (
    re.compile(r"\bUnown\s*\(\s*([A-Z])\s*\)"),
    re.compile(r"\bUnown\s+([A-Z])\b"),
    re.compile(r"\bLetter:?\s*([A-Z])\b"),
)

# Checked in order, "24m 22s" must win over a bare "22s"
MINUTES_SECONDS_PATTERN = re.compile(
    r"(?<![\w.:])(\d+)\s*m(?:in(?:utes?)?)?\s*(\d+)\s*s(?:ec(?:onds?)?)?\b"
)
CLOCK_COUNTDOWN_PATTERN = re.compile(
    r"(?<![\w:])(\d{1,2}):(\d{2})(?!:)\s*(?:left|remaining)\b"
)
SECONDS_PATTERN = re.compile(
    r"(?<![\w.:])(\d+)\s*(?:s|secs?|seconds)\b"
)


@dataclass(frozen=True)
class SpawnRecord:
    """Immutable spawn announcement.

    Attributes:
        latitude: Spawn latitude
        longitude: Spawn longitude
        iv: IV percentage as written (e.g. "60%") or UNKNOWN
        letter: Variant letter (e.g. "V") or UNKNOWN
        ttl: Remaining time as "<m>m <s>s" or UNKNOWN
    """
    latitude: float
    longitude: float
    iv: str | Missing = UNKNOWN
    letter: str | Missing = UNKNOWN
    ttl: str | Missing = UNKNOWN

    @property
    def url(self) -> str:
        """Map link for the spawn coordinates."""
        return format_map_url(self.latitude, self.longitude)

    @property
    def coordinates(self) -> tuple[float, float]:
        """Return (latitude, longitude) tuple."""
        return (self.latitude, self.longitude)

    def to_payload(self) -> dict[str, str]:
        """Render the base event payload.

        Returns a new dict on every call so listeners cannot share state.
        """
        return {
            "iv": render_value(self.iv),
            "letter": render_value(self.letter),
            "ttl": render_value(self.ttl),
            "url": self.url,
        }


def render_value(value: str | Missing) -> str:
    """Render an attribute for a payload, turning UNKNOWN into "unknown"."""
    if isinstance(value, Missing):
        return value.value
    return value


def format_map_url(latitude: float, longitude: float) -> str:
    """Build a map link with exactly five fractional digits per coordinate.

    Pure function.

    Args:
        latitude: Latitude in decimal degrees
        longitude: Longitude in decimal degrees

    Returns:
        URL like "https://maps.google.com/?q=35.41025,139.93000"
    """
    return MAP_URL_TEMPLATE.format(latitude=latitude, longitude=longitude)


def format_ttl(seconds: int) -> str:
    """Format a countdown as "<minutes>m <seconds>s".

    Pure function. Minutes are always present, even when zero.

    Args:
        seconds: Total remaining seconds

    Returns:
        Duration string like "24m 22s" or "0m 5s"
    """
    minutes, remainder = divmod(max(int(seconds), 0), 60)
    return f"{minutes}m {remainder}s"


def match_coordinates(text: str) -> tuple[float, float] | None:
    """Find the first plausible latitude/longitude pair in the text.

    Pure function. Pairs outside the valid coordinate range are skipped.
    """
    for match in COORDINATES_PATTERN.finditer(text):
        latitude = float(match.group(1))
        longitude = float(match.group(2))
        if -90 <= latitude <= 90 and -180 <= longitude <= 180:
            return (latitude, longitude)
    return None


def match_iv(text: str) -> str | None:
    """Find the IV percentage, keeping the number as written."""
    match = IV_PATTERN.search(text)
    if match is None:
        return None
    return f"{match.group(1)}%"


def match_letter(text: str) -> str | None:
    """Find the variant letter."""
    for pattern in LETTER_PATTERNS:
        match = pattern.search(text)
        if match is not None:
            return match.group(1)
    return None


def match_ttl_seconds(text: str) -> int | None:
    """Find the remaining time and return it in total seconds.

    Pure function.

    Recognises "24m 22s" (also "24 min 22 sec"), "24:22 left"
    (or "remaining") and a bare seconds count like "1462s".
    """
    match = MINUTES_SECONDS_PATTERN.search(text)
    if match is not None:
        return int(match.group(1)) * 60 + int(match.group(2))

    match = CLOCK_COUNTDOWN_PATTERN.search(text)
    if match is not None:
        return int(match.group(1)) * 60 + int(match.group(2))

    match = SECONDS_PATTERN.search(text)
    if match is not None:
        return int(match.group(1))

    return None


def parse_spawn(text: str) -> SpawnRecord:
    """Parse a post body into a SpawnRecord.

    Pure function: each optional attribute falls back to UNKNOWN on its own.

    Args:
        text: Post body

    Returns:
        SpawnRecord with whatever attributes the text mentions

    Raises:
        ParseError: If the text has no coordinate pair
    """
    coordinates = match_coordinates(text)
    if coordinates is None:
        raise ParseError(text)

    iv = match_iv(text)
    letter = match_letter(text)
    ttl_seconds = match_ttl_seconds(text)

    return SpawnRecord(
        latitude=coordinates[0],
        longitude=coordinates[1],
        iv=iv if iv is not None else UNKNOWN,
        letter=letter if letter is not None else UNKNOWN,
        ttl=format_ttl(ttl_seconds) if ttl_seconds is not None else UNKNOWN,
    )
