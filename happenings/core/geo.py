"""Geographic calculations - Pure functions.

This module provides distance and proximity calculations for spawn locations.
All functions are pure with no side effects.
"""

import math
from dataclasses import dataclass
from typing import Any, Iterable, Mapping


# Earth's mean radius in kilometers
EARTH_RADIUS_KM = 6371.0


@dataclass(frozen=True)
class NamedLocation:
    """A named location for proximity events.

    Attributes:
        label: Human-readable name (e.g., "Home", "Office")
        latitude: Location latitude
        longitude: Location longitude
        radius: Emit a range event when a spawn is within this many km
    """
    label: str
    latitude: float
    longitude: float
    radius: float

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "NamedLocation":
        """Build a location from a {label, latitude, longitude, radius} mapping.

        Raises:
            KeyError: If a key is missing
            ValueError: If a coordinate or the radius is not numeric
        """
        return cls(
            label=str(data["label"]),
            latitude=float(data["latitude"]),
            longitude=float(data["longitude"]),
            radius=float(data["radius"]),
        )


def coerce_location(raw: NamedLocation | Mapping[str, Any]) -> NamedLocation:
    """Accept either a NamedLocation or a plain location mapping."""
    if isinstance(raw, NamedLocation):
        return raw
    return NamedLocation.from_mapping(raw)


def calculate_distance(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
) -> float:
    """Calculate distance between two points using Haversine formula.

    Pure function.

    Args:
        lat1: Latitude of first point
        lon1: Longitude of first point
        lat2: Latitude of second point
        lon2: Longitude of second point

    Returns:
        Distance in kilometers
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(delta_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def get_distance_to_location(
    latitude: float,
    longitude: float,
    location: NamedLocation,
) -> float:
    """Calculate distance from a point to a named location.

    Pure function.

    Returns:
        Distance in kilometers
    """
    return calculate_distance(
        latitude,
        longitude,
        location.latitude,
        location.longitude,
    )


def find_locations_in_range(
    latitude: float,
    longitude: float,
    locations: Iterable[NamedLocation],
) -> list[tuple[NamedLocation, float]]:
    """Find every location whose radius contains the point.

    Pure function. The boundary counts as inside, and results keep the
    order the locations were given in. Overlapping locations all match.

    Args:
        latitude: Point latitude
        longitude: Point longitude
        locations: Configured named locations

    Returns:
        List of (location, distance_km) tuples
    """
    matches = []

    for location in locations:
        distance = get_distance_to_location(latitude, longitude, location)
        if distance <= location.radius:
            matches.append((location, distance))

    return matches
