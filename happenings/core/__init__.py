"""Functional Core - Pure functions with no side effects.

This module contains all business logic as pure functions:
- Post parsing into spawn records
- Geo/distance calculations
- Event derivation per post
- Configuration validation

All functions here are deterministic and have no I/O.
"""

from happenings.core.errors import ConfigError, HappeningsError, ParseError, StreamError
from happenings.core.spawn import UNKNOWN, Missing, SpawnRecord, parse_spawn
from happenings.core.geo import (
    NamedLocation,
    calculate_distance,
    coerce_location,
    find_locations_in_range,
)
from happenings.core.post import Post
from happenings.core.events import Event, EventKind, derive_events
from happenings.core.config import HappeningsConfig, StreamCredentials, validate_config

__all__ = [
    # Errors
    "HappeningsError",
    "ParseError",
    "StreamError",
    "ConfigError",
    # Spawn
    "UNKNOWN",
    "Missing",
    "SpawnRecord",
    "parse_spawn",
    # Geo
    "NamedLocation",
    "calculate_distance",
    "coerce_location",
    "find_locations_in_range",
    # Post
    "Post",
    # Events
    "Event",
    "EventKind",
    "derive_events",
    # Config
    "HappeningsConfig",
    "StreamCredentials",
    "validate_config",
]
