"""Event derivation - Pure functions.

This module decides which semantic events a single post produces:
nothing for untrusted authors, one error for unparseable bodies, or
one spawn event followed by a range event per matching location.
All functions are pure with no side effects.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable

from happenings.core.errors import ParseError
from happenings.core.geo import NamedLocation, find_locations_in_range
from happenings.core.post import Post
from happenings.core.spawn import SpawnRecord, parse_spawn


class EventKind(str, Enum):
    """Semantic events published to consumers."""
    CONNECTED = "connected"
    ERROR = "error"
    SPAWN = "spawn"
    SPAWN_WITHIN_RANGE = "spawn-within-range"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Event:
    """An event ready to be emitted.

    Attributes:
        kind: Which event to emit
        args: Positional arguments passed to listeners
    """
    kind: EventKind
    args: tuple[Any, ...] = ()


def annotate_range(
    record: SpawnRecord,
    location: NamedLocation,
    distance: float,
) -> dict[str, Any]:
    """Build a spawn-within-range payload.

    Pure function.

    Args:
        record: Extracted spawn
        location: Matching location
        distance: Distance from the spawn to the location in km

    Returns:
        Base payload plus distance and closeTo
    """
    payload: dict[str, Any] = record.to_payload()
    payload["distance"] = distance
    payload["closeTo"] = location.label
    return payload


def derive_events(
    post: Post,
    trusted_author_id: str,
    locations: Iterable[NamedLocation] = (),
) -> list[Event]:
    """Derive the events a post produces.

    Pure function.

    Args:
        post: Inbound post
        trusted_author_id: Only posts by this author are considered
        locations: Named locations for range events, in emission order

    Returns:
        Events in emission order (empty for untrusted authors)
    """
    if post.author_id != trusted_author_id:
        return []

    try:
        record = parse_spawn(post.text)
    except ParseError as e:
        return [Event(EventKind.ERROR, (e,))]

    events = [Event(EventKind.SPAWN, (record.to_payload(),))]

    for location, distance in find_locations_in_range(
        *record.coordinates, locations
    ):
        events.append(Event(
            EventKind.SPAWN_WITHIN_RANGE,
            (annotate_range(record, location, distance),),
        ))

    return events
