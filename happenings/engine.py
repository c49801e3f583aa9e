"""Happenings Engine - Wires the post source to the functional core.

This module subscribes to a post source's three signals, runs each
post through the pure event derivation in core, and publishes the
resulting semantic events to registered consumers.
"""

import logging
from typing import Any, Callable, Iterable, Mapping, Protocol

from happenings.core.events import Event, EventKind, derive_events
from happenings.core.geo import NamedLocation, coerce_location
from happenings.core.post import Post, coerce_post
from happenings.emitter import EventEmitter


logger = logging.getLogger(__name__)


# Signals a post source emits
SOURCE_CONNECTED = "connected"
SOURCE_ERROR = "error"
SOURCE_POST = "tweet"


class PostSource(Protocol):
    """Anything that can signal connected, error and new posts."""

    def on(self, event: str, handler: Callable[..., Any]) -> Any:
        ...


class Happenings(EventEmitter):
    """Turns a stream of posts into spawn events.

    Events:
        connected: no arguments
        error: the transport error, or a ParseError
        spawn: {iv, letter, ttl, url}
        spawn-within-range: {iv, letter, ttl, url, distance, closeTo}
    """

    def __init__(
        self,
        source: PostSource,
        trusted_author_id: str,
        locations: Iterable[NamedLocation | Mapping[str, Any]] = (),
    ) -> None:
        """Initialize the engine and subscribe to the source.

        Args:
            source: Post source with an on(signal, handler) method
            trusted_author_id: Only posts from this author are considered
            locations: Named locations for range events, in emission order.
                Plain {label, latitude, longitude, radius} mappings are
                converted to NamedLocation.

        Raises:
            KeyError: If a location mapping is missing a key
            ValueError: If a location value is not numeric
        """
        super().__init__()
        self.trusted_author_id = trusted_author_id
        self.locations = tuple(coerce_location(loc) for loc in locations)

        source.on(SOURCE_CONNECTED, self._on_connected)
        source.on(SOURCE_ERROR, self._on_error)
        source.on(SOURCE_POST, self.process_post)

    def _on_connected(self, *_args: Any) -> None:
        logger.info("Post source connected")
        self.emit(EventKind.CONNECTED)

    def _on_error(self, error: Any) -> None:
        logger.error("Post source error: %s", error)
        self._emit_error(error)

    def _emit_error(self, error: Any) -> None:
        """Emit an error event. Without listeners the error is only logged."""
        if not self.emit(EventKind.ERROR, error):
            logger.debug("No error listeners registered")

    def process_post(self, raw: Post | Mapping[str, Any]) -> list[Event]:
        """Run one post through the pipeline and emit its events.

        Args:
            raw: A Post or a raw tweet mapping

        Returns:
            The events that were emitted, in order
        """
        post = coerce_post(raw)
        events = derive_events(post, self.trusted_author_id, self.locations)

        if not events:
            logger.debug("Ignoring post from untrusted author %s", post.author_id)
            return events

        for event in events:
            if event.kind is EventKind.ERROR:
                logger.warning("Parse failure: %s", event.args[0])
                self._emit_error(*event.args)
                continue

            payload = event.args[0]
            if event.kind is EventKind.SPAWN:
                logger.info(
                    "Spawn: letter=%s iv=%s ttl=%s %s",
                    payload["letter"],
                    payload["iv"],
                    payload["ttl"],
                    payload["url"],
                )
            else:
                logger.info(
                    "Spawn %.3f km from %s",
                    payload["distance"],
                    payload["closeTo"],
                )
            self.emit(event.kind, *event.args)

        return events


def create_happenings(
    source: PostSource,
    trusted_author_id: str,
    locations: Iterable[NamedLocation | Mapping[str, Any]] = (),
) -> Happenings:
    """Create an engine bound to a post source."""
    return Happenings(source, trusted_author_id, locations)
