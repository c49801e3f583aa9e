"""Observer registry.

A mapping from event name to an ordered list of handlers. Handlers run
synchronously in registration order, and a handler that raises
propagates to whoever called emit().
"""

import logging
from typing import Any, Callable


logger = logging.getLogger(__name__)


Handler = Callable[..., Any]


class EventEmitter:
    """Synchronous publish/subscribe registry.

    Used both by the engine (semantic events) and by post sources
    (connected / error / tweet signals).
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[Handler]] = {}

    def on(self, event: str, handler: Handler) -> "EventEmitter":
        """Register a handler for an event.

        Args:
            event: Event name
            handler: Called with the emitted arguments

        Returns:
            self, so registrations can be chained
        """
        self._handlers.setdefault(event, []).append(handler)
        return self

    def once(self, event: str, handler: Handler) -> "EventEmitter":
        """Register a handler that is removed after its first call."""
        def wrapper(*args: Any) -> Any:
            self.off(event, wrapper)
            return handler(*args)

        wrapper.listener = handler  # type: ignore[attr-defined]
        return self.on(event, wrapper)

    def off(self, event: str, handler: Handler) -> "EventEmitter":
        """Remove the most recently registered matching handler.

        Handlers registered with once() can be removed by passing the
        original function.
        """
        handlers = self._handlers.get(event, [])
        for i in range(len(handlers) - 1, -1, -1):
            registered = handlers[i]
            if registered is handler or getattr(registered, "listener", None) is handler:
                del handlers[i]
                break

        if not handlers:
            self._handlers.pop(event, None)

        return self

    def listeners(self, event: str) -> list[Handler]:
        """Return a copy of the handlers registered for an event."""
        return list(self._handlers.get(event, []))

    def listener_count(self, event: str) -> int:
        """Number of handlers registered for an event."""
        return len(self._handlers.get(event, []))

    def emit(self, event: str, *args: Any) -> bool:
        """Call every handler registered for an event.

        Handlers added or removed while emitting take effect on the
        next emit.

        Args:
            event: Event name
            *args: Passed to each handler unchanged

        Returns:
            True if at least one handler was called
        """
        handlers = self.listeners(event)
        if not handlers:
            logger.debug("No handlers for %s", event)
            return False

        for handler in handlers:
            handler(*args)

        return True
