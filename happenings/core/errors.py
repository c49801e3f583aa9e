"""Domain errors - Pure data structures.

Errors that describe why a post, the stream or the configuration
could not be used. None of them are fatal to the engine.
"""


class HappeningsError(Exception):
    """Base class for happenings failures."""


class ParseError(HappeningsError):
    """A trusted post did not look like a spawn announcement.

    Attributes:
        text: The original post body
    """

    def __init__(self, text: str) -> None:
        super().__init__(f"Could not parse tweet with text '{text}'")
        self.text = text


class StreamError(HappeningsError):
    """The post stream answered with a non-200 status or a disconnect notice.

    Attributes:
        status_code: HTTP status code (0 when not HTTP related)
        body: Response body or notice text
    """

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Stream failed with status {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class ConfigError(HappeningsError):
    """Raised for malformed configuration entries."""
