"""Twitter Stream Client - Imperative Shell.

This module reads the Twitter v1.1 filtered stream and re-emits what it
receives as the three signals the engine listens to: connected, error
and tweet. All I/O is contained here; it makes one connection per run()
and leaves reconnecting to the caller.
"""

import json
import logging

import requests
from requests_oauthlib import OAuth1

from happenings.core.config import DEFAULT_STREAM_URL, StreamCredentials
from happenings.core.errors import StreamError
from happenings.emitter import EventEmitter
from happenings.engine import SOURCE_CONNECTED, SOURCE_ERROR, SOURCE_POST


logger = logging.getLogger(__name__)


# Connect timeout and read timeout (seconds). Twitter sends a
# keep-alive newline every 30 seconds.
DEFAULT_TIMEOUT = (10, 90)


class TwitterStream(EventEmitter):
    """Post source backed by a streaming HTTP endpoint.

    This is part of the imperative shell - it handles HTTP I/O.
    Uses OAuth 1.0a User Context.
    """

    def __init__(
        self,
        credentials: StreamCredentials,
        follow: list[str],
        url: str = DEFAULT_STREAM_URL,
        timeout: tuple[int, int] = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the stream.

        Args:
            credentials: Twitter API credentials
            follow: Author ids whose posts should be delivered
            url: Streaming endpoint
            timeout: (connect, read) timeout in seconds
        """
        super().__init__()
        self.credentials = credentials
        self.follow = list(follow)
        self.url = url
        self.timeout = timeout

    def _get_oauth(self) -> OAuth1:
        """Create OAuth1 authentication object."""
        return OAuth1(
            self.credentials.api_key,
            client_secret=self.credentials.api_secret,
            resource_owner_key=self.credentials.access_token,
            resource_owner_secret=self.credentials.access_token_secret,
        )

    def run(self) -> None:
        """Connect and dispatch messages until the stream ends.

        This method performs HTTP I/O and blocks. Transport failures are
        emitted as error signals rather than raised.
        """
        logger.info("Connecting to stream %s (following %s)", self.url, ",".join(self.follow))

        try:
            response = requests.post(
                self.url,
                data={"follow": ",".join(self.follow)},
                auth=self._get_oauth(),
                stream=True,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error("Stream connection failed: %s", str(e))
            self.emit(SOURCE_ERROR, e)
            return

        try:
            if response.status_code != 200:
                logger.error(
                    "Stream returned non-200: %d - %s",
                    response.status_code,
                    response.text,
                )
                self.emit(SOURCE_ERROR, StreamError(response.status_code, response.text))
                return

            logger.info("Stream connected")
            self.emit(SOURCE_CONNECTED, response)

            for line in response.iter_lines():
                # Blank lines are keep-alives
                if line:
                    self._dispatch(line)

            logger.info("Stream ended")
        except requests.RequestException as e:
            logger.error("Stream read failed: %s", str(e))
            self.emit(SOURCE_ERROR, e)
        finally:
            response.close()

    def _dispatch(self, line: bytes) -> None:
        """Route one stream message to the matching signal."""
        try:
            message = json.loads(line)
        except ValueError:
            logger.warning("Skipping malformed stream line: %r", line[:200])
            return

        if not isinstance(message, dict):
            return

        if "text" in message and "user" in message:
            self.emit(SOURCE_POST, message)
        elif "disconnect" in message:
            notice = message["disconnect"]
            logger.warning("Stream disconnect notice: %s", notice)
            if not isinstance(notice, dict):
                notice = {"reason": str(notice)}
            try:
                code = int(notice.get("code", 0))
            except (TypeError, ValueError):
                code = 0
            self.emit(SOURCE_ERROR, StreamError(code, str(notice.get("reason", ""))))
        else:
            # delete, limit, warning and other control messages
            logger.debug("Ignoring stream control message: %s", list(message))
