"""Command-line entry point.

A thin wrapper that loads configuration, connects the Twitter stream
to the engine and logs every event it emits.
"""

import argparse
import logging
import os
from typing import Any

from happenings.core.config import HappeningsConfig, validate_config
from happenings.core.events import EventKind
from happenings.engine import Happenings, create_happenings
from happenings.shell.config_loader import load_config, load_config_from_env
from happenings.shell.twitter_stream import TwitterStream


logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _configure_logging(level: str) -> None:
    """Configure root logging from a level name."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )


def _get_config(config_path: str | None) -> HappeningsConfig:
    """Load configuration from file or environment."""
    if config_path:
        return load_config(config_path)
    elif os.environ.get("CONFIG_PATH"):
        return load_config()
    elif os.environ.get("TRUSTED_AUTHOR_ID"):
        # Simple env-based config
        return load_config_from_env()
    else:
        # Try default config path
        return load_config()


def attach_event_logging(happenings: Happenings) -> None:
    """Log every semantic event the engine emits."""
    def on_connected() -> None:
        logger.info("Connected, waiting for spawns")

    def on_error(error: Any) -> None:
        logger.error("Error: %s", error)

    def on_spawn(spawn: dict[str, Any]) -> None:
        logger.info(
            "Unown %s (IV %s, %s left) %s",
            spawn["letter"], spawn["iv"], spawn["ttl"], spawn["url"],
        )

    def on_spawn_within_range(spawn: dict[str, Any]) -> None:
        logger.info(
            "Unown %s is %.2f km from %s! %s",
            spawn["letter"], spawn["distance"], spawn["closeTo"], spawn["url"],
        )

    happenings.on(EventKind.CONNECTED, on_connected)
    happenings.on(EventKind.ERROR, on_error)
    happenings.on(EventKind.SPAWN, on_spawn)
    happenings.on(EventKind.SPAWN_WITHIN_RANGE, on_spawn_within_range)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Follow a spawn announcement account and report spawns near you.",
    )
    parser.add_argument(
        "--config",
        help="Path to YAML config (default: $CONFIG_PATH or config/config.yaml)",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("LOG_LEVEL", "INFO"),
        help="Logging level (default: $LOG_LEVEL or INFO)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the stream until it ends.

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)
    _configure_logging(args.log_level)

    config = _get_config(args.config)

    result = validate_config(config)
    for warning in result.warnings:
        logger.warning("%s: %s", warning.field, warning.message)
    for error in result.critical_errors:
        logger.error("%s: %s", error.field, error.message)

    if not result.valid:
        return 1

    if config.credentials is None:
        logger.error("Cannot connect to the stream without credentials")
        return 1

    stream = TwitterStream(
        config.credentials,
        follow=[config.trusted_author_id],
        url=config.stream_url,
    )
    happenings = create_happenings(stream, config.trusted_author_id, config.locations)
    attach_event_logging(happenings)

    try:
        stream.run()
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
