#!/usr/bin/env python3
"""Replay captured tweets through the engine.

Reads a JSON array of raw tweets and feeds each one to the engine as if
it had arrived on the stream, printing every emitted event. Nothing is
sent anywhere; use it to check extraction against real announcements.

Usage:
    # Use trusted author and locations from config
    python scripts/replay_tweets.py tests/fixtures/tweets.json --config config/config.yaml

    # Override the trusted author
    python scripts/replay_tweets.py tweets.json --trusted-author 837234225715818497

Environment:
    CONFIG_PATH: Path to config file (default: config/config.yaml)
"""

import argparse
import json
import logging
import os
import sys
from typing import Any

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from happenings.core.events import EventKind
from happenings.emitter import EventEmitter
from happenings.engine import SOURCE_POST, create_happenings
from happenings.shell.config_loader import load_config

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)


def print_event(kind: EventKind, *args: Any) -> None:
    """Print one event as a JSON line."""
    payload = args[0] if args else None
    if isinstance(payload, Exception):
        payload = str(payload)
    print(json.dumps({"event": kind.value, "payload": payload}))


def main() -> int:
    parser = argparse.ArgumentParser(description="Replay captured tweets through the engine")
    parser.add_argument("tweets_file", help="JSON file with an array of raw tweets")
    parser.add_argument("--config", help="Path to YAML config")
    parser.add_argument("--trusted-author", help="Override the trusted author id")
    args = parser.parse_args()

    config = load_config(args.config)
    trusted_author_id = args.trusted_author or config.trusted_author_id
    if not trusted_author_id:
        logger.error("No trusted author id (set it in config or pass --trusted-author)")
        return 1

    with open(args.tweets_file, "r") as f:
        tweets = json.load(f)

    source = EventEmitter()
    happenings = create_happenings(source, trusted_author_id, config.locations)
    for kind in EventKind:
        happenings.on(kind, lambda *a, kind=kind: print_event(kind, *a))

    logger.info("Replaying %d tweets (trusted author %s)", len(tweets), trusted_author_id)

    for tweet in tweets:
        source.emit(SOURCE_POST, tweet)

    return 0


if __name__ == "__main__":
    sys.exit(main())
