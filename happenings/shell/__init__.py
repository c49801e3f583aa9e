"""Imperative Shell - I/O and side effects.

This module contains all code that interacts with external systems:
- Twitter stream client (HTTP)
- Configuration loading (environment/files)

Keep this layer thin and simple. All business logic should be in core.
"""

from happenings.shell.twitter_stream import TwitterStream
from happenings.shell.config_loader import load_config, load_config_from_env

__all__ = [
    "TwitterStream",
    "load_config",
    "load_config_from_env",
]
