"""Configuration Loader - Imperative Shell.

This module handles loading configuration from YAML files and
environment variables. All I/O is contained here.

Models (HappeningsConfig, StreamCredentials) are defined in
happenings/core/config.py to avoid information leakage between layers.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from happenings.core.config import DEFAULT_STREAM_URL, HappeningsConfig, StreamCredentials
from happenings.core.errors import ConfigError
from happenings.core.geo import NamedLocation


logger = logging.getLogger(__name__)


CREDENTIAL_KEYS = ("api_key", "api_secret", "access_token", "access_token_secret")

CREDENTIAL_ENV_VARS = {
    "api_key": "TWITTER_API_KEY",
    "api_secret": "TWITTER_API_SECRET",
    "access_token": "TWITTER_ACCESS_TOKEN",
    "access_token_secret": "TWITTER_ACCESS_TOKEN_SECRET",
}


def _resolve_value(value: Any) -> Any:
    """Resolve a ${VAR} placeholder from the environment.

    Non-string values and plain strings are returned unchanged. An unset
    variable leaves the placeholder in place.
    """
    if not isinstance(value, str):
        return value

    if value.startswith("${") and value.endswith("}"):
        var_name = value[2:-1]
        env_value = os.environ.get(var_name)
        if env_value:
            return env_value
        logger.warning("Environment variable %s not set", var_name)

    return value


def _parse_location(data: dict[str, Any]) -> NamedLocation:
    """Parse a named location from config data."""
    try:
        return NamedLocation.from_mapping(data)
    except KeyError as e:
        raise ConfigError(f"Location is missing key: {e}") from e
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Location has an invalid value: {e}") from e


def _parse_credentials(data: dict[str, Any] | None) -> StreamCredentials | None:
    """Parse stream credentials, resolving ${VAR} placeholders."""
    if not data:
        return None

    resolved = {key: _resolve_value(data.get(key)) for key in CREDENTIAL_KEYS}
    missing = [key for key, value in resolved.items() if not value]
    if missing:
        raise ConfigError(f"Credentials are missing: {', '.join(missing)}")

    return StreamCredentials(**{key: str(value) for key, value in resolved.items()})


def load_config_from_dict(data: dict[str, Any]) -> HappeningsConfig:
    """Load configuration from a dictionary.

    This is a pure-ish function (only env var expansion has side effects).

    Args:
        data: Configuration dictionary

    Returns:
        Parsed HappeningsConfig object

    Raises:
        ConfigError: If a location or the credentials are malformed
    """
    trusted_author_id = _resolve_value(data.get("trusted_author_id", ""))

    locations = [
        _parse_location(loc)
        for loc in data.get("locations") or []
    ]

    return HappeningsConfig(
        # Unquoted YAML ids load as int
        trusted_author_id=str(trusted_author_id) if trusted_author_id is not None else "",
        locations=locations,
        stream_url=data.get("stream_url", DEFAULT_STREAM_URL),
        credentials=_parse_credentials(data.get("credentials")),
    )


def load_config(config_path: str | Path | None = None) -> HappeningsConfig:
    """Load configuration from a YAML file.

    This method performs file I/O.

    Args:
        config_path: Path to YAML config file.
                    If None, uses CONFIG_PATH env var or default.

    Returns:
        Parsed HappeningsConfig object

    Raises:
        yaml.YAMLError: If config file is invalid YAML
        ConfigError: If an entry is malformed
    """
    if config_path is None:
        config_path = os.environ.get("CONFIG_PATH", "config/config.yaml")

    path = Path(config_path)

    logger.info("Loading configuration from %s", path)

    if not path.exists():
        logger.warning("Config file not found: %s, using defaults", path)
        return HappeningsConfig()

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning("Config file is empty, using defaults")
        return HappeningsConfig()

    config = load_config_from_dict(data)

    logger.info(
        "Loaded config: trusted author %s, %d locations",
        config.trusted_author_id or "(unset)",
        len(config.locations),
    )

    return config


def load_config_from_env() -> HappeningsConfig:
    """Load minimal configuration from environment variables.

    Useful for simple deployments without a YAML file. Locations can
    only be configured through a YAML file.

    Environment variables:
        TRUSTED_AUTHOR_ID: Author id to follow
        TWITTER_API_KEY, TWITTER_API_SECRET,
        TWITTER_ACCESS_TOKEN, TWITTER_ACCESS_TOKEN_SECRET: Stream credentials
        STREAM_URL: Override the streaming endpoint

    Returns:
        HappeningsConfig object from environment
    """
    credentials = None
    values = {key: os.environ.get(var) for key, var in CREDENTIAL_ENV_VARS.items()}
    if all(values.values()):
        credentials = StreamCredentials(**values)
    else:
        logger.warning("Twitter credentials not fully set in environment")

    return HappeningsConfig(
        trusted_author_id=os.environ.get("TRUSTED_AUTHOR_ID", ""),
        stream_url=os.environ.get("STREAM_URL", DEFAULT_STREAM_URL),
        credentials=credentials,
    )
