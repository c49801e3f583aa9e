"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

from collections import Counter
from dataclasses import dataclass, field

from happenings.core.geo import NamedLocation


# Twitter v1.1 filtered stream endpoint
DEFAULT_STREAM_URL = "https://stream.twitter.com/1.1/statuses/filter.json"


@dataclass(frozen=True)
class StreamCredentials:
    """Twitter API credentials for OAuth 1.0a authentication.

    Attributes:
        api_key: Twitter API Key (Consumer Key)
        api_secret: Twitter API Secret (Consumer Secret)
        access_token: User's Access Token
        access_token_secret: User's Access Token Secret
    """
    api_key: str
    api_secret: str
    access_token: str
    access_token_secret: str


@dataclass
class HappeningsConfig:
    """Application configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        trusted_author_id: Only posts from this author are processed
        locations: Named locations for range events, in emission order
        stream_url: Streaming endpoint to follow the author on
        credentials: Stream credentials (None when not configured)
    """
    trusted_author_id: str = ""
    locations: list[NamedLocation] = field(default_factory=list)
    stream_url: str = DEFAULT_STREAM_URL
    credentials: StreamCredentials | None = None


@dataclass
class ValidationError:
    """A configuration validation error.

    Attributes:
        field: The field that has an error
        message: Human-readable error description
        severity: 'error' or 'warning'
    """
    field: str
    message: str
    severity: str = "error"


@dataclass
class ValidationResult:
    """Result of validating configuration.

    Attributes:
        valid: True if no errors (warnings are OK)
        errors: List of validation errors/warnings
    """
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def warnings(self) -> list[ValidationError]:
        """Get only warnings."""
        return [e for e in self.errors if e.severity == "warning"]

    @property
    def critical_errors(self) -> list[ValidationError]:
        """Get only critical errors."""
        return [e for e in self.errors if e.severity == "error"]


def validate_coordinates(lat: float, lon: float, field_name: str) -> list[ValidationError]:
    """Validate latitude/longitude coordinates.

    Pure function.

    Args:
        lat: Latitude value
        lon: Longitude value
        field_name: Name of the field for error messages

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not -90 <= lat <= 90:
        errors.append(ValidationError(
            field=field_name,
            message=f"Latitude {lat} out of range [-90, 90]",
        ))

    if not -180 <= lon <= 180:
        errors.append(ValidationError(
            field=field_name,
            message=f"Longitude {lon} out of range [-180, 180]",
        ))

    return errors


def validate_config(config: HappeningsConfig) -> ValidationResult:
    """Validate configuration for errors and warnings.

    Pure function.

    Args:
        config: Configuration to validate

    Returns:
        ValidationResult with any errors/warnings found
    """
    errors: list[ValidationError] = []

    if not config.trusted_author_id:
        errors.append(ValidationError(
            field="trusted_author_id",
            message="Trusted author id is not set",
        ))

    for i, location in enumerate(config.locations):
        errors.extend(validate_coordinates(
            location.latitude, location.longitude,
            f"locations[{i}]",
        ))
        if location.radius < 0:
            errors.append(ValidationError(
                field=f"locations[{i}].radius",
                message=f"Radius must not be negative, got {location.radius}",
            ))

    label_counts = Counter(location.label for location in config.locations)
    for label in sorted(label for label, count in label_counts.items() if count > 1):
        errors.append(ValidationError(
            field="locations",
            message=f"Location label '{label}' is used more than once",
            severity="warning",
        ))

    if config.credentials is None:
        errors.append(ValidationError(
            field="credentials",
            message="No stream credentials configured",
            severity="warning",
        ))

    has_critical = any(e.severity == "error" for e in errors)

    return ValidationResult(
        valid=not has_critical,
        errors=errors,
    )
