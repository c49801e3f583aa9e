"""Unit tests for configuration validation.

Pure function tests - no mocks needed, fast execution.
"""

from happenings.core.config import (
    HappeningsConfig,
    StreamCredentials,
    validate_config,
    validate_coordinates,
)
from happenings.core.geo import NamedLocation


CREDS = StreamCredentials(
    api_key="key",
    api_secret="secret",
    access_token="token",
    access_token_secret="token_secret",
)


def make_config(**overrides):
    values = {
        "trusted_author_id": "837234225715818497",
        "locations": [NamedLocation(label="Home", latitude=35.4, longitude=139.9, radius=10)],
        "credentials": CREDS,
    }
    values.update(overrides)
    return HappeningsConfig(**values)


class TestValidateCoordinates:
    """Tests for validate_coordinates()."""

    def test_valid(self):
        assert validate_coordinates(35.4, 139.9, "x") == []

    def test_latitude_out_of_range(self):
        errors = validate_coordinates(91, 0, "x")
        assert len(errors) == 1
        assert "Latitude" in errors[0].message

    def test_longitude_out_of_range(self):
        errors = validate_coordinates(0, -181, "x")
        assert len(errors) == 1
        assert "Longitude" in errors[0].message


class TestValidateConfig:
    """Tests for validate_config()."""

    def test_valid_config(self):
        result = validate_config(make_config())

        assert result.valid is True
        assert result.errors == []

    def test_missing_author_is_error(self):
        result = validate_config(make_config(trusted_author_id=""))

        assert result.valid is False
        assert result.critical_errors[0].field == "trusted_author_id"

    def test_negative_radius_is_error(self):
        location = NamedLocation(label="Home", latitude=35.4, longitude=139.9, radius=-1)
        result = validate_config(make_config(locations=[location]))

        assert result.valid is False
        assert result.critical_errors[0].field == "locations[0].radius"

    def test_zero_radius_is_allowed(self):
        location = NamedLocation(label="Home", latitude=35.4, longitude=139.9, radius=0)
        assert validate_config(make_config(locations=[location])).valid is True

    def test_bad_coordinates_is_error(self):
        location = NamedLocation(label="Home", latitude=135.4, longitude=139.9, radius=1)
        result = validate_config(make_config(locations=[location]))

        assert result.valid is False
        assert result.critical_errors[0].field == "locations[0]"

    def test_duplicate_labels_warn(self):
        locations = [
            NamedLocation(label="Home", latitude=35.4, longitude=139.9, radius=1),
            NamedLocation(label="Home", latitude=35.5, longitude=139.8, radius=1),
        ]
        result = validate_config(make_config(locations=locations))

        assert result.valid is True
        assert len(result.warnings) == 1
        assert "Home" in result.warnings[0].message

    def test_missing_credentials_warn(self):
        result = validate_config(make_config(credentials=None))

        assert result.valid is True
        assert result.warnings[0].field == "credentials"

    def test_no_locations_is_fine(self):
        assert validate_config(make_config(locations=[])).valid is True
