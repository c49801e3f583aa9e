"""Unit tests for geographic calculations.

Pure function tests - no mocks needed, fast execution.
"""

import pytest

from happenings.core.geo import (
    NamedLocation,
    calculate_distance,
    coerce_location,
    find_locations_in_range,
    get_distance_to_location,
)


@pytest.fixture
def home():
    """Location near the Katori spawn fixture."""
    return NamedLocation(label="Home", latitude=35.4, longitude=139.9, radius=10)


class TestCalculateDistance:
    """Tests for calculate_distance() Haversine implementation."""

    def test_same_point_returns_zero(self):
        """Distance from point to itself should be zero."""
        distance = calculate_distance(37.7749, -122.4194, 37.7749, -122.4194)
        assert distance == pytest.approx(0.0, abs=0.001)

    def test_known_distance_sf_to_la(self):
        """SF to LA should be approximately 559 km."""
        distance = calculate_distance(37.7749, -122.4194, 34.0522, -118.2437)
        assert distance == pytest.approx(559, rel=0.02)

    def test_known_distance_nyc_to_london(self):
        """NYC to London should be approximately 5570 km."""
        distance = calculate_distance(40.7128, -74.0060, 51.5074, -0.1278)
        assert distance == pytest.approx(5570, rel=0.02)

    def test_symmetric(self):
        """Distance should be the same in both directions."""
        d1 = calculate_distance(37.7749, -122.4194, 34.0522, -118.2437)
        d2 = calculate_distance(34.0522, -118.2437, 37.7749, -122.4194)

        assert d1 == pytest.approx(d2, rel=0.001)

    def test_short_distances(self):
        """Short hops match a spherical earth of radius 6371 km."""
        assert calculate_distance(35.41025, 139.93, 35.4, 139.9) == pytest.approx(2.9482, rel=1e-3)
        assert calculate_distance(-37.7835, 144.95107, -37.7, 144.9) == pytest.approx(10.3137, rel=1e-3)
        assert calculate_distance(42.38131, -88.06614, 42.3, -88.0) == pytest.approx(10.5496, rel=1e-3)


class TestGetDistanceToLocation:
    """Tests for get_distance_to_location()."""

    def test_matches_calculate_distance(self, home):
        expected = calculate_distance(35.41025, 139.93, 35.4, 139.9)
        assert get_distance_to_location(35.41025, 139.93, home) == pytest.approx(expected)


class TestFindLocationsInRange:
    """Tests for find_locations_in_range()."""

    def test_location_in_range(self, home):
        matches = find_locations_in_range(35.41025, 139.93, [home])

        assert len(matches) == 1
        location, distance = matches[0]
        assert location is home
        assert distance == pytest.approx(2.9482, rel=1e-3)

    def test_location_out_of_range(self):
        far = NamedLocation(label="Upper West Side", latitude=40.80, longitude=-73.96, radius=0.9)
        assert find_locations_in_range(-37.7835, 144.95107, [far]) == []

    def test_empty_locations(self):
        assert find_locations_in_range(35.41025, 139.93, []) == []

    def test_boundary_counts_as_inside(self):
        """A radius exactly equal to the distance matches."""
        distance = calculate_distance(35.41025, 139.93, 35.4, 139.9)
        edge = NamedLocation(label="Edge", latitude=35.4, longitude=139.9, radius=distance)

        assert len(find_locations_in_range(35.41025, 139.93, [edge])) == 1

    def test_zero_radius_matches_same_point(self):
        spot = NamedLocation(label="Spot", latitude=35.41025, longitude=139.93, radius=0)
        assert len(find_locations_in_range(35.41025, 139.93, [spot])) == 1

    def test_all_overlapping_matches_in_order(self, home):
        """Every containing location matches, in configured order."""
        wide = NamedLocation(label="Prefecture", latitude=35.6, longitude=140.1, radius=100)
        far = NamedLocation(label="Osaka", latitude=34.69, longitude=135.50, radius=5)

        matches = find_locations_in_range(35.41025, 139.93, [wide, far, home])

        assert [location.label for location, _ in matches] == ["Prefecture", "Home"]

    def test_order_swap_changes_order_only(self, home):
        office = NamedLocation(label="Office", latitude=35.42, longitude=139.95, radius=5)

        forward = find_locations_in_range(35.41025, 139.93, [home, office])
        reverse = find_locations_in_range(35.41025, 139.93, [office, home])

        assert {loc.label for loc, _ in forward} == {loc.label for loc, _ in reverse}
        assert [loc.label for loc, _ in reverse] == ["Office", "Home"]


class TestCoerceLocation:
    """Tests for coerce_location() and NamedLocation.from_mapping()."""

    def test_named_location_passes_through(self, home):
        assert coerce_location(home) is home

    def test_mapping_becomes_named_location(self, home):
        data = {"label": "Home", "latitude": 35.4, "longitude": 139.9, "radius": 10}

        assert coerce_location(data) == home

    def test_string_numbers_are_converted(self):
        location = NamedLocation.from_mapping(
            {"label": "Home", "latitude": "35.4", "longitude": "139.9", "radius": "10"}
        )

        assert location.radius == 10.0

    def test_missing_radius_raises(self):
        with pytest.raises(KeyError):
            NamedLocation.from_mapping({"label": "Home", "latitude": 35.4, "longitude": 139.9})
