"""
Tests for track metrics.

Tests cumulative distances, distance markers and loop detection.
"""

import math

import pytest

from trailgeo.config import settings
from trailgeo.shared.geo import distance_meters
from trailgeo.shared.types import DistanceMarker
from trailgeo.features.track.metrics import (
    cumulative_distances,
    total_distance_km,
    distance_markers,
    is_loop_track,
)


START = (55.7558, 37.6173)


def northbound_track(num_points: int, step_deg: float = 0.001):
    """Straight track due north; 0.001° ≈ 111 m per step."""
    return [(START[0] + i * step_deg, START[1]) for i in range(num_points)]


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def five_km_track():
    """50 points ~111 m apart (~5.4 km)."""
    return northbound_track(50)


@pytest.fixture
def long_track():
    """201 points (~22 km)."""
    return northbound_track(201)


# =============================================================================
# Test Cumulative Distances
# =============================================================================

class TestCumulativeDistances:
    """Tests for cumulative_distances function."""

    def test_empty(self):
        assert cumulative_distances([]) == []

    def test_none(self):
        assert cumulative_distances(None) == []

    def test_single_point(self):
        assert cumulative_distances([(55.75, 37.61)]) == [0.0]

    def test_three_points(self):
        distances = cumulative_distances([
            (55.7558, 37.6173),
            (55.7568, 37.6173),
            (55.7578, 37.6173),
        ])
        assert len(distances) == 3
        assert distances[0] == 0
        assert distances[1] > 0
        assert distances[2] > distances[1]

    def test_each_entry_adds_segment(self, five_km_track):
        distances = cumulative_distances(five_km_track)
        for i in range(1, len(five_km_track)):
            segment = distance_meters(five_km_track[i - 1], five_km_track[i])
            assert distances[i] == pytest.approx(distances[i - 1] + segment)

    def test_length_and_monotonic(self, long_track):
        distances = cumulative_distances(long_track)
        assert len(distances) == len(long_track)
        assert distances[0] == 0
        assert all(b >= a for a, b in zip(distances, distances[1:]))

    def test_repeated_point_adds_nothing(self):
        distances = cumulative_distances([START, START, (55.7568, 37.6173)])
        assert distances[1] == 0.0
        assert distances[2] > 0.0

    def test_invalid_coordinates_skipped(self):
        """Segments touching NaN add zero; the sequence stays non-decreasing."""
        track = [START, (math.nan, 37.6173), (55.7568, 37.6173), (55.7578, 37.6173)]
        distances = cumulative_distances(track)
        assert len(distances) == 4
        assert distances[1] == 0.0
        assert distances[2] == 0.0
        assert distances[3] > 0.0
        assert all(b >= a for a, b in zip(distances, distances[1:]))

    def test_total_distance_km(self, five_km_track):
        assert total_distance_km(five_km_track) == pytest.approx(5.45, rel=0.01)
        assert total_distance_km([]) == 0.0


# =============================================================================
# Test Distance Markers
# =============================================================================

class TestDistanceMarkers:
    """Tests for distance_markers function."""

    def test_empty(self):
        assert distance_markers([], 1, 10) == []
        assert distance_markers(None, 1, 10) == []

    def test_single_point(self):
        assert distance_markers([START], 1, 10) == []

    def test_shorter_than_interval(self):
        """Two points ~11 m apart with 1 km interval."""
        assert distance_markers([START, (55.7559, 37.6173)], 1, 10) == []

    @pytest.mark.parametrize("interval", [0, -1])
    def test_non_positive_interval(self, five_km_track, interval):
        assert distance_markers(five_km_track, interval, 10) == []

    def test_zero_cap(self, five_km_track):
        assert distance_markers(five_km_track, 1, 0) == []

    def test_five_km_track_one_km_interval(self, five_km_track):
        """~5 km track at 1 km interval gives 5 markers."""
        markers = distance_markers(five_km_track, 1, 100)

        assert len(markers) == 5
        assert [m.distance_km for m in markers] == [1, 2, 3, 4, 5]
        for marker in markers:
            assert isinstance(marker, DistanceMarker)
            assert len(marker.position) == 2

    def test_distances_increase(self, long_track):
        markers = distance_markers(long_track, 0.5, 100)
        kms = [m.distance_km for m in markers]
        assert all(b > a for a, b in zip(kms, kms[1:]))

    def test_position_interpolated(self, five_km_track):
        """Marker k sits k km along the path, between track points."""
        markers = distance_markers(five_km_track, 1, 100)
        for marker in markers:
            dist = distance_meters(five_km_track[0], marker.position)
            assert dist == pytest.approx(marker.distance_km * 1000, abs=1.0)

    def test_offset_position_near_marker(self, five_km_track):
        """Label position is ~3 m to the side of the marker."""
        marker = distance_markers(five_km_track, 1, 100)[0]
        assert marker.offset_position != marker.position
        offset = distance_meters(marker.position, marker.offset_position)
        assert 1.0 < offset < 4.0

    def test_ids_stable(self, five_km_track):
        first = distance_markers(five_km_track, 1, 100)
        second = distance_markers(five_km_track, 1, 100)
        assert [m.id for m in first] == ["marker-0", "marker-1", "marker-2", "marker-3", "marker-4"]
        assert first == second

    def test_respects_max_markers(self, long_track):
        markers = distance_markers(long_track, 0.5, 5)
        assert len(markers) <= 5

    def test_cap_widens_spacing_evenly(self, long_track):
        """44 natural markers capped at 5: spacing grows to 9 x 0.5 km."""
        markers = distance_markers(long_track, 0.5, 5)
        kms = [m.distance_km for m in markers]

        assert kms == [4.5, 9.0, 13.5, 18.0]
        # still reaches the last stretch of the track
        assert total_distance_km(long_track) - kms[-1] < 4.5

    @pytest.mark.parametrize("cap", [1, 2, 3, 7, 10, 43, 44, 45])
    def test_cap_never_exceeded(self, long_track, cap):
        assert len(distance_markers(long_track, 0.5, cap)) <= cap

    def test_cap_from_settings(self, long_track, monkeypatch):
        monkeypatch.setattr(settings, "max_distance_markers", 3)
        assert len(distance_markers(long_track, 0.5)) <= 3

    def test_sub_km_interval_labels_clean(self, five_km_track):
        """Distances are rounded so 0.1 km steps do not accumulate noise."""
        markers = distance_markers(five_km_track, 0.1, 100)
        assert markers[2].distance_km == 0.3
        assert len(markers) == 54


# =============================================================================
# Test Loop Detection
# =============================================================================

class TestIsLoopTrack:
    """Tests for is_loop_track function."""

    def test_same_start_and_end(self):
        point = (55.7558, 37.6173)
        assert is_loop_track([point, (55.7560, 37.6175), point]) is True

    def test_within_default_threshold(self):
        track = [(55.7558, 37.6173), (55.7560, 37.6175), (55.75581, 37.61731)]
        assert is_loop_track(track) is True

    def test_beyond_default_threshold(self):
        track = [(55.7558, 37.6173), (55.7560, 37.6175), (55.7561, 37.6176)]
        assert is_loop_track(track) is False

    def test_distant_start_and_end(self):
        track = [(55.7558, 37.6173), (55.7600, 37.6200), (59.9311, 30.3609)]
        assert is_loop_track(track) is False

    def test_custom_threshold(self):
        """Start and end ~13 m apart."""
        track = [(55.7558, 37.6173), (55.7560, 37.6175), (55.7559, 37.6174)]
        assert is_loop_track(track, 10) is False
        assert is_loop_track(track, 100) is True

    @pytest.mark.parametrize("track", [None, [], [(55.7558, 37.6173)]])
    def test_degenerate_input(self, track):
        assert is_loop_track(track) is False

    def test_invalid_endpoint(self):
        assert is_loop_track([(math.nan, 37.6173), (55.7558, 37.6173)]) is False

    def test_monotonic_in_threshold(self):
        track = [(55.7558, 37.6173), (55.7560, 37.6175), (55.7559, 37.6174)]
        results = [is_loop_track(track, r) for r in (1, 5, 10, 12, 13, 14, 15, 50, 1000)]
        # once True, stays True for every larger threshold
        first_true = results.index(True)
        assert all(results[first_true:])
        assert not any(results[:first_true])

    def test_threshold_from_settings(self, monkeypatch):
        track = [(55.7558, 37.6173), (55.7560, 37.6175), (55.7559, 37.6174)]
        monkeypatch.setattr(settings, "loop_threshold_m", 5.0)
        assert is_loop_track(track) is False
