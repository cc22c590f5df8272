"""
Track Metrics

Cumulative distance, distance markers and loop detection for an
ordered (lat, lon) track. Everything here is a pure function of its
arguments; results are recomputed by the renderer on every change.
"""

import logging
import math
from typing import List, Optional

from trailgeo.config import settings
from trailgeo.shared.constants import MARKER_OFFSET_M, METERS_PER_KM
from trailgeo.shared.geo import (
    distance_meters,
    interpolate_point,
    is_valid_point,
    perpendicular_offset,
)
from trailgeo.shared.types import DistanceMarker, Track

logger = logging.getLogger(__name__)


def cumulative_distances(track: Optional[Track]) -> List[float]:
    """
    Running distance from the start for every point.

    A segment touching a non-finite coordinate adds nothing, so the
    result stays non-decreasing.

    Args:
        track: Ordered (lat, lon) points

    Returns:
        Distances in meters, one per point ([] for an empty track)
    """
    if not track:
        return []

    distances = [0.0]
    cumulative = 0.0

    for i in range(1, len(track)):
        prev, curr = track[i - 1], track[i]
        if is_valid_point(prev) and is_valid_point(curr):
            cumulative += distance_meters(prev, curr)
        distances.append(cumulative)

    return distances


def total_distance_km(track: Optional[Track]) -> float:
    """Total track length in kilometers (0 for empty tracks)."""
    distances = cumulative_distances(track)
    if not distances:
        return 0.0
    return distances[-1] / METERS_PER_KM


def distance_markers(
    track: Optional[Track],
    interval_km: float,
    max_markers: Optional[int] = None
) -> List[DistanceMarker]:
    """
    Place a marker every interval_km along the track.

    If the natural marker count would exceed max_markers, the spacing is
    widened by a whole multiple of interval_km so the markers still cover
    the full track evenly.

    Args:
        track: Ordered (lat, lon) points
        interval_km: Marker spacing in kilometers
        max_markers: Cap on returned markers (default: settings.max_distance_markers)

    Returns:
        Markers ordered by distance; [] if the track is shorter than one interval
    """
    if max_markers is None:
        max_markers = settings.max_distance_markers

    if not track or len(track) < 2 or interval_km <= 0 or max_markers <= 0:
        return []

    cumulative = cumulative_distances(track)
    total_m = cumulative[-1]
    interval_m = interval_km * METERS_PER_KM

    if total_m < interval_m:
        return []

    natural_count = int(total_m // interval_m)
    multiplier = 1
    if natural_count > max_markers:
        multiplier = math.ceil(natural_count / max_markers)
        logger.debug(
            "Thinning markers: %d at %.3f km exceeds cap %d, spacing x%d",
            natural_count, interval_km, max_markers, multiplier
        )

    step_km = interval_km * multiplier
    step_m = interval_m * multiplier

    markers: List[DistanceMarker] = []
    k = 1
    next_marker_m = step_m

    for i in range(1, len(track)):
        if len(markers) >= max_markers:
            break

        prev_m = cumulative[i - 1]
        curr_m = cumulative[i]

        while next_marker_m <= curr_m and len(markers) < max_markers:
            # next_marker_m > prev_m here, so the segment has positive length
            fraction = (next_marker_m - prev_m) / (curr_m - prev_m)
            position = interpolate_point(track[i - 1], track[i], fraction)
            offset_position = perpendicular_offset(
                position, track[i - 1], track[i], MARKER_OFFSET_M
            )

            markers.append(DistanceMarker(
                id=f"marker-{len(markers)}",
                position=position,
                distance_km=round(k * step_km, 6),
                offset_position=offset_position,
            ))

            k += 1
            next_marker_m = k * step_m

    return markers


def is_loop_track(
    track: Optional[Track],
    threshold_meters: Optional[float] = None
) -> bool:
    """
    Detect a loop: start and end points close together.

    Never raises; None, empty, single-point tracks and tracks with
    non-finite endpoints are not loops.

    Args:
        track: Ordered (lat, lon) points
        threshold_meters: Max start/end distance (default: settings.loop_threshold_m)
    """
    if threshold_meters is None:
        threshold_meters = settings.loop_threshold_m

    if not track or len(track) < 2:
        return False

    start, end = track[0], track[-1]
    if not is_valid_point(start) or not is_valid_point(end):
        return False

    return distance_meters(start, end) <= threshold_meters
