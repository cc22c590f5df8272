"""
Geographic utility functions.

This is the SINGLE SOURCE OF TRUTH for geographic calculations.
DO NOT duplicate these functions elsewhere.
"""
import math
import numbers
from typing import Optional

from .constants import METERS_PER_DEGREE, METERS_PER_KM
from .types import GeoPoint

# Mean Earth radius in meters
EARTH_RADIUS_M = 6371000.0
EARTH_RADIUS_KM = EARTH_RADIUS_M / METERS_PER_KM


def _central_angle(
    lat1: float, lon1: float,
    lat2: float, lon2: float
) -> float:
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(delta_lat / 2) ** 2 +
        math.cos(lat1_rad) * math.cos(lat2_rad) *
        math.sin(delta_lon / 2) ** 2
    )
    # rounding can push a just past 1 for antipodal points
    a = min(1.0, max(0.0, a))
    return 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def haversine(
    lat1: float, lon1: float,
    lat2: float, lon2: float
) -> float:
    """
    Calculate great-circle distance between two points.

    Args:
        lat1, lon1: First point coordinates (degrees)
        lat2, lon2: Second point coordinates (degrees)

    Returns:
        Distance in kilometers
    """
    return EARTH_RADIUS_KM * _central_angle(lat1, lon1, lat2, lon2)


def distance_meters(point_a: GeoPoint, point_b: GeoPoint) -> float:
    """
    Great-circle distance between two (lat, lon) points.

    Coordinates are not range-checked; filter bad points upstream.

    Returns:
        Distance in meters (exactly 0.0 for identical points)
    """
    lat1, lon1 = point_a
    lat2, lon2 = point_b
    return EARTH_RADIUS_M * _central_angle(lat1, lon1, lat2, lon2)


def is_valid_point(point: Optional[GeoPoint]) -> bool:
    """True if point is a pair of finite numbers."""
    if point is None or len(point) < 2:
        return False
    lat, lon = point[0], point[1]
    for value in (lat, lon):
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            return False
    return math.isfinite(lat) and math.isfinite(lon)


def interpolate_point(
    start: GeoPoint,
    end: GeoPoint,
    fraction: float
) -> GeoPoint:
    """
    Linear interpolation between two points in degree space.

    Good enough for the short segments of a GPS track.

    Args:
        start: Segment start (lat, lon)
        end: Segment end (lat, lon)
        fraction: Position along the segment (0 = start, 1 = end)
    """
    lat1, lon1 = start
    lat2, lon2 = end
    return (
        lat1 + (lat2 - lat1) * fraction,
        lon1 + (lon2 - lon1) * fraction,
    )


def perpendicular_offset(
    point: GeoPoint,
    prev: Optional[GeoPoint],
    next: Optional[GeoPoint],
    offset_meters: float
) -> GeoPoint:
    """
    Shift a point sideways from the path direction.

    Args:
        point: Point to shift (lat, lon)
        prev: Previous point on the path (None = use point)
        next: Next point on the path (None = use point)
        offset_meters: Offset distance, positive = right of travel direction

    Returns:
        Shifted point, or the original point if direction is undefined
    """
    lat, lon = point
    prev_lat, prev_lon = prev or point
    next_lat, next_lon = next or point

    dir_lat = next_lat - prev_lat
    dir_lon = next_lon - prev_lon

    # Rotate 90° clockwise
    perp_lat = -dir_lon
    perp_lon = dir_lat

    length = math.hypot(perp_lat, perp_lon)
    if length == 0:
        return point

    offset_degrees = offset_meters / METERS_PER_DEGREE
    return (
        lat + (perp_lat / length) * offset_degrees,
        lon + (perp_lon / length) * offset_degrees,
    )


def calculate_gradient(
    distance_m: float,
    elevation_diff_m: float
) -> float:
    """
    Calculate gradient as decimal.

    Args:
        distance_m: Horizontal distance in meters
        elevation_diff_m: Elevation difference in meters

    Returns:
        Gradient as decimal (0.10 = 10%)
    """
    if distance_m <= 0:
        return 0.0
    return elevation_diff_m / distance_m


def gradient_to_percent(gradient: float) -> float:
    """Convert gradient decimal to percent."""
    return gradient * 100
