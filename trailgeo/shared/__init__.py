"""
Shared utilities (NOT feature logic).

Usage:
    from trailgeo.shared import distance_meters, slope_color
    from trailgeo.shared.formatters import format_distance_marker
"""
from .geo import (
    haversine,
    distance_meters,
    is_valid_point,
    interpolate_point,
    perpendicular_offset,
    calculate_gradient,
    gradient_to_percent,
    EARTH_RADIUS_M,
    EARTH_RADIUS_KM,
)
from .gradients import (
    SLOPE_COLOR_BUCKETS,
    INVALID_SLOPE_COLOR,
    find_bucket,
    slope_color,
    slope_category,
    slope_ranges,
)
from .formatters import format_distance_marker
from .schemas import SlopeSample
from .constants import (
    SlopeColor,
    METERS_PER_KM,
    METERS_PER_DEGREE,
    MARKER_OFFSET_M,
)
from .types import (
    GeoPoint,
    Track,
    ProfilePoint,
    DistanceMarker,
    ColorBucket,
    ZoomTier,
)

__all__ = [
    # geo
    "haversine",
    "distance_meters",
    "is_valid_point",
    "interpolate_point",
    "perpendicular_offset",
    "calculate_gradient",
    "gradient_to_percent",
    "EARTH_RADIUS_M",
    "EARTH_RADIUS_KM",
    # gradients
    "SLOPE_COLOR_BUCKETS",
    "INVALID_SLOPE_COLOR",
    "find_bucket",
    "slope_color",
    "slope_category",
    "slope_ranges",
    # formatters
    "format_distance_marker",
    # schemas
    "SlopeSample",
    # constants
    "SlopeColor",
    "METERS_PER_KM",
    "METERS_PER_DEGREE",
    "MARKER_OFFSET_M",
    # types
    "GeoPoint",
    "Track",
    "ProfilePoint",
    "DistanceMarker",
    "ColorBucket",
    "ZoomTier",
]
