"""
Slope classification for path and chart coloring.

Used by: slope profile coloring, chart legends, overlay service.
Single source of truth for slope color thresholds.

Buckets are half-open [lower, upper): a value sitting exactly on a
boundary belongs to the upper bucket (4% is light orange, not cyan).
"""
import math
import numbers
from bisect import bisect_right
from typing import Any, Dict, List, Optional

from .constants import SlopeColor
from .types import ColorBucket

# 9-category slope color table, ascending
SLOPE_COLOR_BUCKETS = (
    ColorBucket(-math.inf, -15.0, SlopeColor.DARK_GREEN, 'Very Steep Downhill'),
    ColorBucket(-15.0, -8.0, SlopeColor.FOREST_GREEN, 'Moderate Downhill'),
    ColorBucket(-8.0, -4.0, SlopeColor.LIME_GREEN, 'Gentle Downhill'),
    ColorBucket(-4.0, 0.0, SlopeColor.LIGHT_GREEN, 'Slight Downhill'),
    ColorBucket(0.0, 4.0, SlopeColor.CYAN, 'Gentle Uphill'),
    ColorBucket(4.0, 8.0, SlopeColor.LIGHT_ORANGE, 'Moderate Uphill'),
    ColorBucket(8.0, 12.0, SlopeColor.TOMATO, 'Steep Uphill'),
    ColorBucket(12.0, 18.0, SlopeColor.CRIMSON, 'Very Steep Uphill'),
    ColorBucket(18.0, math.inf, SlopeColor.DARK_RED, 'Extreme Uphill'),
)

INVALID_SLOPE_COLOR = SlopeColor.GRAY
INVALID_SLOPE_LABEL = 'Unknown'

_LOWER_BOUNDS = [bucket.lower for bucket in SLOPE_COLOR_BUCKETS]


def _is_valid_slope(value: Any) -> bool:
    if value is None or isinstance(value, bool):
        return False
    if not isinstance(value, numbers.Real):
        return False
    return not math.isnan(float(value))


def find_bucket(slope_percent: Any) -> Optional[ColorBucket]:
    """
    Find the color bucket for a slope.

    +inf saturates into the top bucket, -inf into the bottom one.

    Returns:
        Matching ColorBucket, or None for None/NaN/non-numeric input
    """
    if not _is_valid_slope(slope_percent):
        return None
    index = bisect_right(_LOWER_BOUNDS, slope_percent) - 1
    return SLOPE_COLOR_BUCKETS[max(index, 0)]


def slope_color(slope_percent: Any) -> SlopeColor:
    """
    Get color for a slope percentage.

    Never raises; invalid or missing data is gray.

    Args:
        slope_percent: Slope as percentage (e.g., 10.0 for 10%)

    Returns:
        SlopeColor token (a str, e.g. '#FF6347')
    """
    bucket = find_bucket(slope_percent)
    if bucket is None:
        return INVALID_SLOPE_COLOR
    return bucket.color


def slope_category(slope_percent: Any) -> str:
    """Human-readable category name (e.g. 'Steep Uphill')."""
    bucket = find_bucket(slope_percent)
    if bucket is None:
        return INVALID_SLOPE_LABEL
    return bucket.label


def slope_ranges() -> List[Dict[str, Any]]:
    """
    Slope ranges for a chart legend, ascending.

    Returns:
        List of dicts with 'min', 'max', 'color', 'label'
    """
    return [
        {
            'min': bucket.lower,
            'max': bucket.upper,
            'color': bucket.color.value,
            'label': bucket.label,
        }
        for bucket in SLOPE_COLOR_BUCKETS
    ]
