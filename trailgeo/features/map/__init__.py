"""
Map decoration density by zoom level.
"""

from .zoom import (
    MARKER_INTERVAL_TIERS,
    ARROW_REPEAT_TIERS,
    TOLERANCE_TIERS,
    lookup_tier,
    marker_interval,
    arrow_repeat_interval,
    tolerance_for_zoom,
)

__all__ = [
    "MARKER_INTERVAL_TIERS",
    "ARROW_REPEAT_TIERS",
    "TOLERANCE_TIERS",
    "lookup_tier",
    "marker_interval",
    "arrow_repeat_interval",
    "tolerance_for_zoom",
]
