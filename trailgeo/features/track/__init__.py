"""
Track metrics feature.

Cumulative distance, kilometer markers and loop detection.
"""

from .metrics import (
    cumulative_distances,
    total_distance_km,
    distance_markers,
    is_loop_track,
)

__all__ = [
    "cumulative_distances",
    "total_distance_km",
    "distance_markers",
    "is_loop_track",
]
