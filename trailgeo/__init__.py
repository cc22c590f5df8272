"""
trailgeo - track geometry and gradient classification for map/chart UIs.

Usage:
    from trailgeo import distance_markers, slope_color, downsample
"""
from trailgeo.shared.geo import distance_meters
from trailgeo.shared.gradients import slope_color
from trailgeo.features.track.metrics import (
    cumulative_distances,
    distance_markers,
    is_loop_track,
)
from trailgeo.features.map.zoom import marker_interval, arrow_repeat_interval
from trailgeo.features.profile.downsampling import downsample

__version__ = "0.1.0"

__all__ = [
    "distance_meters",
    "cumulative_distances",
    "distance_markers",
    "is_loop_track",
    "marker_interval",
    "arrow_repeat_interval",
    "slope_color",
    "downsample",
]
