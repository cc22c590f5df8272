"""
Elevation/slope profile feature.

Chart downsampling, profile adapters and slope profile building.
"""

from .downsampling import (
    downsample,
    slope_profile_points,
    elevation_profile_points,
    profile_colors,
)
from .slope_profile import (
    HistogramBucket,
    SlopeProfile,
    SlopeProfileBuilder,
    build_slope_profile,
)

__all__ = [
    "downsample",
    "slope_profile_points",
    "elevation_profile_points",
    "profile_colors",
    "HistogramBucket",
    "SlopeProfile",
    "SlopeProfileBuilder",
    "build_slope_profile",
]
