"""
Zoom-based adaptation of map decorations.

Lower zoom = broader view = fewer decorations.
Higher zoom = detailed view = denser markers and arrows.

Each table is a tuple of ZoomTier sorted by descending min_zoom; the
first tier whose min_zoom <= zoom wins.
"""

from typing import Sequence

from trailgeo.config import settings
from trailgeo.shared.types import ZoomTier

# Distance marker interval (km)
MARKER_INTERVAL_TIERS = (
    ZoomTier(17, 0.1),   # street level: every 100 m
    ZoomTier(15, 0.5),
    ZoomTier(13, 1.0),
    ZoomTier(12, 5.0),   # only for tracks >= settings.marker_min_track_km
)

# Below this zoom, markers need a minimum track length to be shown
MARKER_FULL_DETAIL_ZOOM = 13

# Spacing between direction arrows; strictly tighter with every zoom
# step up to the map's max zoom (18)
ARROW_REPEAT_TIERS = (
    ZoomTier(18, 40.0),
    ZoomTier(17, 50.0),
    ZoomTier(16, 65.0),
    ZoomTier(15, 80.0),
    ZoomTier(14, 100.0),
    ZoomTier(13, 120.0),
    ZoomTier(12, 150.0),
    ZoomTier(11, 180.0),
)

# Simplification tolerance (m) for serving track geometry at a zoom
TOLERANCE_TIERS = (
    ZoomTier(17, 2.0),    # very detailed view
    ZoomTier(15, 5.0),    # street view
    ZoomTier(13, 10.0),   # neighborhood view
    ZoomTier(11, 25.0),   # city view
    ZoomTier(9, 50.0),    # regional view
)
MAX_TOLERANCE_M = 100.0   # world/country view


def lookup_tier(
    tiers: Sequence[ZoomTier],
    zoom: float,
    default: float = 0.0
) -> float:
    """Value of the first tier with min_zoom <= zoom, else default."""
    for tier in tiers:
        if zoom >= tier.min_zoom:
            return tier.value
    return default


def marker_interval(zoom: float, track_length_km: float) -> float:
    """
    Get marker interval based on zoom level and track length.

    At zoom 12 short tracks get no markers: a single 5 km marker (or
    none) is just clutter.

    Args:
        zoom: Current map zoom level
        track_length_km: Length of the displayed track

    Returns:
        Interval in kilometers, or 0 if markers should be hidden
    """
    interval = lookup_tier(MARKER_INTERVAL_TIERS, zoom)
    if zoom < MARKER_FULL_DETAIL_ZOOM and track_length_km < settings.marker_min_track_km:
        return 0.0
    return interval


def arrow_repeat_interval(zoom: float) -> float:
    """
    Get direction-arrow repeat interval for a zoom level.

    Returns:
        Spacing between arrows, or 0 if arrows should be hidden (zoom <= 10)

    The map tops out at zoom 18; anything above reuses the zoom 18
    spacing. Fractional zooms use the tier of their integer floor.
    """
    return lookup_tier(ARROW_REPEAT_TIERS, zoom)


def tolerance_for_zoom(zoom: float) -> float:
    """
    Track simplification tolerance in meters for a zoom level.

    Lower zoom = higher tolerance (more simplification).
    """
    return lookup_tier(TOLERANCE_TIERS, zoom, default=MAX_TOLERANCE_M)
