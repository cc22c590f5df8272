"""
Track overlay module.

Usage:
    from trailgeo.features.overlay import TrackOverlayService

    overlay = TrackOverlayService().build(track, zoom=14)
"""
from .schemas import ChartPoint, MarkerOut, TrackOverlay
from .service import TrackOverlayService

__all__ = [
    "ChartPoint",
    "MarkerOut",
    "TrackOverlay",
    "TrackOverlayService",
]
