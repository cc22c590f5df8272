"""
Track overlay service.

Main entry point for renderers: composes track metrics, zoom
adaptation and profile processing for one track at one zoom level.
"""
import logging
from typing import Optional, Sequence

from trailgeo.config import settings
from trailgeo.shared.constants import METERS_PER_KM
from trailgeo.shared.formatters import format_distance_marker
from trailgeo.shared.schemas import SlopeSample
from trailgeo.shared.types import Track
from trailgeo.features.map.zoom import (
    arrow_repeat_interval,
    marker_interval,
    tolerance_for_zoom,
)
from trailgeo.features.profile.downsampling import (
    downsample,
    elevation_profile_points,
    profile_colors,
    slope_profile_points,
)
from trailgeo.features.track.metrics import (
    cumulative_distances,
    distance_markers,
    is_loop_track,
)

from .schemas import ChartPoint, MarkerOut, TrackOverlay

logger = logging.getLogger(__name__)


class TrackOverlayService:
    """
    Service for per-redraw track decorations.

    Holds no state between calls; safe to call on every pan/zoom.

    Usage:
        service = TrackOverlayService()
        overlay = service.build(track, zoom=14, slope_samples=samples)
    """

    def __init__(
        self,
        max_markers: Optional[int] = None,
        chart_max_points: Optional[int] = None
    ):
        self.max_markers = max_markers or settings.max_distance_markers
        self.chart_max_points = chart_max_points or settings.chart_max_points

    def build(
        self,
        track: Track,
        zoom: float,
        elevations: Optional[Sequence[Optional[float]]] = None,
        slope_samples: Optional[Sequence[SlopeSample]] = None,
    ) -> TrackOverlay:
        """
        Compute all decorations for a track.

        Args:
            track: Ordered (lat, lon) points
            zoom: Current map zoom level
            elevations: Optional elevation per point (chart source if given)
            slope_samples: Optional gradient profile from the track API

        Returns:
            TrackOverlay; chart_points come from elevations when provided,
            otherwise from slope_samples
        """
        distances = cumulative_distances(track)
        total_km = distances[-1] / METERS_PER_KM if distances else 0.0

        interval = marker_interval(zoom, total_km)
        markers = []
        if interval > 0:
            markers = [
                MarkerOut(
                    id=m.id,
                    position=m.position,
                    offset_position=m.offset_position,
                    distance_km=m.distance_km,
                    label=format_distance_marker(m.distance_km),
                )
                for m in distance_markers(track, interval, self.max_markers)
            ]

        samples = list(slope_samples or [])
        if elevations is not None:
            raw_points = elevation_profile_points(track, elevations)
        else:
            raw_points = slope_profile_points(samples)
        chart_points = [
            ChartPoint(x=p.x, y=p.y)
            for p in downsample(raw_points, self.chart_max_points)
        ]

        overlay = TrackOverlay(
            zoom=zoom,
            cumulative_distances_m=distances,
            total_distance_km=total_km,
            is_loop=is_loop_track(track),
            marker_interval_km=interval,
            markers=markers,
            arrow_repeat_interval=arrow_repeat_interval(zoom),
            simplify_tolerance_m=tolerance_for_zoom(zoom),
            slope_colors=[color.value for color in profile_colors(samples)],
            chart_points=chart_points,
        )

        logger.debug(
            "Overlay for %d points at zoom %s: %d markers, %d chart points",
            len(distances), zoom, len(markers), len(chart_points)
        )
        return overlay
