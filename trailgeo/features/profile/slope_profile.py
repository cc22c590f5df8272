"""
Slope Profile Builder

Turns a track and its elevations into a gradient profile: smoothed
per-point slopes, summary statistics, a distance histogram and merged
SlopeSample segments ready for path coloring.
"""

import logging
import math
from bisect import bisect_left, bisect_right
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from trailgeo.config import settings
from trailgeo.shared.geo import calculate_gradient, gradient_to_percent
from trailgeo.shared.schemas import SlopeSample
from trailgeo.shared.types import Track
from trailgeo.features.track.metrics import cumulative_distances

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistogramBucket:
    """Track distance spent in one slope range [bucket_from, bucket_to)."""
    bucket_from: float
    bucket_to: float
    distance_m: float = 0.0


@dataclass
class SlopeProfile:
    """
    Result of slope calculation.

    All fields stay empty when the input cannot produce slopes.
    """
    slope_min: Optional[float] = None
    slope_max: Optional[float] = None
    slope_avg: Optional[float] = None
    histogram: List[HistogramBucket] = field(default_factory=list)
    segments: List[SlopeSample] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.slope_min is None


class SlopeProfileBuilder:
    """
    Builds a SlopeProfile with distance-based windows.

    Windows are measured along the track, not in point counts, so
    dense and sparse recordings give comparable slopes.
    """

    # Neighbouring segments within this slope difference are merged
    MERGE_DELTA_PERCENT = 1.0

    # Merged segments shorter than this are dropped as noise
    MIN_SEGMENT_M = 15.0

    HISTOGRAM_RANGES: Tuple[Tuple[float, float], ...] = (
        (-60.0, -30.0),
        (-30.0, -15.0),
        (-15.0, -8.0),
        (-8.0, -4.0),
        (-4.0, 0.0),
        (0.0, 4.0),
        (4.0, 8.0),
        (8.0, 12.0),
        (12.0, 18.0),
        (18.0, 25.0),
        (25.0, 60.0),
    )

    @classmethod
    def build(
        cls,
        track: Track,
        elevations: Sequence[Optional[float]],
        track_name: str = "track"
    ) -> SlopeProfile:
        """
        Calculate the slope profile of a track.

        Args:
            track: Ordered (lat, lon) points
            elevations: One elevation (m) per point; gaps are not interpolated
            track_name: Name used in log messages

        Returns:
            SlopeProfile (empty if the data is insufficient)
        """
        if not track or len(track) < 2:
            logger.info(
                "Track '%s' has insufficient points for slope calculation: %d points",
                track_name, len(track) if track else 0
            )
            return SlopeProfile()

        if len(elevations) != len(track):
            logger.info(
                "Track '%s' has mismatched points (%d) and elevations (%d)",
                track_name, len(track), len(elevations)
            )
            return SlopeProfile()

        if any(e is None or math.isnan(e) for e in elevations):
            logger.info("Track '%s' has gaps in elevation data", track_name)
            return SlopeProfile()

        distances = cumulative_distances(track)

        smoothed = cls._smooth_elevations(
            list(elevations), distances, settings.slope_smoothing_window_m
        )
        point_slopes = cls._window_slopes(
            smoothed, distances, settings.slope_window_m
        )

        lengths = [distances[i + 1] - distances[i] for i in range(len(distances) - 1)]
        segment_slopes = [
            (point_slopes[i] + point_slopes[i + 1]) / 2
            for i in range(len(lengths))
        ]

        total_length = sum(lengths)
        slope_avg = None
        if total_length > 0:
            slope_avg = sum(s * l for s, l in zip(segment_slopes, lengths)) / total_length

        profile = SlopeProfile(
            slope_min=min(point_slopes),
            slope_max=max(point_slopes),
            slope_avg=slope_avg,
            histogram=cls._histogram(segment_slopes, lengths),
            segments=cls._merge_segments(segment_slopes, lengths),
        )

        logger.info(
            "Track '%s' slope calculation completed: min=%.1f%%, max=%.1f%%, avg=%.1f%%",
            track_name, profile.slope_min, profile.slope_max, slope_avg or 0.0
        )
        return profile

    @staticmethod
    def _smooth_elevations(
        elevations: List[float],
        distances: List[float],
        half_window: float
    ) -> List[float]:
        """Weighted average within ±half_window meters, linear falloff."""
        if len(elevations) < 3:
            return elevations

        smoothed = []
        for center in distances:
            lo = bisect_left(distances, center - half_window)
            hi = bisect_right(distances, center + half_window)

            weighted_sum = 0.0
            total_weight = 0.0
            for j in range(lo, hi):
                weight = 1.0 - abs(distances[j] - center) / half_window
                weighted_sum += elevations[j] * weight
                total_weight += weight

            smoothed.append(weighted_sum / total_weight)

        return smoothed

    @staticmethod
    def _window_slopes(
        elevations: List[float],
        distances: List[float],
        half_window: float
    ) -> List[float]:
        """
        Slope (%) at each point across a ±half_window distance window.

        Falls back to the immediate neighbours when the window holds a
        single point, and to 0% at the track ends.
        """
        last = len(elevations) - 1
        slopes = []

        for i, center in enumerate(distances):
            start = bisect_left(distances, center - half_window)
            end = bisect_right(distances, center + half_window) - 1

            if end <= start or distances[end] - distances[start] <= 0:
                if 0 < i < last:
                    start, end = i - 1, i + 1
                else:
                    slopes.append(0.0)
                    continue

            gradient = calculate_gradient(
                distances[end] - distances[start],
                elevations[end] - elevations[start]
            )
            slopes.append(gradient_to_percent(gradient))

        return slopes

    @classmethod
    def _histogram(
        cls,
        slopes: List[float],
        lengths: List[float]
    ) -> List[HistogramBucket]:
        totals = [0.0] * len(cls.HISTOGRAM_RANGES)
        for slope, length in zip(slopes, lengths):
            for k, (low, high) in enumerate(cls.HISTOGRAM_RANGES):
                if low <= slope < high:
                    totals[k] += length
                    break

        return [
            HistogramBucket(bucket_from=low, bucket_to=high, distance_m=total)
            for (low, high), total in zip(cls.HISTOGRAM_RANGES, totals)
        ]

    @classmethod
    def _merge_segments(
        cls,
        slopes: List[float],
        lengths: List[float]
    ) -> List[SlopeSample]:
        """Merge runs of similar slope into SlopeSample segments."""
        if not slopes:
            return []

        segments = []
        run_slope = slopes[0]
        run_start = 0.0
        run_length = lengths[0]

        for slope, length in zip(slopes[1:], lengths[1:]):
            if abs(slope - run_slope) <= cls.MERGE_DELTA_PERCENT:
                run_length += length
                continue

            if run_length >= cls.MIN_SEGMENT_M:
                segments.append(SlopeSample(
                    distance_m=run_start,
                    slope_percent=run_slope,
                    length_m=run_length,
                ))
            run_start += run_length
            run_slope = slope
            run_length = length

        if run_length >= cls.MIN_SEGMENT_M:
            segments.append(SlopeSample(
                distance_m=run_start,
                slope_percent=run_slope,
                length_m=run_length,
            ))

        return segments


def build_slope_profile(
    track: Track,
    elevations: Sequence[Optional[float]],
    track_name: str = "track"
) -> SlopeProfile:
    """Shortcut for SlopeProfileBuilder.build()."""
    return SlopeProfileBuilder.build(track, elevations, track_name)
