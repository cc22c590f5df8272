"""
Profile downsampling for charts.

Charts get at most max_points points: the input is cut into equal
chunks and each chunk is replaced by its mean point.
"""

import logging
import math
from typing import List, Optional, Sequence

from trailgeo.config import settings
from trailgeo.exceptions import InvalidParameterError
from trailgeo.shared.constants import METERS_PER_KM, SlopeColor
from trailgeo.shared.gradients import slope_color
from trailgeo.shared.schemas import SlopeSample
from trailgeo.shared.types import ProfilePoint, Track
from trailgeo.features.track.metrics import cumulative_distances

logger = logging.getLogger(__name__)


def downsample(
    points: Sequence[ProfilePoint],
    max_points: Optional[int] = None
) -> List[ProfilePoint]:
    """
    Reduce a profile to at most max_points by chunk averaging.

    step = ceil(N / max_points); every run of `step` consecutive points
    (the last may be shorter) becomes one point at the mean x and mean y.
    Exception: the first output point takes x from the first input point
    (its y is still the chunk mean) so the chart starts at the track
    origin. Every other output point is a plain chunk mean.

    Args:
        points: Ordered profile points
        max_points: Output cap (default: settings.chart_max_points)

    Returns:
        New list; a copy of points if already within the cap

    Raises:
        InvalidParameterError: if max_points < 1
    """
    if max_points is None:
        max_points = settings.chart_max_points
    if max_points < 1:
        raise InvalidParameterError(f"max_points must be >= 1, got {max_points}")

    total = len(points)
    if total <= max_points:
        return list(points)

    step = math.ceil(total / max_points)
    result = []

    for start in range(0, total, step):
        chunk = points[start:start + step]
        avg_x = sum(p.x for p in chunk) / len(chunk)
        avg_y = sum(p.y for p in chunk) / len(chunk)
        result.append(ProfilePoint(x=avg_x, y=avg_y))

    result[0] = ProfilePoint(x=points[0].x, y=result[0].y)

    logger.debug("Downsampled profile %d -> %d points (step %d)", total, len(result), step)
    return result


def slope_profile_points(samples: Sequence[SlopeSample]) -> List[ProfilePoint]:
    """
    Slope chart points: x = distance_m, y = slope_percent.

    Samples without a usable slope are dropped.
    """
    return [
        ProfilePoint(x=s.distance_m, y=s.slope_percent)
        for s in samples
        if s.slope_percent is not None and not math.isnan(s.slope_percent)
    ]


def elevation_profile_points(
    track: Track,
    elevations: Sequence[Optional[float]]
) -> List[ProfilePoint]:
    """
    Elevation chart points: x = cumulative km, y = elevation in meters.

    Points with missing elevation are dropped; extra elevations beyond
    the track length are ignored.
    """
    distances = cumulative_distances(track)
    return [
        ProfilePoint(x=distance / METERS_PER_KM, y=elevation)
        for distance, elevation in zip(distances, elevations)
        if elevation is not None and not math.isnan(elevation)
    ]


def profile_colors(samples: Sequence[SlopeSample]) -> List[SlopeColor]:
    """One path color per slope sample (gray where slope is missing)."""
    return [slope_color(s.slope_percent) for s in samples]
